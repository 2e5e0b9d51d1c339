"""rn-ubuntu -- Ubuntu platform support tooling.

Two independent pieces live here:

- :mod:`rn_ubuntu.image`: a backend-agnostic image component facade.
- :mod:`rn_ubuntu.scaffolder`: the generator that adds an ``ubuntu/``
  platform target to an application.
"""

__version__ = "0.1.0"
