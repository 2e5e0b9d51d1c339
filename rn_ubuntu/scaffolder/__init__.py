"""rn-ubuntu scaffolder -- adds an Ubuntu platform target to an app.

Quick usage::

    from rn_ubuntu.scaffolder import UbuntuGenerator

    generator = UbuntuGenerator("MyApp", destination_root="/path/to/app")
    written = await generator.run()
"""

from rn_ubuntu.scaffolder.generator import (
    TEMPLATE_MANIFEST,
    GeneratorOptions,
    PackageNameError,
    TemplateEntry,
    TemplateParams,
    UbuntuGenerator,
    validate_package_name,
)
from rn_ubuntu.scaffolder.templates import TemplateRenderer

__all__ = [
    "GeneratorOptions",
    "PackageNameError",
    "TEMPLATE_MANIFEST",
    "TemplateEntry",
    "TemplateParams",
    "TemplateRenderer",
    "UbuntuGenerator",
    "validate_package_name",
]
