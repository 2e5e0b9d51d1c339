"""Style descriptor helpers for the image component.

A style descriptor is a flat ``dict``.  Callers may pass a single mapping,
``None``, or arbitrarily nested lists of those; :func:`flatten_style`
merges them left to right so that the last mapping wins on conflicting
keys.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

StyleProp = Mapping[str, Any] | list | tuple | None


BASE_STYLE: dict[str, Any] = {"overflow": "hidden"}


def flatten_style(style: StyleProp) -> dict[str, Any]:
    """Merge a possibly nested style prop into a single new ``dict``.

    Falsy entries (``None``, ``False``, empty mappings) are skipped.

    Examples::

        flatten_style([{"width": 10}, None, [{"width": 20, "opacity": 0.5}]])
        -> {"width": 20, "opacity": 0.5}
    """
    result: dict[str, Any] = {}
    _merge_into(result, style)
    return result


def _merge_into(target: dict[str, Any], style: StyleProp) -> None:
    if not style:
        return
    if isinstance(style, Mapping):
        target.update(style)
        return
    if isinstance(style, (list, tuple)):
        for item in style:
            _merge_into(target, item)
        return
    raise TypeError(f"Unsupported style value: {style!r}")
