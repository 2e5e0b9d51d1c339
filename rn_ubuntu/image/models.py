"""Pydantic models for image sources and image component props."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


ResizeMode = Literal["cover", "contain", "stretch", "repeat", "center"]

CacheLocation = Literal["memory", "disk"]

DEFAULT_RESIZE_MODE: ResizeMode = "cover"


class ImageSource(BaseModel):
    """A concrete image source.

    Unknown keys (``headers``, ``cache``, ...) are kept so the rendering
    backend receives them untouched.
    """

    model_config = ConfigDict(extra="allow")

    uri: str | None = None
    width: float | None = None
    height: float | None = None
    scale: float | None = Field(default=None, gt=0)

    def dimensions(self) -> dict[str, float]:
        """Return the ``width``/``height`` keys that are actually set."""
        dims: dict[str, float] = {}
        if self.width is not None:
            dims["width"] = self.width
        if self.height is not None:
            dims["height"] = self.height
        return dims


class ImageProps(BaseModel):
    """Props accepted by :class:`~rn_ubuntu.image.facade.Image`.

    Any extra keyword (``accessibilityLabel``, ``onLoad``, ...) is kept and
    forwarded to the rendering backend.
    """

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True, populate_by_name=True)

    source: Any = None
    style: Any = None
    resize_mode: ResizeMode | None = Field(default=None, alias="resizeMode")
    src: Any = None
    children: Any = None

    def extra_props(self) -> dict[str, Any]:
        """Props the component does not interpret itself."""
        return dict(self.model_extra or {})
