"""Asset-resolution service.

Maps an abstract image reference to a concrete :class:`ImageSource` (or a
list of them).  Bundled assets are registered once, receive an integer id,
and are later resolved to a uri served either by a development server or
from the bundle directory on disk.

Typical usage::

    resolver = AssetResolver(AssetConfig(server_url="http://localhost:8081"))
    logo = resolver.register_asset({
        "name": "logo", "type": "png", "http_server_location": "/assets/img",
        "scales": [1, 2], "width": 64, "height": 64,
    })
    resolver.resolve(logo)
    # ImageSource(uri="http://localhost:8081/assets/img/logo.png", ...)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, Field

from rn_ubuntu.config import AssetConfig

from .models import ImageSource


class PackagerAsset(BaseModel):
    """A bundled image as recorded by the asset registry."""

    name: str
    type: str
    http_server_location: str = Field(default="/assets")
    scales: list[float] = Field(default_factory=lambda: [1.0])
    width: float | None = None
    height: float | None = None
    hash: str | None = None


SourceTransformer = Callable[[PackagerAsset, ImageSource], ImageSource | None]


class AssetResolver:
    """Resolves image references into concrete sources.

    Accepted inputs:
    - ``None`` -> ``None``
    - ``ImageSource`` -> returned as-is
    - mapping -> validated into an ``ImageSource``
    - list/tuple -> list with every entry resolved
    - ``int`` -> registered asset id; unknown ids resolve to ``None``
    """

    def __init__(self, config: AssetConfig | None = None) -> None:
        self.config = config or AssetConfig()
        self._assets: list[PackagerAsset] = []
        self._transformer: SourceTransformer | None = None

    # -- Registry ----------------------------------------------------------

    def register_asset(self, asset: PackagerAsset | Mapping[str, Any]) -> int:
        """Register a bundled asset and return its id (ids start at 1)."""
        if not isinstance(asset, PackagerAsset):
            asset = PackagerAsset.model_validate(dict(asset))
        self._assets.append(asset)
        return len(self._assets)

    def get_asset_by_id(self, asset_id: int) -> PackagerAsset | None:
        if 1 <= asset_id <= len(self._assets):
            return self._assets[asset_id - 1]
        return None

    def set_custom_source_transformer(self, transformer: SourceTransformer | None) -> None:
        """Install a hook that may replace the default source of an asset.

        The hook receives the registered asset and the source the resolver
        would have produced.  Returning ``None`` keeps the default.
        """
        self._transformer = transformer

    # -- Resolution --------------------------------------------------------

    def resolve(self, source: Any) -> ImageSource | list[ImageSource] | None:
        """Resolve *source* into a concrete source or list of sources."""
        if source is None:
            return None
        if isinstance(source, ImageSource):
            return source
        if isinstance(source, Mapping):
            return ImageSource.model_validate(dict(source))
        if isinstance(source, (list, tuple)):
            return [self._resolve_entry(item) for item in source]
        if isinstance(source, int) and not isinstance(source, bool):
            return self._resolve_asset_id(source)
        raise TypeError(f"Unsupported image source: {source!r}")

    def _resolve_entry(self, item: Any) -> ImageSource:
        resolved = self.resolve(item)
        if not isinstance(resolved, ImageSource):
            raise TypeError(f"Unsupported entry in image source list: {item!r}")
        return resolved

    def _resolve_asset_id(self, asset_id: int) -> ImageSource | None:
        asset = self.get_asset_by_id(asset_id)
        if asset is None:
            return None

        scale = pick_scale(asset.scales, self.config.pixel_ratio)
        default = ImageSource(
            uri=self._asset_uri(asset, scale),
            width=asset.width,
            height=asset.height,
            scale=scale,
        )
        if self._transformer is not None:
            transformed = self._transformer(asset, default)
            if transformed is not None:
                return transformed
        return default

    def _asset_uri(self, asset: PackagerAsset, scale: float) -> str:
        filename = f"{asset.name}{_scale_suffix(scale)}.{asset.type}"
        location = asset.http_server_location.rstrip("/")
        if self.config.server_url:
            return f"{self.config.server_url.rstrip('/')}{location}/{filename}"

        # Bundled assets drop the leading /assets segment of the server path.
        relative = location.lstrip("/")
        if relative == "assets":
            relative = ""
        elif relative.startswith("assets/"):
            relative = relative[len("assets/"):]
        path = self.config.bundle_dir.resolve()
        if relative:
            path = path / relative
        return (path / filename).as_uri()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def pick_scale(scales: list[float], pixel_ratio: float) -> float:
    """Pick the smallest scale that covers *pixel_ratio*.

    Falls back to the largest available scale, or ``1.0`` when the asset
    lists none.
    """
    if not scales:
        return 1.0
    ordered = sorted(scales)
    for scale in ordered:
        if scale >= pixel_ratio:
            return scale
    return ordered[-1]


def _scale_suffix(scale: float) -> str:
    if scale == 1:
        return ""
    return f"@{scale:g}x"


# ---------------------------------------------------------------------------
# Module-level default resolver
# ---------------------------------------------------------------------------

default_resolver = AssetResolver()


def resolve_asset_source(source: Any) -> ImageSource | list[ImageSource] | None:
    """Resolve *source* with the module-level default resolver."""
    return default_resolver.resolve(source)
