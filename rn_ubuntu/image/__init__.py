"""rn-ubuntu image component.

Wraps a platform rendering backend and an image-loading service behind a
small declarative facade.

Public API
----------
.. autoclass:: Image
.. autoclass:: ImageProps
.. autoclass:: ImageSource
.. autoclass:: AssetResolver
.. autoclass:: ImageLoadingService
.. autoclass:: RenderBackend
"""

from .assets import AssetResolver, PackagerAsset, resolve_asset_source
from .facade import Image, ImageChildrenError
from .models import ImageProps, ImageSource
from .services import ImageLoadingService, RenderBackend
from .styles import BASE_STYLE, flatten_style

__all__ = [
    # Facade
    "Image",
    "ImageChildrenError",
    # Models
    "ImageProps",
    "ImageSource",
    # Assets
    "AssetResolver",
    "PackagerAsset",
    "resolve_asset_source",
    # Services
    "ImageLoadingService",
    "RenderBackend",
    # Styles
    "BASE_STYLE",
    "flatten_style",
]
