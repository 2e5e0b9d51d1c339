"""Service contracts the image facade delegates to.

The facade never decodes, caches, or draws images itself.  It talks to two
collaborators through the abstract interfaces below:

- :class:`ImageLoadingService` fetches, decodes, and caches image bytes.
- :class:`RenderBackend` draws an already-normalised image description.

To plug in a platform:
    1. Subclass both interfaces
    2. Pass the instances to ``Image(backend, loader)``
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable
from typing import Any

from .models import CacheLocation, ImageSource


class ImageLoadingService(ABC):
    """Fetches, decodes, and caches images on behalf of the facade."""

    @abstractmethod
    async def get_size(self, url: str) -> tuple[float, float]:
        """Return the ``(width, height)`` of the image at *url* in pixels.

        Raises whatever the underlying fetch raises on failure.
        """

    @abstractmethod
    def prefetch_image(self, url: str) -> Awaitable[bool]:
        """Start downloading *url* into the disk cache.

        Returns an awaitable that resolves to ``True`` once the image is
        cached.
        """

    @abstractmethod
    async def query_cache(self, urls: list[str]) -> dict[str, CacheLocation]:
        """Report where each of *urls* is cached.

        Urls that are not cached are absent from the returned mapping.
        """


class RenderBackend(ABC):
    """Native rendering primitive that draws a normalised image."""

    @abstractmethod
    def render(
        self,
        *,
        source: list[ImageSource],
        style: dict[str, Any],
        resize_mode: str,
        tint_color: Any = None,
        ref: Any = None,
        **props: Any,
    ) -> Any:
        """Draw the image and return the backend's element/handle."""
