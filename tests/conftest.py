"""Shared pytest fixtures for the rn-ubuntu test suite.

Provides reusable fixtures for:
- Fake image-loading service and recording render backend
- Image facade and asset resolver instances
- Temporary project directories and generator instances
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from rn_ubuntu.config import AssetConfig, Config
from rn_ubuntu.image import AssetResolver, Image, ImageLoadingService, RenderBackend
from rn_ubuntu.scaffolder.generator import UbuntuGenerator


# ---------------------------------------------------------------------------
# Fake image services
# ---------------------------------------------------------------------------


class FakeImageLoader(ImageLoadingService):
    """In-memory loader with canned sizes and cache contents."""

    def __init__(
        self,
        sizes: dict[str, tuple[float, float]] | None = None,
        cache: dict[str, str] | None = None,
    ) -> None:
        self.sizes = sizes or {}
        self.cache = cache or {}
        self.prefetched: list[str] = []
        self.size_requests: list[str] = []

    async def get_size(self, url: str) -> tuple[float, float]:
        self.size_requests.append(url)
        if url not in self.sizes:
            raise LookupError(f"Cannot load {url}")
        return self.sizes[url]

    def prefetch_image(self, url: str):
        self.prefetched.append(url)
        return self._prefetch(url)

    async def _prefetch(self, url: str) -> bool:
        self.cache[url] = "disk"
        return True

    async def query_cache(self, urls: list[str]) -> dict[str, str]:
        return {url: self.cache[url] for url in urls if url in self.cache}


class RecordingBackend(RenderBackend):
    """Render backend that records every call and echoes its arguments."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []

    def render(self, *, source, style, resize_mode, tint_color=None, ref=None, **props):
        call = {
            "source": source,
            "style": style,
            "resize_mode": resize_mode,
            "tint_color": tint_color,
            "ref": ref,
            "props": props,
        }
        self.calls.append(call)
        return call


@pytest.fixture
def fake_loader() -> FakeImageLoader:
    return FakeImageLoader(
        sizes={"https://example.com/cat.png": (640, 480)},
        cache={
            "https://example.com/a.png": "memory",
            "https://example.com/b.png": "disk",
        },
    )


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def resolver() -> AssetResolver:
    return AssetResolver(AssetConfig(server_url="http://localhost:8081", pixel_ratio=2.0))


@pytest.fixture
def image(backend, fake_loader, resolver) -> Image:
    return Image(backend, fake_loader, resolver)


# ---------------------------------------------------------------------------
# Scaffolder
# ---------------------------------------------------------------------------


@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Temporary application directory the ubuntu/ target is written into."""
    project_dir = tmp_path / "my-app"
    project_dir.mkdir()
    yield project_dir


@pytest.fixture
def generator(tmp_project_dir: Path) -> UbuntuGenerator:
    """Generator for ``MyApp`` with the default package name."""
    return UbuntuGenerator("MyApp", destination_root=tmp_project_dir, config=Config())
