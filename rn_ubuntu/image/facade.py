"""Declarative image component.

:class:`Image` normalises the caller's source and style, resolves the resize
mode and tint colour, and hands the result to a :class:`RenderBackend`.  It
also exposes the size, prefetch, and cache-query utilities of the
configured :class:`ImageLoadingService`.

Quick usage::

    image = Image(backend, loader)
    element = image.render(ImageProps(source={"uri": "https://x/y.png"},
                                      style={"width": 40, "height": 40}))
    sizes = await image.query_cache(["https://x/y.png"])
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from rich.markup import escape

from rn_ubuntu.utils import print_warning

from .assets import AssetResolver, default_resolver
from .models import DEFAULT_RESIZE_MODE, CacheLocation, ImageProps, ImageSource
from .services import ImageLoadingService, RenderBackend
from .styles import BASE_STYLE, flatten_style


class ImageChildrenError(TypeError):
    """Raised when content is nested inside an image component."""


_CHILDREN_MESSAGE = (
    "The <Image> component cannot contain children. If you want to render "
    "content on top of the image, consider using the <ImageBackground> "
    "component or absolute positioning."
)

# Keywords computed by render(); same-named extra props are dropped.
_COMPUTED_PROPS = frozenset({"source", "style", "resize_mode", "tint_color", "ref"})


class Image:
    """Backend-agnostic image component.

    Rendering is stateless: every :meth:`render` call recomputes the source
    list and style from the props it receives.
    """

    def __init__(
        self,
        backend: RenderBackend,
        loader: ImageLoadingService,
        resolver: AssetResolver | None = None,
    ) -> None:
        self.backend = backend
        self.loader = loader
        self.resolver = resolver or default_resolver

    # -- Rendering ---------------------------------------------------------

    def render(self, props: ImageProps | Mapping[str, Any], ref: Any = None) -> Any:
        """Normalise *props* and render them through the backend.

        Raises:
            ImageChildrenError: If ``children`` is supplied.
        """
        if not isinstance(props, ImageProps):
            props = ImageProps.model_validate(dict(props))

        source = self.resolver.resolve(props.source)
        if source is None:
            source = ImageSource(uri=None, width=None, height=None)

        if isinstance(source, list):
            style = flatten_style([BASE_STYLE, props.style])
            sources = list(source)
        else:
            style = flatten_style([source.dimensions(), BASE_STYLE, props.style])
            sources = [source]
            if source.uri == "":
                print_warning("source.uri should not be an empty string")

        resize_mode = props.resize_mode or style.get("resizeMode") or DEFAULT_RESIZE_MODE
        tint_color = style.get("tintColor")

        if props.src is not None:
            print_warning(
                "The <Image> component requires a `source` property rather than `src`."
            )

        if props.children is not None:
            raise ImageChildrenError(_CHILDREN_MESSAGE)

        extras = {k: v for k, v in props.extra_props().items() if k not in _COMPUTED_PROPS}
        return self.backend.render(
            source=sources,
            style=style,
            resize_mode=resize_mode,
            tint_color=tint_color,
            ref=ref,
            **extras,
        )

    # -- Loader utilities --------------------------------------------------

    def get_size(
        self,
        url: str,
        on_success: Callable[[float, float], Any],
        on_failure: Callable[[BaseException], Any] | None = None,
    ) -> asyncio.Task[None]:
        """Query the pixel size of *url* before displaying it.

        Must be called from a running event loop.  The returned task
        finishes after the matching callback has run.  Errors from the
        loader or from *on_success* go to *on_failure*, or are reported as a
        warning when no failure callback is given.
        """
        loop = asyncio.get_running_loop()

        async def _query() -> None:
            try:
                width, height = await self.loader.get_size(url)
                on_success(width, height)
            except Exception as exc:
                if on_failure is not None:
                    on_failure(exc)
                else:
                    print_warning(f"Failed to get size for image: {escape(url)}")

        return loop.create_task(_query())

    def prefetch(self, url: str) -> Awaitable[bool]:
        """Download *url* into the disk cache for later use."""
        return self.loader.prefetch_image(url)

    async def query_cache(self, urls: list[str]) -> dict[str, CacheLocation]:
        """Return ``{url: "memory" | "disk"}`` for the cached subset of *urls*."""
        return await self.loader.query_cache(urls)

    def resolve_asset_source(self, source: Any) -> ImageSource | list[ImageSource] | None:
        return self.resolver.resolve(source)
