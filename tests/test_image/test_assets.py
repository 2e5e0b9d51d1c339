"""Tests for the asset-resolution service.

Covers:
- Passthrough of sources, mappings, and lists
- Registered asset lookup, scale selection, and uri building
- Custom source transformers
"""

from __future__ import annotations

from pathlib import Path

import pytest

from rn_ubuntu.config import AssetConfig
from rn_ubuntu.image.assets import AssetResolver, PackagerAsset, pick_scale
from rn_ubuntu.image.models import ImageSource


pytestmark = pytest.mark.unit


@pytest.fixture
def logo_asset() -> dict:
    return {
        "name": "logo",
        "type": "png",
        "http_server_location": "/assets/img",
        "scales": [1, 2, 3],
        "width": 64,
        "height": 32,
    }


class TestResolvePassthrough:
    def test_none(self, resolver):
        assert resolver.resolve(None) is None

    def test_image_source_returned_as_is(self, resolver):
        source = ImageSource(uri="https://x/a.png")
        assert resolver.resolve(source) is source

    def test_mapping_validated(self, resolver):
        source = resolver.resolve({"uri": "https://x/a.png", "width": 5, "headers": {"A": "b"}})
        assert isinstance(source, ImageSource)
        assert source.width == 5
        assert source.model_extra == {"headers": {"A": "b"}}

    def test_list_resolved_per_entry(self, resolver):
        sources = resolver.resolve([{"uri": "a"}, ImageSource(uri="b")])
        assert [s.uri for s in sources] == ["a", "b"]

    def test_list_with_unknown_asset_rejected(self, resolver):
        with pytest.raises(TypeError):
            resolver.resolve([{"uri": "a"}, 42])

    def test_unsupported_type(self, resolver):
        with pytest.raises(TypeError):
            resolver.resolve("https://x/a.png")

    def test_bool_is_not_an_asset_id(self, resolver):
        with pytest.raises(TypeError):
            resolver.resolve(True)


class TestRegisteredAssets:
    def test_ids_start_at_one(self, resolver, logo_asset):
        assert resolver.register_asset(logo_asset) == 1
        assert resolver.register_asset(PackagerAsset(name="bg", type="jpg")) == 2

    def test_unknown_id(self, resolver):
        assert resolver.resolve(1) is None
        assert resolver.get_asset_by_id(0) is None

    def test_server_uri_uses_scale_for_pixel_ratio(self, resolver, logo_asset):
        asset_id = resolver.register_asset(logo_asset)
        source = resolver.resolve(asset_id)
        assert source.uri == "http://localhost:8081/assets/img/logo@2x.png"
        assert source.scale == 2
        assert source.width == 64
        assert source.height == 32

    def test_scale_one_has_no_suffix(self, logo_asset):
        resolver = AssetResolver(AssetConfig(server_url="http://localhost:8081/"))
        source = resolver.resolve(resolver.register_asset(logo_asset))
        assert source.uri == "http://localhost:8081/assets/img/logo.png"

    def test_bundle_uri_without_server(self, tmp_path: Path, logo_asset):
        resolver = AssetResolver(AssetConfig(bundle_dir=tmp_path, pixel_ratio=3))
        source = resolver.resolve(resolver.register_asset(logo_asset))
        assert source.uri == (tmp_path.resolve() / "img" / "logo@3x.png").as_uri()

    def test_bundle_uri_at_assets_root(self, tmp_path: Path):
        resolver = AssetResolver(AssetConfig(bundle_dir=tmp_path))
        source = resolver.resolve(resolver.register_asset({"name": "bg", "type": "jpg"}))
        assert source.uri == (tmp_path.resolve() / "bg.jpg").as_uri()


class TestCustomTransformer:
    def test_transformer_replaces_source(self, resolver, logo_asset):
        asset_id = resolver.register_asset(logo_asset)
        resolver.set_custom_source_transformer(
            lambda asset, default: ImageSource(uri=f"res://{asset.name}", scale=default.scale)
        )
        source = resolver.resolve(asset_id)
        assert source.uri == "res://logo"
        assert source.scale == 2

    def test_transformer_returning_none_keeps_default(self, resolver, logo_asset):
        asset_id = resolver.register_asset(logo_asset)
        resolver.set_custom_source_transformer(lambda asset, default: None)
        assert resolver.resolve(asset_id).uri.endswith("logo@2x.png")


class TestPickScale:
    def test_exact_match(self):
        assert pick_scale([1, 2, 3], 2) == 2

    def test_rounds_up(self):
        assert pick_scale([1, 2, 3], 1.5) == 2

    def test_falls_back_to_largest(self):
        assert pick_scale([1, 2], 3) == 2

    def test_no_scales(self):
        assert pick_scale([], 2) == 1.0
