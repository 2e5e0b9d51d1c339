"""rn-ubuntu configuration.

Typed settings for the scaffolder and the image asset resolver.  All
settings use Pydantic v2 models so they are validated at construction time
and can be serialised to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "scaffolder" / "templates"


class AssetConfig(BaseModel):
    """Where bundled image assets are served from."""

    server_url: str | None = Field(
        default=None,
        description="Development server serving /assets (e.g. http://localhost:8081)",
    )
    bundle_dir: Path = Field(
        default=Path("./share"),
        description="Directory holding bundled assets when no server is used",
    )
    pixel_ratio: float = Field(default=1.0, gt=0, description="Device pixel ratio")


class Config(BaseModel):
    """Global rn-ubuntu configuration.

    Instances are typically created once by the CLI entry point and then
    passed to ``UbuntuGenerator`` and ``AssetResolver``.
    """

    template_dir: Path = Field(default=_DEFAULT_TEMPLATE_DIR)
    output_subdir: str = Field(default="ubuntu", min_length=1)
    package_suffix: str = Field(default=".dev")
    assets: AssetConfig = Field(default_factory=AssetConfig)

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def output_root(self, destination_root: str | Path) -> Path:
        """Root of the generated platform tree inside *destination_root*."""
        return Path(destination_root) / self.output_subdir

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            RN_UBUNTU_TEMPLATE_DIR, RN_UBUNTU_OUTPUT_SUBDIR,
            RN_UBUNTU_PACKAGE_SUFFIX, RN_UBUNTU_ASSET_SERVER,
            RN_UBUNTU_BUNDLE_DIR, RN_UBUNTU_PIXEL_RATIO.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("RN_UBUNTU_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["RN_UBUNTU_TEMPLATE_DIR"])
        if os.environ.get("RN_UBUNTU_OUTPUT_SUBDIR"):
            kwargs["output_subdir"] = os.environ["RN_UBUNTU_OUTPUT_SUBDIR"]
        if "RN_UBUNTU_PACKAGE_SUFFIX" in os.environ:
            kwargs["package_suffix"] = os.environ["RN_UBUNTU_PACKAGE_SUFFIX"]

        asset_kwargs: dict[str, Any] = {}
        if os.environ.get("RN_UBUNTU_ASSET_SERVER"):
            asset_kwargs["server_url"] = os.environ["RN_UBUNTU_ASSET_SERVER"]
        if os.environ.get("RN_UBUNTU_BUNDLE_DIR"):
            asset_kwargs["bundle_dir"] = Path(os.environ["RN_UBUNTU_BUNDLE_DIR"])
        if os.environ.get("RN_UBUNTU_PIXEL_RATIO"):
            asset_kwargs["pixel_ratio"] = float(os.environ["RN_UBUNTU_PIXEL_RATIO"])

        return cls(assets=AssetConfig(**asset_kwargs), **kwargs)
