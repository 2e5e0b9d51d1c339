"""Ubuntu platform generator.

Adds an ``ubuntu/`` platform target to an existing application: CMake and
shell build scripts, the click package manifest, a desktop entry, an
AppArmor profile, and the application icon.  The generator follows the
named-generator run order ``initialize -> write -> end``.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field
from rich.markup import escape

from rn_ubuntu.config import Config
from rn_ubuntu.utils import console, ensure_dir, make_executable

from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Package name validation
# ---------------------------------------------------------------------------

_PACKAGE_NAME_RE = re.compile(
    r"^([a-zA-Z_$][a-zA-Z0-9_$]*\.)+([a-zA-Z_$][a-zA-Z0-9_$]*)$"
)


class PackageNameError(ValueError):
    """Raised when the package identifier is not a dotted identifier."""

    def __init__(self, package: str) -> None:
        self.package = package
        super().__init__(f"Package name {package} is invalid")


def validate_package_name(name: str) -> bool:
    """Return ``True`` if *name* looks like ``appname.developername``.

    Every dot-separated segment must start with a letter, ``_`` or ``$``
    and continue with letters, digits, ``_`` or ``$``; at least two
    segments are required.
    """
    return _PACKAGE_NAME_RE.fullmatch(name) is not None


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class GeneratorOptions(BaseModel):
    """Options supplied once per generator run."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Application name")
    package: str = Field(..., description="Package name (appname.developername)")


class TemplateParams(BaseModel):
    """Substitution values shared by every templated file."""

    model_config = ConfigDict(frozen=True)

    package: str
    name: str
    lower_case_name: str

    @classmethod
    def from_options(cls, options: GeneratorOptions) -> "TemplateParams":
        return cls(
            package=options.package,
            name=options.name,
            lower_case_name=options.name.lower(),
        )

    def as_context(self) -> dict[str, Any]:
        """Template context using the variable names the templates expect."""
        return {
            "package": self.package,
            "name": self.name,
            "lowerCaseName": self.lower_case_name,
        }


class TemplateEntry(NamedTuple):
    """One file of the template manifest.

    ``destination`` is relative to the output root and may itself contain
    template variables.
    """

    source: str
    destination: str
    substitute: bool = True
    executable: bool = False


TEMPLATE_MANIFEST: tuple[TemplateEntry, ...] = (
    TemplateEntry("CMakeLists.txt.j2", "CMakeLists.txt"),
    TemplateEntry("build.sh.j2", "build.sh", executable=True),
    TemplateEntry("run-app.sh.in.j2", "run-app.sh.in"),
    TemplateEntry("click/manifest.json.j2", "click/manifest.json"),
    TemplateEntry("click/desktop.j2", "click/{{ name }}.desktop"),
    TemplateEntry("click/apparmor", "click/{{ name }}.apparmor", substitute=False),
    TemplateEntry("click/icon.png", "click/share/icons/{{ name }}.png", substitute=False),
)

# Directories created empty alongside the generated files.
EXTRA_DIRECTORIES: tuple[str, ...] = ("share",)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class UbuntuGenerator:
    """Scaffolds the ``ubuntu/`` platform directory for an application.

    Args:
        name: Application name, used for file names and the default package.
        package: Package name; defaults to ``<name lowercased><suffix>``
            where the suffix comes from ``Config.package_suffix``.
        destination_root: Project directory the ``ubuntu/`` tree goes into.
        config: Optional configuration override.
    """

    def __init__(
        self,
        name: str,
        package: str | None = None,
        destination_root: str | Path = ".",
        config: Config | None = None,
    ) -> None:
        self.config = config or Config()
        if package is None:
            package = name.lower() + self.config.package_suffix
        self.options = GeneratorOptions(name=name, package=package)
        self.destination_root = Path(destination_root)
        self.renderer = TemplateRenderer(self.config.template_dir)
        self.manifest = TEMPLATE_MANIFEST

    @property
    def output_root(self) -> Path:
        return self.config.output_root(self.destination_root)

    # -- Run phases --------------------------------------------------------

    def initialize(self) -> None:
        """Validate the options before anything touches the filesystem.

        Raises:
            PackageNameError: If the package name is not a dotted identifier.
        """
        if not validate_package_name(self.options.package):
            raise PackageNameError(self.options.package)

    def plan(self) -> list[tuple[TemplateEntry, Path]]:
        """Return ``(entry, destination)`` for every file :meth:`write` produces."""
        context = TemplateParams.from_options(self.options).as_context()
        return [
            (entry, self.output_root / self.renderer.render_string(entry.destination, context))
            for entry in self.manifest
        ]

    async def write(self) -> list[Path]:
        """Write every manifest entry and create the extra directories.

        Files are written one at a time; existing files are overwritten.
        A filesystem error stops the run and leaves the files written so
        far in place.

        Returns:
            The written file paths, in manifest order.
        """
        context = TemplateParams.from_options(self.options).as_context()
        written: list[Path] = []

        for entry, destination in self.plan():
            if entry.substitute:
                path = await self.renderer.render_to_file(entry.source, destination, context)
            else:
                path = await self.renderer.copy_to_file(entry.source, destination)
            if entry.executable:
                await asyncio.to_thread(make_executable, path)
            written.append(path)

        for directory in EXTRA_DIRECTORIES:
            await asyncio.to_thread(ensure_dir, self.output_root / directory)

        return written

    def end(self) -> None:
        """Print how to build and run the generated target."""
        project_path = self.destination_root.resolve()
        console.print("[bold white]To run your app on Ubuntu:[/bold white]")
        console.print(
            "[white]   Have an Ubuntu emulator running, or a device connected[/white]",
        )
        console.print(f"[white]   cd {escape(str(project_path))}[/white]")
        console.print("[white]   react-native run-ubuntu[/white]")

    async def run(self) -> list[Path]:
        """Run ``initialize``, ``write`` and ``end`` in order."""
        self.initialize()
        written = await self.write()
        self.end()
        return written
