"""Command-line entry point for the Ubuntu platform generator."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from rich.markup import escape

from rn_ubuntu.config import Config
from rn_ubuntu.scaffolder.generator import PackageNameError, UbuntuGenerator
from rn_ubuntu.utils import console, print_error, print_success, print_summary_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rn-ubuntu-init",
        description="Add an Ubuntu (click package) target to a React Native app",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  rn-ubuntu-init MyApp\n"
            "  rn-ubuntu-init MyApp --package myapp.janedoe\n"
            "  rn-ubuntu-init MyApp --destination ./my-app --dry-run\n"
        ),
    )
    parser.add_argument("name", help="Application name")
    parser.add_argument(
        "--package",
        default=None,
        help="Package name for the application (appname.developername, "
        "default: <lowercased name>.dev)",
    )
    parser.add_argument(
        "--destination", "-d",
        default=".",
        help="Project root the ubuntu/ directory is created in (default: .)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the files that would be written without writing them",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``rn-ubuntu-init`` and ``python -m rn_ubuntu``."""
    args = build_parser().parse_args(argv)

    generator = UbuntuGenerator(
        args.name,
        package=args.package,
        destination_root=Path(args.destination),
        config=Config.from_env(),
    )

    try:
        generator.initialize()
    except PackageNameError as exc:
        print_error(f"Error: {escape(str(exc))}")
        sys.exit(1)

    if args.dry_run:
        print_summary_table(
            {entry.source: escape(str(dest)) for entry, dest in generator.plan()},
            title="Files to write",
        )
        return

    written = asyncio.run(generator.write())
    print_summary_table(
        {escape(path.name): escape(str(path.parent)) for path in written},
        title=f"Ubuntu target for {escape(generator.options.name)}",
    )
    print_success(f"Package {escape(generator.options.package)} created.")
    console.print()
    generator.end()


if __name__ == "__main__":
    main()
