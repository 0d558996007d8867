"""buildnumber CLI — bump the build number of an Xcode product.

Usage:
    build-number [--path <plist>] [--tag-prefix <prefix>] [--mode numeric|annotated] [--verbose]

Without --path the Info.plist is located through the BUILT_PRODUCTS_DIR and
INFOPLIST_PATH environment variables that Xcode exports to build phases.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from buildnumber import __version__
from buildnumber.core.config import MODE_ANNOTATED, MODES, BuildNumberConfig, get_config
from buildnumber.core.errors import FatalError
from buildnumber.orchestrator.engine import BuildOrchestrator
from buildnumber.revision.git import GitRevisionSource
from buildnumber.store.plist import PlistMetadataStore
from buildnumber.version.model import RenderMode

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="build-number",
        description="Increment the build number recorded in an Info.plist and tag it in git.",
    )
    parser.add_argument("--version", action="version", version=f"build-number {__version__}")
    parser.add_argument(
        "--path",
        "-P",
        type=str,
        default=None,
        help="Path to plist containing version info. Default uses Xcode environment values.",
    )
    parser.add_argument(
        "--tag-prefix",
        type=str,
        default=None,
        help="Prefix of build tags (default: build-)",
    )
    parser.add_argument(
        "--mode",
        choices=MODES,
        default=None,
        help="Version mode. 'numeric' only uses numeric versioning; "
        "'annotated' also records the git revision.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def configure_logging(level: str) -> None:
    """Route buildnumber log records to stderr through Rich."""
    root = logging.getLogger("buildnumber")
    root.handlers.clear()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    root.addHandler(
        RichHandler(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
            rich_tracebacks=False,
        )
    )
    root.propagate = False


def apply_args(config: BuildNumberConfig, args: argparse.Namespace) -> BuildNumberConfig:
    """Layer CLI flags over the environment-derived config."""
    if args.path:
        config.metadata_path = Path(args.path)
    if args.tag_prefix:
        config.tag_prefix = args.tag_prefix
    if args.mode:
        config.mode = args.mode
    if args.verbose:
        config.log_level = "DEBUG"
    return config


def cmd_bump(config: BuildNumberConfig) -> int:
    """Run one build-number bump and report old -> new."""
    path = config.resolve_metadata_path()
    store = PlistMetadataStore.load(path)
    revisions = GitRevisionSource(config.git_executable, config.repository_dir)

    result = BuildOrchestrator(config, store, revisions).run()

    mode = RenderMode.WITH_REVISION_KIND if config.mode == MODE_ANNOTATED else RenderMode.NONE
    print(result.summary(mode))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    errors = Console(stderr=True)

    try:
        config = apply_args(dataclasses.replace(get_config()), args)
        configure_logging(config.log_level)
        return cmd_bump(config)
    except FatalError as exc:
        logger.debug("Build number run failed", exc_info=True)
        errors.print(f"[bold red]ERROR:[/bold red] {escape(str(exc))}", soft_wrap=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
