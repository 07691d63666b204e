"""Command-line entry point for ``new-component``.

Usage::

    new-component Avatar
    new-component Avatar -d src/widgets -l fr-fr
    new-component Avatar --no-format
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from new_component import __version__
from new_component.config import DEFAULT_DIR, DEFAULT_LANGUAGE, Config
from new_component.errors import ConfigError, GenerationError, UsageError
from new_component.scaffolder import ComponentGenerator, build_request, check_preconditions
from new_component.utils import log_conclusion, log_error, log_intro

# Usage errors deliberately exit with success so existing scripts that chain
# ``new-component`` keep working.
USAGE_ERROR_EXIT_CODE = 0
FAILURE_EXIT_CODE = 1


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser.

    ``--dir`` and ``--lang`` default to ``None`` so values from the
    configuration files apply unless given on the command line.
    """
    parser = argparse.ArgumentParser(
        prog="new-component",
        description="Create a new React component directory from templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  new-component Avatar\n"
            "  new-component Avatar --dir src/widgets --lang fr-fr\n"
        ),
    )
    parser.add_argument(
        "component_name",
        nargs="?",
        metavar="componentName",
        help="Name of the component to create",
    )
    parser.add_argument(
        "--dir", "-d",
        metavar="pathToDirectory",
        help=f'Path to the "components" directory (default: config file, else "{DEFAULT_DIR}")',
    )
    parser.add_argument(
        "--lang", "-l",
        metavar="languageName",
        help=f'Language file name (default: config file, else "{DEFAULT_LANGUAGE}")',
    )
    parser.add_argument(
        "--no-format",
        action="store_true",
        help="Write files without running Prettier",
    )
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``new-component`` and ``python -m new_component``."""
    args = build_parser().parse_args(argv)

    try:
        config = Config.load()
    except ConfigError as exc:
        log_error(str(exc))
        sys.exit(FAILURE_EXIT_CODE)

    try:
        config = config.with_overrides(dir=args.dir, lang=args.lang)
    except ValueError as exc:
        log_error(f"Invalid option: {exc}")
        sys.exit(FAILURE_EXIT_CODE)
    if args.no_format:
        config = config.without_formatting()

    try:
        request = build_request(args.component_name, config.lang)
        log_intro(request.component_name, config.dir / request.component_name)
        check_preconditions(request, config)
    except UsageError as exc:
        log_error(str(exc))
        sys.exit(USAGE_ERROR_EXIT_CODE)

    generator = ComponentGenerator(config)
    try:
        asyncio.run(generator.generate(request))
    except GenerationError as exc:
        log_error(str(exc))
        sys.exit(FAILURE_EXIT_CODE)

    log_conclusion()


if __name__ == "__main__":
    main()
