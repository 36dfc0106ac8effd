"""Main CLI entry point for styled_variants."""

import argparse
import logging
import sys

from styled_variants import __version__
from styled_variants.cli.commands import resolve, tokens
from styled_variants.config import DEFAULT_CONFIG
from styled_variants.models import THEME_SECTIONS
from styled_variants.primitives import PRIMITIVES
from styled_variants.themes import available_themes


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="styled_variants",
        description="Resolve theme-aware style variants for UI primitives",
        epilog="Use 'styled_variants <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # styled_variants resolve <primitive>
    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Resolve a primitive's style for a set of variant choices",
        description="Resolve a primitive's variants against a theme and print the result",
    )
    resolve_parser.add_argument("primitive", choices=sorted(PRIMITIVES), help="Primitive name")
    resolve_parser.add_argument(
        "--theme",
        choices=available_themes(),
        default=DEFAULT_CONFIG.default_theme,
        help="Theme to resolve against",
    )
    resolve_parser.add_argument(
        "--set",
        action="append",
        type=resolve.parse_assignment,
        metavar="KEY=VALUE",
        help="Prop to pass (repeatable), e.g. --set color_scheme=danger",
    )
    resolve_parser.add_argument(
        "--format",
        choices=["json", "css", "qss"],
        default="json",
        help="Output format",
    )
    resolve_parser.add_argument("--selector", help="Selector for css/qss output")

    # styled_variants tokens
    tokens_parser = subparsers.add_parser(
        "tokens",
        help="List theme tokens",
        description="Print the design tokens of a built-in theme",
    )
    tokens_parser.add_argument(
        "--theme",
        choices=available_themes(),
        default=DEFAULT_CONFIG.default_theme,
        help="Theme to list",
    )
    tokens_parser.add_argument("--section", choices=THEME_SECTIONS, help="Only list one section")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Dispatch to appropriate command
    if args.command == "resolve":
        return resolve.resolve_command(args)
    elif args.command == "tokens":
        return tokens.tokens_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
