"""CLI command for resolving a primitive's style."""

import argparse
import json

from styled_variants.exceptions import StyledVariantsException
from styled_variants.interfaces import PresenterProtocol
from styled_variants.presenters import ConsolePresenter
from styled_variants.primitives import PRIMITIVES
from styled_variants.rendering import render_css, render_qss
from styled_variants.themes import get_theme


def parse_assignment(text: str) -> tuple[str, str]:
    """Parse a ``key=value`` command-line assignment.

    Raises:
        argparse.ArgumentTypeError: If there is no '=' or the key is empty
    """
    key, sep, value = text.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"expected key=value, got {text!r}")
    return key.strip(), value.strip()


def resolve_command(args, presenter: PresenterProtocol | None = None) -> int:
    """Execute the resolve subcommand.

    Args:
        args: Parsed command-line arguments
        presenter: Output presenter (console if None)

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = presenter or ConsolePresenter()

    styles = PRIMITIVES.get(args.primitive)
    if styles is None:
        presenter.show_error(
            f"Unknown primitive '{args.primitive}'. Available: {', '.join(sorted(PRIMITIVES))}"
        )
        return 1

    props = dict(args.set or [])

    try:
        theme = get_theme(args.theme)
        style, forwarded = styles.resolve(theme, props)
        selector = args.selector or f".{args.primitive}"
        if args.format == "css":
            text = render_css(style, selector)
        elif args.format == "qss":
            text = render_qss(style, selector)
        else:
            text = json.dumps({"style": style, "props": forwarded}, indent=2, ensure_ascii=False)
    except StyledVariantsException as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_style(f"{args.primitive} ({theme.name})", text)
    return 0
