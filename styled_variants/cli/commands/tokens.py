"""CLI command for listing theme tokens."""

from styled_variants.exceptions import StyledVariantsException
from styled_variants.interfaces import PresenterProtocol
from styled_variants.presenters import ConsolePresenter
from styled_variants.themes import get_theme


def tokens_command(args, presenter: PresenterProtocol | None = None) -> int:
    """Execute the tokens subcommand.

    Args:
        args: Parsed command-line arguments
        presenter: Output presenter (console if None)

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = presenter or ConsolePresenter()

    try:
        theme = get_theme(args.theme)
        if args.section:
            sections = {args.section: dict(theme.section(args.section))}
        else:
            sections = theme.to_dict()
    except StyledVariantsException as e:
        presenter.show_error(str(e))
        return 1

    if not any(sections.values()):
        presenter.show_info(f"Theme '{theme.name}' has no tokens in: {', '.join(sections)}")
        return 0

    presenter.show_tokens(theme.name, sections)
    return 0
