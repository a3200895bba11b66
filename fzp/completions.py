"""Shell completion functions for the fzp CLI."""

from click.shell_completion import CompletionItem

from .candidates import Kind, sort_candidates
from .config import DEFAULT_CONFIG, load_search_config
from .engine import complete_pattern


def complete_path(ctx, param, incomplete: str) -> list:
    """Shell completion for paths, fuzzy matched with fd.

    Shells pass the bare word being completed, so there is no leader to strip.
    Config errors fall back to the defaults rather than breaking the shell.
    """
    try:
        config = load_search_config()
    except ValueError:
        config = DEFAULT_CONFIG

    items = complete_pattern(incomplete, incomplete, config)

    return [
        CompletionItem(
            item.label + ("/" if item.kind is Kind.DIRECTORY else ""),
            help=f"{item.kind.value if item.kind else 'other'}, score {item.score}",
        )
        for item in sort_candidates(items)
    ]
