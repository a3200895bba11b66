"""Completion commands for the fzp CLI (complete, resolve)."""

import json
import os

import click

from ..candidates import Kind, sort_candidates
from ..completions import complete_path
from ..config import SearchConfig, load_search_config
from ..engine import complete as run_completion
from ..paths import normalize_dir
from ..utils import log_verbose


def _effective_config(blocking: bool | None, timeout: int | None) -> SearchConfig:
    try:
        config = load_search_config()
        return SearchConfig.from_options(
            {"blocking": blocking, "fd_timeout_msec": timeout}, base=config
        )
    except ValueError as e:
        raise click.ClickException(f"Invalid configuration: {e}")


@click.command()
@click.argument("arg_lead", default="")
@click.option("--cmdline", "-c", default=None, help="Full command line (defaults to ARG_LEAD)")
@click.option("--blocking/--async", "blocking", default=None, help="Run fd synchronously or on an event loop")
@click.option("--timeout", "-t", type=click.IntRange(min=1), default=None, help="fd timeout in milliseconds")
@click.option("--json", "as_json", is_flag=True, help="Print candidates as JSON")
def complete(arg_lead: str, cmdline: str | None, blocking: bool | None, timeout: int | None, as_json: bool):
    """Print fuzzy path completions for ARG_LEAD, best first.

    ARG_LEAD may carry the "e " leader of an edit command.

    Examples:
        fzp complete "e src/fo"
        fzp complete "e /" --json
        fzp complete "e ~/pro" --blocking --timeout 500
    """
    config = _effective_config(blocking, timeout)
    items = sort_candidates(run_completion(arg_lead, cmdline if cmdline is not None else arg_lead, config))
    log_verbose("%d candidates", len(items))

    if as_json:
        click.echo(json.dumps([item.to_dict() for item in items], indent=2))
        return

    for item in items:
        label = item.label
        if item.kind is Kind.DIRECTORY:
            label = click.style(label + "/", fg="blue", bold=True)
        click.echo(f"{item.score:>4}  {label}")


@click.command()
@click.argument("path", shell_complete=complete_path)
def resolve(path: str):
    """Print PATH as an absolute path with symlinks resolved."""
    resolved = normalize_dir(path)
    if not os.path.exists(resolved):
        raise click.ClickException(f"No such file or directory: {path}")
    click.echo(resolved)
