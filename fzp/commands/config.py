"""Settings commands for the fzp CLI."""

import click
import yaml

from ..config import get_config_file, get_verbosity, load_search_config, set_option, set_verbosity
from ..utils import log_info

SETTABLE = ("fd_cmd", "fd_timeout_msec", "blocking", "verbosity")


def _parse_value(key: str, value: str):
    if key == "fd_cmd":
        return value.split()
    if key in ("fd_timeout_msec", "verbosity"):
        try:
            return int(value)
        except ValueError:
            raise click.BadParameter(f"{key} must be an integer", param_hint="VALUE")
    lowered = value.lower()
    if lowered in ("true", "yes", "on", "1"):
        return True
    if lowered in ("false", "no", "off", "0"):
        return False
    raise click.BadParameter(f"{key} must be true or false", param_hint="VALUE")


@click.group()
def config():
    """Show or change fuzzy-path settings."""


@config.command()
def show():
    """Print the effective settings."""
    try:
        search_config = load_search_config()
    except ValueError as e:
        raise click.ClickException(f"Invalid configuration: {e}")

    settings = search_config.as_dict()
    settings["verbosity"] = get_verbosity()
    click.echo(click.style(f"# {get_config_file()}", dim=True))
    click.echo(yaml.dump(settings, default_flow_style=False).rstrip())


@config.command(name="set")
@click.argument("key", type=click.Choice(SETTABLE))
@click.argument("value")
def set_(key: str, value: str):
    """Persist KEY=VALUE in the config file.

    Examples:
        fzp config set fd_timeout_msec 800
        fzp config set blocking true
        fzp config set fd_cmd "fd -d 8 -p -i -H"
    """
    parsed = _parse_value(key, value)
    try:
        if key == "verbosity":
            set_verbosity(parsed)
        else:
            set_option(key, parsed)
    except ValueError as e:
        raise click.ClickException(str(e))
    log_info(click.style(f"Set {key} in {get_config_file()}", fg="green"))
