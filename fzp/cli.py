"""fzp - fuzzy path completion backed by fd."""

import click

from . import __version__
from .commands import complete, config, resolve
from .utils import set_log_level


@click.group()
@click.version_option(__version__, prog_name="fzp")
@click.option(
    "--verbosity", "-v",
    type=click.IntRange(0, 3),
    default=None,
    help="Override configured verbosity (0=silent, 3=debug)",
)
def cli(verbosity: int | None):
    """Fuzzy path completion backed by fd."""
    set_log_level(verbosity)


cli.add_command(complete)
cli.add_command(resolve)
cli.add_command(config)


def main():
    cli()


if __name__ == "__main__":
    main()
