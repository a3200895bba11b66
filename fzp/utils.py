"""Shared helpers: verbosity-gated logging."""

from functools import lru_cache

import click

from .config import get_verbosity

_verbosity_override: int | None = None


def set_log_level(level: int | None) -> None:
    """Override the configured verbosity for this process.

    None drops the override and re-reads the config file on the next log call.
    """
    global _verbosity_override
    _verbosity_override = level
    _configured_verbosity.cache_clear()


@lru_cache(maxsize=None)
def _configured_verbosity() -> int:
    # Read once per process, log calls never touch the disk after that
    return get_verbosity()


def current_verbosity() -> int:
    if _verbosity_override is not None:
        return _verbosity_override
    return _configured_verbosity()


def _log(level: int, message: str, *args) -> None:
    if current_verbosity() < level:
        return
    if args:
        message = message % args
    click.echo(message, err=True)


def log_info(message: str, *args) -> None:
    """Print at verbosity >= 1."""
    _log(1, message, *args)


def log_verbose(message: str, *args) -> None:
    """Print at verbosity >= 2."""
    _log(2, message, *args)


def log_debug(message: str, *args) -> None:
    """Print at verbosity >= 3, prefixed with the logger name."""
    _log(3, "[fuzzy_path] " + message, *args)
