"""Command modules for the fzp CLI."""

from .complete import complete, resolve
from .config import config

__all__ = [
    "complete",
    "resolve",
    "config",
]
