"""Search functionality for fuzzy path completion.

This package contains:
- command.py: fd invocation building
- runner.py: Blocking and asyncio process runners
- fuzzy.py: Fuzzy scoring
"""

from .command import build_command, fuzzy_regex
from .fuzzy import fuzzy_filter
from .runner import AsyncRunner, BlockingRunner, ProcessRunner, get_runner

__all__ = [
    "build_command",
    "fuzzy_regex",
    "fuzzy_filter",
    "ProcessRunner",
    "BlockingRunner",
    "AsyncRunner",
    "get_runner",
]
