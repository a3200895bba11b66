"""Fuzzy path completion entry point.

A request goes: strip the ``e`` leader, decompose the path, build the fd
command, run it in the base directory, then score the output. Any failure
along the way yields an empty list.
"""

import re
from dataclasses import dataclass
from typing import Callable

from .candidates import Candidate, Kind, build_candidates
from .config import DEFAULT_CONFIG, SearchConfig
from .paths import decompose, is_directory
from .search.command import build_command
from .search.runner import AsyncRunner, get_runner
from .utils import log_debug, log_verbose

# An "e" command, optional spaces, then a path-like token at end of input
TRIGGER_PATTERN = r"e *[^ \t]*$"
TRIGGER_RE = re.compile(TRIGGER_PATTERN)


def matches_trigger(cmdline: str) -> bool:
    return TRIGGER_RE.search(cmdline) is not None


def strip_leader(arg_lead: str) -> str:
    """Remove a leading 'e' and trim whitespace."""
    if arg_lead.startswith("e"):
        arg_lead = arg_lead[1:]
    return arg_lead.strip()


def filter_text_for(cmdline: str, arg_lead: str) -> str:
    # cmdline[-0:] is the whole line, so an empty arg lead keeps all of it
    return cmdline[-len(arg_lead):]


def _prepare(pattern: str, config: SearchConfig):
    try:
        new_pattern, base_dir, prefix = decompose(pattern)
    except ValueError as e:
        log_verbose("Invalid pattern %r: %s", pattern, e)
        return None
    log_debug("new_pattern: %s, cwd: %s, prefix: %s", new_pattern, base_dir, prefix)

    if not is_directory(base_dir):
        log_verbose("Invalid cwd: %s", base_dir)
        return None

    cmd = build_command(config, new_pattern, base_dir)
    return cmd, new_pattern, base_dir, prefix


async def complete_pattern_async(
    pattern: str,
    filter_text: str,
    config: SearchConfig = DEFAULT_CONFIG,
) -> list[Candidate]:
    """Coroutine form of :func:`complete_pattern` for hosts running a loop.

    Always uses the asyncio runner; ``config.blocking`` is ignored here.
    """
    prepared = _prepare(pattern, config)
    if prepared is None:
        return []
    cmd, new_pattern, base_dir, prefix = prepared

    output = await AsyncRunner(config.fd_timeout_msec).run_async(cmd, base_dir)
    items = build_candidates(output, base_dir, prefix, new_pattern, filter_text)
    log_debug("Found %d items (async)", len(items))
    return items


def complete_pattern(
    pattern: str,
    filter_text: str,
    config: SearchConfig = DEFAULT_CONFIG,
) -> list[Candidate]:
    """Complete an already stripped path pattern."""
    prepared = _prepare(pattern, config)
    if prepared is None:
        return []
    cmd, new_pattern, base_dir, prefix = prepared

    output = get_runner(config).run(cmd, base_dir)
    items = build_candidates(output, base_dir, prefix, new_pattern, filter_text)
    log_debug(
        "Found %d items (%s)", len(items), "blocking" if config.blocking else "async"
    )
    return items


def complete(
    arg_lead: str,
    cmdline: str,
    config: SearchConfig = DEFAULT_CONFIG,
    force: bool = False,
) -> list[Candidate]:
    """Return candidates for ``arg_lead``, unsorted.

    Never raises for search problems: a bad directory, a missing or failing
    fd, or a timeout all give an empty list. ``force`` is accepted for host
    compatibility and ignored.
    """
    arg_lead = strip_leader(arg_lead)
    log_debug("Starting fuzzy_path exec with arglead: %s", arg_lead)
    return complete_pattern(arg_lead, filter_text_for(cmdline, arg_lead), config)


async def complete_async(
    arg_lead: str,
    cmdline: str,
    config: SearchConfig = DEFAULT_CONFIG,
    force: bool = False,
) -> list[Candidate]:
    arg_lead = strip_leader(arg_lead)
    return await complete_pattern_async(
        arg_lead, filter_text_for(cmdline, arg_lead), config
    )


@dataclass(frozen=True)
class CompletionSource:
    """Descriptor a completion host registers."""

    ctype: str
    regex: str
    kind: Kind
    is_incomplete: bool
    exec: Callable[..., list[Candidate]]


FUZZY_PATH_SOURCE = CompletionSource(
    ctype="cmdline",
    regex=TRIGGER_PATTERN,
    kind=Kind.FILE,
    is_incomplete=True,
    exec=complete,
)


def run_source(
    source: CompletionSource,
    cmdline: str,
    config: SearchConfig = DEFAULT_CONFIG,
    force: bool = False,
) -> list[Candidate]:
    """Match ``cmdline`` against ``source.regex`` and complete the matched tail.

    Returns an empty list when the trigger does not match.
    """
    match = re.search(source.regex, cmdline)
    if match is None:
        return []
    return source.exec(match.group(0), cmdline, config, force)


__all__ = [
    "TRIGGER_PATTERN",
    "FUZZY_PATH_SOURCE",
    "CompletionSource",
    "complete",
    "complete_async",
    "complete_pattern",
    "complete_pattern_async",
    "matches_trigger",
    "run_source",
    "strip_leader",
]
