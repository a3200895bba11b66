"""Build the fd invocation for one completion request."""

import os
import re

from ..config import SearchConfig
from ..paths import is_root

FD_PROGRAMS = ("fd", "fdfind")
DEPTH_FLAGS = ("-d", "--max-depth", "--maxdepth")
# -d20 or -d=20
_ATTACHED_DEPTH_RE = re.compile(r"-d=?\d+")

# Characters fd's regex engine treats specially
_REGEX_META = frozenset("\\.+*?()|[]{}^$")


def fuzzy_regex(pattern: str) -> str:
    """Turn ``abc`` into ``a.*b.*c.*``.

    The regex only narrows what fd prints; ranking is done by the scorer.
    """
    return "".join(
        ("\\" + char if char in _REGEX_META else char) + ".*"
        for char in pattern
    )


def limit_depth(cmd: list[str], depth: int = 1) -> list[str]:
    """Drop any max-depth options from ``cmd`` and append ``-d <depth>``."""
    limited = []
    skip = False
    for arg in cmd:
        if skip:
            skip = False
            continue
        if arg in DEPTH_FLAGS:
            skip = True
            continue
        if arg.startswith(("--max-depth=", "--maxdepth=")) or _ATTACHED_DEPTH_RE.fullmatch(arg):
            continue
        limited.append(arg)
    limited.extend(["-d", str(depth)])
    return limited


def is_fd(program: str) -> bool:
    name = os.path.basename(program)
    if name.lower().endswith(".exe"):
        name = name[:-4]
    return name in FD_PROGRAMS


def build_command(config: SearchConfig, pattern: str, base_dir: str) -> list[str]:
    """Return a fresh argument list for searching ``base_dir`` for ``pattern``.

    Searching from the filesystem root with fd is limited to depth 1.
    """
    cmd = list(config.fd_cmd)

    if is_root(base_dir) and cmd and is_fd(cmd[0]):
        cmd = limit_depth(cmd)

    if pattern:
        cmd.append(fuzzy_regex(pattern))

    return cmd
