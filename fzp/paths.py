"""Pattern decomposition and filesystem stat."""

import os
import re
import stat as stat_module
from enum import Enum
from typing import NamedTuple

# Directory part (up to and including the last separator), then the basename
_SPLIT_RE = re.compile(r"(.*[/\\])(.*)", re.DOTALL)


class Decomposition(NamedTuple):
    pattern: str
    base_dir: str
    prefix: str


def normalize_dir(dname: str) -> str:
    """Expand ~ and $VARS, resolve symlinks and make ``dname`` absolute."""
    dname = dname.replace("\\", "/")
    return os.path.realpath(os.path.expandvars(os.path.expanduser(dname)))


def decompose(pattern: str) -> Decomposition:
    """Split user input into (residual pattern, base directory, display prefix).

    The prefix keeps the directory part exactly as typed so labels can be
    rebuilt as ``prefix + line``. A trailing separator gives an empty residual
    pattern, which lists the whole directory.
    """
    match = _SPLIT_RE.fullmatch(pattern)
    if match is None:
        # No separator: the whole input is the search pattern, rooted at cwd.
        # This is also what an empty pattern gets.
        return Decomposition(pattern, os.getcwd(), "")

    dname, basename = match.groups()
    return Decomposition(basename, normalize_dir(dname), dname)


def is_root(path: str) -> bool:
    """True for the filesystem root ("/" or a drive root)."""
    return os.path.dirname(path) == path


class FileType(Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


class StatInfo(NamedTuple):
    type: FileType
    size: int
    mtime: float


def stat(path: str) -> StatInfo | None:
    """Stat ``path`` following symlinks. Missing or unreadable paths give None."""
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return None

    if stat_module.S_ISDIR(st.st_mode):
        file_type = FileType.DIRECTORY
    elif stat_module.S_ISREG(st.st_mode):
        file_type = FileType.FILE
    else:
        file_type = FileType.OTHER
    return StatInfo(file_type, st.st_size, st.st_mtime)


def is_directory(path: str) -> bool:
    info = stat(path)
    return info is not None and info.type is FileType.DIRECTORY
