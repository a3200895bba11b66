"""Turn fd output lines into scored completion candidates."""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from .paths import FileType, StatInfo, stat
from .search.fuzzy import fuzzy_filter

UNFILTERED_SCORE = 10


class Kind(Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass
class Candidate:
    label: str
    kind: Kind | None
    score: int
    # Data is for the host's compare function
    data: dict = field(default_factory=dict)
    filter_text: str = ""

    def to_dict(self) -> dict:
        info = self.data.get("stat")
        return {
            "label": self.label,
            "kind": self.kind.value if self.kind else None,
            "score": self.score,
            "path": self.data.get("path"),
            "size": info.size if info else None,
            "filter_text": self.filter_text,
        }


def kind_for(info: StatInfo | None) -> Kind | None:
    if info is None:
        return None
    if info.type is FileType.DIRECTORY:
        return Kind.DIRECTORY
    if info.type is FileType.FILE:
        return Kind.FILE
    return None


def build_candidates(
    lines: list[str],
    base_dir: str,
    prefix: str,
    pattern: str,
    filter_text: str,
    matcher: Callable[[str, list[str]], list] = fuzzy_filter,
) -> list[Candidate]:
    """Build candidates from fd output, in output order.

    With an empty pattern every line scores 10. Otherwise lines the matcher
    rejects are dropped and the rest take the matcher's score.
    """
    items = []
    for line in lines:
        if line.startswith("./"):
            line = line[2:]
        if not line:
            continue

        full_path = os.path.join(base_dir, line)

        if not pattern:
            score = UNFILTERED_SCORE
        else:
            matches = matcher(pattern, [line])
            if not matches:
                continue
            score = matches[0][2]

        info = stat(full_path)
        items.append(Candidate(
            label=prefix + line,
            kind=kind_for(info),
            score=score,
            data={"path": full_path, "stat": info, "score": score},
            filter_text=filter_text,
        ))
    return items


def sort_candidates(items: list[Candidate]) -> list[Candidate]:
    """Best score first, then alphabetical."""
    return sorted(items, key=lambda item: (-item.score, item.label))
