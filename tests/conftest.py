"""Shared test fixtures for fuzzy-path tests."""

import sys
from pathlib import Path

import pytest

from fzp.config import SearchConfig
from fzp.utils import set_log_level

# Stand-in for fd: walks cwd, prints "./relative/path" lines, and filters
# them with the regex passed as the last argument (case-insensitive).
FAKE_FD = """\
import os
import re
import sys

regex = re.compile(sys.argv[-1], re.IGNORECASE) if len(sys.argv) > 1 else None
found = []
for dirpath, dirnames, filenames in os.walk("."):
    for name in dirnames + filenames:
        rel = os.path.relpath(os.path.join(dirpath, name), ".")
        if regex is None or regex.search(rel):
            found.append("./" + rel)
for line in sorted(found):
    print(line)
"""


@pytest.fixture(autouse=True)
def config_home(tmp_path, monkeypatch):
    """Point config lookups at an empty per-test directory.

    Returns the directory used as XDG_CONFIG_HOME.
    """
    home = tmp_path / "config"
    home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    monkeypatch.delenv("FZP_CONFIG", raising=False)
    set_log_level(None)
    yield home
    set_log_level(None)


@pytest.fixture
def file_tree(tmp_path, monkeypatch):
    """Create a small directory tree and chdir into it.

    Creates:
    - src/foo.txt
    - src/bar.txt
    - src/lib/ (directory)
    - src/lib/util.py
    - docs/readme.md

    Returns the tree root.
    """
    root = tmp_path / "tree"
    (root / "src" / "lib").mkdir(parents=True)
    (root / "docs").mkdir()
    (root / "src" / "foo.txt").write_text("foo\n")
    (root / "src" / "bar.txt").write_text("bar\n")
    (root / "src" / "lib" / "util.py").write_text("")
    (root / "docs" / "readme.md").write_text("# readme\n")

    monkeypatch.chdir(root)
    return root


@pytest.fixture
def fake_fd(tmp_path) -> tuple:
    """Command tuple running the fake fd lister with the current interpreter."""
    script = tmp_path / "fake_fd.py"
    script.write_text(FAKE_FD)
    return (sys.executable, str(script))


@pytest.fixture
def make_config():
    """Build a SearchConfig with the given command and options."""
    def _make(fd_cmd, blocking=False, timeout=5000):
        return SearchConfig(fd_cmd=tuple(fd_cmd), fd_timeout_msec=timeout, blocking=blocking)
    return _make


def failing_cmd(code: int = 1) -> tuple:
    return (sys.executable, "-c", f"import sys; sys.exit({code})")


def sleeping_cmd(seconds: float = 30) -> tuple:
    return (sys.executable, "-c", f"import time; time.sleep({seconds})")


def write_config(config_home: Path, text: str) -> Path:
    """Write a config.yaml under the test config home."""
    config_file = config_home / "fuzzy-path" / "config.yaml"
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(text)
    return config_file
