"""Tests for fd command construction."""

import os
import re

import pytest

from fzp.config import DEFAULT_CONFIG, SearchConfig
from fzp.search.command import build_command, fuzzy_regex, limit_depth

ROOT = os.path.abspath(os.sep)


def depth_values(cmd):
    values = []
    for i, arg in enumerate(cmd):
        if arg in ("-d", "--max-depth", "--maxdepth"):
            values.append(cmd[i + 1])
        elif arg.startswith("--max-depth="):
            values.append(arg.split("=", 1)[1])
    return values


def test_default_command_is_copied(tmp_path):
    cmd = build_command(DEFAULT_CONFIG, "", str(tmp_path))
    assert cmd == ["fd", "-d", "20", "-p", "-i"]
    cmd.append("extra")
    assert DEFAULT_CONFIG.fd_cmd == ("fd", "-d", "20", "-p", "-i")


def test_pattern_appended_as_loose_regex(tmp_path):
    cmd = build_command(DEFAULT_CONFIG, "fo", str(tmp_path))
    assert cmd[-1] == "f.*o.*"
    assert cmd[:-1] == list(DEFAULT_CONFIG.fd_cmd)


def test_regex_escapes_metacharacters():
    regex = fuzzy_regex("a.(b")
    assert regex == "a.*\\..*\\(.*b.*"
    assert re.search(regex, "xa.y(zb")
    assert not re.search(regex, "axyb")


def test_root_forces_depth_one():
    cmd = build_command(DEFAULT_CONFIG, "", ROOT)
    assert depth_values(cmd) == ["1"]
    assert cmd[0] == "fd"
    assert "-p" in cmd and "-i" in cmd


def test_root_with_pattern_keeps_regex_last():
    cmd = build_command(DEFAULT_CONFIG, "etc", ROOT)
    assert depth_values(cmd) == ["1"]
    assert cmd[-1] == "e.*t.*c.*"


@pytest.mark.parametrize("fd_cmd", [
    ("fd", "--max-depth", "7", "-H"),
    ("fd", "--max-depth=7", "-H"),
    ("fdfind", "-d", "3", "-d", "9"),
    ("/usr/bin/fd", "-H"),
])
def test_root_depth_variants(fd_cmd):
    config = SearchConfig(fd_cmd=fd_cmd)
    cmd = build_command(config, "", ROOT)
    assert depth_values(cmd) == ["1"]
    assert "-H" in cmd or cmd[0] == "fdfind"


def test_root_leaves_other_programs_alone():
    config = SearchConfig(fd_cmd=("find", "-d", "20"))
    assert build_command(config, "", ROOT) == ["find", "-d", "20"]


def test_non_root_keeps_depth(tmp_path):
    cmd = build_command(DEFAULT_CONFIG, "", str(tmp_path))
    assert depth_values(cmd) == ["20"]


def test_limit_depth_does_not_mutate():
    original = ["fd", "-d", "20"]
    assert limit_depth(original) == ["fd", "-d", "1"]
    assert original == ["fd", "-d", "20"]


@pytest.mark.parametrize("fd_cmd", [
    ("fd", "-d20"),
    ("fd", "-d=20", "-p"),
])
def test_root_strips_attached_depth(fd_cmd):
    cmd = build_command(SearchConfig(fd_cmd=fd_cmd), "", ROOT)
    assert [arg for arg in cmd if arg.startswith("-d")] == ["-d"]
    assert depth_values(cmd) == ["1"]
