"""Tests for verbosity-gated logging."""

from conftest import write_config
from fzp import utils
from fzp.utils import log_debug, log_info, set_log_level


def test_config_read_once(config_home, monkeypatch):
    calls = []

    def counting_verbosity():
        calls.append(1)
        return 3

    monkeypatch.setattr(utils, "get_verbosity", counting_verbosity)
    set_log_level(None)
    for _ in range(5):
        log_debug("line %d", 1)
    assert len(calls) == 1


def test_override_wins(config_home, capsys):
    write_config(config_home, "verbosity: 0\n")
    log_info("hidden")
    set_log_level(3)
    log_debug("shown %s", "here")
    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "[fuzzy_path] shown here" in err


def test_clearing_override_rereads_config(config_home, capsys):
    log_info("before")
    write_config(config_home, "verbosity: 0\n")
    set_log_level(None)
    log_info("after")
    err = capsys.readouterr().err
    assert "before" in err
    assert "after" not in err
