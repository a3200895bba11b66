"""Search configuration and settings file handling."""

import os
from dataclasses import dataclass, replace
from pathlib import Path

import yaml

CONFIG_NAME = "fuzzy-path"


def get_config_file() -> Path:
    """Get the config file path with resolution priority.

    Priority:
    1. FZP_CONFIG environment variable
    2. $XDG_CONFIG_HOME/fuzzy-path/config.yaml
    3. ~/.config/fuzzy-path/config.yaml (fallback)
    """
    env_config = os.environ.get("FZP_CONFIG")
    if env_config:
        return Path(env_config)

    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    config_dir = Path(xdg_home) if xdg_home else Path.home() / ".config"
    return config_dir / CONFIG_NAME / "config.yaml"


def load_config() -> dict:
    """Load config from the settings file."""
    config_file = get_config_file()
    if not config_file.exists():
        return {}
    try:
        data = yaml.safe_load(config_file.read_text())
    except (OSError, UnicodeDecodeError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: dict) -> None:
    """Save config to the settings file."""
    config_file = get_config_file()
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(yaml.dump(config, default_flow_style=False))


@dataclass(frozen=True)
class SearchConfig:
    """Options for one completion request.

    fd_cmd is the lister invocation run inside the base directory, the fuzzy
    regex is appended to it. fd_timeout_msec bounds the whole search.
    """

    fd_cmd: tuple[str, ...] = ("fd", "-d", "20", "-p", "-i")
    fd_timeout_msec: int = 1500
    blocking: bool = False

    @classmethod
    def from_options(cls, options: dict | None, base: "SearchConfig | None" = None) -> "SearchConfig":
        """Merge user options over ``base`` (defaults when omitted).

        Unknown keys are ignored. Raises ValueError on a badly typed value.
        """
        config = base if base is not None else DEFAULT_CONFIG
        if not options:
            return config

        changes = {}

        if options.get("fd_cmd") is not None:
            fd_cmd = options["fd_cmd"]
            if isinstance(fd_cmd, str):
                fd_cmd = fd_cmd.split()
            if not isinstance(fd_cmd, (list, tuple)) or not fd_cmd:
                raise ValueError("fd_cmd must be a non-empty list of arguments")
            changes["fd_cmd"] = tuple(str(arg) for arg in fd_cmd)

        if options.get("fd_timeout_msec") is not None:
            timeout = options["fd_timeout_msec"]
            if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
                raise ValueError("fd_timeout_msec must be a positive integer")
            changes["fd_timeout_msec"] = timeout

        if options.get("blocking") is not None:
            if not isinstance(options["blocking"], bool):
                raise ValueError("blocking must be true or false")
            changes["blocking"] = options["blocking"]

        return replace(config, **changes)

    def as_dict(self) -> dict:
        return {
            "fd_cmd": list(self.fd_cmd),
            "fd_timeout_msec": self.fd_timeout_msec,
            "blocking": self.blocking,
        }


DEFAULT_CONFIG = SearchConfig()


def load_search_config() -> SearchConfig:
    """Get the SearchConfig merged from the settings file."""
    return SearchConfig.from_options(load_config())


def get_verbosity() -> int:
    """Get verbosity level from config (default: 1).

    Levels:
    - 0: Silent
    - 1: Normal (standard output)
    - 2: Verbose (search failures and timeouts)
    - 3: Debug (commands, per-request counts)
    """
    config = load_config()
    level = config.get("verbosity", 1)
    if isinstance(level, bool) or not isinstance(level, int):
        return 1
    return level


def set_verbosity(level: int) -> None:
    """Save verbosity level to config file (0-3)."""
    if not 0 <= level <= 3:
        raise ValueError("Verbosity level must be between 0 and 3")
    config = load_config()
    config["verbosity"] = level
    save_config(config)


def set_option(key: str, value) -> None:
    """Validate and persist a single search option."""
    if key not in SearchConfig.__dataclass_fields__:
        raise ValueError(f"Unknown option: {key}")
    config = load_config()
    config[key] = value
    # Validate the merged result before writing it
    merged = SearchConfig.from_options(config)
    config[key] = merged.as_dict()[key]
    save_config(config)
