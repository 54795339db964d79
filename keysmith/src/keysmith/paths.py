"""Where keysmith looks for its configuration file."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, Optional

from platformdirs import user_config_path

CONFIG_ENV = "KEYSMITH_CONFIG"
CONFIG_NAME = "config.yaml"


def runtime_config_dir() -> Path:
    """Per-user configuration directory (``~/.config/keysmith`` on Linux)."""
    return Path(user_config_path("keysmith", appauthor=False, roaming=True))


def config_search_paths(explicit: Optional[Path] = None) -> Iterator[Path]:
    """Yield candidate config files, most specific first.

    Order: ``explicit``, ``$KEYSMITH_CONFIG``, ``./.keysmith/config.yaml``,
    then the per-user directory.
    """
    if explicit:
        yield Path(explicit).expanduser()
    env_value = os.getenv(CONFIG_ENV)
    if env_value:
        yield Path(env_value).expanduser()
    yield Path.cwd() / ".keysmith" / CONFIG_NAME
    yield runtime_config_dir() / CONFIG_NAME
