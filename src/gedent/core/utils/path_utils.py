"""
Path Utilities Module

Resolves the gedent home directory and locates the configuration file.
These are the only places where gedent looks at the process environment;
the core functions take already resolved paths.
"""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional
from gedent.core.constants import Constants


def gedent_home(env: Optional[Mapping[str, str]] = None) -> Path:
    """
    Returns the gedent home directory.

    $GEDENT_HOME wins when set, otherwise ~/.config/gedent is used.
    """
    env = os.environ if env is None else env
    override = env.get(Constants.HOME_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / Constants.HOME_SUBDIR


def find_config(start_dir: Path, home: Path) -> Path:
    """
    Git-like search for the configuration file.

    Walks from start_dir up to the filesystem root and returns the first
    gedent.yaml found. Falls back to the one in the gedent home directory.
    The returned path is not guaranteed to exist.
    """
    start_dir = Path(start_dir).resolve()
    for folder in (start_dir, *start_dir.parents):
        candidate = folder / Constants.CONFIG_NAME
        if candidate.is_file():
            logging.debug(f"Using config {candidate}")
            return candidate
    fallback = Path(home) / Constants.CONFIG_NAME
    logging.debug(f"No {Constants.CONFIG_NAME} above {start_dir}, using {fallback}")
    return fallback


def templates_dir(home: Path) -> Path:
    return Path(home) / Constants.TEMPLATES_DIR


def presets_dir(home: Path) -> Path:
    return Path(home) / Constants.PRESETS_DIR
