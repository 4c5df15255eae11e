"""
File Utilities Module

Provides basic file I/O operations. Failures are not swallowed: OSError
propagates to the caller, which decides whether the whole request aborts.
"""

import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import Mapping, Optional


def read_text(file_path: Path) -> str:
    """
    Reads and returns the text of the given file.
    """
    return Path(file_path).read_text(encoding="utf-8")


def write_text(file_path: Path, content: str) -> None:
    """
    Writes content to a file, creating missing parent folders.
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding="utf-8")
    logging.info(f"Wrote {file_path}")


def open_in_editor(file_path: Path, env: Optional[Mapping[str, str]] = None) -> None:
    """
    Opens a file in $VISUAL or $EDITOR (vi if neither is set) and waits for it to close.
    """
    env = os.environ if env is None else env
    editor = env.get("VISUAL") or env.get("EDITOR") or "vi"
    logging.info(f"Opening {file_path} with {editor}")
    subprocess.run([*shlex.split(editor), str(file_path)], check=True)
