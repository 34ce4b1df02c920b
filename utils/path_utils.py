from __future__ import annotations

from pathlib import Path
import sys


def get_base_dir() -> Path:
    """Return the console's root directory or PyInstaller's bundle directory."""
    return Path(getattr(sys, "_MEIPASS", Path(__file__).resolve().parent.parent))


def config_path(name: str = "config.ini") -> Path:
    """Return the path of a configuration file next to the console root."""
    return get_base_dir() / name
