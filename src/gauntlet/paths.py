# src/gauntlet/paths.py

"""
Per-user data directory resolution.

Layout follows each platform's convention for user-scoped application data:
- Linux/BSD: $XDG_DATA_HOME/<app> (default ~/.local/share/<app>)
- macOS:     ~/Library/Application Support/<app>
- Windows:   %LOCALAPPDATA%\\<app> (or %APPDATA%\\<app>)

If none of these can be discovered, the user's home directory is used as-is.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from .errors import ErrorKind, GauntletError

logger = logging.getLogger(__name__)

DATA_DIR_MODE = 0o770


def _home() -> Path | None:
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


def _user_data_root() -> Path | None:
    if sys.platform.startswith("win"):
        for name in ("LOCALAPPDATA", "APPDATA"):
            raw = os.getenv(name)
            if raw and raw.strip():
                return Path(raw)
        return None

    home = _home()

    if sys.platform == "darwin":
        return home / "Library" / "Application Support" if home else None

    raw = os.getenv("XDG_DATA_HOME")
    # XDG: relative paths are invalid and must be ignored.
    if raw and os.path.isabs(raw):
        return Path(raw)
    return home / ".local" / "share" if home else None


def default_data_dir(app_name: str = "gauntlet") -> Path:
    root = _user_data_root()
    if root is not None:
        return root / app_name

    home = _home()
    if home is None:
        # Nothing discoverable at all; keep the data next to the process.
        return Path.cwd()
    return home


def setup_data_directory(path: str | Path) -> Path:
    """
    Create the data directory if it does not exist and return it.

    An existing directory is fine. Anything else (permission errors, a regular
    file in the way, ...) is a FILESYSTEM error.
    """
    path = Path(path).expanduser()
    try:
        path.mkdir(mode=DATA_DIR_MODE, parents=True, exist_ok=True)
    except OSError as exc:
        raise GauntletError(
            ErrorKind.FILESYSTEM, f"cannot create data directory {path}: {exc}"
        ) from exc

    logger.debug("Data directory ready: %s", path)
    return path
