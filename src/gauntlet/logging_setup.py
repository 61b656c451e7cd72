# src/gauntlet/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

from .errors import ErrorKind, GauntletError

_FORMAT = logging.Formatter(
    fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep stderr readable next to the prompts on stdout:
    - allow gauntlet logs at the configured level
    - everything else (third-party, captured py.warnings) only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "gauntlet" or name.startswith("gauntlet."):
            return True

        return record.levelno >= logging.ERROR


def setup_logging(*, console_level: int = logging.WARNING) -> None:
    """
    Configure the console handler (stderr, filtered).

    Call this ONCE, very early. The file handler is attached later with
    add_file_handler(), once the data directory is known to exist.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(_FORMAT)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)


def add_file_handler(log_file: str | Path, *, level: int = logging.DEBUG) -> logging.Handler:
    """Attach a full-detail file handler and return it (callers close it on shutdown)."""
    log_file = Path(log_file)
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
    except OSError as exc:
        raise GauntletError(ErrorKind.FILESYSTEM, f"cannot open log file {log_file}: {exc}") from exc
    fh.setLevel(level)
    fh.setFormatter(_FORMAT)
    logging.getLogger().addHandler(fh)
    return fh
