# src/gauntlet/cli/main.py

"""
CLI entrypoint.

Initializes logging, opens the task store, runs exactly one command and exits.
This is the only place where a GauntletError becomes a process exit status.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ..cli.bootstrap import open_state
from ..cli.commands import registry
from ..config import get_settings
from ..core.ports import Console
from ..errors import GauntletError
from ..logging_setup import add_file_handler, setup_logging
from ..paths import setup_data_directory

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_INTERRUPTED = 130


def main(argv: list[str] | None = None, *, settings=None, console: Console | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(console_level=console_level)

    file_handler: logging.Handler | None = None
    try:
        log_file = getattr(settings, "log_file", None)
        if log_file is not None:
            setup_data_directory(Path(log_file).parent)
            file_handler = add_file_handler(log_file)
        logger.info("Starting %s argv=%s", getattr(settings, "app_name", "gauntlet"), argv)

        with open_state(settings, console=console) as state:
            registry.dispatch(state, argv)

    except GauntletError as exc:
        logger.error("Fatal %s error: %s", exc.kind.value, exc.message)
        return EXIT_FATAL
    except KeyboardInterrupt:
        logger.info("Interrupted.")
        print(file=sys.stderr)
        return EXIT_INTERRUPTED
    finally:
        if file_handler is not None:
            logging.getLogger().removeHandler(file_handler)
            file_handler.close()

    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
