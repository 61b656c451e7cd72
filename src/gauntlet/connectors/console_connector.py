# src/gauntlet/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from collections import deque
from typing import TextIO

logger = logging.getLogger(__name__)


class StreamConsole:
    """
    Console over a pair of text streams (stdin/stdout by default).

    Input is consumed as whitespace-delimited tokens, so several answers may be
    typed on one line ("1 2 3") or one per line.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._pending: deque[str] = deque()

    def emit(self, text: str) -> None:
        print(text, file=self._stdout, flush=True)

    def read_token(self) -> str:
        while not self._pending:
            line = self._stdin.readline()
            if line == "":
                logger.debug("Console EOF received.")
                raise EOFError("end of input")
            self._pending.extend(line.split())
        return self._pending.popleft()
