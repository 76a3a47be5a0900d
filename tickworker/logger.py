"""Logging collaborators used by the scheduling loop."""
from __future__ import annotations

import logging
import sys
from typing import Optional, Protocol


class Logger(Protocol):
    """Two-method logging capability supplied by the embedding application.

    Both methods take printf-style arguments.  They are called from the loop
    thread on every tick so implementations should not block.
    """

    def printf(self, fmt: str, *args: object) -> None:
        ...

    def errorf(self, fmt: str, *args: object) -> None:
        ...


def _format(fmt: str, args: tuple) -> str:
    return fmt % args if args else fmt


class StdLogger:
    """Write informational lines to stdout and errors to stderr."""

    def printf(self, fmt: str, *args: object) -> None:
        stream = sys.stdout
        stream.write(_format(fmt, args))
        stream.flush()

    def errorf(self, fmt: str, *args: object) -> None:
        stream = sys.stderr
        stream.write("ERROR: " + _format(fmt, args))
        stream.flush()


class LoggingLogger:
    """Adapter forwarding to a :mod:`logging` logger."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger("tickworker")

    def printf(self, fmt: str, *args: object) -> None:
        self._logger.info(_format(fmt, args).rstrip("\n"))

    def errorf(self, fmt: str, *args: object) -> None:
        self._logger.error(_format(fmt, args).rstrip("\n"))


class NullLogger:
    """Discard every message."""

    def printf(self, fmt: str, *args: object) -> None:
        pass

    def errorf(self, fmt: str, *args: object) -> None:
        pass
