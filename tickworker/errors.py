"""Error taxonomy for periodic workers."""
from __future__ import annotations

from enum import IntEnum
from typing import Union


class ErrorCode(IntEnum):
    """Known classifications of worker runtime conditions."""

    NO_FUNCTION_SET = 0


_MESSAGES = {
    ErrorCode.NO_FUNCTION_SET: "no function set to execute",
}


class WorkerError(Exception):
    """Condition raised by the scheduling loop itself, never by caller code.

    Instances compare by :attr:`code` so a processor can test
    ``err == NO_FUNCTION_SET`` regardless of which instance it received.
    """

    def __init__(self, code: Union[ErrorCode, int]) -> None:
        self.code = int(code)
        super().__init__(self.message)

    @property
    def message(self) -> str:
        try:
            return _MESSAGES[ErrorCode(self.code)]
        except ValueError:
            return "unknown error"

    def matches(self, other: object) -> bool:
        """Return ``True`` when ``other`` is a worker error of the same kind."""

        return isinstance(other, WorkerError) and other.code == self.code

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WorkerError):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash((WorkerError, self.code))

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"WorkerError({self.code})"


NO_FUNCTION_SET = WorkerError(ErrorCode.NO_FUNCTION_SET)
