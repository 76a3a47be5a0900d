import threading
from typing import List, Tuple


class RecordingLogger:
    """Logger collecting formatted messages, safe to use from the loop thread."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.records: List[Tuple[str, str]] = []

    def printf(self, fmt, *args):
        self._record("info", fmt, args)

    def errorf(self, fmt, *args):
        self._record("error", fmt, args)

    def _record(self, level, fmt, args):
        with self._lock:
            self.records.append((level, fmt % args if args else fmt))

    def messages(self, level):
        with self._lock:
            return [message for lvl, message in self.records if lvl == level]


class Counter:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.value = 0

    def increment(self, *_args):
        with self._lock:
            self.value += 1
