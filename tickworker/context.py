"""Cooperative cancellation token shared by a worker and its callables."""
from __future__ import annotations

import threading
from typing import List, Optional


class CancelContext:
    """Thin wrapper around :class:`threading.Event`.

    A worker observes cancellation only between ticks.  Long running callables
    receive the same context and are expected to check :attr:`cancelled` (or
    :meth:`wait` on it) themselves.
    """

    def __init__(self) -> None:
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._children: List["CancelContext"] = []
        self._timer: Optional[threading.Timer] = None

    @classmethod
    def with_timeout(cls, seconds: float) -> "CancelContext":
        """Return a context that cancels itself after ``seconds``."""

        ctx = cls()
        timer = threading.Timer(max(0.0, float(seconds)), ctx.cancel)
        timer.daemon = True
        ctx._timer = timer
        timer.start()
        return ctx

    def child(self) -> "CancelContext":
        """Return a context cancelled together with this one."""

        child = CancelContext()
        with self._lock:
            if not self._event.is_set():
                self._children.append(child)
                return child
        child.cancel()
        return child

    def cancel(self) -> None:
        with self._lock:
            if self._event.is_set():
                return
            self._event.set()
            children, self._children = self._children, []
            timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()
        for child in children:
            child.cancel()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until cancelled or ``timeout`` elapses; return :attr:`cancelled`."""

        return self._event.wait(timeout)

    def __enter__(self) -> "CancelContext":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        self.cancel()
