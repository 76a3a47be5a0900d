"""Periodic execution loop."""
from __future__ import annotations

import threading
import time
from typing import Optional

from tickworker.config import Option, WorkerConfig, build_config
from tickworker.context import CancelContext
from tickworker.errors import NO_FUNCTION_SET

# upper bound for a single wait; longer intervals wake up and wait again
_MAX_WAIT = min(threading.TIMEOUT_MAX, 24 * 3600.0)


class Worker:
    """Run the configured callables every ``config.interval`` until cancelled.

    All callables of a tick run sequentially, in registration order, on a
    single background thread.  Cancellation is observed only between ticks,
    so a callable that ignores its :class:`CancelContext` delays shutdown for
    as long as it runs.

    ``start`` must be called at most once per worker.  A second call spawns a
    second loop over the same configuration and :meth:`wait` then only tracks
    the most recent one.
    """

    def __init__(self, config: Optional[WorkerConfig] = None) -> None:
        self.config = config if config is not None else WorkerConfig()
        self._done: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None

    @classmethod
    def from_options(cls, *options: Option) -> "Worker":
        return cls(build_config(*options))

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    # ------------------------------------------------------------------
    def start(self, ctx: CancelContext) -> None:
        """Spawn the loop thread and return immediately."""

        done = threading.Event()
        self._done = done
        self._thread = threading.Thread(
            target=self._run, args=(ctx, done), name=self.config.name, daemon=True
        )
        self._thread.start()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the loop has exited.

        Returns ``True`` straight away when the worker was never started.
        With a ``timeout`` the result tells whether the loop finished in time.
        """

        done = self._done
        if done is None:
            return True
        return done.wait(timeout)

    # ------------------------------------------------------------------
    def _run(self, ctx: CancelContext, done: threading.Event) -> None:
        config = self.config
        config.logger.printf("%s started\n", config.name)
        try:
            period = config.interval.total_seconds()
            next_fire = time.monotonic() + period
            if config.instant_run:
                self._tick(ctx)
            while True:
                remaining = next_fire - time.monotonic()
                if ctx.wait(min(_MAX_WAIT, max(0.0, remaining))):
                    return
                received = time.monotonic()
                if received < next_fire:
                    continue
                # one fire absorbs every grid point missed while busy
                next_fire += ((received - next_fire) // period + 1) * period
                if next_fire <= received:
                    next_fire += period
                self._tick(ctx)
        finally:
            config.logger.printf("%s stopped\n", config.name)
            done.set()

    def _tick(self, ctx: CancelContext) -> None:
        config = self.config
        if not config.has_work:
            config.logger.errorf("%s: no function set to execute\n", config.name)
            self._process_error(ctx, NO_FUNCTION_SET)
            return

        for func in config.fire_and_forget:
            try:
                func(ctx)
            except Exception as exc:  # outcome of fire-and-forget calls is ignored
                config.logger.errorf(
                    "%s: fire and forget function raised: %s\n", config.name, exc
                )

        for func in config.fallible:
            try:
                err = func(ctx)
            except Exception as exc:
                err = exc
            if err is not None:
                config.logger.errorf(
                    "%s: error executing function: %s\n", config.name, err
                )
                self._process_error(ctx, err)

    def _process_error(self, ctx: CancelContext, err: BaseException) -> None:
        processor = self.config.error_processor
        if processor is None:
            return
        try:
            processor(ctx, err)
        except Exception as exc:
            self.config.logger.errorf(
                "%s: error processor raised: %s\n", self.config.name, exc
            )


def new_worker(*options: Option) -> Worker:
    """Build a :class:`Worker` from option applications."""

    return Worker.from_options(*options)
