"""Configuration schema and builder for periodic workers.

A :class:`WorkerConfig` is assembled by applying an ordered sequence of
options to a :class:`ConfigBuilder`.  Invalid input never raises: the
offending value is dropped (or corrected to a safe default) and a warning is
written through whichever logger is configured at the time the option runs.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Callable, List, Optional, Sequence, Union

from tickworker.context import CancelContext
from tickworker.logger import Logger, StdLogger

DEFAULT_NAME = "noName worker"
DEFAULT_INTERVAL = timedelta(hours=1)

FireAndForget = Callable[[CancelContext], None]
Fallible = Callable[[CancelContext], Optional[BaseException]]
ErrorProcessor = Callable[[CancelContext, BaseException], None]
Duration = Union[timedelta, int, float]


@dataclass(frozen=True, slots=True)
class WorkerConfig:
    """Immutable settings owned by a :class:`~tickworker.services.Worker`."""

    name: str = DEFAULT_NAME
    instant_run: bool = False
    interval: timedelta = DEFAULT_INTERVAL
    fire_and_forget: Sequence[FireAndForget] = field(default_factory=tuple)
    fallible: Sequence[Fallible] = field(default_factory=tuple)
    error_processor: Optional[ErrorProcessor] = None
    logger: Logger = field(default_factory=StdLogger)

    @property
    def has_work(self) -> bool:
        return bool(self.fire_and_forget or self.fallible)


class ConfigBuilder:
    """Mutable, in-progress configuration.

    Each setter returns ``True`` when the value was taken as given and
    ``False`` when it was rejected or corrected.
    """

    def __init__(self) -> None:
        self.name = DEFAULT_NAME
        self.instant_run = False
        self.interval = DEFAULT_INTERVAL
        self.fire_and_forget: List[FireAndForget] = []
        self.fallible: List[Fallible] = []
        self.error_processor: Optional[ErrorProcessor] = None
        self.logger: Logger = StdLogger()

    def set_logger(self, logger: Optional[Logger]) -> bool:
        if logger is None:
            self.logger.errorf("with logger: logger is nil\n")
            return False
        self.logger = logger
        return True

    def set_name(self, name: Optional[str]) -> bool:
        if not name:
            self.logger.errorf("with name: name is empty\n")
            return False
        self.name = str(name)
        return True

    def set_instant_run(self, enabled: bool) -> bool:
        self.instant_run = bool(enabled)
        return True

    def set_interval(self, interval: Duration) -> bool:
        if not isinstance(interval, timedelta):
            try:
                interval = timedelta(seconds=float(interval))
            except (TypeError, ValueError, OverflowError):
                self.logger.errorf(
                    "with duration: invalid duration value %r, setting to 1 hour\n",
                    interval,
                )
                self.interval = DEFAULT_INTERVAL
                return False
        if interval <= timedelta(0):
            self.logger.errorf(
                "with duration: duration value is less than 0, setting to 1 hour\n"
            )
            self.interval = DEFAULT_INTERVAL
            return False
        self.interval = interval
        return True

    def add_fire_and_forget(self, func: Optional[FireAndForget]) -> bool:
        if not callable(func):
            self.logger.errorf("with fire and forget: function is nil\n")
            return False
        self.fire_and_forget.append(func)
        return True

    def add_fallible(self, func: Optional[Fallible]) -> bool:
        if not callable(func):
            self.logger.errorf("with fallible: function is nil\n")
            return False
        self.fallible.append(func)
        return True

    def set_error_processor(self, func: Optional[ErrorProcessor]) -> bool:
        if not callable(func):
            self.logger.errorf("with error processor: error processor is nil\n")
            return False
        self.error_processor = func
        return True

    def build(self) -> WorkerConfig:
        return WorkerConfig(
            name=self.name,
            instant_run=self.instant_run,
            interval=self.interval,
            fire_and_forget=tuple(self.fire_and_forget),
            fallible=tuple(self.fallible),
            error_processor=self.error_processor,
            logger=self.logger,
        )


Option = Callable[[ConfigBuilder], bool]


def with_logger(logger: Optional[Logger]) -> Option:
    """Use ``logger`` for lifecycle messages, warnings and tick errors."""

    return lambda builder: builder.set_logger(logger)


def with_name(name: str) -> Option:
    return lambda builder: builder.set_name(name)


def with_instant_run(enabled: bool) -> Option:
    """Run one tick immediately on start instead of after the first interval."""

    return lambda builder: builder.set_instant_run(enabled)


def with_interval(interval: Duration) -> Option:
    """Set the tick period; plain numbers are seconds."""

    return lambda builder: builder.set_interval(interval)


def with_fire_and_forget(func: Optional[FireAndForget]) -> Option:
    return lambda builder: builder.add_fire_and_forget(func)


def with_fallible(func: Optional[Fallible]) -> Option:
    """Register a callable whose returned or raised error goes to the processor."""

    return lambda builder: builder.add_fallible(func)


def with_error_processor(func: Optional[ErrorProcessor]) -> Option:
    return lambda builder: builder.set_error_processor(func)


def build_config(*options: Option) -> WorkerConfig:
    """Apply ``options`` in order on top of the defaults."""

    builder = ConfigBuilder()
    for option in options:
        option(builder)
    return builder.build()
