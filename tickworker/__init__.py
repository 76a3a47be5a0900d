"""Periodic task execution primitive for background jobs and pollers."""

from .cli import main as cli_main
from .config import (
    ConfigBuilder,
    WorkerConfig,
    build_config,
    with_error_processor,
    with_fallible,
    with_fire_and_forget,
    with_instant_run,
    with_interval,
    with_logger,
    with_name,
)
from .config_loader import load_options
from .context import CancelContext
from .errors import NO_FUNCTION_SET, ErrorCode, WorkerError
from .logger import Logger, LoggingLogger, NullLogger, StdLogger
from .services import Worker, new_worker

__all__ = [
    "cli_main",
    "load_options",
    "CancelContext",
    "ConfigBuilder",
    "WorkerConfig",
    "build_config",
    "with_error_processor",
    "with_fallible",
    "with_fire_and_forget",
    "with_instant_run",
    "with_interval",
    "with_logger",
    "with_name",
    "ErrorCode",
    "NO_FUNCTION_SET",
    "WorkerError",
    "Logger",
    "LoggingLogger",
    "NullLogger",
    "StdLogger",
    "Worker",
    "new_worker",
]
