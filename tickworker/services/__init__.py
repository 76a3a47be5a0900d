"""Service orchestration helpers."""

from .worker import Worker, new_worker

__all__ = ["Worker", "new_worker"]
