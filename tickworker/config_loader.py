"""Utilities to load worker options from YAML files."""
from __future__ import annotations

import datetime as _dt
from pathlib import Path
from typing import Any, List, Mapping

import yaml

from .config import Option, with_instant_run, with_interval, with_name

_DURATION_UNITS = {
    "ms": _dt.timedelta(milliseconds=1),
    "s": _dt.timedelta(seconds=1),
    "m": _dt.timedelta(minutes=1),
    "h": _dt.timedelta(hours=1),
    "d": _dt.timedelta(days=1),
}


def load_options(path: Path) -> List[Option]:
    """Read scalar worker settings from ``path``.

    Recognised keys are ``name``, ``instant_run`` and ``interval``; durations
    accept values such as ``"500ms"``, ``"30s"`` or ``"5m"``.  Callables and
    collaborators have to be registered in code, so they are not read here.
    Missing keys keep the builder defaults.
    """

    raw = _load_yaml(path)

    options: List[Option] = []
    if "name" in raw:
        options.append(with_name(str(raw["name"] or "")))
    if "instant_run" in raw:
        options.append(with_instant_run(bool(raw["instant_run"])))
    if "interval" in raw:
        options.append(with_interval(parse_duration(raw["interval"])))
    return options


def _load_yaml(path: Path) -> Mapping[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError("configuration root must be a mapping")
    return data


def parse_duration(value: Any) -> _dt.timedelta:
    try:
        return _parse_duration(value)
    except OverflowError as exc:
        raise ValueError(f"duration out of range: {value!r}") from exc


def _parse_duration(value: Any) -> _dt.timedelta:
    if isinstance(value, _dt.timedelta):
        return value
    if isinstance(value, bool):
        raise ValueError(f"unsupported duration value: {value!r}")
    if isinstance(value, (int, float)):
        return _dt.timedelta(seconds=float(value))
    if not isinstance(value, str):
        raise ValueError(f"unsupported duration value: {value!r}")
    value = value.strip()
    if value.lstrip("-").isdigit():
        return _dt.timedelta(seconds=int(value))
    unit = "ms" if value.lower().endswith("ms") else value[-1:].lower()
    if unit not in _DURATION_UNITS:
        raise ValueError(f"unknown duration unit: {value}")
    try:
        amount = float(value[: -len(unit)])
    except ValueError as exc:
        raise ValueError(f"invalid duration: {value}") from exc
    base = _DURATION_UNITS[unit]
    return _dt.timedelta(seconds=base.total_seconds() * amount)
