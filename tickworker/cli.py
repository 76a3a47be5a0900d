"""Command line entry point running a shell command on an interval."""
from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .config import (
    Option,
    with_error_processor,
    with_fallible,
    with_instant_run,
    with_interval,
    with_name,
)
from .config_loader import load_options, parse_duration
from .context import CancelContext
from .services import Worker


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="tickworker helper CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser(
        "run",
        help="Run a shell command periodically until interrupted",
    )
    run.add_argument(
        "--command",
        dest="shell_command",
        required=True,
        help="Shell command executed on every tick",
    )
    run.add_argument(
        "--config",
        type=Path,
        help="Optional YAML file with name, instant_run and interval",
    )
    run.add_argument("--name", help="Worker name used in log lines")
    run.add_argument(
        "--interval",
        type=parse_duration,
        help="Tick period, e.g. 30s, 5m or 500ms",
    )
    run.add_argument(
        "--instant-run",
        action="store_true",
        default=None,
        help="Run the command once immediately on start",
    )
    run.add_argument(
        "--duration",
        type=float,
        help="Stop after this many seconds (default: run until interrupted)",
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "run":
        return _command_run(args)

    parser.error("unknown command")
    return 1


def _command_run(args: argparse.Namespace) -> int:
    options: List[Option] = []
    if args.config is not None:
        options.extend(load_options(args.config))
    if args.name is not None:
        options.append(with_name(args.name))
    if args.interval is not None:
        options.append(with_interval(args.interval))
    if args.instant_run is not None:
        options.append(with_instant_run(args.instant_run))

    failures: List[BaseException] = []
    options.append(with_fallible(_shell_job(args.shell_command)))
    options.append(with_error_processor(lambda _ctx, err: failures.append(err)))

    worker = Worker.from_options(*options)
    if args.duration is not None:
        ctx = CancelContext.with_timeout(args.duration)
    else:
        ctx = CancelContext()

    worker.start(ctx)
    try:
        worker.wait()
    except KeyboardInterrupt:  # pragma: no cover - interactive use
        print("Interrupted, waiting for the current tick...", file=sys.stderr)
        ctx.cancel()
        worker.wait()

    return 1 if failures else 0


def _shell_job(command: str):
    def run(ctx: CancelContext) -> Optional[BaseException]:
        completed = subprocess.run(command, shell=True, check=False)
        if completed.returncode != 0:
            return subprocess.CalledProcessError(completed.returncode, command)
        return None

    return run


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
