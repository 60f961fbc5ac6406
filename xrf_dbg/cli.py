#!/usr/bin/env python3
"""xrf-dbg CLI entry point."""

from __future__ import annotations

import argparse
import logging
import shlex
import sys
from pathlib import Path
from typing import List, Optional

from xrf.io_port import StreamIOPort

from .commands import build_registry
from .context import DebuggerContext
from .history import HistoryStore
from .repl import DebuggerREPL, dispatch_line

LOG = logging.getLogger("xrf_dbg.cli")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="xrf-dbg", description="XRF step debugger")
    parser.add_argument("program", nargs="?", help="XRF program to load at start-up")
    parser.add_argument("--input", type=Path, help="file supplying bytes for the READ opcode (default: none)")
    parser.add_argument("--seed", type=int, help="seed for the shuffle opcode")
    parser.add_argument("--json", action="store_true", help="Emit JSON output when supported")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default INFO)")
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        help="Execute a command non-interactively (repeatable; quote the command string)",
    )
    parser.add_argument(
        "--history",
        type=Path,
        default=Path.home() / ".xrf-dbg-history",
        help="Path to command history file",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    reader = None
    if args.input:
        try:
            reader = args.input.open("rb")
        except OSError as exc:
            print(f"error: cannot open input {args.input}: {exc.strerror}", file=sys.stderr)
            return 1
    ctx = DebuggerContext(
        io=StreamIOPort(reader, sys.stdout.buffer),
        json_output=args.json,
        seed=args.seed,
    )
    registry = build_registry()
    try:
        if args.program:
            status = dispatch_line(ctx, registry, f"load {shlex.quote(args.program)}")
            if status:
                return status
        if args.command:
            return _run_commands(ctx, registry, args.command)
        repl = DebuggerREPL(ctx, registry, history_store=HistoryStore(str(args.history)))
        return repl.run()
    except SystemExit as exc:
        return int(exc.code or 0)
    finally:
        if reader is not None:
            reader.close()


def _run_commands(ctx: DebuggerContext, registry, commands: List[str]) -> int:
    status = 0
    for line in commands:
        LOG.debug("running %r", line)
        status = dispatch_line(ctx, registry, line)
        if status:
            break
    return status


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
