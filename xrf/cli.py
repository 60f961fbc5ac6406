#!/usr/bin/env python3
"""``xrf`` command: load one program file and run it on stdin/stdout."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from .code import load_program
from .engine import ControlEngine, EngineState, VMConfig
from .errors import LoadError, XRFError
from .io_port import StreamIOPort

LOG = logging.getLogger("xrf.cli")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


class _ArgumentParser(argparse.ArgumentParser):
    """argparse that reports bad options as load errors instead of exiting."""

    def error(self, message: str):  # type: ignore[override]
        raise LoadError(f"{self.prog}: {message}")


def build_arg_parser() -> argparse.ArgumentParser:
    # No positional is declared: every non-option word lands in the leftovers
    # so the filename rules below see all of them. -h is not defined and is
    # ignored like any other reserved option.
    parser = _ArgumentParser(
        prog="xrf",
        description="XRF interpreter",
        usage="%(prog)s [options] FILE",
        allow_abbrev=False,
        add_help=False,
    )
    parser.add_argument("--trace", action="store_true", help="print each executed chunk to stderr")
    parser.add_argument("--trace-file", help="write trace output to a file")
    parser.add_argument("--seed", type=int, help="seed for the shuffle opcode (default: wall-clock time)")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default WARNING)")
    return parser


def split_arguments(leftovers: List[str]) -> Tuple[List[str], List[str]]:
    """Separate reserved ``-`` options from positional words."""
    reserved = [arg for arg in leftovers if arg.startswith("-")]
    positionals = [arg for arg in leftovers if not arg.startswith("-")]
    return positionals, reserved


def resolve_program_path(positionals: List[str]) -> str:
    if not positionals:
        raise LoadError("No filename given!")
    if len(positionals) > 1:
        raise LoadError("Only one file at a time!")
    return positionals[0]


def run_program(path: str, config: VMConfig, io: StreamIOPort) -> int:
    code = load_program(path)
    engine = ControlEngine(code, io, config)
    LOG.debug("running %s (%d chunk(s), seed %d)", path, code.chunk_count, engine.seed)
    state = engine.run()
    LOG.debug("%s after %d chunk(s)", state.value, engine.steps)
    return 0 if state is EngineState.HALTED else 1


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    trace_fp = None
    io = StreamIOPort(sys.stdin.buffer, sys.stdout.buffer)
    try:
        args, leftovers = parser.parse_known_args(argv)
        _configure_logging(args.log_level)
        positionals, reserved = split_arguments(leftovers)
        for option in reserved:
            LOG.debug("ignoring reserved option %s", option)

        path = resolve_program_path(positionals)
        if args.trace_file:
            try:
                trace_fp = open(args.trace_file, "w", encoding="utf-8")
            except OSError as exc:
                raise LoadError(f"Unable to open {args.trace_file}!") from exc
        # Without a trace file, --trace prints straight to stderr.
        trace_out = trace_fp or (sys.stderr if args.trace else None)
        config = VMConfig(trace=trace_out is not None, trace_file=trace_out, seed=args.seed)
        return run_program(path, config, io)
    except XRFError as exc:
        io.flush()
        print(f"Error! {exc}", file=sys.stderr)
        return 1
    finally:
        if trace_fp:
            trace_fp.close()


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
