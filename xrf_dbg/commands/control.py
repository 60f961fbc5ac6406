"""Execution control commands (step/continue)."""

from __future__ import annotations

from typing import List

from .base import Command, CommandUsageError
from ..context import DebuggerContext, DebuggerError
from ..output import emit_error, emit_stop


class StepCommand(Command):
    def __init__(self) -> None:
        super().__init__("step", "Execute N chunks (default 1)", aliases=("s", "next"))
        self._parser = self.make_parser()
        self._parser.add_argument("count", nargs="?", type=int, default=1)

    def run(self, ctx: DebuggerContext, argv: List[str]) -> int:
        try:
            args = self._parser.parse_args(argv)
            stop = ctx.step(args.count)
        except (CommandUsageError, DebuggerError) as exc:
            emit_error(ctx, message=str(exc))
            return 1
        return emit_stop(ctx, stop)


class ContinueCommand(Command):
    def __init__(self) -> None:
        super().__init__("continue", "Run until halt, error or breakpoint", aliases=("c", "cont"))
        self._parser = self.make_parser()
        self._parser.add_argument("--max", type=int, dest="max_chunks", help="stop after this many chunks")

    def run(self, ctx: DebuggerContext, argv: List[str]) -> int:
        try:
            args = self._parser.parse_args(argv)
            stop = ctx.resume(args.max_chunks)
        except (CommandUsageError, DebuggerError) as exc:
            emit_error(ctx, message=str(exc))
            return 1
        return emit_stop(ctx, stop)
