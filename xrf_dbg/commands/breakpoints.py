"""Chunk breakpoint management."""

from __future__ import annotations

from typing import List

from .base import Command, CommandUsageError
from ..context import DebuggerContext, DebuggerError
from ..output import emit_error, emit_result


class BreakpointCommand(Command):
    def __init__(self) -> None:
        super().__init__("break", "Manage chunk breakpoints", aliases=("bp",))
        parser = self.make_parser()
        sub = parser.add_subparsers(dest="subcmd")
        sub.required = False

        add = sub.add_parser("add")
        add.add_argument("chunk", type=lambda text: int(text, 0))

        clear = sub.add_parser("clear")
        clear.add_argument("chunk", type=lambda text: int(text, 0))

        sub.add_parser("clearall")
        sub.add_parser("list")

        parser.set_defaults(subcmd="list")
        self._parser = parser

    def run(self, ctx: DebuggerContext, argv: List[str]) -> int:
        try:
            args = self._parser.parse_args(argv)
        except CommandUsageError as exc:
            emit_error(ctx, message=str(exc))
            return 1
        action = args.subcmd
        if action == "add":
            try:
                ctx.add_breakpoint(args.chunk)
            except DebuggerError as exc:
                emit_error(ctx, message=str(exc))
                return 1
            emit_result(ctx, message=f"Breakpoint at chunk {args.chunk}", data={"added": args.chunk})
            return 0
        if action == "clear":
            if not ctx.clear_breakpoint(args.chunk):
                emit_error(ctx, message=f"no breakpoint at chunk {args.chunk}")
                return 1
            emit_result(ctx, message=f"Cleared breakpoint at chunk {args.chunk}", data={"cleared": args.chunk})
            return 0
        if action == "clearall":
            ctx.breakpoints.clear()
            emit_result(ctx, message="Cleared all breakpoints", data={"breakpoints": []})
            return 0
        chunks = sorted(ctx.breakpoints)
        if ctx.json_output:
            emit_result(ctx, message="breakpoints", data={"breakpoints": chunks})
        elif not chunks:
            print("breakpoints: (none)")
        else:
            print("breakpoints: " + ", ".join(str(chunk) for chunk in chunks))
        return 0
