"""Program lifecycle commands (load/reset)."""

from __future__ import annotations

from typing import List

from xrf.errors import XRFError

from .base import Command, CommandUsageError
from ..context import DebuggerContext, DebuggerError
from ..output import emit_error, emit_result


class LoadCommand(Command):
    def __init__(self) -> None:
        super().__init__("load", "Load an XRF program and reset the VM", aliases=("file",))
        self._parser = self.make_parser()
        self._parser.add_argument("path")

    def run(self, ctx: DebuggerContext, argv: List[str]) -> int:
        try:
            args = self._parser.parse_args(argv)
        except CommandUsageError as exc:
            emit_error(ctx, message=str(exc))
            return 1
        try:
            code = ctx.load(args.path)
        except (XRFError, DebuggerError) as exc:
            emit_error(ctx, message=str(exc))
            return 1
        emit_result(
            ctx,
            message=f"Loaded {args.path} ({code.chunk_count} chunk(s))",
            data={"path": str(ctx.program_path), "chunks": code.chunk_count},
        )
        return 0


class ResetCommand(Command):
    def __init__(self) -> None:
        super().__init__("reset", "Restart the loaded program with a fresh stack and visited flags")

    def run(self, ctx: DebuggerContext, argv: List[str]) -> int:
        try:
            engine = ctx.reset()
        except DebuggerError as exc:
            emit_error(ctx, message=str(exc))
            return 1
        emit_result(ctx, message="VM reset to chunk 0", data={"chunk": engine.current_chunk, "seed": engine.seed})
        return 0
