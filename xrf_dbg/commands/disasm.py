"""Chunk listing around the current position."""

from __future__ import annotations

from typing import List

from xrf.disassemble import disassemble, format_listing

from .base import Command, CommandUsageError
from ..context import DebuggerContext, DebuggerError
from ..output import emit_error, emit_result


class DisasmCommand(Command):
    def __init__(self) -> None:
        super().__init__("disasm", "List chunks (default: around the current chunk)", aliases=("dis",))
        self._parser = self.make_parser()
        self._parser.add_argument("start", nargs="?", type=lambda text: int(text, 0))
        self._parser.add_argument("count", nargs="?", type=int, default=8)

    def run(self, ctx: DebuggerContext, argv: List[str]) -> int:
        try:
            args = self._parser.parse_args(argv)
            engine = ctx.ensure_engine()
        except (CommandUsageError, DebuggerError) as exc:
            emit_error(ctx, message=str(exc))
            return 1
        start = args.start
        if start is not None and start < 0:
            emit_error(ctx, message=f"disasm: start must be a chunk index, not {start}")
            return 1
        if start is None:
            start = max(0, engine.current_chunk - 2)
        count = max(1, args.count)
        listing = disassemble(engine.code)[start : start + count]
        if ctx.json_output:
            emit_result(ctx, message="disasm", data={"current": engine.current_chunk, "listing": listing})
            return 0
        if not listing:
            print(f"no chunks at {start}")
            return 0
        for line in format_listing(listing, current=engine.current_chunk):
            print(line)
        return 0
