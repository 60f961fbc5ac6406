"""Stack inspection command."""

from __future__ import annotations

from typing import List

from .base import Command
from ..context import DebuggerContext, DebuggerError
from ..output import emit_error, emit_result, format_stack


class StackCommand(Command):
    def __init__(self) -> None:
        super().__init__("stack", "Print the value stack, top first", aliases=("bt",))

    def run(self, ctx: DebuggerContext, argv: List[str]) -> int:
        try:
            engine = ctx.ensure_engine()
        except DebuggerError as exc:
            emit_error(ctx, message=str(exc))
            return 1
        values = engine.stack.snapshot()
        if ctx.json_output:
            emit_result(ctx, message="stack", data={"stack": values})
        else:
            print(format_stack(values))
        return 0
