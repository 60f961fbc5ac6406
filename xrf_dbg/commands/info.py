"""Info command."""

from __future__ import annotations

from typing import Any, Dict, List

from .base import Command
from ..context import DebuggerContext, DebuggerError
from ..output import emit_error, emit_result


class InfoCommand(Command):
    def __init__(self) -> None:
        super().__init__("info", "Show VM state", aliases=("status",))

    def run(self, ctx: DebuggerContext, argv: List[str]) -> int:
        try:
            engine = ctx.ensure_engine()
        except DebuggerError as exc:
            emit_error(ctx, message=str(exc))
            return 1
        code = engine.code
        info: Dict[str, Any] = {
            "program": str(ctx.program_path) if ctx.program_path else None,
            "state": engine.state.value,
            "chunk": engine.current_chunk,
            "chunks": code.chunk_count,
            "visited": code.visited_count(),
            "steps": engine.steps,
            "depth": len(engine.stack),
            "seed": engine.seed,
        }
        if engine.error is not None:
            info["error"] = str(engine.error)
        if ctx.json_output:
            emit_result(ctx, message="info", data={"info": info})
            return 0
        print("info:")
        for key, value in info.items():
            print(f"  {key:<8}: {value}")
        return 0
