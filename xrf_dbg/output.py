"""Output helpers for xrf-dbg."""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional

from .context import DebuggerContext, StopInfo


def _json_dump(payload: Mapping[str, Any]) -> str:
    return json.dumps(payload, indent=2, sort_keys=True)


def emit_result(ctx: DebuggerContext, *, message: str, data: Optional[Mapping[str, Any]] = None) -> None:
    """Emit a successful command result."""
    if ctx.json_output:
        payload: Dict[str, Any] = {"status": "ok"}
        if data is not None:
            payload["result"] = data
        else:
            payload["message"] = message
        print(_json_dump(payload))
    else:
        print(message)


def emit_error(ctx: DebuggerContext, *, message: str, data: Optional[Mapping[str, Any]] = None) -> None:
    """Emit an error message respecting JSON mode."""
    payload: Dict[str, Any] = {"status": "error", "error": message}
    if data:
        payload["details"] = dict(data)
    if ctx.json_output:
        print(_json_dump(payload))
    else:
        print(f"error: {message}")


def emit_stop(ctx: DebuggerContext, stop: StopInfo) -> int:
    data = {"reason": stop.reason, "chunk": stop.chunk, "steps": stop.steps}
    if stop.error:
        data["error"] = stop.error
        emit_error(ctx, message=stop.describe(), data=data)
        return 1
    emit_result(ctx, message=stop.describe(), data=data)
    return 0


def format_stack(values) -> str:
    if not values:
        return "stack: (empty)"
    lines = ["stack (top first):"]
    for depth, value in enumerate(values):
        lines.append(f"  [{depth:02}] {value:>10}  0x{value:08X}")
    return "\n".join(lines)


__all__ = ["emit_result", "emit_error", "emit_stop", "format_stack"]
