"""Command listing."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from .base import Command
from ..context import DebuggerContext
from ..output import emit_error, emit_result

if TYPE_CHECKING:  # pragma: no cover
    from . import CommandRegistry


class HelpCommand(Command):
    def __init__(self) -> None:
        super().__init__("help", "List debugger commands", aliases=("?",))
        self._registry: Optional["CommandRegistry"] = None

    def bind(self, registry: "CommandRegistry") -> None:
        self._registry = registry

    def run(self, ctx: DebuggerContext, argv: List[str]) -> int:
        registry = self._registry
        if registry is None:
            emit_error(ctx, message="help is not bound to a registry")
            return 1
        commands = registry.list_commands()
        if argv:
            wanted = ctx.resolve_alias(argv[0])
            commands = [cmd for cmd in commands if cmd.name == wanted or wanted in cmd.aliases]
            if not commands:
                emit_error(ctx, message=f"unknown command '{argv[0]}'")
                return 1
        if ctx.json_output:
            entries = [
                {"name": cmd.name, "description": cmd.description, "aliases": list(cmd.aliases)}
                for cmd in commands
            ]
            emit_result(ctx, message="help", data={"commands": entries})
            return 0
        for cmd in commands:
            print(cmd.format_help())
        return 0
