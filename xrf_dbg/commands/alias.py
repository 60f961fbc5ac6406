"""Alias command."""

from __future__ import annotations

from typing import List

from .base import Command, CommandUsageError
from ..context import DebuggerContext
from ..output import emit_error, emit_result


class AliasCommand(Command):
    def __init__(self) -> None:
        super().__init__("alias", "Define or list command aliases")
        self._parser = self.make_parser()
        self._parser.add_argument("alias", nargs="?")
        self._parser.add_argument("command", nargs="?")

    def run(self, ctx: DebuggerContext, argv: List[str]) -> int:
        try:
            args = self._parser.parse_args(argv)
        except CommandUsageError as exc:
            emit_error(ctx, message=str(exc))
            return 1
        if args.alias is None:
            aliases = ctx.list_aliases()
            if not ctx.json_output:
                if not aliases:
                    print("aliases: (none)")
                for name, target in sorted(aliases.items()):
                    print(f"  {name} -> {target}")
                return 0
            emit_result(ctx, message="aliases", data={"aliases": aliases})
            return 0
        if args.command is None:
            emit_error(ctx, message="usage: alias NAME COMMAND")
            return 1
        ctx.set_alias(args.alias, args.command)
        emit_result(ctx, message=f"{args.alias} -> {args.command}", data={"alias": args.alias, "command": args.command})
        return 0
