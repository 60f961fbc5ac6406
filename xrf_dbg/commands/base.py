"""Command base classes for xrf-dbg."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..context import DebuggerContext


class _ArgumentParser(argparse.ArgumentParser):
    """argparse that reports usage errors without exiting the debugger."""

    def error(self, message: str):  # type: ignore[override]
        raise CommandUsageError(f"{self.prog}: {message}")


class CommandUsageError(Exception):
    pass


@dataclass
class Command:
    """Abstract command description."""

    name: str
    description: str
    aliases: Sequence[str] = field(default_factory=tuple)

    def run(self, ctx: DebuggerContext, argv: List[str]) -> int:
        raise NotImplementedError("Command must implement run()")

    def format_help(self) -> str:
        alias_text = f" ({', '.join(self.aliases)})" if self.aliases else ""
        return f"{self.name:<10} {self.description}{alias_text}"

    def make_parser(self, prog: Optional[str] = None) -> argparse.ArgumentParser:
        return _ArgumentParser(prog=prog or self.name, add_help=False)
