"""Interactive REPL for xrf-dbg."""

from __future__ import annotations

import logging
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.patch_stdout import patch_stdout

from .commands import CommandRegistry
from .completion import DebuggerCompleter
from .context import DebuggerContext
from .history import HistoryStore
from .parser import split_command

LOGGER = logging.getLogger("xrf_dbg.repl")


def dispatch_line(ctx: DebuggerContext, registry: CommandRegistry, line: str) -> int:
    """Run one command line; returns the command status."""
    argv = split_command(line.strip())
    if not argv:
        return 0
    cmd_name, *cmd_args = argv
    if cmd_name == "#parse-error":
        print(f"Parse error: {cmd_args[-1] if cmd_args else line}")
        return 1
    cmd_name = ctx.resolve_alias(cmd_name)
    command = registry.get(cmd_name)
    if not command:
        print(f"Unknown command: {cmd_name}")
        return 1
    return command.run(ctx, cmd_args)


class DebuggerREPL:
    """prompt_toolkit loop with history and completion."""

    def __init__(
        self,
        ctx: DebuggerContext,
        registry: CommandRegistry,
        *,
        history_store: Optional[HistoryStore] = None,
    ) -> None:
        self.ctx = ctx
        self.registry = registry
        self.history_store = history_store

    def _build_session(self) -> PromptSession:
        history = InMemoryHistory()
        if self.history_store:
            for entry in self.history_store.snapshot():
                history.append_string(entry)
        completer = DebuggerCompleter(self.ctx, self.registry)
        return PromptSession("(xrf) ", history=history, completer=completer, complete_while_typing=True)

    def run(self) -> int:
        session = self._build_session()
        buffer: List[str] = []
        while True:
            try:
                with patch_stdout():
                    line = session.prompt()
            except (EOFError, KeyboardInterrupt):
                print()
                return 0
            if self._handle_multiline(buffer, line):
                continue
            payload = " ".join(buffer) if buffer else line
            buffer.clear()
            self._record_history(payload)
            try:
                dispatch_line(self.ctx, self.registry, payload)
            except KeyboardInterrupt:
                print("interrupted")

    @staticmethod
    def _handle_multiline(buffer: List[str], line: str) -> bool:
        stripped = line.rstrip()
        if stripped.endswith("\\"):
            buffer.append(stripped[:-1])
            return True
        if buffer:
            buffer.append(stripped)
        return False

    def _record_history(self, entry: str) -> None:
        if self.history_store:
            self.history_store.append(entry)
