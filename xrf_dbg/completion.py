"""prompt_toolkit completer for xrf-dbg."""

from __future__ import annotations

import shlex
from typing import Iterable, List

from prompt_toolkit.completion import Completer, Completion, PathCompleter
from prompt_toolkit.document import Document

from .commands import CommandRegistry
from .context import DebuggerContext

PATH_COMMANDS = {"load"}
BREAK_SUBCMDS = ("add", "clear", "clearall", "list")


def _normalise_tokens(text: str) -> List[str]:
    if not text:
        return []
    try:
        tokens = shlex.split(text, posix=True)
        trailing = text[-1].isspace()
    except ValueError:
        tokens = text.strip().split()
        trailing = text.endswith((" ", "\t"))
    if trailing:
        tokens.append("")
    return tokens


class DebuggerCompleter(Completer):
    """Completes command names, ``break`` subcommands, chunk numbers and paths."""

    def __init__(self, ctx: DebuggerContext, registry: CommandRegistry) -> None:
        self.ctx = ctx
        self.registry = registry
        self._path = PathCompleter(expanduser=True)

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        tokens = _normalise_tokens(document.text_before_cursor)
        if not tokens:
            yield from self._emit(self._command_names(), "")
            return
        prefix = tokens[-1]
        if len(tokens) == 1:
            yield from self._emit(self._command_names(), prefix)
            return
        command = self.registry.get(self.ctx.resolve_alias(tokens[0]))
        name = command.name if command else tokens[0]
        if name in PATH_COMMANDS and len(tokens) == 2:
            sub_doc = Document(prefix, cursor_position=len(prefix))
            yield from self._path.get_completions(sub_doc, complete_event)
            return
        if name == "break":
            if len(tokens) == 2:
                yield from self._emit(BREAK_SUBCMDS, prefix)
            elif tokens[1] == "clear":
                yield from self._emit([str(chunk) for chunk in sorted(self.ctx.breakpoints)], prefix)

    def _command_names(self) -> List[str]:
        names: List[str] = []
        for command in self.registry.list_commands():
            names.append(command.name)
            names.extend(command.aliases)
        names.extend(self.ctx.aliases)
        return sorted(set(names))

    @staticmethod
    def _emit(candidates: Iterable[str], prefix: str) -> Iterable[Completion]:
        needle = prefix.lower()
        for entry in sorted(dict.fromkeys(candidates)):
            if entry.lower().startswith(needle):
                yield Completion(entry, start_position=-len(prefix))
