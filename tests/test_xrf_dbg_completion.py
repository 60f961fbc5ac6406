"""Completion tests for xrf-dbg."""

from __future__ import annotations

from prompt_toolkit.document import Document

from xrf_dbg.commands import build_registry
from xrf_dbg.completion import DebuggerCompleter
from xrf_dbg.context import DebuggerContext


def _complete(ctx: DebuggerContext, text: str):
    completer = DebuggerCompleter(ctx, build_registry())
    doc = Document(text, cursor_position=len(text))
    return {c.text for c in completer.get_completions(doc, None)}


def test_command_completion_offers_break():
    results = _complete(DebuggerContext(), "br")
    assert "break" in results


def test_aliases_are_completed():
    ctx = DebuggerContext()
    ctx.set_alias("go", "continue")
    assert "go" in _complete(ctx, "g")


def test_break_subcommands():
    assert _complete(DebuggerContext(), "break c") == {"clear", "clearall"}


def test_break_clear_offers_existing_breakpoints():
    ctx = DebuggerContext()
    ctx.breakpoints.update({3, 12})
    assert _complete(ctx, "bp clear 1") == {"12"}


def test_load_completes_paths(tmp_path, monkeypatch):
    (tmp_path / "hello.xrf").write_text("BFFFF", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    # PathCompleter inserts only the missing suffix.
    assert "lo.xrf" in _complete(DebuggerContext(), "load hel")
