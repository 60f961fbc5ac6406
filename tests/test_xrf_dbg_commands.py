"""Unit tests for xrf-dbg commands."""

from __future__ import annotations

import json

import pytest

from xrf.io_port import BufferIOPort
from xrf_dbg.cli import main as dbg_main
from xrf_dbg.commands import build_registry
from xrf_dbg.context import DebuggerContext
from xrf_dbg.repl import dispatch_line

THREE_CHUNKS = "5FFFF" "5FFFF" "BFFFF"


@pytest.fixture
def session(write_program):
    def _session(text: str = THREE_CHUNKS, *, data: bytes = b"", json_output: bool = False):
        ctx = DebuggerContext(io=BufferIOPort(data), json_output=json_output, seed=5)
        registry = build_registry()
        path = write_program(text)
        assert dispatch_line(ctx, registry, f"load {path}") == 0
        return ctx, registry

    return _session


def test_load_reports_chunk_count(session, capsys):
    ctx, _ = session()
    assert ctx.code.chunk_count == 3
    assert "(3 chunk(s))" in capsys.readouterr().out


def test_load_error_is_reported(write_program, capsys):
    ctx = DebuggerContext(io=BufferIOPort())
    path = write_program("55x55")
    assert dispatch_line(ctx, build_registry(), f"load {path}") == 1
    assert "error: Unknown character x encountered!" in capsys.readouterr().out
    assert ctx.engine is None


def test_commands_need_a_program(capsys):
    ctx = DebuggerContext(io=BufferIOPort())
    assert dispatch_line(ctx, build_registry(), "step") == 1
    assert "no program loaded" in capsys.readouterr().out


def test_step_advances_one_chunk(session, capsys):
    ctx, registry = session()
    capsys.readouterr()
    assert dispatch_line(ctx, registry, "step") == 0
    assert ctx.engine.current_chunk == 1
    assert "step at chunk 1 (1 chunk(s) executed)" in capsys.readouterr().out


def test_step_count_stops_at_halt(session, capsys):
    ctx, registry = session()
    capsys.readouterr()
    assert dispatch_line(ctx, registry, "s 10") == 0
    assert "program halted after 3 chunk(s)" in capsys.readouterr().out


def test_continue_stops_at_breakpoint(session, capsys):
    ctx, registry = session()
    assert dispatch_line(ctx, registry, "break add 2") == 0
    capsys.readouterr()
    assert dispatch_line(ctx, registry, "continue") == 0
    assert "breakpoint at chunk 2 (2 chunk(s) executed)" in capsys.readouterr().out
    assert dispatch_line(ctx, registry, "c") == 0
    assert "program halted after 3 chunk(s)" in capsys.readouterr().out


def test_continue_limit(write_program, capsys):
    ctx = DebuggerContext(io=BufferIOPort(), seed=1)
    registry = build_registry()
    dispatch_line(ctx, registry, f"load {write_program('FFFFF')}")
    capsys.readouterr()
    assert dispatch_line(ctx, registry, "continue --max 4") == 0
    assert "limit at chunk 0 (4 chunk(s) executed)" in capsys.readouterr().out


def test_breakpoint_out_of_range(session, capsys):
    ctx, registry = session()
    assert dispatch_line(ctx, registry, "bp add 9") == 1
    assert "out of range" in capsys.readouterr().out


def test_breakpoint_list_and_clear(session, capsys):
    ctx, registry = session()
    dispatch_line(ctx, registry, "break add 1")
    dispatch_line(ctx, registry, "break add 2")
    capsys.readouterr()
    dispatch_line(ctx, registry, "break list")
    assert "breakpoints: 1, 2" in capsys.readouterr().out
    assert dispatch_line(ctx, registry, "break clear 1") == 0
    assert dispatch_line(ctx, registry, "break clear 1") == 1
    assert ctx.breakpoints == {2}
    dispatch_line(ctx, registry, "break clearall")
    assert ctx.breakpoints == set()


def test_vm_error_is_reported_not_fatal(session, capsys):
    ctx, registry = session("5555A")
    capsys.readouterr()
    assert dispatch_line(ctx, registry, "step") == 1
    assert "error: stopped at chunk 0: Cannot go to nonexistent chunk 4!" in capsys.readouterr().out
    assert dispatch_line(ctx, registry, "step") == 1
    assert dispatch_line(ctx, registry, "reset") == 0
    assert ctx.engine.state.value == "running"
    assert ctx.code.visited_count() == 0


def test_stack_command(session, capsys):
    ctx, registry = session()
    dispatch_line(ctx, registry, "step")
    capsys.readouterr()
    assert dispatch_line(ctx, registry, "stack") == 0
    out = capsys.readouterr().out
    assert "stack (top first):" in out
    assert "0x00000001" in out


def test_info_json(session, capsys):
    ctx, registry = session(json_output=True)
    capsys.readouterr()
    dispatch_line(ctx, registry, "step 2")
    capsys.readouterr()
    assert dispatch_line(ctx, registry, "info") == 0
    payload = json.loads(capsys.readouterr().out)
    info = payload["result"]["info"]
    assert info["state"] == "running"
    assert info["chunk"] == 2
    assert info["visited"] == 2
    assert info["seed"] == 5


def test_disasm_marks_current_chunk(session, capsys):
    ctx, registry = session()
    dispatch_line(ctx, registry, "step")
    capsys.readouterr()
    assert dispatch_line(ctx, registry, "dis 0 3") == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1].startswith("->0001")
    assert lines[2].endswith("HALT NOP NOP NOP NOP")


def test_program_output_goes_to_io_port(session):
    ctx, registry = session("012B2", data=b"Z")
    dispatch_line(ctx, registry, "continue")
    assert bytes(ctx.io.output) == b"Z"


def test_alias_and_unknown_command(session, capsys):
    ctx, registry = session()
    assert dispatch_line(ctx, registry, "alias go continue") == 0
    capsys.readouterr()
    assert dispatch_line(ctx, registry, "go") == 0
    assert "halted" in capsys.readouterr().out
    assert dispatch_line(ctx, registry, "frobnicate") == 1
    assert "Unknown command: frobnicate" in capsys.readouterr().out


def test_bad_arguments_do_not_exit(session, capsys):
    ctx, registry = session()
    capsys.readouterr()
    assert dispatch_line(ctx, registry, "step many") == 1
    assert "error: step:" in capsys.readouterr().out


def test_help_lists_commands(session, capsys):
    ctx, registry = session()
    capsys.readouterr()
    assert dispatch_line(ctx, registry, "help") == 0
    out = capsys.readouterr().out
    for name in ("load", "step", "continue", "break", "stack", "disasm", "exit"):
        assert name in out


def test_exit_raises_system_exit(session):
    ctx, registry = session()
    with pytest.raises(SystemExit):
        dispatch_line(ctx, registry, "quit")


def test_cli_runs_commands_non_interactively(write_program, capsys):
    path = write_program(THREE_CHUNKS)
    rc = dbg_main([str(path), "--seed", "2", "-c", "step", "-c", "continue"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "Loaded" in out
    assert "program halted after 3 chunk(s)" in out


def test_cli_reads_input_file(write_program, tmp_path, capsys):
    path = write_program("012B2")
    data = tmp_path / "in.bin"
    data.write_bytes(b"Q")
    assert dbg_main([str(path), "--input", str(data), "-c", "continue"]) == 0
    assert "Q" in capsys.readouterr().out


def test_help_json_lists_commands(session, capsys):
    ctx, registry = session(json_output=True)
    capsys.readouterr()
    assert dispatch_line(ctx, registry, "help") == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["status"] == "ok"
    names = {entry["name"] for entry in payload["result"]["commands"]}
    assert {"help", "load", "step", "continue", "disasm", "exit"} <= names
    help_entry = next(e for e in payload["result"]["commands"] if e["name"] == "help")
    assert help_entry["aliases"] == ["?"]


def test_help_for_one_command(session, capsys):
    ctx, registry = session()
    capsys.readouterr()
    assert dispatch_line(ctx, registry, "help bt") == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert len(out) == 1 and out[0].startswith("stack")
    assert dispatch_line(ctx, registry, "help nosuch") == 1
    assert "error: unknown command 'nosuch'" in capsys.readouterr().out


def test_disasm_rejects_negative_start(session, capsys):
    ctx, registry = session()
    capsys.readouterr()
    assert dispatch_line(ctx, registry, "disasm -3") == 1
    out = capsys.readouterr().out
    assert "error: disasm: start must be a chunk index" in out
    assert "0000" not in out
