"""Shared fixtures for the XRF test suite."""

from __future__ import annotations

import pytest

from xrf.code import parse_program
from xrf.engine import ControlEngine, VMConfig
from xrf.io_port import BufferIOPort


@pytest.fixture
def make_engine():
    """Build an engine over program text with an in-memory IOPort."""

    def _make(source: str, data: bytes = b"", **config):
        config.setdefault("seed", 1234)
        io = BufferIOPort(data)
        return ControlEngine(parse_program(source), io, VMConfig(**config)), io

    return _make


@pytest.fixture
def write_program(tmp_path):
    def _write(text: str, name: str = "prog.xrf"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
