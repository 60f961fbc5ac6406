"""Debugger context: the loaded program and its engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Set

from xrf.code import CodeStore, load_program
from xrf.engine import ControlEngine, EngineState, VMConfig
from xrf.errors import XRFError
from xrf.io_port import IOPort

LOGGER = logging.getLogger("xrf_dbg.context")


class DebuggerError(Exception):
    """Raised by commands that need state the session does not have."""


@dataclass
class StopInfo:
    reason: str
    chunk: int
    steps: int
    error: Optional[str] = None

    def describe(self) -> str:
        if self.reason == "error":
            return f"stopped at chunk {self.chunk}: {self.error}"
        if self.reason == "halted":
            return f"program halted after {self.steps} chunk(s)"
        return f"{self.reason} at chunk {self.chunk} ({self.steps} chunk(s) executed)"


@dataclass
class DebuggerContext:
    """Holds shared debugger state."""

    io: Optional[IOPort] = None
    json_output: bool = False
    seed: Optional[int] = None
    program_path: Optional[Path] = None
    aliases: Dict[str, str] = field(default_factory=dict)
    breakpoints: Set[int] = field(default_factory=set)
    _code: Optional[CodeStore] = field(default=None, init=False, repr=False)
    _engine: Optional[ControlEngine] = field(default=None, init=False, repr=False)

    # ------------------------------------------------------------------
    # Program lifecycle

    def load(self, path: str) -> CodeStore:
        candidate = Path(path).expanduser()
        code = load_program(candidate)
        self.program_path = candidate
        self._code = code
        self.breakpoints = {bp for bp in self.breakpoints if bp < code.chunk_count}
        self.reset()
        LOGGER.info("loaded %s (%d chunk(s))", candidate, code.chunk_count)
        return code

    def reset(self) -> ControlEngine:
        if self._code is None:
            raise DebuggerError("no program loaded")
        self._code.reset_visited()
        if self.io is None:
            raise DebuggerError("no I/O port configured")
        self._engine = ControlEngine(self._code, self.io, VMConfig(seed=self.seed))
        return self._engine

    @property
    def code(self) -> Optional[CodeStore]:
        return self._code

    @property
    def engine(self) -> Optional[ControlEngine]:
        return self._engine

    def ensure_engine(self) -> ControlEngine:
        if self._engine is None:
            raise DebuggerError("no program loaded (use 'load PATH')")
        return self._engine

    # ------------------------------------------------------------------
    # Execution control

    def step(self, count: int = 1) -> StopInfo:
        engine = self.ensure_engine()
        executed = 0
        while executed < max(1, count):
            stop = self._single_step(engine)
            if stop is not None:
                return stop
            executed += 1
        return StopInfo("step", engine.current_chunk, engine.steps)

    def resume(self, max_chunks: Optional[int] = None) -> StopInfo:
        """Run until halt, failure, a breakpoint or ``max_chunks`` chunks."""
        engine = self.ensure_engine()
        executed = 0
        while True:
            if max_chunks is not None and executed >= max_chunks:
                return StopInfo("limit", engine.current_chunk, engine.steps)
            # The chunk we are parked on never re-triggers its own breakpoint.
            if executed and engine.current_chunk in self.breakpoints:
                return StopInfo("breakpoint", engine.current_chunk, engine.steps)
            stop = self._single_step(engine)
            if stop is not None:
                return stop
            executed += 1

    def _single_step(self, engine: ControlEngine) -> Optional[StopInfo]:
        if engine.state is EngineState.HALTED:
            return StopInfo("halted", engine.current_chunk, engine.steps)
        if engine.state is EngineState.FAILED:
            return StopInfo("error", engine.current_chunk, engine.steps, error=str(engine.error))
        try:
            engine.step()
        except XRFError as exc:
            LOGGER.debug("program failed: %s", exc)
            return StopInfo("error", engine.current_chunk, engine.steps, error=str(exc))
        finally:
            engine.io.flush()
        if engine.state is EngineState.HALTED:
            return StopInfo("halted", engine.current_chunk, engine.steps)
        return None

    # ------------------------------------------------------------------
    # Breakpoints and aliases

    def add_breakpoint(self, chunk: int) -> None:
        code = self._code
        if code is not None and not 0 <= chunk < code.chunk_count:
            raise DebuggerError(f"chunk {chunk} out of range (0-{code.chunk_count - 1})")
        self.breakpoints.add(chunk)

    def clear_breakpoint(self, chunk: int) -> bool:
        if chunk in self.breakpoints:
            self.breakpoints.discard(chunk)
            return True
        return False

    def resolve_alias(self, name: str) -> str:
        return self.aliases.get(name, name)

    def set_alias(self, alias: str, command: str) -> None:
        if alias == command:
            self.aliases.pop(alias, None)
            return
        self.aliases[alias] = command

    def list_aliases(self) -> Dict[str, str]:
        return dict(self.aliases)
