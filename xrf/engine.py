"""Control engine: chunk scheduling, visited bookkeeping and halt/fail detection."""

from __future__ import annotations

import enum
import logging
import random
import time
from dataclasses import dataclass
from typing import Optional, TextIO

from .code import CodeStore
from .dispatch import ChunkOutcome, InstructionDispatcher
from .errors import InvalidJump, ResourceError, StackUnderflow, XRFError
from .io_port import IOPort
from .stack import ValueStack

LOGGER = logging.getLogger("xrf.engine")


class EngineState(enum.Enum):
    RUNNING = "running"
    HALTED = "halted"
    FAILED = "failed"


@dataclass
class VMConfig:
    trace: bool = False
    trace_file: Optional[TextIO] = None
    seed: Optional[int] = None


class ControlEngine:
    """Owns the stack and code store for one program run.

    Each ``step`` executes one chunk, marks it visited and reads the next chunk
    index off the stack. There is no implicit termination: only opcode B
    halts, and every other exit is an error.
    """

    def __init__(self, code: CodeStore, io: IOPort, config: Optional[VMConfig] = None) -> None:
        self.code = code
        self.io = io
        self.config = config or VMConfig()
        seed = self.config.seed if self.config.seed is not None else int(time.time())
        self.seed = seed
        self.rng = random.Random(seed)
        self.stack = ValueStack([0])
        self.dispatcher = InstructionDispatcher(self.stack, io, self.rng)
        self.state = EngineState.RUNNING
        self.current_chunk = 0
        self.steps = 0
        self.error: Optional[XRFError] = None

    @property
    def running(self) -> bool:
        return self.state is EngineState.RUNNING

    def _log(self, msg: str) -> None:
        LOGGER.debug(msg)
        trace_out = self.config.trace_file
        if trace_out:
            trace_out.write(msg + "\n")
            trace_out.flush()

    def _fail(self, exc: XRFError) -> XRFError:
        self.state = EngineState.FAILED
        self.error = exc
        LOGGER.debug("failed at chunk %d after %d step(s): %s", self.current_chunk, self.steps, exc)
        return exc

    def step(self) -> EngineState:
        """Execute the current chunk and select the next one."""
        if self.state is not EngineState.RUNNING:
            return self.state
        index = self.current_chunk
        chunk = self.code.chunk(index)
        visited = self.code.is_visited(index)
        if self.config.trace:
            marker = "visited" if visited else "new"
            self._log(f"[TRACE] chunk {index:04d} ({marker}) {chunk} stack={self.stack.snapshot()}")

        try:
            outcome = self.dispatcher.execute(chunk, visited)
        except StackUnderflow as exc:
            exc.chunk = index
            exc.opcode = chunk[self.dispatcher.slot]
            raise self._fail(exc)
        except MemoryError as exc:
            raise self._fail(ResourceError("Unable to allocate additional stack space!")) from exc
        self.steps += 1

        if outcome is ChunkOutcome.HALTED:
            self.state = EngineState.HALTED
            if self.config.trace:
                self._log(f"[TRACE] halt in chunk {index:04d} after {self.steps} step(s)")
            return self.state

        self.code.mark_visited(index)
        if not self.stack:
            raise self._fail(InvalidJump("Can't have an empty stack upon reaching the end of a chunk!"))
        target = self.stack.top
        if target >= self.code.chunk_count:
            raise self._fail(InvalidJump(f"Cannot go to nonexistent chunk {target}!", index=target))
        self.current_chunk = target
        return self.state

    def run(self, max_chunks: Optional[int] = None) -> EngineState:
        """Step until halt (or ``max_chunks`` chunks); errors propagate."""
        executed = 0
        try:
            while self.state is EngineState.RUNNING:
                if max_chunks is not None and executed >= max_chunks:
                    break
                self.step()
                executed += 1
        finally:
            self.io.flush()
        return self.state


__all__ = ["EngineState", "VMConfig", "ControlEngine"]
