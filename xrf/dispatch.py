"""Per-chunk instruction dispatcher."""

from __future__ import annotations

import enum
import random

from .errors import StackUnderflow
from .io_port import IOPort
from .opcodes import COMMANDS_PER_CHUNK
from .stack import ValueStack


class ChunkOutcome(enum.Enum):
    COMPLETED = "completed"  # all five slots ran
    RETURNED = "returned"  # opcode A
    HALTED = "halted"  # opcode B


class InstructionDispatcher:
    """Runs the five slots of one chunk against a stack and an IOPort.

    ``visited`` is captured by the caller before dispatch and stays fixed for
    the whole chunk, so SKIPNEW/SKIPOLD see whether this chunk had completed
    before this call, not whether it is completing now.
    """

    def __init__(self, stack: ValueStack, io: IOPort, rng: random.Random) -> None:
        self.stack = stack
        self.io = io
        self.rng = rng
        # Slot currently executing; read by the engine when a slot fails.
        self.slot = 0

    def execute(self, chunk: str, visited: bool) -> ChunkOutcome:
        stack = self.stack
        i = 0
        while i < COMMANDS_PER_CHUNK:
            self.slot = i
            op = chunk[i]
            if op == "0":  # READ
                value = self.io.read_byte()
                stack.push(0 if value is None else value)
            elif op == "1":  # WRITE
                if not stack:
                    raise StackUnderflow("Cannot output nonexistent value!")
                self.io.write_byte(stack.pop())
            elif op == "2":  # DROP
                stack.pop()
            elif op == "3":  # DUP
                stack.duplicate_top()
            elif op == "4":  # SWAP
                stack.swap_top2()
            elif op == "5":  # INC
                stack.increment_top()
            elif op == "6":  # DEC
                stack.decrement_top()
            elif op == "7":  # ADD
                stack.add_top2_combine()
            elif op == "8":  # SKIPNEW
                if not visited:
                    i += 1
            elif op == "9":  # ROT
                stack.rotate_top_to_bottom()
            elif op == "A":  # RET
                return ChunkOutcome.RETURNED
            elif op == "B":  # HALT
                return ChunkOutcome.HALTED
            elif op == "C":  # SKIPOLD
                if visited:
                    i += 1
            elif op == "D":  # SHUF
                stack.shuffle(self.rng)
            elif op == "E":  # DIFF
                stack.abs_diff_top2_combine()
            i += 1
        return ChunkOutcome.COMPLETED


__all__ = ["ChunkOutcome", "InstructionDispatcher"]
