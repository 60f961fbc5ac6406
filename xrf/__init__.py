"""
xrf - interpreter for the XRF esoteric stack language.

Program text is a flat run of hex-digit opcodes cut into five-symbol chunks.
After each chunk the value on top of the stack selects the next chunk to run.

    stack.py     → ValueStack
    code.py      → CodeStore and the source loader
    dispatch.py  → per-chunk opcode dispatcher
    engine.py    → ControlEngine (scheduling, visited flags, halt/fail)
    io_port.py   → byte I/O endpoints for READ/WRITE
"""

from .code import CodeStore, load_program, parse_program  # noqa: F401
from .dispatch import ChunkOutcome, InstructionDispatcher  # noqa: F401
from .engine import ControlEngine, EngineState, VMConfig  # noqa: F401
from .errors import (  # noqa: F401
    InvalidJump,
    LoadError,
    ResourceError,
    StackUnderflow,
    XRFError,
)
from .io_port import BufferIOPort, IOPort, StreamIOPort  # noqa: F401
from .stack import ValueStack  # noqa: F401

__all__ = [
    "CodeStore",
    "load_program",
    "parse_program",
    "ChunkOutcome",
    "InstructionDispatcher",
    "ControlEngine",
    "EngineState",
    "VMConfig",
    "XRFError",
    "LoadError",
    "StackUnderflow",
    "InvalidJump",
    "ResourceError",
    "IOPort",
    "StreamIOPort",
    "BufferIOPort",
    "ValueStack",
]

__version__ = "0.1.0"
