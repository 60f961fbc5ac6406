"""Fatal error taxonomy for the XRF engine.

None of these are recoverable inside the VM; the engine records the error,
moves to the failed state and re-raises so the front-end can report it.
"""

from __future__ import annotations

from typing import Optional


class XRFError(Exception):
    """Base class for every fatal XRF condition."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class LoadError(XRFError):
    """Raised before execution: unreadable file, bad character, bad length, bad arguments."""


class StackUnderflow(XRFError):
    """An opcode needed more stack values than were present."""

    def __init__(self, message: str, *, opcode: Optional[str] = None, chunk: Optional[int] = None) -> None:
        super().__init__(message)
        self.opcode = opcode
        self.chunk = chunk


class InvalidJump(XRFError):
    """The value left on the stack does not name a chunk."""

    def __init__(self, message: str, *, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.index = index


class ResourceError(XRFError):
    """Allocation failure."""


__all__ = [
    "XRFError",
    "LoadError",
    "StackUnderflow",
    "InvalidJump",
    "ResourceError",
]
