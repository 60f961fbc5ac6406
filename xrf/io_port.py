"""Byte I/O endpoints used by the READ and WRITE opcodes."""

from __future__ import annotations

from typing import BinaryIO, Optional, Protocol


class IOPort(Protocol):
    def read_byte(self) -> Optional[int]:
        """Return the next input byte, or None at end of input."""

    def write_byte(self, value: int) -> None:
        """Emit the low byte of ``value``."""

    def flush(self) -> None:
        ...


class StreamIOPort:
    """IOPort over binary streams (normally ``sys.stdin.buffer``/``sys.stdout.buffer``)."""

    def __init__(self, reader: Optional[BinaryIO], writer: Optional[BinaryIO]) -> None:
        self.reader = reader
        self.writer = writer

    def read_byte(self) -> Optional[int]:
        if self.reader is None:
            return None
        # Pending output must be visible before blocking on input.
        self.flush()
        data = self.reader.read(1)
        if not data:
            return None
        return data[0]

    def write_byte(self, value: int) -> None:
        if self.writer is None:
            return
        self.writer.write(bytes([value & 0xFF]))

    def flush(self) -> None:
        if self.writer is not None:
            self.writer.flush()


class BufferIOPort:
    """In-memory IOPort: reads from ``data``, collects writes in ``output``."""

    def __init__(self, data: bytes = b"") -> None:
        self._data = bytes(data)
        self._pos = 0
        self.output = bytearray()

    def read_byte(self) -> Optional[int]:
        if self._pos >= len(self._data):
            return None
        value = self._data[self._pos]
        self._pos += 1
        return value

    def write_byte(self, value: int) -> None:
        self.output.append(value & 0xFF)

    def flush(self) -> None:
        return None


__all__ = ["IOPort", "StreamIOPort", "BufferIOPort"]
