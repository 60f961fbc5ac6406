"""Program storage and the XRF source loader."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Union

from .errors import LoadError
from .opcodes import COMMANDS_PER_CHUNK, VALID_SYMBOLS, WHITESPACE

LOGGER = logging.getLogger("xrf.code")


class CodeStore:
    """Immutable chunk text plus one mutable visited flag per chunk."""

    def __init__(self, commands: str) -> None:
        if not commands or len(commands) % COMMANDS_PER_CHUNK:
            raise LoadError("Inadequate code length!")
        for symbol in commands:
            if symbol not in VALID_SYMBOLS:
                raise LoadError(f"Unknown character {symbol} encountered!")
        self._commands = commands
        self._visited: List[bool] = [False] * (len(commands) // COMMANDS_PER_CHUNK)

    def __len__(self) -> int:
        return self.chunk_count

    def __iter__(self) -> Iterator[str]:
        for index in range(self.chunk_count):
            yield self.chunk(index)

    @property
    def commands(self) -> str:
        return self._commands

    @property
    def chunk_count(self) -> int:
        return len(self._visited)

    def chunk(self, index: int) -> str:
        if index < 0 or index >= self.chunk_count:
            raise IndexError(f"chunk {index} out of range (0-{self.chunk_count - 1})")
        start = index * COMMANDS_PER_CHUNK
        return self._commands[start : start + COMMANDS_PER_CHUNK]

    def is_visited(self, index: int) -> bool:
        return self._visited[index]

    def mark_visited(self, index: int) -> None:
        self._visited[index] = True

    def reset_visited(self) -> None:
        self._visited = [False] * self.chunk_count

    def visited_count(self) -> int:
        return sum(self._visited)


def parse_program(text: str) -> CodeStore:
    """Strip whitespace, validate every symbol and build a CodeStore."""
    symbols: List[str] = []
    for char in text:
        if char in WHITESPACE:
            continue
        if char not in VALID_SYMBOLS:
            raise LoadError(f"Unknown character {char} encountered!")
        symbols.append(char)
    return CodeStore("".join(symbols))


def load_program(path: Union[str, Path]) -> CodeStore:
    """Read an XRF source file from disk."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise LoadError(f"Unable to open {path}!") from exc
    # latin-1 maps every byte to one character so bad bytes can be named.
    code = parse_program(data.decode("latin-1"))
    LOGGER.debug("loaded %s: %d chunk(s)", path, code.chunk_count)
    return code


__all__ = ["CodeStore", "parse_program", "load_program"]
