#!/usr/bin/env python3
"""Shared opcode definitions for the XRF toolchain.

The dispatcher, disassembler and debugger all read this table so symbol and
mnemonic assignments cannot drift between them.
"""

from __future__ import annotations

from typing import Dict, Tuple

COMMANDS_PER_CHUNK = 5
WORD_MASK = 0xFFFFFFFF
VALID_SYMBOLS = "0123456789ABCDEF"
# Same set as C isspace() in the "C" locale.
WHITESPACE = " \t\n\v\f\r"

# Ordered so listings and docs iterate in a stable order.
OPCODE_LIST: Tuple[Tuple[str, str], ...] = (
    ("0", "READ"),
    ("1", "WRITE"),
    ("2", "DROP"),
    ("3", "DUP"),
    ("4", "SWAP"),
    ("5", "INC"),
    ("6", "DEC"),
    ("7", "ADD"),
    ("8", "SKIPNEW"),
    ("9", "ROT"),
    ("A", "RET"),
    ("B", "HALT"),
    ("C", "SKIPOLD"),
    ("D", "SHUF"),
    ("E", "DIFF"),
)

OPCODES: Dict[str, str] = {mnemonic: symbol for symbol, mnemonic in OPCODE_LIST}
OPCODE_NAMES: Dict[str, str] = {symbol: mnemonic for symbol, mnemonic in OPCODE_LIST}

# "F" loads fine but has no assigned behaviour.
NOP_NAME = "NOP"

__all__ = [
    "COMMANDS_PER_CHUNK",
    "WORD_MASK",
    "VALID_SYMBOLS",
    "WHITESPACE",
    "OPCODE_LIST",
    "OPCODES",
    "OPCODE_NAMES",
    "NOP_NAME",
    "mnemonic_for",
]


def mnemonic_for(symbol: str) -> str:
    return OPCODE_NAMES.get(symbol, NOP_NAME)
