#!/usr/bin/env python3
"""Chunk listing for XRF programs."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

from .code import CodeStore, load_program
from .errors import XRFError
from .opcodes import COMMANDS_PER_CHUNK, mnemonic_for


def disassemble(code: CodeStore) -> List[Dict[str, object]]:
    listing = []
    for index, chunk in enumerate(code):
        listing.append(
            {
                "chunk": index,
                "offset": index * COMMANDS_PER_CHUNK,
                "text": chunk,
                "mnemonics": [mnemonic_for(symbol) for symbol in chunk],
            }
        )
    return listing


def format_entry(entry: Dict[str, object], *, marker: str = "  ") -> str:
    mnemonics = " ".join(entry["mnemonics"])  # type: ignore[arg-type]
    return f"{marker}{entry['chunk']:04d} @{entry['offset']:04d}: {entry['text']}  {mnemonics}"


def format_listing(listing: List[Dict[str, object]], *, current: Optional[int] = None) -> List[str]:
    lines = []
    for entry in listing:
        marker = "->" if current is not None and entry["chunk"] == current else "  "
        lines.append(format_entry(entry, marker=marker))
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="xrf-dis", description="XRF chunk disassembler")
    ap.add_argument("program", type=Path, help="XRF source file")
    ap.add_argument("--json", action="store_true", help="emit JSON instead of text")
    args = ap.parse_args(argv)

    try:
        code = load_program(args.program)
    except XRFError as exc:
        print(f"Error! {exc}", file=sys.stderr)
        return 1
    listing = disassemble(code)
    if args.json:
        print(json.dumps({"chunks": code.chunk_count, "listing": listing}, indent=2))
        return 0
    print(f"; {args.program} chunks={code.chunk_count}")
    for line in format_listing(listing):
        print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
