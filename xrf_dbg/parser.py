"""Command-line splitting for xrf-dbg."""

from __future__ import annotations

import shlex
from typing import List


def split_command(line: str) -> List[str]:
    """Split a command line into argv tokens using shlex rules."""
    if not line:
        return []
    try:
        return shlex.split(line, comments=True, posix=True)
    except ValueError as exc:
        # Caller reports the parse error instead of dispatching.
        return ["#parse-error", str(exc)]
