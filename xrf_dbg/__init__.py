"""
xrf-dbg - interactive step debugger for XRF programs.

Steps a ControlEngine one chunk at a time, with chunk breakpoints, stack and
listing views. Launch with ``xrf-dbg [PROGRAM]``.
"""

from __future__ import annotations

from .cli import main

__all__ = ["main"]
__version__ = "0.1.0"
