"""Value stack for the XRF VM.

Values are unsigned 32-bit integers. The stack is a Python list with the top
at the end; ``top``/``bottom`` expose the two ends and iteration walks from top
to bottom, which is the order every listing and the shuffle use.
"""

from __future__ import annotations

import random
from typing import Iterable, Iterator, List, Optional

from .errors import StackUnderflow
from .opcodes import WORD_MASK


class ValueStack:
    """LIFO of unsigned 32-bit values."""

    def __init__(self, values: Optional[Iterable[int]] = None) -> None:
        # Accepts values top to bottom, matching snapshot().
        self._items: List[int] = []
        if values is not None:
            for value in reversed(list(values)):
                self._items.append(int(value) & WORD_MASK)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[int]:
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"ValueStack({self.snapshot()!r})"

    @property
    def top(self) -> Optional[int]:
        return self._items[-1] if self._items else None

    @property
    def bottom(self) -> Optional[int]:
        return self._items[0] if self._items else None

    def snapshot(self) -> List[int]:
        """Return the values top to bottom."""
        return list(reversed(self._items))

    # ------------------------------------------------------------------
    # Core operations

    def push(self, value: int) -> None:
        self._items.append(int(value) & WORD_MASK)

    def pop(self) -> int:
        if not self._items:
            raise StackUnderflow("Can't pop an empty stack!")
        return self._items.pop()

    def peek_top(self) -> int:
        if not self._items:
            raise StackUnderflow("Can't read the top of an empty stack!")
        return self._items[-1]

    def peek_second(self) -> int:
        if len(self._items) < 2:
            raise StackUnderflow(
                "Can't read the second value of a%s stack!" % (" one-element" if self._items else "n empty")
            )
        return self._items[-2]

    def swap_top2(self) -> None:
        if len(self._items) < 2:
            raise StackUnderflow(
                "Can't swap the top two elements on a%s stack"
                % (" one-element" if len(self._items) == 1 else "n empty")
            )
        items = self._items
        items[-1], items[-2] = items[-2], items[-1]

    def duplicate_top(self) -> None:
        if not self._items:
            raise StackUnderflow("Nothing on the stack to be duplicated!")
        self._items.append(self._items[-1])

    def rotate_top_to_bottom(self) -> None:
        if not self._items:
            raise StackUnderflow("Can't send nonexistent value to the bottom of the stack!")
        if len(self._items) == 1:
            return
        self._items.insert(0, self._items.pop())

    def shuffle(self, rng: random.Random) -> None:
        """Fisher-Yates over the values, collected and written back top to bottom."""
        size = len(self._items)
        if size == 0:
            return
        vals = self.snapshot()
        for i in range(size - 1, 0, -1):
            swap_index = rng.randrange(i + 1)
            vals[i], vals[swap_index] = vals[swap_index], vals[i]
        self._items[:] = reversed(vals)

    # ------------------------------------------------------------------
    # Arithmetic helpers

    def add_top2_combine(self) -> None:
        if len(self._items) < 2:
            raise StackUnderflow(
                "Cannot add the top values of a%s" % (" one-value stack." if self._items else "n empty stack.")
            )
        value = self._items.pop()
        self._items[-1] = (self._items[-1] + value) & WORD_MASK

    def abs_diff_top2_combine(self) -> None:
        if len(self._items) < 2:
            raise StackUnderflow(
                "Cannot get the difference of the top two values of a%s!"
                % (" one-value stack" if self._items else "n empty stack")
            )
        value = self._items.pop()
        self._items[-1] = abs(self._items[-1] - value)

    def increment_top(self) -> None:
        if not self._items:
            raise StackUnderflow("Cannot increment nonexistent value!")
        self._items[-1] = (self._items[-1] + 1) & WORD_MASK

    def decrement_top(self) -> None:
        if not self._items:
            raise StackUnderflow("Cannot decrement nonexistent value!")
        if self._items[-1] > 0:
            self._items[-1] -= 1


__all__ = ["ValueStack"]
