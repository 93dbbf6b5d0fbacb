"""
The captcha equation: left + right = sum.

Collected asteroid values fill the slots in order. The equation is only
judged once the sum slot is filled.
"""
from typing import List, Optional


class Equation:
    """Three input slots and their solved/failed checks."""

    SLOTS = 3

    def __init__(self):
        self._slots: List[Optional[int]] = [None] * self.SLOTS

    @property
    def slots(self) -> List[Optional[int]]:
        return list(self._slots)

    @property
    def complete(self) -> bool:
        return self._slots[-1] is not None

    def reset(self) -> None:
        self._slots = [None] * self.SLOTS

    def add_input(self, value: int) -> bool:
        """Put a value in the first empty slot.

        Returns:
            False if every slot was already filled.
        """
        for idx, slot in enumerate(self._slots):
            if slot is None:
                self._slots[idx] = value
                return True
        return False

    def solved(self) -> bool:
        """True if all slots are filled and left + right == sum."""
        if not self.complete:
            return False
        left, right, total = self._slots
        return left + right == total

    def failed(self) -> bool:
        """True if all slots are filled and left + right != sum.

        Not the same as `not solved()`: an incomplete equation is neither.
        """
        if not self.complete:
            return False
        return not self.solved()

    def __str__(self) -> str:
        left, right, total = (('?' if s is None else str(s)) for s in self._slots)
        return f"{left} + {right} = {total}"
