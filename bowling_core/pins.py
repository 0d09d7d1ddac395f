from __future__ import annotations

from typing import Iterable, List, Set

from .errors import IndexOutOfRange
from .state import PINS


class PinState:
    """Tracks which of the ten pins are down on the current rack.

    Pins are indexed 0-9 (head pin first, back row last). The frame
    tracker never touches this object; the code that watches the lane
    marks pins, reads the counts and resets the rack when told to.
    """

    def __init__(self) -> None:
        self._knocked: Set[int] = set()

    def mark_knocked(self, index: int) -> None:
        """Marks one pin as down. Marking a pin twice is a no-op."""
        if not 0 <= index < PINS:
            raise IndexOutOfRange(index)
        self._knocked.add(index)

    def mark_many(self, indices: Iterable[int]) -> None:
        """Marks several pins; nothing is marked if any index is bad."""
        wanted = list(indices)
        for index in wanted:
            if not 0 <= index < PINS:
                raise IndexOutOfRange(index)
        self._knocked.update(wanted)

    def count_knocked(self) -> int:
        return len(self._knocked)

    def count_standing(self) -> int:
        return PINS - len(self._knocked)

    def knocked(self) -> List[int]:
        return sorted(self._knocked)

    def standing(self) -> List[int]:
        return [i for i in range(PINS) if i not in self._knocked]

    def reset(self, keep_knocked: bool = False) -> None:
        """Full re-rack, or (keep_knocked=True) leave fallen pins down for the next ball."""
        if not keep_knocked:
            self._knocked = set()

    def is_strike(self) -> bool:
        """All ten down. Only meaningful right after the first ball on a fresh rack."""
        return len(self._knocked) == PINS

    def is_spare(self, ball1_knocked: int) -> bool:
        """All ten down across two balls, the first of which left pins standing."""
        return ball1_knocked < PINS and len(self._knocked) == PINS

    def __repr__(self) -> str:
        return f'PinState(knocked={self.knocked()})'
