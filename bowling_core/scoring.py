from __future__ import annotations

from typing import List, Optional, Sequence

from .state import FRAMES, PINS


def _strike_bonus(rolls: Sequence[int], i: int) -> Optional[int]:
    if i + 2 >= len(rolls):
        return None
    return rolls[i + 1] + rolls[i + 2]


def _spare_bonus(rolls: Sequence[int], i: int) -> Optional[int]:
    if i + 2 >= len(rolls):
        return None
    return rolls[i + 2]


def get_frame_scores(rolls: Sequence[int]) -> List[Optional[int]]:
    """
    Scores each of the ten frames separately (not cumulative).

    A slot stays None while its bonus balls have not been rolled yet, or
    while the frame itself is unfinished. Scoring stops at the first such
    frame, so every later slot is None too. Never raises.
    """
    scores: List[Optional[int]] = [None] * FRAMES
    i = 0
    for frame in range(FRAMES):
        if i >= len(rolls):
            break
        if rolls[i] == PINS:
            bonus = _strike_bonus(rolls, i)
            if bonus is None:
                break
            scores[frame] = PINS + bonus
            i += 1
        elif i + 1 < len(rolls):
            if rolls[i] + rolls[i + 1] == PINS:
                bonus = _spare_bonus(rolls, i)
                if bonus is None:
                    break
                scores[frame] = PINS + bonus
            else:
                scores[frame] = rolls[i] + rolls[i + 1]
            i += 2
        else:
            # only ball 1 of this frame so far
            break
    return scores


def calculate_score(rolls: Sequence[int]) -> int:
    """Total of every frame that can be fully scored; 0 for no rolls, 300 for a perfect game."""
    return sum(s for s in get_frame_scores(rolls) if s is not None)


def running_totals(rolls: Sequence[int]) -> List[Optional[int]]:
    """Cumulative score under each frame, as a scoreboard shows it."""
    totals: List[Optional[int]] = []
    total = 0
    for s in get_frame_scores(rolls):
        if s is None:
            totals.append(None)
            continue
        total += s
        totals.append(total)
    return totals
