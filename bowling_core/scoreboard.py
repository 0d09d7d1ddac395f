from __future__ import annotations

from typing import List, Sequence

from .scoring import calculate_score, running_totals
from .state import FRAMES, PINS

Mark = str  # 'X', '/', '-', '1'..'9' or '' for an empty box


def _pin_mark(pins: int) -> Mark:
    if pins == PINS:
        return 'X'
    if pins == 0:
        return '-'
    return str(pins)


def split_frames(rolls: Sequence[int]) -> List[List[int]]:
    """Groups the flat roll sequence into ten per-frame lists (later frames may be empty)."""
    frames: List[List[int]] = [[] for _ in range(FRAMES)]
    i = 0
    for frame in range(FRAMES - 1):
        if i >= len(rolls):
            return frames
        if rolls[i] == PINS:
            frames[frame] = [rolls[i]]
            i += 1
        else:
            frames[frame] = list(rolls[i:i + 2])
            i += 2
    frames[FRAMES - 1] = list(rolls[i:i + 3])
    return frames


def _open_frame_marks(balls: List[int]) -> List[Mark]:
    if not balls:
        return ['', '']
    if balls[0] == PINS:
        # strike is written in the second box
        return ['', 'X']
    first = _pin_mark(balls[0])
    if len(balls) < 2:
        return [first, '']
    second = '/' if balls[0] + balls[1] == PINS else _pin_mark(balls[1])
    return [first, second]


def _final_frame_marks(balls: List[int]) -> List[Mark]:
    marks: List[Mark] = ['', '', '']
    if not balls:
        return marks
    r1 = balls[0]
    marks[0] = _pin_mark(r1)
    if len(balls) < 2:
        return marks
    r2 = balls[1]
    if r1 != PINS and r1 + r2 == PINS:
        marks[1] = '/'
    else:
        marks[1] = _pin_mark(r2)
    if len(balls) < 3:
        return marks
    r3 = balls[2]
    fresh_rack = r2 == PINS or (r1 != PINS and r1 + r2 == PINS)
    if not fresh_rack and r2 + r3 == PINS:
        marks[2] = '/'
    else:
        marks[2] = _pin_mark(r3)
    return marks


def frame_marks(rolls: Sequence[int]) -> List[List[Mark]]:
    """Scoreboard marks for each frame: two boxes for frames 1-9, three for frame 10."""
    frames = split_frames(rolls)
    out = [_open_frame_marks(balls) for balls in frames[:FRAMES - 1]]
    out.append(_final_frame_marks(frames[FRAMES - 1]))
    return out


def render(rolls: Sequence[int], player: str = 'Player') -> str:
    """Plain text scoreboard: frame numbers, marks, and the running total under each frame."""
    marks = frame_marks(rolls)
    totals = running_totals(rolls)
    widths = [5] * (FRAMES - 1) + [7]

    head: List[str] = []
    boxes: List[str] = []
    under: List[str] = []
    for idx in range(FRAMES):
        w = widths[idx]
        head.append(str(idx + 1).center(w))
        boxes.append(' '.join(m or ' ' for m in marks[idx]).center(w))
        total = totals[idx]
        under.append(('' if total is None else str(total)).center(w))

    lines = [
        f'{player}  (total {calculate_score(rolls)})',
        '|' + '|'.join(head) + '|',
        '|' + '|'.join(boxes) + '|',
        '|' + '|'.join(under) + '|',
    ]
    return '\n'.join(lines)
