from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

FRAMES = 10
PINS = 10


class RollOutcome(Enum):
    """What a recorded delivery did to the game."""
    CONTINUED = 'continued'            # same rack, next ball
    FRAME_ADVANCED = 'frame_advanced'  # re-rack: next frame, or the bonus ball of frame 10
    GAME_OVER = 'game_over'


@dataclass(frozen=True)
class OpenFrame:
    """Turn state inside frames 1-9."""
    frame: int  # 1..9
    ball: int  # 1 or 2
    running_total: int  # pins down after ball 1, 0 before it


@dataclass(frozen=True)
class FinalFrame:
    """Turn state inside frame 10, which takes two or three deliveries."""
    ball: int  # 1..3
    ball1: int
    ball2: int
    balls_so_far: int  # 0..2

    @property
    def frame(self) -> int:
        return FRAMES


@dataclass(frozen=True)
class GameOver:
    """Terminal state; remembers how many balls frame 10 took."""
    last_ball: int  # 2 or 3

    @property
    def frame(self) -> int:
        return FRAMES


TurnState = Union[OpenFrame, FinalFrame, GameOver]


def initial_state() -> TurnState:
    return OpenFrame(frame=1, ball=1, running_total=0)
