"""
Ten-pin bowling rules engine.

Pure-logic package: turns a stream of per-delivery pin counts into a
validated frame/ball state machine and an official score.
Modules:
- state.py: turn-state types (OpenFrame, FinalFrame, GameOver) and RollOutcome
- frames.py: FrameTracker, the turn-taking state machine
- pins.py: PinState, the knocked/standing pin tracker
- scoring.py: calculate_score, get_frame_scores, running_totals
- scoreboard.py: scoreboard marks and a text rendering
- simulate.py: random games driven through PinState
- cli.py: command line entry point
"""
from .errors import BowlingError, GameAlreadyOver, IndexOutOfRange, InvalidRoll
from .frames import FrameTracker
from .pins import PinState
from .scoring import calculate_score, get_frame_scores, running_totals
from .state import FRAMES, PINS, FinalFrame, GameOver, OpenFrame, RollOutcome

__all__ = [
    'BowlingError',
    'FRAMES',
    'FinalFrame',
    'FrameTracker',
    'GameAlreadyOver',
    'GameOver',
    'IndexOutOfRange',
    'InvalidRoll',
    'OpenFrame',
    'PINS',
    'PinState',
    'RollOutcome',
    'calculate_score',
    'get_frame_scores',
    'running_totals',
]
