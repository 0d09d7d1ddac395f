from __future__ import annotations

import logging
import random
from typing import List, Optional

from .frames import FrameTracker
from .pins import PinState

logger = logging.getLogger(__name__)


def simulate_delivery(pin_state: PinState, rng: random.Random, accuracy: float) -> List[int]:
    """Knocks down a random subset of the standing pins; each falls with probability `accuracy`."""
    fallen = [i for i in pin_state.standing() if rng.random() < accuracy]
    pin_state.mark_many(fallen)
    return fallen


def play_random_game(seed: Optional[int] = None, accuracy: float = 0.6) -> FrameTracker:
    """Plays a complete single-player game with random deliveries and returns the finished tracker."""
    if not 0.0 <= accuracy <= 1.0:
        raise ValueError(f'accuracy must be within 0..1, got {accuracy}')
    rng = random.Random(seed)
    tracker = FrameTracker()
    pins = PinState()
    while not tracker.done:
        simulate_delivery(pins, rng, accuracy)
        if tracker.pins_down == 0 and pins.is_strike():
            logger.debug('frame %d: strike', tracker.current_frame)
        elif tracker.pins_down > 0 and pins.is_spare(tracker.pins_down):
            logger.debug('frame %d: spare', tracker.current_frame)
        tracker.record_pins(pins)
        if pins.count_knocked() == tracker.pins_down:
            pins.reset(keep_knocked=True)
        else:
            # re-rack to the pins the next ball is allowed to hit
            pins.reset()
            pins.mark_many(range(tracker.pins_down))
    return tracker
