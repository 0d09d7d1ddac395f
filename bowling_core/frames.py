from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Tuple

from .errors import GameAlreadyOver, InvalidRoll
from .pins import PinState
from .state import (
    FRAMES,
    PINS,
    FinalFrame,
    GameOver,
    OpenFrame,
    RollOutcome,
    TurnState,
    initial_state,
)

logger = logging.getLogger(__name__)

FrameAdvanceListener = Callable[[], None]
GameOverListener = Callable[[Tuple[int, ...]], None]


def _check_pins(pins: int) -> int:
    # bool is an int subclass; True must not count as one pin
    if isinstance(pins, bool) or not isinstance(pins, int):
        raise InvalidRoll(f'Invalid roll: {pins!r} (must be an integer 0-10)')
    if not 0 <= pins <= PINS:
        raise InvalidRoll(f'Invalid roll: {pins} (must be 0-10)')
    return pins


def _next_frame(frame: int) -> TurnState:
    if frame + 1 == FRAMES:
        return FinalFrame(ball=1, ball1=0, ball2=0, balls_so_far=0)
    return OpenFrame(frame=frame + 1, ball=1, running_total=0)


def _advance_open(state: OpenFrame, pins: int) -> Tuple[TurnState, RollOutcome]:
    if state.ball == 1:
        if pins == PINS:
            return _next_frame(state.frame), RollOutcome.FRAME_ADVANCED
        return OpenFrame(frame=state.frame, ball=2, running_total=pins), RollOutcome.CONTINUED
    if state.running_total + pins > PINS:
        raise InvalidRoll(
            f'Invalid roll: ball 1 ({state.running_total}) + ball 2 ({pins}) exceeds 10'
        )
    return _next_frame(state.frame), RollOutcome.FRAME_ADVANCED


def _advance_final(state: FinalFrame, pins: int) -> Tuple[TurnState, RollOutcome]:
    if state.balls_so_far == 0:
        return FinalFrame(ball=2, ball1=pins, ball2=0, balls_so_far=1), RollOutcome.CONTINUED

    if state.balls_so_far == 1:
        if state.ball1 != PINS and state.ball1 + pins > PINS:
            raise InvalidRoll(
                f'Invalid roll: ball 1 ({state.ball1}) + ball 2 ({pins}) exceeds 10'
            )
        if state.ball1 == PINS or state.ball1 + pins == PINS:
            # bonus ball earned
            return (
                FinalFrame(ball=3, ball1=state.ball1, ball2=pins, balls_so_far=2),
                RollOutcome.FRAME_ADVANCED,
            )
        return GameOver(last_ball=2), RollOutcome.GAME_OVER

    # Third ball: capped by ball 2 unless ball 2 was itself a strike.
    if state.ball2 != PINS and state.ball2 + pins > PINS:
        raise InvalidRoll(
            f'Invalid roll: frame-10 ball 2 ({state.ball2}) + ball 3 ({pins}) exceeds 10'
        )
    return GameOver(last_ball=3), RollOutcome.GAME_OVER


class FrameTracker:
    """Turn-taking state machine for one player's game.

    Feed it one delivery at a time with record_roll(). Every call returns a
    RollOutcome and also fires the registered listeners before returning:
    frame-advance listeners when the rack must be reset (a new frame, or the
    bonus ball of frame 10), game-over listeners with the complete roll
    sequence once the tenth frame is finished.

    A rejected delivery raises and leaves the tracker exactly as it was.
    """

    def __init__(self) -> None:
        self._rolls: List[int] = []
        self._state: TurnState = initial_state()
        self._frame_listeners: List[FrameAdvanceListener] = []
        self._game_over_listeners: List[GameOverListener] = []

    @classmethod
    def from_rolls(cls, rolls: Iterable[int]) -> 'FrameTracker':
        """Rebuilds a tracker by replaying a recorded roll sequence."""
        tracker = cls()
        for pins in rolls:
            tracker.record_roll(pins)
        return tracker

    # ---- notification hooks ----

    def on_frame_advance(self, fn: FrameAdvanceListener) -> None:
        self._frame_listeners.append(fn)

    def on_game_over(self, fn: GameOverListener) -> None:
        self._game_over_listeners.append(fn)

    # ---- read-only view ----

    @property
    def state(self) -> TurnState:
        return self._state

    @property
    def rolls(self) -> Tuple[int, ...]:
        return tuple(self._rolls)

    @property
    def current_frame(self) -> int:
        return self._state.frame

    @property
    def current_ball(self) -> int:
        s = self._state
        if isinstance(s, GameOver):
            return s.last_ball
        return s.ball

    @property
    def done(self) -> bool:
        return isinstance(self._state, GameOver)

    def is_game_over(self) -> bool:
        return self.done

    @property
    def ball1_knocked(self) -> int:
        """Pins knocked by the first delivery of the current frame (0 before it)."""
        s = self._state
        if isinstance(s, OpenFrame):
            return s.running_total
        if isinstance(s, FinalFrame):
            return s.ball1
        return 0

    @property
    def pins_down(self) -> int:
        """Pins already lying on the current rack before the next delivery."""
        s = self._state
        if isinstance(s, OpenFrame):
            return s.running_total
        if isinstance(s, FinalFrame):
            if s.balls_so_far == 1 and s.ball1 != PINS:
                return s.ball1
            if s.balls_so_far == 2 and s.ball2 != PINS:
                return s.ball2
        return 0

    # ---- mutation ----

    def record_roll(self, pins: int) -> RollOutcome:
        """Records one delivery and returns what it did to the game."""
        if self.done:
            raise GameAlreadyOver(len(self._rolls))
        pins = _check_pins(pins)

        s = self._state
        if isinstance(s, OpenFrame):
            next_state, outcome = _advance_open(s, pins)
        else:
            next_state, outcome = _advance_final(s, pins)

        self._rolls.append(pins)
        logger.debug('frame %d ball %d: %d pins -> %s', s.frame, s.ball, pins, outcome.value)
        self._state = next_state
        self._notify(outcome)
        return outcome

    def record_pins(self, pin_state: PinState) -> RollOutcome:
        """Records the delivery that left the rack looking like pin_state.

        The delivery count is the pins now down minus the pins that were
        already down before the ball, which this tracker knows itself.
        """
        knocked = pin_state.count_knocked() - self.pins_down
        if knocked < 0:
            raise InvalidRoll(
                f'Invalid roll: {pin_state.count_knocked()} pins down but {self.pins_down} were down before the delivery'
            )
        return self.record_roll(knocked)

    def _notify(self, outcome: RollOutcome) -> None:
        if outcome is RollOutcome.FRAME_ADVANCED:
            logger.debug('frame advance: now frame %d ball %d', self.current_frame, self.current_ball)
            for fn in list(self._frame_listeners):
                fn()
        elif outcome is RollOutcome.GAME_OVER:
            logger.debug('game over after %d rolls', len(self._rolls))
            rolls = self.rolls
            for fn in list(self._game_over_listeners):
                fn(rolls)

    def __repr__(self) -> str:
        return f'FrameTracker(state={self._state!r}, rolls={self._rolls!r})'
