"""Exceptions raised by the bowling engine."""


class BowlingError(Exception):
    """Base class for all bowling engine errors."""


class InvalidRoll(BowlingError, ValueError):
    """A delivery that cannot legally be recorded (bad pin count or more than 10 pins in a rack)."""


class GameAlreadyOver(BowlingError, RuntimeError):
    """A delivery recorded after the tenth frame has finished."""

    def __init__(self, rolls_recorded: int):
        super().__init__(f'Game over: no more rolls allowed ({rolls_recorded} rolls recorded)')
        self.rolls_recorded = rolls_recorded


class IndexOutOfRange(BowlingError, IndexError):
    """A pin index outside 0-9."""

    def __init__(self, index: int):
        super().__init__(f'PinState: index out of range ({index})')
        self.index = index
