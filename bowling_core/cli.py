from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from .errors import GameAlreadyOver, InvalidRoll
from .frames import FrameTracker
from .scoreboard import render
from .scoring import calculate_score
from .simulate import play_random_game

DEFAULT_LOG_LEVEL = os.getenv('TENPIN_LOG_LEVEL', 'WARNING')
DEFAULT_ACCURACY = float(os.getenv('TENPIN_SIM_ACCURACY', '0.6'))


def parse_rolls(text: str) -> List[int]:
    """Parses '10,7,3' or '10 7 3' into pin counts."""
    sep = ',' if ',' in text else ' '
    try:
        return [int(t) for t in text.split(sep) if t.strip() != '']
    except ValueError:
        raise InvalidRoll(f'Invalid roll list: {text!r}') from None


def _play(player: str) -> int:
    tracker = FrameTracker()
    tracker.on_frame_advance(lambda: print('-- reset pins --'))
    tracker.on_game_over(lambda rolls: print(f'Game over. Final score: {calculate_score(rolls)}'))
    while not tracker.done:
        prompt = f'Frame {tracker.current_frame}, ball {tracker.current_ball} - pins knocked: '
        try:
            text = input(prompt).strip()
        except EOFError:
            print()
            return 1
        try:
            tracker.record_roll(int(text))
        except ValueError as e:
            # InvalidRoll is a ValueError too
            print(f'error: {e}. Try again.')
            continue
        print(render(tracker.rolls, player))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Ten-pin bowling scorer')
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument('--rolls', help='Comma or space separated pin counts to score')
    mode.add_argument('--simulate', action='store_true', help='Play a random game')
    mode.add_argument('--play', action='store_true', help='Enter pin counts interactively')
    parser.add_argument('--player', default='Player', help='Name shown on the scoreboard')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for --simulate')
    parser.add_argument('--accuracy', type=float, default=DEFAULT_ACCURACY,
                        help='Chance each standing pin falls, for --simulate')
    parser.add_argument('--log-level', default=DEFAULT_LOG_LEVEL, help='Logging level (e.g. DEBUG)')
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format='%(levelname)s %(name)s: %(message)s')

    if args.play:
        return _play(args.player)

    if args.simulate:
        try:
            tracker = play_random_game(seed=args.seed, accuracy=args.accuracy)
        except ValueError as e:
            print(f'error: {e}', file=sys.stderr)
            return 2
        print(render(tracker.rolls, args.player))
        return 0

    try:
        tracker = FrameTracker.from_rolls(parse_rolls(args.rolls))
    except (InvalidRoll, GameAlreadyOver) as e:
        print(f'error: {e}', file=sys.stderr)
        return 2
    print(render(tracker.rolls, args.player))
    if not tracker.done:
        print(f'In progress: frame {tracker.current_frame}, ball {tracker.current_ball}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
