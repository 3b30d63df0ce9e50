import argparse
import os

from game_loop import DEFAULT_DEBOUNCE_MS
from orbit_cursor import OrbitCursor
from ring_board import RUN_LENGTH, RingBoard

SLOTS = RingBoard.DEFAULT_SIZE
SPEED = OrbitCursor.DEFAULT_SPEED
DEBOUNCE_MS = DEFAULT_DEBOUNCE_MS
FPS = 60
WINDOW = 1000
RADIUS = 150
LOG_LEVEL = 'INFO'
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


class Settings:
    def __init__(self, slots=SLOTS, speed=SPEED, debounce_ms=DEBOUNCE_MS, fps=FPS,
                 window=WINDOW, radius=RADIUS, log_level=LOG_LEVEL):
        self.slots = slots
        self.speed = speed
        self.debounce_ms = debounce_ms
        self.fps = fps
        self.window = window
        self.radius = radius
        self.log_level = log_level

    @classmethod
    def from_args(cls, argv=None):
        parser = build_parser()
        args = parser.parse_args(argv)
        if args.slots < RUN_LENGTH:
            parser.error(f'--slots must be at least {RUN_LENGTH}')
        if args.speed <= 0:
            parser.error('--speed must be positive')
        if args.debounce_ms < 0:
            parser.error('--debounce-ms must not be negative')
        if args.fps < 1:
            parser.error('--fps must be at least 1')
        if args.window < 1:
            parser.error('--window must be at least 1')
        if args.radius < 1:
            parser.error('--radius must be at least 1')
        # string defaults are converted by argparse but not checked against choices
        if args.log_level not in LOG_LEVELS:
            parser.error(f'--log-level must be one of {", ".join(LOG_LEVELS)}')
        return cls(slots=args.slots, speed=args.speed, debounce_ms=args.debounce_ms,
                   fps=args.fps, window=args.window, radius=args.radius,
                   log_level=args.log_level)


def build_parser():
    # environment values stay strings so argparse converts and reports them
    parser = argparse.ArgumentParser(description='Orbit Connect Four')
    parser.add_argument('--slots', type=int, default=os.getenv('ORBIT_SLOTS', SLOTS),
                        help='number of slots on the ring')
    parser.add_argument('--speed', type=float, default=os.getenv('ORBIT_SPEED', SPEED),
                        help='orbit speed in slots per frame')
    parser.add_argument('--debounce-ms', type=int, default=os.getenv('ORBIT_DEBOUNCE_MS', DEBOUNCE_MS),
                        help='cooldown between placements')
    parser.add_argument('--fps', type=int, default=os.getenv('ORBIT_FPS', FPS))
    parser.add_argument('--window', type=int, default=os.getenv('ORBIT_WINDOW', WINDOW),
                        help='window width and height in pixels')
    parser.add_argument('--radius', type=int, default=os.getenv('ORBIT_RADIUS', RADIUS),
                        help='board radius in pixels')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS,
                        default=os.getenv('ORBIT_LOG_LEVEL', LOG_LEVEL))
    return parser
