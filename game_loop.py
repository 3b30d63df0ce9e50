import logging

from orbit_cursor import OrbitCursor
from ring_board import PLAYER_A, PLAYER_B, RingBoard, find_winner

logger = logging.getLogger(__name__)

# State
STATE_PLAYING = 'playing'
STATE_WON = 'won'

DEFAULT_DEBOUNCE_MS = 200


class GameState:
    """Everything one game owns: board, orbiting piece, turn and outcome."""

    def __init__(self, slots=RingBoard.DEFAULT_SIZE, speed=OrbitCursor.DEFAULT_SPEED):
        self.board = RingBoard(slots)
        self.cursor = OrbitCursor(slots, speed)
        self.current_player = PLAYER_A
        self.winner = None
        self.phase = STATE_PLAYING
        self.place_ready_at = 0

    def reset(self):
        self.board.reset()
        self.cursor.reset()
        self.current_player = PLAYER_A
        self.winner = None
        self.phase = STATE_PLAYING
        self.place_ready_at = 0

    @property
    def is_draw(self):
        return self.winner is None and self.board.is_full()

    def status_text(self):
        if self.winner is not None:
            return f'Player {self.winner} wins!'
        if self.is_draw:
            return 'Board full'
        return f'Player {self.current_player} to move'


class GameLoop:
    def __init__(self, state=None, debounce_ms=DEFAULT_DEBOUNCE_MS):
        self.state = state if state is not None else GameState()
        self.debounce_ms = debounce_ms
        logger.info(f"New game on a ring of {len(self.state.board)} slots")

    def tick(self, frames=1):
        state = self.state
        if state.phase == STATE_WON:
            return state.phase
        state.cursor.advance(frames)
        self.check_winner()
        return state.phase

    def check_winner(self):
        state = self.state
        winner = find_winner(state.board)
        if winner is not None and state.phase != STATE_WON:
            state.winner = winner
            state.phase = STATE_WON
            logger.info(f"Player {winner} wins")
        return state.winner

    def handle_place(self, now_ms):
        """Drop the current piece into the nearest empty slot.

        Inputs arriving before the cooldown from the last accepted input has
        elapsed are ignored. Returns the slot index used, or None.
        """
        state = self.state
        if state.phase != STATE_PLAYING:
            logger.debug("Place ignored: game is over")
            return None
        if now_ms < state.place_ready_at:
            logger.debug(f"Place ignored: cooldown until {state.place_ready_at}ms")
            return None
        state.place_ready_at = now_ms + self.debounce_ms

        slot = state.cursor.nearest_empty_slot(state.board)
        if slot is None:
            logger.debug("Place ignored: board is full")
            return None
        state.board.place(slot, state.current_player)
        logger.debug(f"Player {state.current_player} placed in slot {slot}")
        state.current_player = PLAYER_B if state.current_player == PLAYER_A else PLAYER_A
        # the winning move ends the game before another input can land
        self.check_winner()
        return slot

    def reset(self):
        self.state.reset()
        logger.info("Game reset")
