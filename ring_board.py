# Circular Connect Four board and win check

EMPTY = 0
PLAYER_A = 1
PLAYER_B = 2

PLAYERS = (PLAYER_A, PLAYER_B)
RUN_LENGTH = 4


class RingBoard:
    DEFAULT_SIZE = 20

    def __init__(self, size=DEFAULT_SIZE):
        if size < 1:
            raise ValueError(f'Ring needs at least one slot, got {size}')
        self.size = size
        self._slots = [EMPTY] * size

    def __len__(self):
        return self.size

    @property
    def slots(self):
        return list(self._slots)

    def reset(self):
        self._slots = [EMPTY] * self.size

    def get(self, index):
        return self._slots[index % self.size]

    def is_empty(self, index):
        return self.get(index) == EMPTY

    def place(self, index, player):
        """Put player's piece in slot index. Returns False if the slot is taken."""
        if player not in PLAYERS:
            raise ValueError(f'Unknown player: {player}')
        if not self.is_empty(index):
            return False
        self._slots[index % self.size] = player
        return True

    def empty_slots(self):
        return [i for i, owner in enumerate(self._slots) if owner == EMPTY]

    def is_full(self):
        return EMPTY not in self._slots


def find_winner(board, run_length=RUN_LENGTH):
    # one pass over every start index; the modulo covers runs across the seam
    if len(board) < run_length:
        return None
    for start in range(len(board)):
        owner = board.get(start)
        if owner == EMPTY:
            continue
        if all(board.get(start + step) == owner for step in range(1, run_length)):
            return owner
    return None
