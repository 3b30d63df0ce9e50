import math


class OrbitCursor:
    """Piece orbiting the ring, measured in slots rather than pixels."""

    DEFAULT_SPEED = 0.15

    def __init__(self, size, speed=DEFAULT_SPEED):
        self.size = size
        self.speed = speed
        self.position = 0.0

    def reset(self):
        self.position = 0.0

    def advance(self, frames=1):
        self.position = (self.position + self.speed * frames) % self.size

    @property
    def angle(self):
        return self.position * 2 * math.pi / self.size

    def distance_to(self, index):
        # angular distance along the shorter arc, in slots
        diff = abs(self.position - index) % self.size
        return min(diff, self.size - diff)

    def nearest_empty_slot(self, board):
        nearest = None
        min_distance = math.inf
        for index in board.empty_slots():
            distance = self.distance_to(index)
            if distance < min_distance:
                min_distance = distance
                nearest = index
        return nearest
