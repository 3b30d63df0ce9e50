import math

import pytest

from orbit_cursor import OrbitCursor
from ring_board import PLAYER_A, PLAYER_B, RingBoard


class TestAdvance:
    """Cursor movement around the ring."""

    def test_starts_at_zero(self):
        cursor = OrbitCursor(20)
        assert cursor.position == 0.0
        assert cursor.angle == 0.0

    def test_advance_by_speed(self):
        cursor = OrbitCursor(20, speed=0.5)
        cursor.advance()
        cursor.advance(3)
        assert cursor.position == pytest.approx(2.0)

    def test_advance_wraps(self):
        cursor = OrbitCursor(20, speed=1.5)
        cursor.advance(14)
        assert cursor.position == pytest.approx(1.0)
        assert 0 <= cursor.position < 20

    def test_angle_is_fraction_of_turn(self):
        cursor = OrbitCursor(20)
        cursor.position = 5.0
        assert cursor.angle == pytest.approx(math.pi / 2)

    def test_reset(self):
        cursor = OrbitCursor(20)
        cursor.advance(10)
        cursor.reset()
        assert cursor.position == 0.0


class TestNearestEmptySlot:
    """Picking the landing slot for the orbiting piece."""

    def test_slot_five_after_orbiting(self):
        board = RingBoard(20)
        cursor = OrbitCursor(20, speed=0.15)
        for _ in range(33):
            cursor.advance()
        assert cursor.position == pytest.approx(5.0, abs=0.1)
        assert cursor.nearest_empty_slot(board) == 5

    def test_skips_occupied_slots(self):
        board = RingBoard(20)
        board.place(5, PLAYER_A)
        board.place(6, PLAYER_B)
        cursor = OrbitCursor(20)
        cursor.position = 5.4
        assert cursor.nearest_empty_slot(board) == 4

    def test_wraps_across_the_seam(self):
        board = RingBoard(20)
        board.place(19, PLAYER_A)
        cursor = OrbitCursor(20)
        cursor.position = 19.2
        assert cursor.nearest_empty_slot(board) == 0

    def test_tie_goes_to_lowest_index(self):
        cursor = OrbitCursor(20)
        cursor.position = 0.5
        assert cursor.nearest_empty_slot(RingBoard(20)) == 0

    def test_full_board(self):
        board = RingBoard(4)
        for i in range(4):
            board.place(i, PLAYER_A)
        assert OrbitCursor(4).nearest_empty_slot(board) is None
