# -*-  coding: utf-8 -*-
"""
Set of test for Board and Tile.
"""
from unittest import TestCase, main

import numpy as np

from tilemerge.core import (
    TILE_SIZE,
    Board,
    DuplicatePosition,
    InvalidBoardSize,
    InvalidTile,
    Position,
    Tile,
    from_array,
    is_tile_value,
    make_tiles,
    to_array,
)


class TestBoard(TestCase):
    """
    Test for the Board class.
    """

    def setUp(self):
        """Initialize a new board before each test."""
        self.board = Board(size=4)

    def test_init(self):
        """Test if the board keeps its size."""
        self.assertEqual(self.board.size, 4)

    def test_invalid_size(self):
        """Sizes below 2 and non-integers are rejected."""
        for size in (1, 0, -3, 2.5, True, '4'):
            with self.assertRaises(InvalidBoardSize):
                Board(size)

    def test_minimal_size(self):
        """Any size from 2 is legal, even or odd."""
        self.assertEqual(Board(2).size, 2)
        self.assertEqual(Board(5).size, 5)

    def test_dimension(self):
        """Four tiles of 40 and five spacers of 10."""
        self.assertEqual(self.board.dimension(), 210.0)

    def test_layout_offset(self):
        """Cell centres are symmetric around the centre of the board."""
        self.assertEqual(self.board.layout_offset(0), -75.0)
        self.assertEqual(self.board.layout_offset(3), 75.0)
        self.assertEqual(self.board.layout_offset(2) - self.board.layout_offset(1), 50.0)
        self.assertEqual(self.board.layout_offset(1), -self.board.layout_offset(2))

    def test_layout_fits_dimension(self):
        """The outer cells stay within the board extent."""
        board = Board(7)
        half = board.dimension() / 2
        self.assertLessEqual(board.layout_offset(board.size - 1) + TILE_SIZE / 2, half)
        self.assertGreaterEqual(board.layout_offset(0) - TILE_SIZE / 2, -half)

    def test_contains(self):
        """Positions out of range are off the board."""
        self.assertTrue(self.board.contains((0, 3)))
        self.assertFalse(self.board.contains((4, 0)))
        self.assertFalse(self.board.contains((0, -1)))

    def test_cells(self):
        """Every cell is listed exactly once."""
        cells = list(self.board.cells())
        self.assertEqual(len(cells), 16)
        self.assertEqual(len(set(cells)), 16)

    def test_immutable(self):
        """The size cannot change after construction."""
        with self.assertRaises(AttributeError):
            self.board.size = 8


class TestTiles(TestCase):
    """
    Test for tile sets.
    """

    def setUp(self):
        self.board = Board(size=3)

    def test_make_tiles(self):
        """Tiles are keyed by position."""
        tiles = make_tiles([Tile(Position(0, 0), 2), Tile((2, 1), 4)], self.board)
        self.assertEqual(tiles[Position(2, 1)].value, 4)
        self.assertIsInstance(tiles[Position(2, 1)].position, Position)

    def test_duplicate_position(self):
        """Two tiles on one cell fail loudly."""
        with self.assertRaises(DuplicatePosition):
            make_tiles([Tile(Position(1, 1), 2), Tile(Position(1, 1), 4)], self.board)

    def test_out_of_board(self):
        """A tile outside the board is rejected."""
        with self.assertRaises(InvalidTile):
            make_tiles([Tile(Position(3, 0), 2)], self.board)

    def test_non_positive_value(self):
        """A tile must carry a positive value."""
        with self.assertRaises(InvalidTile):
            make_tiles([Tile(Position(0, 0), 0)], self.board)

    def test_fractional_value(self):
        """A fractional value is rejected instead of being truncated."""
        with self.assertRaises(InvalidTile):
            make_tiles([Tile(Position(0, 0), 2.5)], self.board)

    def test_value_outside_doubling_sequence(self):
        """Values that no chain of merges can produce are rejected."""
        for value in (1, 3, 6, 12, True):
            with self.assertRaises(InvalidTile):
                make_tiles([Tile(Position(0, 0), value)], self.board)

    def test_fractional_position(self):
        """A position between cells is rejected."""
        with self.assertRaises(InvalidTile):
            make_tiles([Tile((0.5, 0), 2)], self.board)

    def test_custom_base(self):
        """The doubling sequence starts at the given spawn value."""
        tiles = make_tiles([Tile(Position(0, 0), 3), Tile(Position(1, 0), 12)], self.board, base=3)
        self.assertEqual(tiles[Position(1, 0)].value, 12)
        with self.assertRaises(InvalidTile):
            make_tiles([Tile(Position(0, 0), 4)], self.board, base=3)

    def test_is_tile_value(self):
        """Doubling sequence membership."""
        self.assertTrue(all(is_tile_value(2**k) for k in range(1, 20)))
        self.assertTrue(is_tile_value(np.int64(64)))
        self.assertFalse(is_tile_value(0))
        self.assertFalse(is_tile_value(2.0))

    def test_tile_helpers(self):
        """Moving keeps the value, doubling keeps the position."""
        tile = Tile(Position(0, 0), 8)
        self.assertEqual(tile.moved_to((2, 2)), Tile(Position(2, 2), 8))
        self.assertEqual(tile.doubled(), Tile(Position(0, 0), 16))

    def test_array_layout(self):
        """Row 0 of the grid is the top of the board."""
        tiles = make_tiles([Tile(Position(0, 2), 2), Tile(Position(2, 0), 4)], self.board)
        grid = to_array(tiles, 3)
        np.testing.assert_array_equal(grid, np.array([[2, 0, 0], [0, 0, 0], [0, 0, 4]]))
        self.assertEqual(from_array(grid), tiles)


if __name__ == '__main__':
    main()
