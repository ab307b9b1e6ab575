from unittest import TestCase, main

from numpy import array

from tilemerge.core import Direction, UnrecognizedDirection, can_move, from_array, legal_directions, shift_tiles


class TestGameMove(TestCase):
    def test_legal_directions(self):
        """
        Test if legal directions are correctly identified.
        """
        tiles = from_array(array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]))
        legal = legal_directions(tiles, 4)
        self.assertEqual(set(legal), {Direction.UP, Direction.RIGHT, Direction.DOWN})

    def test_blocked_board(self):
        """
        Test if a full board without equal neighbours has no legal direction.
        """
        tiles = from_array(array([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8, 16, 32, 64]]))
        self.assertEqual(legal_directions(tiles, 4), [])

    def test_can_move_matches_shift(self):
        """
        Test if legality agrees with the did-move flag of the shift.
        """
        boards = [
            array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]),
            array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 4]]),
            array([[0, 0, 0, 2], [0, 0, 4, 8], [0, 0, 0, 0], [0, 0, 0, 16]]),
        ]
        for board in boards:
            tiles = from_array(board)
            for direction in Direction:
                self.assertEqual(can_move(tiles, 4, direction), shift_tiles(tiles, 4, direction).moved)

    def test_lone_tile_per_direction(self):
        """
        Test if a tile on an edge can move everywhere but toward that edge.
        """
        edges = {
            Direction.LEFT: array([[0, 0, 0], [2, 0, 0], [0, 0, 0]]),
            Direction.RIGHT: array([[0, 0, 0], [0, 0, 2], [0, 0, 0]]),
            Direction.UP: array([[0, 2, 0], [0, 0, 0], [0, 0, 0]]),
            Direction.DOWN: array([[0, 0, 0], [0, 0, 0], [0, 2, 0]]),
        }
        for edge, board in edges.items():
            tiles = from_array(board)
            self.assertEqual(set(legal_directions(tiles, 3)), set(Direction) - {edge})
            self.assertFalse(can_move(tiles, 3, edge))

    def test_parse_direction(self):
        """
        Test if raw input is decoded into directions.
        """
        self.assertIs(Direction.parse('Left'), Direction.LEFT)
        self.assertIs(Direction.parse(' down '), Direction.DOWN)
        self.assertIs(Direction.parse(1), Direction.UP)
        self.assertIs(Direction.parse(Direction.RIGHT), Direction.RIGHT)
        for raw in ('north', 7, None, True, 1.0):
            with self.assertRaises(UnrecognizedDirection):
                Direction.parse(raw)


if __name__ == '__main__':
    main()
