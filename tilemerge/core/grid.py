"""
Conversions between a live tile set and a dense numpy grid.

The grid is laid out the way the board is displayed: row 0 is the top of the board (``y = size - 1``) and
column ``j`` is ``x = j``. Empty cells hold zero.
"""

from numpy import int64, ndarray, zeros

from tilemerge.core.board import Position, Tile, Tiles


def to_array(tiles: Tiles, size: int) -> ndarray:
    """
    Build a dense grid from a tile set.

    Parameters
    ----------
    tiles : Tiles
        The live tile set.
    size : int
        Side length of the board.

    Returns
    -------
    ndarray
        A ``(size, size)`` array of tile values, zero for empty cells.
    """
    grid = zeros((size, size), dtype=int64)
    for (x, y), tile in tiles.items():
        grid[size - 1 - y, x] = tile.value
    return grid


def from_array(grid: ndarray) -> Tiles:
    """
    Build a tile set from a dense grid, the inverse of ``to_array``.
    """
    size = len(grid)
    tiles: Tiles = {}
    for row, values in enumerate(grid):
        for x, value in enumerate(values):
            if value:
                position = Position(x, size - 1 - row)
                tiles[position] = Tile(position=position, value=int(value))
    return dict(sorted(tiles.items()))
