"""
Data model of the puzzle: the square board, the position of a cell and the tiles living on it.

The board does not store tile values. Live tiles are independent records gathered in a mapping keyed by their
position, so tiles can be created, merged or removed without touching a grid array.
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Iterable, Iterator, NamedTuple

from tilemerge.core.errors import DuplicatePosition, InvalidBoardSize, InvalidTile

# ##>: Layout metrics, in layout units, shared with the presentation layer.
TILE_SIZE = 40.0
TILE_SPACER = 10.0


class Position(NamedTuple):
    """Cell coordinates: ``x`` grows rightwards, ``y`` grows upwards."""

    x: int
    y: int


@dataclass(frozen=True)
class Tile:
    """A valued tile sitting on one cell of the board."""

    position: Position
    value: int

    def moved_to(self, position: Position) -> 'Tile':
        """Return the same tile re-homed on another cell."""
        return Tile(position=Position(*position), value=self.value)

    def doubled(self) -> 'Tile':
        """Return the tile resulting from a merge with an equal tile."""
        return Tile(position=self.position, value=self.value * 2)


# ##: Live tile set, keyed by position.
Tiles = dict[Position, Tile]


@dataclass(frozen=True)
class Board:
    """
    Fixed-size square board.

    The board only defines the coordinate space the tiles live in, along with the layout metrics used to
    map a cell index to the presentation layer's coordinates.

    Parameters
    ----------
    size : int
        Side length of the square grid. Must be an integer greater than or equal to 2.

    Raises
    ------
    InvalidBoardSize
        If ``size`` is not an integer or is lower than 2.
    """

    size: int

    def __post_init__(self):
        if isinstance(self.size, bool) or not isinstance(self.size, Integral) or self.size < 2:
            raise InvalidBoardSize(self.size)
        object.__setattr__(self, 'size', int(self.size))

    def dimension(self) -> float:
        """
        Total extent of the board in layout space.

        Returns
        -------
        float
            Width (and height) of the board: every tile plus a spacer on both sides of each tile.
        """
        return self.size * TILE_SIZE + (self.size + 1) * TILE_SPACER

    def layout_offset(self, index: int) -> float:
        """
        Convert a cell index into a layout-space coordinate.

        Parameters
        ----------
        index : int
            Index of the cell along one axis.

        Returns
        -------
        float
            Coordinate of the centre of the cell, the origin being the centre of the board.
        """
        offset = -self.dimension() / 2.0 + 0.5 * TILE_SIZE
        return offset + index * TILE_SIZE + (index + 1) * TILE_SPACER

    def contains(self, position: tuple[int, int]) -> bool:
        """Check whether a position lies on the board."""
        x, y = position
        return 0 <= x < self.size and 0 <= y < self.size

    def cells(self) -> Iterator[Position]:
        """Iterate over every cell, column by column."""
        for x in range(self.size):
            for y in range(self.size):
                yield Position(x, y)


def _is_integer(value: object) -> bool:
    """Check for an integer that is not a boolean."""
    return isinstance(value, Integral) and not isinstance(value, bool)


def is_tile_value(value: object, base: int = 2) -> bool:
    """Check whether ``value`` is ``base`` doubled zero or more times."""
    if not _is_integer(value) or value < base:
        return False
    quotient, remainder = divmod(int(value), base)
    return remainder == 0 and quotient & (quotient - 1) == 0


def make_tiles(tiles: Iterable[Tile], board: Board, base: int = 2) -> Tiles:
    """
    Gather tiles into a live tile set, checking the board invariants.

    Parameters
    ----------
    tiles : Iterable[Tile]
        Tiles to place on the board.
    board : Board
        The board the tiles live on.
    base : int, optional
        Value of a freshly spawned tile (default is 2). Every tile value must be ``base * 2**k``.

    Returns
    -------
    Tiles
        Mapping from position to tile.

    Raises
    ------
    InvalidTile
        If a coordinate is not an integer, a tile lies outside the board, or its value is not in the
        doubling sequence starting at ``base``.
    DuplicatePosition
        If two tiles share one cell.
    """
    result: Tiles = {}
    for tile in tiles:
        if not all(_is_integer(coordinate) for coordinate in tile.position):
            raise InvalidTile(f'Tile {tile} has a non-integer position')
        position = Position(*(int(coordinate) for coordinate in tile.position))
        if not board.contains(position):
            raise InvalidTile(f'Tile {tile} lies outside a board of size {board.size}')
        if not is_tile_value(tile.value, base):
            raise InvalidTile(f'Tile {tile} has a value outside the doubling sequence from {base}')
        if position in result:
            raise DuplicatePosition(position)
        result[position] = Tile(position=position, value=int(tile.value))
    return result
