"""
Shift engine: slide every tile toward one edge of the board and merge equal neighbours.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from operator import itemgetter

from tilemerge.core.board import Position, Tile, Tiles
from tilemerge.core.direction import Direction
from tilemerge.core.errors import UnrecognizedDirection

_logger = logging.getLogger(__name__)


class ChangeTag(str, Enum):
    """What happened to a tile during a turn, for the presentation layer."""

    STATIC = 'static'
    MOVED = 'moved'
    MERGED = 'merged'
    SPAWNED = 'spawned'


@dataclass(frozen=True)
class TileChange:
    """
    A tile of the new tile set together with how it got there.

    Attributes
    ----------
    tile : Tile
        The tile after the turn.
    tag : ChangeTag
        Kind of change undergone by the tile.
    origins : tuple[Position, ...]
        Positions the tile came from before the turn: one for a moved or static tile, two for a merged
        tile (the absorbing tile first), none for a spawned tile.
    """

    tile: Tile
    tag: ChangeTag
    origins: tuple[Position, ...] = ()


@dataclass(frozen=True)
class MergeEvent:
    """Two equal tiles merged on ``position`` into a tile of ``value``."""

    position: Position
    value: int
    sources: tuple[Position, Position]


@dataclass(frozen=True)
class ShiftResult:
    """
    Outcome of a shift.

    Attributes
    ----------
    tiles : Tiles
        The new tile set.
    merges : tuple[MergeEvent, ...]
        Every merge performed, lane by lane.
    moved : bool
        Whether any tile changed position or value.
    changes : dict[Position, TileChange]
        For each tile of the new set, keyed by its position, how it got there.
    """

    tiles: Tiles
    merges: tuple[MergeEvent, ...] = ()
    moved: bool = False
    changes: dict[Position, TileChange] = field(default_factory=dict)

    @property
    def score(self) -> int:
        """Sum of the values created by merges."""
        return sum(merge.value for merge in self.merges)


def _lane_and_distance(position: Position, direction: Direction, size: int) -> tuple[int, int]:
    """Split a position into its lane index and its distance to the target edge."""
    along = position[direction.axis]
    lane = position[1 - direction.axis]
    distance = size - 1 - along if direction.towards_high else along
    return lane, distance


def _cell(lane: int, distance: int, direction: Direction, size: int) -> Position:
    """Inverse of ``_lane_and_distance``."""
    along = size - 1 - distance if direction.towards_high else distance
    if direction.axis == 0:
        return Position(along, lane)
    return Position(lane, along)


def _unchanged(tiles: Tiles) -> ShiftResult:
    """A shift that leaves every tile in place."""
    changes = {
        position: TileChange(tile=tile, tag=ChangeTag.STATIC, origins=(position,))
        for position, tile in tiles.items()
    }
    return ShiftResult(tiles=dict(sorted(tiles.items())), changes=dict(sorted(changes.items())))


def shift_tiles(tiles: Tiles, size: int, direction: Direction | str | int) -> ShiftResult:
    """
    Shift every tile toward one edge and merge equal neighbours.

    Parameters
    ----------
    tiles : Tiles
        The live tile set. Not modified.
    size : int
        Side length of the board.
    direction : Direction | str | int
        Edge the tiles move toward, as a member, a name or an integer code. Unrecognized input leaves the
        tile set unchanged.

    Returns
    -------
    ShiftResult
        The new tile set, the merges performed and the did-move flag.

    Notes
    -----
    - Lanes (rows for left and right, columns for up and down) are independent.
    - In a lane, tiles are handled from the closest to the target edge to the farthest, and each one is
      placed right behind the previously placed tile.
    - A tile merges into the previously placed tile when both values are equal, unless that tile already
      absorbed a merge during this shift.
    """
    try:
        direction = Direction.parse(direction)
    except UnrecognizedDirection as error:
        _logger.warning('Ignoring shift: %s', error)
        return _unchanged(tiles)

    # ##: Partition tiles into lanes.
    lanes: dict[int, list[tuple[int, Tile]]] = defaultdict(list)
    for position, tile in tiles.items():
        lane, distance = _lane_and_distance(position, direction, size)
        lanes[lane].append((distance, tile))

    new_tiles: Tiles = {}
    changes: dict[Position, TileChange] = {}
    merges: list[MergeEvent] = []
    moved = False

    for lane in sorted(lanes):
        members = sorted(lanes[lane], key=itemgetter(0))

        # ##: Walk the lane from the target edge outward.
        cursor = 0
        last: Position | None = None
        spent: set[Position] = set()
        for _, tile in members:
            if last is not None and last not in spent and new_tiles[last].value == tile.value:
                # ##>: Merge into the previous tile; the cursor stays put.
                merged = new_tiles[last].doubled()
                sources = (changes[last].origins[0], tile.position)
                new_tiles[last] = merged
                changes[last] = TileChange(tile=merged, tag=ChangeTag.MERGED, origins=sources)
                merges.append(MergeEvent(position=last, value=merged.value, sources=sources))
                spent.add(last)
                moved = True
                continue

            destination = _cell(lane, cursor, direction, size)
            cursor += 1
            placed = tile.moved_to(destination)
            tag = ChangeTag.STATIC if destination == tile.position else ChangeTag.MOVED
            new_tiles[destination] = placed
            changes[destination] = TileChange(tile=placed, tag=tag, origins=(tile.position,))
            moved = moved or tag is ChangeTag.MOVED
            last = destination

    return ShiftResult(
        tiles=dict(sorted(new_tiles.items())),
        merges=tuple(merges),
        moved=moved,
        changes=dict(sorted(changes.items())),
    )
