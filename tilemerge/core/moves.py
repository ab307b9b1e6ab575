"""
Move legality: which directions would change the board, computed without performing the shift.
"""

from numpy import ndarray

from tilemerge.core.board import Tiles
from tilemerge.core.direction import Direction
from tilemerge.core.grid import to_array


def _lanes_toward_edge(state: ndarray, direction: Direction) -> ndarray:
    """
    Rearrange a dense grid so each row is a lane whose first cell lies on the target edge.

    Parameters
    ----------
    state : ndarray
        Dense grid, row 0 being the top of the board (``y = size - 1``).
    direction : Direction
        Direction of the shift.

    Returns
    -------
    ndarray
        A view of the grid, one lane per row, ordered by distance to the target edge.
    """
    if direction.axis == 0:
        # ##>: Columns follow x: the low edge comes first already.
        lanes = state
        flip = direction.towards_high
    else:
        # ##>: Rows follow y downwards: the high edge comes first already.
        lanes = state.T
        flip = not direction.towards_high
    return lanes[:, ::-1] if flip else lanes


def _lane_can_move(lanes: ndarray) -> bool:
    """Check if a tile has an empty cell or an equal tile right in front of it, toward the edge."""
    ahead, behind = lanes[:, :-1], lanes[:, 1:]
    can_slide = (ahead == 0) & (behind != 0)
    can_merge = (ahead != 0) & (ahead == behind)
    return bool(can_slide.any() or can_merge.any())


def legal_directions_mask(tiles: Tiles, size: int) -> dict[Direction, bool]:
    """
    Tell, for each direction, whether its shift would move something.

    Parameters
    ----------
    tiles : Tiles
        The live tile set.
    size : int
        Side length of the board.

    Returns
    -------
    dict[Direction, bool]
        True for each direction whose shift is legal.

    Notes
    -----
    A shift is legal if, in some lane, a tile has an empty cell between itself and the target edge, or two
    neighbouring tiles share a value. The grid is built once and every direction reads it through the lane
    geometry of ``Direction``.
    """
    state = to_array(tiles, size)
    return {direction: _lane_can_move(_lanes_toward_edge(state, direction)) for direction in Direction}


def legal_directions(tiles: Tiles, size: int) -> list[Direction]:
    """List the directions whose shift would change the board."""
    mask = legal_directions_mask(tiles, size)
    return [direction for direction in Direction if mask[direction]]


def can_move(tiles: Tiles, size: int, direction: Direction) -> bool:
    """Check if a shift in ``direction`` would change the board."""
    state = to_array(tiles, size)
    return _lane_can_move(_lanes_toward_edge(state, Direction.parse(direction)))
