"""
Terminal-state checks: has a tile reached the target value, or is there no legal shift left?
"""

from enum import Enum

from numpy import all as np_all
from numpy import any as np_any

from tilemerge.core.board import Tiles
from tilemerge.core.grid import to_array

# ##>: Tile value that wins the game.
WIN_VALUE = 2048


class GameStatus(str, Enum):
    """State of the game after a turn."""

    IN_PROGRESS = 'in_progress'
    WON = 'won'
    LOST = 'lost'


def has_won(tiles: Tiles, win_value: int = WIN_VALUE) -> bool:
    """Check whether any tile reaches or exceeds ``win_value``."""
    return any(tile.value >= win_value for tile in tiles.values())


def is_lost(tiles: Tiles, size: int) -> bool:
    """
    Check if no shift can change the board anymore.

    Parameters
    ----------
    tiles : Tiles
        The live tile set.
    size : int
        Side length of the board.

    Returns
    -------
    bool
        True if the board is full and no two horizontally or vertically adjacent tiles share a value.
    """
    if len(tiles) < size * size:
        return False
    state = to_array(tiles, size)
    return bool(
        np_all(state != 0) and not np_any(state[:-1] == state[1:]) and not np_any(state[:, :-1] == state[:, 1:])
    )


def evaluate(tiles: Tiles, size: int, win_value: int = WIN_VALUE) -> GameStatus:
    """
    Compute the status of the game.

    Notes
    -----
    A board that is both won and blocked counts as won.
    """
    if has_won(tiles, win_value):
        return GameStatus.WON
    if is_lost(tiles, size):
        return GameStatus.LOST
    return GameStatus.IN_PROGRESS
