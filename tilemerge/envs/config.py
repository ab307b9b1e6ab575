"""
Configuration of a game session.
"""

from dataclasses import dataclass

from tilemerge.core.board import Board
from tilemerge.core.spawner import INITIAL_TILE_VALUE
from tilemerge.core.terminal import WIN_VALUE


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration of a game session.

    Raises
    ------
    InvalidBoardSize
        If ``board_size`` is lower than 2.
    ValueError
        If any other parameter is out of range.
    """

    board_size: int = 4  # Side length of the square board
    win_value: int = WIN_VALUE  # Tile value that wins the game
    spawn_count_initial: int = 2  # Tiles placed by reset
    spawn_count_per_turn: int = 1  # Tiles placed after each moving shift
    initial_tile_value: int = INITIAL_TILE_VALUE  # Value of every spawned tile
    seed: int | None = None  # Seed of the spawn generator, random if None

    def __post_init__(self):
        # ##: Validates the board size, raises InvalidBoardSize.
        Board(self.board_size)

        if self.initial_tile_value <= 0:
            raise ValueError(f'initial_tile_value must be positive, got {self.initial_tile_value}')
        if self.win_value <= self.initial_tile_value:
            raise ValueError(f'win_value must exceed initial_tile_value, got {self.win_value}')
        if self.spawn_count_initial < 0 or self.spawn_count_per_turn < 0:
            raise ValueError('Spawn counts must be non-negative')
