"""Board logic engine of a 2048-style sliding-tile puzzle."""

from .core import Board, Direction, GameStatus, Position, Tile, shift_tiles
from .envs import Game, GameConfig, TurnResult

__all__ = ['Board', 'Direction', 'Game', 'GameConfig', 'GameStatus', 'Position', 'Tile', 'TurnResult', 'shift_tiles']
