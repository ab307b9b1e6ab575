# -*- coding: utf-8 -*-
"""
Board logic engine of the sliding-tile puzzle.

It includes the board and tile model, the shift engine that slides and merges tiles, the spawner that places
new tiles on empty cells, and the checks for a won or lost game. Every function here is pure: it takes a tile
set and returns a new one.
"""

from .board import TILE_SIZE, TILE_SPACER, Board, Position, Tile, Tiles, is_tile_value, make_tiles
from .direction import Direction
from .errors import (
    DuplicatePosition,
    InvalidBoardSize,
    InvalidTile,
    SpawnOverflow,
    TileMergeError,
    UnrecognizedDirection,
)
from .grid import from_array, to_array
from .moves import can_move, legal_directions
from .shift import ChangeTag, MergeEvent, ShiftResult, TileChange, shift_tiles
from .spawner import INITIAL_TILE_VALUE, empty_cells, make_generator, spawn_tiles
from .terminal import WIN_VALUE, GameStatus, evaluate, has_won, is_lost

__all__ = [
    'TILE_SIZE',
    'TILE_SPACER',
    'Board',
    'Position',
    'Tile',
    'Tiles',
    'is_tile_value',
    'make_tiles',
    'Direction',
    'TileMergeError',
    'InvalidBoardSize',
    'InvalidTile',
    'DuplicatePosition',
    'SpawnOverflow',
    'UnrecognizedDirection',
    'to_array',
    'from_array',
    'can_move',
    'legal_directions',
    'ChangeTag',
    'MergeEvent',
    'ShiftResult',
    'TileChange',
    'shift_tiles',
    'INITIAL_TILE_VALUE',
    'empty_cells',
    'make_generator',
    'spawn_tiles',
    'WIN_VALUE',
    'GameStatus',
    'evaluate',
    'has_won',
    'is_lost',
]
