# -*- coding: utf-8 -*-
"""
Game session for the sliding-tile puzzle.

This module provides the `Game` class, which holds the live tile set and plays turns, and its `GameConfig`.
"""

from .config import GameConfig
from .game import Game, TurnResult

__all__ = ['Game', 'GameConfig', 'TurnResult']
