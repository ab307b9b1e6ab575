"""
Exceptions raised by the board logic engine.
"""


class TileMergeError(Exception):
    """Base class for every error raised by the board logic."""


class InvalidBoardSize(TileMergeError, ValueError):
    """The board side length is not an integer greater than or equal to 2."""

    def __init__(self, size: object):
        super().__init__(f'Board size must be an integer >= 2, got {size!r}')
        self.size = size


class InvalidTile(TileMergeError, ValueError):
    """A tile lies outside the board or carries a non-positive value."""


class DuplicatePosition(TileMergeError):
    """
    Two live tiles share one cell.

    This is an invariant violation: the shift engine and the spawner never produce it, so it signals a
    programming error rather than a game situation.
    """

    def __init__(self, position: tuple[int, int]):
        super().__init__(f'More than one tile at position {tuple(position)}')
        self.position = position


class SpawnOverflow(TileMergeError):
    """More tiles were requested than there are empty cells."""

    def __init__(self, requested: int, available: int):
        super().__init__(f'Cannot spawn {requested} tile(s): only {available} empty cell(s) left')
        self.requested = requested
        self.available = available


class UnrecognizedDirection(TileMergeError, ValueError):
    """Raw input that does not map to a shift direction."""

    def __init__(self, raw: object):
        super().__init__(f'Unrecognized direction: {raw!r}')
        self.raw = raw
