"""
Shift directions and their geometry on the board.
"""

from enum import IntEnum
from numbers import Integral

from tilemerge.core.errors import UnrecognizedDirection


class Direction(IntEnum):
    """
    Direction of a shift.

    The integer codes follow the usual action encoding of 2048 environments (0: left, 1: up, 2: right,
    3: down).
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def parse(cls, raw: object) -> 'Direction':
        """
        Decode a direction from a member, a name or an integer code.

        Parameters
        ----------
        raw : object
            A ``Direction``, a case-insensitive name such as ``"left"``, or an integer code.

        Returns
        -------
        Direction
            The decoded direction.

        Raises
        ------
        UnrecognizedDirection
            If ``raw`` does not designate any direction.
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            try:
                return cls[raw.strip().upper()]
            except KeyError:
                raise UnrecognizedDirection(raw) from None
        if isinstance(raw, Integral) and not isinstance(raw, bool):
            try:
                return cls(int(raw))
            except ValueError:
                raise UnrecognizedDirection(raw) from None
        raise UnrecognizedDirection(raw)

    @property
    def axis(self) -> int:
        """Coordinate the tiles travel along (0 for ``x``, 1 for ``y``)."""
        return 0 if self in (Direction.LEFT, Direction.RIGHT) else 1

    @property
    def towards_high(self) -> bool:
        """Whether the target edge is the one with the highest coordinate."""
        return self in (Direction.RIGHT, Direction.UP)
