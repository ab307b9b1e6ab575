"""Game session: runs turns of shift, conditional spawn and terminal check over one live tile set."""

import logging
import threading
from dataclasses import dataclass, field
from typing import Iterable

from numpy import ndarray

from tilemerge.core.board import Board, Position, Tile, Tiles, make_tiles
from tilemerge.core.direction import Direction
from tilemerge.core.errors import SpawnOverflow, UnrecognizedDirection
from tilemerge.core.grid import to_array
from tilemerge.core.moves import legal_directions
from tilemerge.core.shift import ChangeTag, MergeEvent, TileChange, shift_tiles
from tilemerge.core.spawner import empty_cells, make_generator, spawn_tiles
from tilemerge.core.terminal import GameStatus, evaluate
from tilemerge.envs.config import GameConfig

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurnResult:
    """
    Everything the presentation layer needs after a turn.

    Attributes
    ----------
    tiles : Tiles
        The live tile set after the turn.
    changes : dict[Position, TileChange]
        For each live tile, how it got to its position (static, moved, merged or spawned).
    merges : tuple[MergeEvent, ...]
        Merges performed by the shift, for an external score keeper.
    moved : bool
        Whether the shift changed the board.
    status : GameStatus
        State of the game after the turn.
    """

    tiles: Tiles
    changes: dict[Position, TileChange] = field(default_factory=dict)
    merges: tuple[MergeEvent, ...] = ()
    moved: bool = False
    status: GameStatus = GameStatus.IN_PROGRESS

    @property
    def score(self) -> int:
        """Sum of the values created by merges during the turn."""
        return sum(merge.value for merge in self.merges)

    @property
    def spawned(self) -> list[Tile]:
        """Tiles created by the spawner during the turn."""
        return [change.tile for change in self.changes.values() if change.tag is ChangeTag.SPAWNED]


class Game:
    """
    A game of the sliding-tile puzzle.

    This class owns the live tile set and chains the pure board functions into turns. Turns are serialized:
    a lock is held for the whole shift, spawn and terminal check, so a concurrent host never observes a
    half-played turn.
    """

    def __init__(self, config: GameConfig | None = None):
        """
        Initialize the board and place the starting tiles.

        Parameters
        ----------
        config : GameConfig, optional
            Session configuration (default is a 4x4 board played up to 2048).
        """
        self.config = config if config is not None else GameConfig()
        self.board = Board(self.config.board_size)

        self._generator = make_generator(self.config.seed)
        self._lock = threading.Lock()
        self._tiles: Tiles = {}
        self._status = GameStatus.IN_PROGRESS

        self.reset()

    @property
    def size(self) -> int:
        """Side length of the board."""
        return self.board.size

    @property
    def tiles(self) -> Tiles:
        """A copy of the live tile set."""
        return dict(self._tiles)

    @property
    def status(self) -> GameStatus:
        """State of the game."""
        return self._status

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if the game is won or lost, False otherwise.
        """
        return self._status is not GameStatus.IN_PROGRESS

    @property
    def observation(self) -> ndarray:
        """The board as a dense grid, row 0 being the top of the board."""
        return to_array(self._tiles, self.size)

    def reset(self, seed: int | None = None) -> TurnResult:
        """
        Clear the board and place the starting tiles.

        Parameters
        ----------
        seed : int, optional
            Reseed the spawn generator for a reproducible game.

        Returns
        -------
        TurnResult
            The starting tiles, all tagged as spawned.
        """
        with self._lock:
            if seed is not None:
                self._generator = make_generator(seed)

            self._tiles, spawned = self._spawn({}, self.config.spawn_count_initial)
            self._status = evaluate(self._tiles, self.size, self.config.win_value)
            _logger.info('New %dx%d game with %d tile(s)', self.size, self.size, len(spawned))

            changes = {tile.position: TileChange(tile=tile, tag=ChangeTag.SPAWNED) for tile in spawned}
            return TurnResult(tiles=self.tiles, changes=changes, status=self._status)

    def load(self, tiles: Iterable[Tile]) -> TurnResult:
        """
        Replace the live tile set with a given arrangement.

        Parameters
        ----------
        tiles : Iterable[Tile]
            Tiles to place on the board.

        Returns
        -------
        TurnResult
            The loaded tiles, all tagged as static.

        Raises
        ------
        InvalidTile
            If a tile has a non-integer position, lies outside the board, or has a value outside the
            doubling sequence of the initial tile value.
        DuplicatePosition
            If two tiles share one cell.
        """
        with self._lock:
            loaded = make_tiles(tiles, self.board, base=self.config.initial_tile_value)
            self._tiles = dict(sorted(loaded.items()))
            self._status = evaluate(self._tiles, self.size, self.config.win_value)
            return self._idle_turn()

    def step(self, direction: Direction | str | int) -> TurnResult:
        """
        Play one turn.

        Parameters
        ----------
        direction : Direction | str | int
            Direction of the shift, as a member, a name or an integer code.

        Returns
        -------
        TurnResult
            The tile set after the turn, the per-tile changes, the merges and the game status.

        Notes
        -----
        - A new tile is spawned only if the shift moved something.
        - Unrecognized input and input received once the game is finished are ignored: the turn is a no-op.
        """
        with self._lock:
            try:
                direction = Direction.parse(direction)
            except UnrecognizedDirection as error:
                _logger.warning('Ignoring input: %s', error)
                return self._idle_turn()

            if self.is_finished:
                _logger.warning('Game is %s, ignoring shift %s', self._status.value, direction.name)
                return self._idle_turn()

            shifted = shift_tiles(self._tiles, self.size, direction)
            tiles, changes = shifted.tiles, dict(shifted.changes)

            # ##: Spawn only after a shift that changed the board.
            if shifted.moved:
                tiles, spawned = self._spawn(tiles, self.config.spawn_count_per_turn)
                for tile in spawned:
                    changes[tile.position] = TileChange(tile=tile, tag=ChangeTag.SPAWNED)
            else:
                _logger.debug('Shift %s moved nothing, no tile spawned', direction.name)

            self._tiles = tiles
            self._status = evaluate(tiles, self.size, self.config.win_value)
            _logger.debug('Shift %s: %d merge(s), %d tile(s)', direction.name, len(shifted.merges), len(tiles))
            if self.is_finished:
                _logger.info('Game %s with max tile %d', self._status.value, max(t.value for t in tiles.values()))

            return TurnResult(
                tiles=self.tiles,
                changes=dict(sorted(changes.items())),
                merges=shifted.merges,
                moved=shifted.moved,
                status=self._status,
            )

    def legal_directions(self) -> list[Direction]:
        """List the directions whose shift would change the board."""
        return legal_directions(self._tiles, self.size)

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        for row in self.observation.tolist():
            print(' \t'.join(map(str, row)))

    def _spawn(self, tiles: Tiles, count: int) -> tuple[Tiles, list[Tile]]:
        """Spawn ``count`` tiles, or fill every empty cell when fewer remain."""
        try:
            return spawn_tiles(tiles, self.size, count, self.config.initial_tile_value, self._generator)
        except SpawnOverflow as error:
            _logger.debug('%s, filling the remaining cells', error)
            available = len(empty_cells(tiles, self.size))
            return spawn_tiles(tiles, self.size, available, self.config.initial_tile_value, self._generator)

    def _idle_turn(self) -> TurnResult:
        """A turn that changes nothing."""
        changes = {
            position: TileChange(tile=tile, tag=ChangeTag.STATIC, origins=(position,))
            for position, tile in self._tiles.items()
        }
        return TurnResult(tiles=self.tiles, changes=changes, status=self._status)
