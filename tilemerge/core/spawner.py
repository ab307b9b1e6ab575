"""
Random placement of new tiles on empty cells.
"""

from numpy.random import PCG64DXSM, Generator, default_rng

from tilemerge.core.board import Position, Tile, Tiles
from tilemerge.core.errors import SpawnOverflow

# ##>: Value of every freshly spawned tile.
INITIAL_TILE_VALUE = 2

# ##>: Module-level generator, used when the caller does not inject one.
_GENERATOR = default_rng(PCG64DXSM())


def make_generator(seed: int | None = None) -> Generator:
    """Create a random generator, reproducible when ``seed`` is given."""
    return default_rng(PCG64DXSM(seed))


def empty_cells(tiles: Tiles, size: int) -> list[Position]:
    """
    List the cells holding no tile.

    Parameters
    ----------
    tiles : Tiles
        The live tile set.
    size : int
        Side length of the board.

    Returns
    -------
    list[Position]
        Empty cells, column by column.
    """
    return [Position(x, y) for x in range(size) for y in range(size) if (x, y) not in tiles]


def spawn_tiles(
    tiles: Tiles,
    size: int,
    count: int,
    value: int = INITIAL_TILE_VALUE,
    generator: Generator | None = None,
) -> tuple[Tiles, list[Tile]]:
    """
    Create new tiles on empty cells picked uniformly at random.

    Parameters
    ----------
    tiles : Tiles
        The live tile set. Not modified.
    size : int
        Side length of the board.
    count : int
        Number of tiles to create.
    value : int, optional
        Value of the new tiles (default is 2).
    generator : Generator, optional
        Random generator to sample cells with. The module-level generator is used if omitted.

    Returns
    -------
    tuple[Tiles, list[Tile]]
        The new tile set and the tiles that were created.

    Raises
    ------
    SpawnOverflow
        If ``count`` exceeds the number of empty cells while at least one cell is empty.

    Notes
    -----
    - Cells are drawn without replacement, so a single call never stacks two tiles on one cell.
    - On a full board the call is a no-op.
    """
    rng = generator if generator is not None else _GENERATOR
    if count <= 0:
        return dict(tiles), []

    # ##: Nothing to do on a full board.
    available = empty_cells(tiles, size)
    if not available:
        return dict(tiles), []
    if count > len(available):
        raise SpawnOverflow(requested=count, available=len(available))

    # ##: Randomly choose cell positions on the board.
    chosen = rng.choice(len(available), size=count, replace=False)
    spawned = [Tile(position=available[int(index)], value=value) for index in chosen]

    result = dict(tiles)
    for tile in spawned:
        result[tile.position] = tile
    return dict(sorted(result.items())), spawned
