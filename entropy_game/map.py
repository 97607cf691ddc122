"""Tile map: layout, tile geometry and world-to-grid lookups."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

TILE_SIZE = 1000

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

DEFAULT_LAYOUT: tuple[tuple[int, ...], ...] = (
    (1, 0, 1, 0, 0, 0, 1, 0, 1, 1),
    (1, 0, 1, 0, 0, 0, 1, 0, 1, 1),
    (1, 0, 1, 0, 0, 0, 1, 0, 1, 1),
    (1, 0, 1, 0, 0, 0, 1, 0, 1, 1),
    (1, 0, 1, 0, 0, 0, 1, 0, 1, 1),
    (1, 0, 1, 0, 0, 0, 1, 0, 1, 1),
    (1, 0, 1, 0, 0, 0, 1, 0, 1, 1),
    (1, 0, 1, 0, 0, 0, 0, 1, 1, 1),
    (1, 0, 1, 0, 0, 0, 0, 1, 1, 1),
    (1, 0, 1, 0, 0, 0, 1, 0, 1, 1),
)


class TileKind(Enum):
    """What a tile is made of."""

    PLAINS = "plains"
    SKY = "sky"


@dataclass(frozen=True)
class Tile:
    """A square of the map with its world-space edges."""

    kind: TileKind
    top: float
    bottom: float
    left: float
    right: float


class Position(NamedTuple):
    """Grid coordinates of a tile."""

    x: int
    y: int


class GameMap:
    """All tiles of the world, keyed by grid position."""

    def __init__(self, tiles: dict[Position, Tile] | None = None) -> None:
        self._tiles: dict[Position, Tile] = dict(tiles or {})

    def insert(self, position: Position, tile: Tile) -> None:
        """Place a tile at a grid position, replacing any previous one."""
        self._tiles[Position(*position)] = tile

    def get(self, position: Position) -> Tile | None:
        """Return the tile at a grid position, or None if there is none."""
        return self._tiles.get(Position(*position))

    def items(self):
        """Return a view of (position, tile) pairs."""
        return self._tiles.items()

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, position: object) -> bool:
        return position in self._tiles

    def __iter__(self) -> Iterator[Position]:
        return iter(self._tiles)


def build_map(layout: Sequence[Sequence[int]] = DEFAULT_LAYOUT) -> GameMap:
    """Build a map from rows of cells; the first row is the top of the world.

    A cell of 0 is sky, anything else is plains. The grid is centred so that
    the middle row and column sit at grid coordinate 0.
    """
    rows = [list(row) for row in layout][::-1]
    game_map = GameMap()
    if not rows:
        return game_map

    columns = len(rows[0])
    if any(len(row) != columns for row in rows):
        raise ValueError("all rows of a map layout must have the same length")

    row_offset = len(rows) // 2
    column_offset = columns // 2
    for i, row in enumerate(rows):
        grid_y = i - row_offset
        for j, cell in enumerate(row):
            grid_x = j - column_offset
            bottom = float(TILE_SIZE * grid_y)
            left = float(TILE_SIZE * grid_x)
            tile = Tile(
                kind=TileKind.SKY if cell == 0 else TileKind.PLAINS,
                top=bottom + TILE_SIZE,
                bottom=bottom,
                left=left,
                right=left + TILE_SIZE,
            )
            game_map.insert(Position(grid_x, grid_y), tile)
    return game_map


def _saturating_int(value: float) -> int:
    if math.isnan(value):
        return 0
    if value == math.inf:
        return _I64_MAX
    if value == -math.inf:
        return _I64_MIN
    return max(_I64_MIN, min(_I64_MAX, int(value)))


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def _to_cell(value: float) -> int:
    quotient = _truncating_div(_saturating_int(value), TILE_SIZE)
    on_edge = math.isfinite(value) and math.fmod(value, TILE_SIZE) == 0.0
    if value >= 0.0 or on_edge:
        return quotient
    return quotient - 1


def xy_to_position(x: float, y: float) -> Position:
    """Return the grid position of the tile containing world point (x, y)."""
    return Position(_to_cell(x), _to_cell(y))


def is_solid(kind: TileKind) -> bool:
    """Whether a tile of this kind blocks movement."""
    return kind is TileKind.PLAINS


def is_solid_position(game_map: GameMap, x: float, y: float) -> Tile | None:
    """Return the tile at (x, y) if it is solid, else None."""
    tile = game_map.get(xy_to_position(x, y))
    if tile is not None and is_solid(tile.kind):
        return tile
    return None


def is_not_solid_position(game_map: GameMap, x: float, y: float) -> Tile | None:
    """Return the tile at (x, y) if it exists and is not solid, else None."""
    tile = game_map.get(xy_to_position(x, y))
    if tile is not None and not is_solid(tile.kind):
        return tile
    return None