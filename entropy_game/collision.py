"""Pushing sprites out of solid tiles on each side."""

from __future__ import annotations

from collections.abc import Iterable

from .map import GameMap, Tile, is_solid_position
from .sprite import SpriteSize, SpriteState, Transform


def _first_solid(game_map: GameMap, points: Iterable[tuple[float, float]]) -> Tile | None:
    for x, y in points:
        tile = is_solid_position(game_map, x, y)
        if tile is not None:
            return tile
    return None


def collision_top(
    game_map: GameMap, transform: Transform, state: SpriteState, size: SpriteSize
) -> None:
    """Stop a sprite whose head is inside a solid tile and mark it as bumped."""
    head = transform.y + size.height
    tile = _first_solid(
        game_map, ((transform.x + dx, head) for dx in range(1, int(size.width)))
    )
    if tile is not None:
        transform.y = tile.bottom - size.height
        state.head_bumped = True
    else:
        state.head_bumped = False


def collision_bottom(
    game_map: GameMap, transform: Transform, state: SpriteState, size: SpriteSize
) -> None:
    """Stand a sprite on the solid tile below it, or mark it as falling."""
    below = transform.y - 1.0
    tile = _first_solid(
        game_map, ((transform.x + dx, below) for dx in range(1, int(size.width)))
    )
    if tile is not None:
        transform.y = tile.top
        state.is_falling = False
    else:
        state.is_falling = True


def collision_left(game_map: GameMap, transform: Transform, size: SpriteSize) -> None:
    """Push a sprite out of a solid tile on its left side."""
    tile = _first_solid(
        game_map,
        ((transform.x, transform.y + dy) for dy in range(1, int(size.height))),
    )
    if tile is not None:
        transform.x = tile.right


def collision_right(game_map: GameMap, transform: Transform, size: SpriteSize) -> None:
    """Push a sprite out of a solid tile on its right side."""
    edge = transform.x + size.width
    tile = _first_solid(
        game_map, ((edge, transform.y + dy) for dy in range(1, int(size.height)))
    )
    if tile is not None:
        transform.x = tile.left - size.width


def resolve_collisions(
    game_map: GameMap, transform: Transform, state: SpriteState, size: SpriteSize
) -> None:
    """Resolve top, bottom, left and right collisions in that order."""
    collision_top(game_map, transform, state, size)
    collision_bottom(game_map, transform, state, size)
    collision_left(game_map, transform, size)
    collision_right(game_map, transform, size)