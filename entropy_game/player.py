"""The player character: its components, spawning and per-frame movement."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from .map import GameMap, is_not_solid_position
from .sprite import SpriteSize, SpriteState, Transform


class JumpKind(Enum):
    """Phase of a jump."""

    UP = "up"
    DOWN = "down"
    STAY = "stay"


@dataclass(frozen=True)
class Jump:
    """A jump phase and the height the jump started from."""

    kind: JumpKind = JumpKind.STAY
    start_y: float = 0.0


@dataclass(frozen=True)
class PlayerStats:
    """Movement tuning for the player."""

    speed: float = 400.0
    jump_speed: float = 100.0
    jump_height: float = 1400.0


@dataclass
class Player:
    """Everything the game tracks about the player."""

    transform: Transform = field(default_factory=Transform)
    state: SpriteState = field(default_factory=SpriteState)
    size: SpriteSize = field(default_factory=lambda: SpriteSize(width=800.0, height=1600.0))
    jump: Jump = field(default_factory=Jump)
    flip_x: bool = False


@dataclass(frozen=True)
class Controls:
    """Which player inputs are held during a frame."""

    jump: bool = False
    sprint: bool = False
    left: bool = False
    right: bool = False


def spawn_player() -> Player:
    """Create the player standing at the origin, facing right."""
    return Player(
        transform=Transform(0.0, 0.0, 0.0),
        state=SpriteState(is_falling=False, head_bumped=False),
        size=SpriteSize(width=800.0, height=1600.0),
        jump=Jump(JumpKind.STAY),
        flip_x=False,
    )


def _ln(value: float) -> float:
    if value > 0.0:
        return math.log(value)
    if value == 0.0:
        return -math.inf
    return math.nan


def _jump_step(start_y: float, y: float, stats: PlayerStats, jump_speed: float) -> float:
    return (_ln(start_y + stats.jump_height + 0.02 - y) + 4.0) * jump_speed


def move_player(
    player: Player,
    controls: Controls,
    stats: PlayerStats,
    game_map: GameMap,
    dt: float,
) -> None:
    """Apply one frame of walking, sprinting and jumping to the player."""
    transform = player.transform
    state = player.state
    speed = stats.speed * dt
    jump_speed = stats.jump_speed * dt

    if controls.jump and not state.is_falling:
        player.jump = Jump(JumpKind.UP, transform.y)
    if controls.sprint:
        speed *= 3.0
    if controls.left:
        if is_not_solid_position(game_map, transform.x - speed, transform.y + 1.0) is not None:
            transform.x -= speed
        player.flip_x = True
    if controls.right:
        edge = transform.x + player.size.width + speed
        if is_not_solid_position(game_map, edge, transform.y + 1.0) is not None:
            transform.x += speed
        player.flip_x = False

    jump = player.jump
    if jump.kind is JumpKind.UP:
        if state.head_bumped:
            player.jump = Jump(JumpKind.DOWN, jump.start_y)
        else:
            transform.y += _jump_step(jump.start_y, transform.y, stats, jump_speed)
            peak = jump.start_y + stats.jump_height
            if peak <= transform.y:
                transform.y = peak
                player.jump = Jump(JumpKind.DOWN, jump.start_y)
    elif jump.kind is JumpKind.DOWN:
        if not state.is_falling:
            player.jump = Jump(JumpKind.STAY)
        else:
            transform.y -= _jump_step(jump.start_y, transform.y, stats, jump_speed)
            if transform.y < jump.start_y:
                transform.y = jump.start_y
                player.jump = Jump(JumpKind.STAY)
    elif state.is_falling:
        tile = is_not_solid_position(game_map, transform.x, transform.y - 1.0)
        if tile is not None:
            player.jump = Jump(JumpKind.DOWN, tile.bottom)