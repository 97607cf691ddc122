from entropy_game.collision import (
    collision_bottom,
    collision_left,
    collision_right,
    collision_top,
    resolve_collisions,
)
from entropy_game.map import TILE_SIZE, build_map, is_solid_position
from entropy_game.sprite import SpriteSize, SpriteState, Transform


def _ground_map():
    # Sky row above a plains row; the plains top sits at y == 0.
    return build_map([[0, 0], [1, 1]])


def _ceiling_map():
    # Plains row above a sky row; the plains bottom sits at y == 0.
    return build_map([[1, 1], [0, 0]])


def test_bottom_snaps_sinking_sprite_onto_ground():
    game_map = _ground_map()
    ground = is_solid_position(game_map, -TILE_SIZE / 2, -1.0)
    transform = Transform(x=-TILE_SIZE / 2, y=-200.0)
    state = SpriteState(is_falling=True)
    collision_bottom(game_map, transform, state, SpriteSize(width=800.0, height=1600.0))
    assert transform.y == ground.top
    assert state.is_falling is False


def test_bottom_marks_airborne_sprite_falling():
    game_map = _ground_map()
    transform = Transform(x=-TILE_SIZE / 2, y=10.0)
    state = SpriteState()
    collision_bottom(game_map, transform, state, SpriteSize(width=800.0, height=1600.0))
    assert state.is_falling is True
    assert transform.y == 10.0


def test_bottom_with_unit_width_checks_nothing():
    game_map = _ground_map()
    transform = Transform(x=-TILE_SIZE / 2, y=-200.0)
    state = SpriteState()
    collision_bottom(game_map, transform, state, SpriteSize(width=1.0, height=1600.0))
    assert state.is_falling is True
    assert transform.y == -200.0


def test_top_pushes_sprite_below_ceiling():
    game_map = _ceiling_map()
    ceiling = is_solid_position(game_map, -TILE_SIZE / 2, 1.0)
    size = SpriteSize(width=800.0, height=1600.0)
    transform = Transform(x=-TILE_SIZE / 2, y=-TILE_SIZE)
    state = SpriteState()
    collision_top(game_map, transform, state, size)
    assert transform.y + size.height == ceiling.bottom
    assert state.head_bumped is True


def test_top_clears_bump_when_free():
    game_map = _ceiling_map()
    size = SpriteSize(width=100.0, height=100.0)
    transform = Transform(x=-TILE_SIZE / 2, y=-TILE_SIZE)
    state = SpriteState(head_bumped=True)
    collision_top(game_map, transform, state, size)
    assert state.head_bumped is False
    assert transform.y == -TILE_SIZE


def test_left_pushes_sprite_out_of_wall():
    game_map = build_map([[1, 0]])
    wall = is_solid_position(game_map, -1.0, 1.0)
    transform = Transform(x=-10.0, y=0.0)
    collision_left(game_map, transform, SpriteSize(width=100.0, height=100.0))
    assert transform.x == wall.right


def test_right_pushes_sprite_out_of_wall():
    game_map = build_map([[0, 1]])
    wall = is_solid_position(game_map, 1.0, 1.0)
    size = SpriteSize(width=100.0, height=100.0)
    transform = Transform(x=-90.0, y=0.0)
    collision_right(game_map, transform, size)
    assert transform.x + size.width == wall.left


def test_sides_leave_free_sprite_alone():
    game_map = build_map([[0, 1]])
    size = SpriteSize(width=100.0, height=100.0)
    transform = Transform(x=-TILE_SIZE / 2, y=0.0)
    collision_left(game_map, transform, size)
    collision_right(game_map, transform, size)
    assert transform.x == -TILE_SIZE / 2


def test_resolve_collisions_lands_sprite_on_ground():
    game_map = _ground_map()
    ground = is_solid_position(game_map, -TILE_SIZE / 2, -1.0)
    transform = Transform(x=-TILE_SIZE / 2, y=-50.0)
    state = SpriteState(is_falling=True, head_bumped=True)
    resolve_collisions(game_map, transform, state, SpriteSize(width=400.0, height=800.0))
    assert transform.y == ground.top
    assert transform.x == -TILE_SIZE / 2
    assert state.is_falling is False
    assert state.head_bumped is False