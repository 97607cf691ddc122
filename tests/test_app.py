import pytest

from entropy_game.app import Game, _parse_args, _to_screen
from entropy_game.camera import Camera
from entropy_game.map import build_map
from entropy_game.player import Controls, JumpKind, spawn_player

GROUND = build_map(
    [
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [1, 1, 1, 1],
        [1, 1, 1, 1],
    ]
)


def test_default_game_has_spawned_player_and_map():
    game = Game()
    assert game.player == spawn_player()
    assert len(game.game_map) > 0
    assert game.camera == Camera()


def test_player_stands_on_ground():
    game = Game(game_map=GROUND)
    game.update(Controls(), 0.016)
    assert game.player.transform.y == 0.0
    assert game.player.state.is_falling is False
    assert game.player.jump.kind is JumpKind.STAY


def test_walking_right_moves_player_on_ground():
    game = Game(game_map=GROUND)
    game.update(Controls(right=True), 0.25)
    assert game.player.transform.x > 0.0
    assert game.player.transform.y == 0.0


def test_jump_on_ground_lifts_player():
    game = Game(game_map=GROUND)
    game.update(Controls(jump=True), 0.016)
    assert game.player.jump.kind is JumpKind.UP
    assert game.player.transform.y > 0.0


def test_player_over_empty_space_is_falling():
    game = Game(game_map=build_map([[0, 0, 0, 0]] * 4))
    game.update(Controls(), 0.016)
    assert game.player.state.is_falling is True


def test_camera_follows_player_when_window_known():
    game = Game(game_map=GROUND)
    game.update(Controls(right=True), 0.25, window_height=1000.0)
    expected = Camera(scale=game.camera.scale)
    expected.follow(
        game.player.transform.x,
        game.player.transform.y,
        game.player.size.width,
        1000.0,
    )
    assert (game.camera.x, game.camera.y) == (expected.x, expected.y)


def test_camera_stays_without_window():
    game = Game(game_map=GROUND, camera=Camera(x=5.0, y=6.0))
    game.update(Controls(right=True), 0.25)
    assert (game.camera.x, game.camera.y) == (5.0, 6.0)


def test_scroll_events_zoom_camera():
    game = Game(game_map=GROUND)
    game.update(Controls(), 0.016, scroll=[-100.0, -100.0])
    assert game.camera.scale == 10.0


def test_to_screen_centres_camera_point():
    camera = Camera(x=0.0, y=0.0, scale=1.0)
    x, y, w, h = _to_screen(camera, 0.0, -100.0, 100.0, 100.0, (800, 600))
    assert (x, y) == (400, 300)
    assert (w, h) == (100, 100)


def test_to_screen_size_shrinks_with_scale():
    near = _to_screen(Camera(scale=1.0), 0.0, 0.0, 1000.0, 1000.0, (800, 600))
    far = _to_screen(Camera(scale=2.0), 0.0, 0.0, 1000.0, 1000.0, (800, 600))
    assert far[2] * 2 == near[2]
    assert far[3] * 2 == near[3]


def test_parse_args_options():
    args = _parse_args(["--windowed", "--fps", "30"])
    assert args.windowed is True
    assert args.fps == 30
    assert args.assets is None


def test_parse_args_rejects_bad_fps():
    with pytest.raises(SystemExit):
        _parse_args(["--fps", "fast"])