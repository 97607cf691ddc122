# entropy-game

A small side-scrolling platformer. A player walks and jumps across a grid of
tiles. Solid ground (plains) stops it and open sky lets it fall through. A
camera follows the player, and the mouse wheel zooms the view.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Play

```
entropy-game
```

Options:

- `--windowed`: open a 1280x720 window instead of going fullscreen
- `--fps N`: frame rate limit (default 60)
- `--assets DIR`: a directory holding `map/sky.png`, `map/plains.png` and
  `miku.png`. An image that is missing or cannot be loaded is drawn as a plain
  coloured rectangle instead.

Controls:

- `A` / `D`: walk left or right
- `Left Shift`: run (three times the walking speed)
- `Space`: start a jump while not falling
- Mouse wheel: zoom in and out
- `Escape`, or closing the window: quit

## Using the pieces

The game logic does not need a window, so each part can be used or tested on
its own. Only `entropy_game.app.main` imports pygame.

- `entropy_game.map`: `build_map(layout)` turns rows of cells (`0` for sky,
  anything else for plains, first row at the top) into a `GameMap` of
  1000-unit `Tile`s centred on the origin. With no argument it builds the
  built-in 10x10 level. It raises `ValueError` if the rows differ in length.
  `xy_to_position`, `is_solid`, `is_solid_position` and
  `is_not_solid_position` look up the tile under a world point.
- `entropy_game.sprite`: `Transform`, `SpriteSize` and `SpriteState`, plus
  `fit_size`, which scales an image to fit a box and keeps its aspect ratio.
  `SpriteSize.resize` does this once and then keeps its first result.
- `entropy_game.collision`: `collision_top`, `collision_bottom`,
  `collision_left` and `collision_right` push a sprite out of solid tiles.
  `resolve_collisions` runs all four in that order.
- `entropy_game.player`: `spawn_player()`, `Player`, `PlayerStats`,
  `Controls`, `Jump` / `JumpKind`, and
  `move_player(player, controls, stats, game_map, dt)`, which moves the player
  one frame and advances its jump.
- `entropy_game.camera`: `Camera.zoom(scroll_y)` and
  `Camera.follow(player_x, player_y, player_width, window_height)`.
- `entropy_game.app`: `Game.update(controls, dt, scroll, window_height)`
  moves the player, resolves collisions, applies each wheel movement in
  `scroll` to the camera, and, when `window_height` is given, makes the camera
  follow the player. `main()` opens the game window.

```python
from entropy_game.app import Game
from entropy_game.player import Controls

game = Game()
game.update(Controls(right=True), dt=1 / 60, scroll=[1.0], window_height=720)
print(game.player.transform.x, game.camera.scale)
```

## What it does not do

The package ships no images; without `--assets` every tile and the player are
drawn as coloured rectangles. There is a single built-in level, no sound, no
menus, and no saving of progress.