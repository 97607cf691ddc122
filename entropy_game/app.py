"""The game loop: world state, per-frame update and the pygame front end."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from pathlib import Path

from .camera import Camera
from .collision import resolve_collisions
from .map import TILE_SIZE, GameMap, TileKind, build_map
from .player import Controls, Player, PlayerStats, move_player, spawn_player
from .sprite import SpriteSize, fit_size

_TITLE = "Entropy"
_FALLBACK_COLOURS = {
    TileKind.SKY: (120, 180, 235),
    TileKind.PLAINS: (90, 160, 70),
}
_PLAYER_COLOUR = (60, 200, 200)
_ASSET_FILES = {
    TileKind.SKY: "map/sky.png",
    TileKind.PLAINS: "map/plains.png",
    "player": "miku.png",
}


class Game:
    """The world: map, player and camera, advanced one frame at a time."""

    def __init__(
        self,
        game_map: GameMap | None = None,
        player: Player | None = None,
        stats: PlayerStats | None = None,
        camera: Camera | None = None,
    ) -> None:
        self.game_map = game_map if game_map is not None else build_map()
        self.player = player if player is not None else spawn_player()
        self.stats = stats if stats is not None else PlayerStats()
        self.camera = camera if camera is not None else Camera()

    def update(
        self,
        controls: Controls,
        dt: float,
        scroll: Iterable[float] = (),
        window_height: float | None = None,
    ) -> None:
        """Advance the world by dt seconds with the given input."""
        player = self.player
        move_player(player, controls, self.stats, self.game_map, dt)
        resolve_collisions(self.game_map, player.transform, player.state, player.size)
        for amount in scroll:
            self.camera.zoom(amount)
        if window_height is not None:
            self.camera.follow(
                player.transform.x,
                player.transform.y,
                player.size.width,
                window_height,
            )


def _to_screen(
    camera: Camera,
    left: float,
    bottom: float,
    width: float,
    height: float,
    screen_size: tuple[int, int],
) -> tuple[int, int, int, int]:
    screen_w, screen_h = screen_size
    sx = (left - camera.x) / camera.scale + screen_w / 2
    sy = screen_h / 2 - (bottom + height - camera.y) / camera.scale
    return (
        round(sx),
        round(sy),
        max(1, round(width / camera.scale)),
        max(1, round(height / camera.scale)),
    )


def _load_images(pygame, assets: Path | None) -> dict:
    images = {}
    if assets is None:
        return images
    for key, relative in _ASSET_FILES.items():
        try:
            images[key] = pygame.image.load(str(assets / relative)).convert_alpha()
        except (pygame.error, FileNotFoundError):
            continue
    return images


def _draw(pygame, screen, game: Game, images: dict) -> None:
    screen.fill((0, 0, 0))
    screen_rect = screen.get_rect()
    size = screen.get_size()
    camera = game.camera

    for tile in game.game_map._tiles.values():
        image = images.get(tile.kind)
        if image is not None:
            width, height = fit_size(*image.get_size(), TILE_SIZE, TILE_SIZE)
        else:
            width = height = float(TILE_SIZE)
        rect = pygame.Rect(_to_screen(camera, tile.left, tile.bottom, width, height, size))
        if not rect.colliderect(screen_rect):
            continue
        if image is not None:
            screen.blit(pygame.transform.scale(image, rect.size), rect)
        else:
            pygame.draw.rect(screen, _FALLBACK_COLOURS[tile.kind], rect)

    player = game.player
    width, height = player.size.custom_size or (player.size.width, player.size.height)
    rect = pygame.Rect(
        _to_screen(camera, player.transform.x, player.transform.y, width, height, size)
    )
    image = images.get("player")
    if image is not None:
        sprite = pygame.transform.scale(image, rect.size)
        screen.blit(pygame.transform.flip(sprite, player.flip_x, False), rect)
    else:
        pygame.draw.rect(screen, _PLAYER_COLOUR, rect)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="entropy", description="A side-scrolling platformer.")
    parser.add_argument("--assets", type=Path, default=None, help="directory holding the images")
    parser.add_argument("--windowed", action="store_true", help="run in a window, not fullscreen")
    parser.add_argument("--fps", type=int, default=60, help="frame rate limit")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    args = _parse_args(argv)

    import pygame

    pygame.init()
    try:
        if args.windowed:
            screen = pygame.display.set_mode((1280, 720))
        else:
            screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        pygame.display.set_caption(_TITLE)
        clock = pygame.time.Clock()
        game = Game()
        images = _load_images(pygame, args.assets)
        player_image = images.get("player")
        if player_image is not None:
            game.player.size.resize(*player_image.get_size())
        _fit_placeholder(game.player.size, player_image)

        running = True
        while running:
            dt = clock.tick(args.fps) / 1000.0
            scroll: list[float] = []
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.MOUSEWHEEL:
                    scroll.append(float(event.y))
            keys = pygame.key.get_pressed()
            controls = Controls(
                jump=bool(keys[pygame.K_SPACE]),
                sprint=bool(keys[pygame.K_LSHIFT]),
                left=bool(keys[pygame.K_a]),
                right=bool(keys[pygame.K_d]),
            )
            game.update(controls, dt, scroll, screen.get_height())
            _draw(pygame, screen, game, images)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


def _fit_placeholder(size: SpriteSize, image) -> None:
    if image is None and not size.done:
        size.custom_size = (size.width, size.height)
        size.done = True