"""Window, asset loading, drawing and the main loop."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import Sequence

import pygame

from garunner.objects import GROUND_Y
from garunner.world import NUM_BACKGROUNDS, SCREEN_HEIGHT, SCREEN_WIDTH, World

DEFAULT_ASSETS = Path("assets") / "images"
GROUND_HEIGHT = 80
FRAME_DELAY_MS = 16


def load_texture(path, size=None):
    """Load an image, scaled to size when given; None if it cannot be read."""
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        print(f"Error loading image: {exc}", file=sys.stderr)
        return None
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    if size is not None and image.get_size() != tuple(size):
        image = pygame.transform.scale(image, tuple(size))
    return image


def _draw(screen, world: World, backgrounds, ground_tex) -> None:
    screen.fill((0, 0, 0))
    fade = world.fade
    current = backgrounds[fade.index]
    if current is not None:
        screen.blit(current, (0, 0))
    if fade.fading:
        incoming = backgrounds[fade.next_index]
        if incoming is not None:
            faded = incoming.copy()
            faded.set_alpha(fade.alpha)
            screen.blit(faded, (0, 0))

    for cloud in world.clouds:
        if cloud.texture is not None:
            screen.blit(cloud.texture, (cloud.rect.x, cloud.rect.y))

    if ground_tex is not None:
        screen.blit(ground_tex, (world.ground_x, GROUND_Y))
        screen.blit(ground_tex, (world.ground_x + SCREEN_WIDTH, GROUND_Y))

    world.ga.render(screen)
    world.cactus.render(screen)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="garunner", description="Endless runner: jump the chicken over the fire."
    )
    parser.add_argument("--assets", type=Path, default=DEFAULT_ASSETS, help="image directory")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    except pygame.error as exc:
        print(f"Display error: {exc}", file=sys.stderr)
        pygame.quit()
        return 1
    pygame.display.set_caption("Ga Game")

    assets: Path = args.assets
    screen_size = (SCREEN_WIDTH, SCREEN_HEIGHT)
    backgrounds = [
        load_texture(assets / f"bg{i + 1}.png", screen_size) for i in range(NUM_BACKGROUNDS)
    ]
    cloud_tex = load_texture(assets / "cloud.png", (300, 150))
    ground_tex = load_texture(assets / "dat.png", (SCREEN_WIDTH, GROUND_HEIGHT))
    ga_tex = load_texture(assets / "ga.png", (60, 60))
    cactus_tex = load_texture(assets / "fire.png", (50, 60))

    world = World(
        random.Random(args.seed),
        ga_texture=ga_tex,
        cactus_texture=cactus_tex,
        cloud_texture=cloud_tex,
    )

    try:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                    world.jump()

            if not world.step():
                print(f"Game Over! Score: {world.score}")
                running = False

            _draw(screen, world, backgrounds, ground_tex)
            world.fade.advance()
            pygame.display.flip()
            pygame.time.delay(FRAME_DELAY_MS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())