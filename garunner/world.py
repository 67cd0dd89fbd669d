"""Game state and per-frame rules: scrolling, scoring, collisions and fades."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any

from garunner.objects import GROUND_Y, Ga, GameObject, Rect

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 400
NUM_BACKGROUNDS = 3
NUM_CLOUDS = 3
CLOUD_WIDTH = 300
CLOUD_HEIGHT = 150
GROUND_SPEED = 8
CACTUS_SPEED = 8
FADE_SPEED = 5
MAX_ALPHA = 255
SCORE_PER_BACKGROUND = 10


def random_in_range(rng: random.Random, low: int, high: int) -> int:
    """A random integer between low and high, both included."""
    return rng.randint(low, high)


@dataclass
class Cloud:
    """A cloud drifting right to left, wrapping to the right edge."""

    rect: Rect
    speed: int
    texture: Any = None

    def set_rect(self, x: int, y: int, w: int, h: int) -> None:
        self.rect = Rect(x, y, w, h)

    def move(self) -> None:
        self.rect.x += self.speed
        if self.rect.right < 0:
            self.rect.x = SCREEN_WIDTH


@dataclass
class BackgroundFade:
    """Cross-fade state between the background images."""

    index: int = 0
    next_index: int = 0
    alpha: int = 0
    fading: bool = True

    def request(self, target: int) -> bool:
        """Begin fading to target; ignored while fading or if already shown."""
        if self.fading or target == self.index:
            return False
        self.next_index = target
        self.fading = True
        self.alpha = 0
        return True

    def advance(self) -> None:
        """Raise the new background's opacity by one step."""
        if not self.fading:
            return
        self.alpha += FADE_SPEED
        if self.alpha >= MAX_ALPHA:
            self.alpha = MAX_ALPHA
            self.index = self.next_index
            self.fading = False


def _spawn_cloud(rng: random.Random, texture: Any) -> Cloud:
    x = random_in_range(rng, 0, SCREEN_WIDTH)
    y = random_in_range(rng, 50, 200)
    speed = random_in_range(rng, -2, -1)
    return Cloud(Rect(x, y, CLOUD_WIDTH, CLOUD_HEIGHT), speed, texture)


class World:
    """Everything that changes from frame to frame."""

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        ga_texture: Any = None,
        cactus_texture: Any = None,
        cloud_texture: Any = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.clouds = [_spawn_cloud(self.rng, cloud_texture) for _ in range(NUM_CLOUDS)]
        self.ga = Ga(Rect(50, GROUND_Y - 60, 60, 60), ga_texture)
        self.cactus = GameObject(Rect(SCREEN_WIDTH, GROUND_Y - 40, 50, 60), cactus_texture)
        self.fade = BackgroundFade()
        self.ground_x = 0
        self.score = 0
        self.game_over = False

    def jump(self) -> None:
        self.ga.jump()

    def step(self) -> bool:
        """Run one frame of game logic; return False once the game is over."""
        self.ground_x -= GROUND_SPEED
        if self.ground_x <= -SCREEN_WIDTH:
            self.ground_x = 0

        self.ga.update()
        self.cactus.move_x(-CACTUS_SPEED)
        if self.cactus.rect.right < 0:
            self.cactus.set_x(SCREEN_WIDTH + self.rng.randrange(200))
            self.score += 1
            self.fade.request((self.score // SCORE_PER_BACKGROUND) % NUM_BACKGROUNDS)

        if self.ga.rect.intersects(self.cactus.rect):
            self.game_over = True

        for cloud in self.clouds:
            cloud.move()
        return not self.game_over