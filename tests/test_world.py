import random

import pytest

from garunner.objects import Rect
from garunner.world import (
    FADE_SPEED,
    GROUND_SPEED,
    MAX_ALPHA,
    SCREEN_WIDTH,
    BackgroundFade,
    Cloud,
    World,
    random_in_range,
)


def settled_fade(world):
    while world.fade.fading:
        world.fade.advance()


def test_random_in_range_inclusive_bounds():
    rng = random.Random(3)
    values = {random_in_range(rng, -2, -1) for _ in range(200)}
    assert values == {-2, -1}


def test_random_in_range_rejects_reversed_bounds():
    with pytest.raises(ValueError):
        random_in_range(random.Random(0), 5, 1)


def test_cloud_moves_by_speed():
    cloud = Cloud(Rect(100, 60, 300, 150), -2)
    cloud.move()
    assert cloud.rect.x == 98


def test_cloud_wraps_to_right_edge():
    cloud = Cloud(Rect(-299, 60, 300, 150), -2)
    cloud.move()
    assert cloud.rect.x == SCREEN_WIDTH


def test_cloud_set_rect():
    cloud = Cloud(Rect(0, 0, 1, 1), -1)
    cloud.set_rect(4, 5, 6, 7)
    assert cloud.rect == Rect(4, 5, 6, 7)


def test_fade_starts_fading_and_settles_at_full_alpha():
    fade = BackgroundFade()
    assert fade.fading
    steps = 0
    while fade.fading:
        fade.advance()
        steps += 1
    assert fade.alpha == MAX_ALPHA
    assert fade.index == 0
    assert steps * FADE_SPEED >= MAX_ALPHA


def test_fade_request_ignored_while_fading_or_same_index():
    fade = BackgroundFade()
    assert fade.request(1) is False
    settled = BackgroundFade(fading=False)
    assert settled.request(0) is False
    assert settled.fading is False


def test_fade_request_switches_background():
    fade = BackgroundFade(fading=False, alpha=MAX_ALPHA)
    assert fade.request(2) is True
    assert fade.alpha == 0
    while fade.fading:
        fade.advance()
    assert fade.index == 2


def test_clouds_within_spawn_ranges():
    world = World(random.Random(11))
    assert len(world.clouds) == 3
    for cloud in world.clouds:
        assert 0 <= cloud.rect.x <= SCREEN_WIDTH
        assert 50 <= cloud.rect.y <= 200
        assert cloud.speed in (-2, -1)


def test_same_seed_same_world():
    a = World(random.Random(5))
    b = World(random.Random(5))
    assert [c.rect for c in a.clouds] == [c.rect for c in b.clouds]


def test_ground_scrolls_and_wraps():
    world = World(random.Random(1))
    world.step()
    assert world.ground_x == -GROUND_SPEED
    for _ in range(300):
        world.step()
        assert -SCREEN_WIDTH < world.ground_x <= 0


def test_collision_ends_game_without_jumping():
    world = World(random.Random(2))
    for _ in range(200):
        if not world.step():
            break
    assert world.game_over
    assert world.score == 0
    assert world.ga.rect.intersects(world.cactus.rect)


def test_passing_cactus_scores_and_respawns():
    world = World(random.Random(4))
    world.cactus.set_x(-45)
    assert world.step()
    assert world.score == 1
    assert SCREEN_WIDTH <= world.cactus.rect.x < SCREEN_WIDTH + 200


def test_tenth_point_starts_background_fade():
    world = World(random.Random(4))
    settled_fade(world)
    world.score = 9
    world.cactus.set_x(-45)
    world.step()
    assert world.score == 10
    assert world.fade.fading
    assert world.fade.next_index == 1


def test_world_jump_starts_ga_jump():
    world = World(random.Random(0))
    world.jump()
    assert world.ga.is_jumping
    start = world.ga.rect.y
    world.step()
    assert world.ga.rect.y < start