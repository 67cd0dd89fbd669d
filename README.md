# garunner

A small endless-runner arcade game. You play a chicken running along the ground.
Fire obstacles slide in from the right. Press **Space** to jump over them. You
score a point each time an obstacle leaves the left edge of the screen. The game
ends when the chicken touches an obstacle, and it prints your score.

Clouds drift across the sky and the ground scrolls under the runner. Every ten
points the background fades to the next of three scenes.

## Installation

```
pip install .
```

This installs `pygame` as well. To run the tests, install the `test` extra
(`pip install .[test]`) and then run `pytest`.

## Playing

```
garunner
```

Options:

- `--assets DIR`: the directory to read images from. The default is `assets/images`
  under the current directory.
- `--seed N`: the seed for the random numbers that place the clouds and obstacles.

The game reads these images from the asset directory and scales each one to the
size it is drawn at:

- `bg1.png`, `bg2.png`, `bg3.png`: the backgrounds
- `cloud.png`: a cloud
- `dat.png`: the ground
- `ga.png`: the chicken
- `fire.png`: an obstacle

If an image cannot be loaded, the game writes the error to standard error and
runs without that image.

Controls:

- **Space**: jump
- Close the window to quit

When the game ends it prints `Game Over! Score: N` and exits.

## Using the pieces

The game logic runs without a display, so you can drive it from your own code:

```python
import random
from garunner.world import World

world = World(random.Random(1))
world.jump()
while world.step():
    pass
print(world.score, world.game_over)
```

`World.step()` runs one frame and returns `False` once the chicken has hit an
obstacle. Its state is kept in plain attributes: `ga`, `cactus`, `clouds`,
`fade`, `ground_x`, `score` and `game_over`.

- `garunner.objects` provides `Rect` (with `intersects`), `GameObject`
  (`render`, `set_x`, `move_x`) and the jumping player `Ga` (`jump`, `update`).
- `garunner.world` provides `random_in_range`, `Cloud`, `BackgroundFade`
  (`request`, `advance`) and `World`.
- `garunner.app` provides `load_texture` and `main`, the function behind the
  `garunner` command.

## What it does not do

The score is not shown in the window while you play. It is printed only when the
game ends. There is no restart, pause, menu or high-score storage. When the game
is over the program exits.