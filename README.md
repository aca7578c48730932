# survivalrush

A small top-down arena survival game drawn with pygame. You steer a triangle
across a plane while enemies keep appearing, each one sooner than the last.
Shoot them down, grab the health pickups they drop, and see how long you
survive. Your score is the time you stayed alive; the best score of the session
is shown beneath it.

## Installing

```
pip install .
```

pygame is installed as a dependency.

## Playing

```
survivalrush
```

The `--seed N` option seeds the random distance at which enemies appear, so a
session can be repeated.

Controls:

| Input              | Action                                          |
|--------------------|-------------------------------------------------|
| `W` / `S`          | move forward / backward along your heading      |
| `A` / `D`          | strafe sideways                                 |
| mouse              | the player turns towards the point on the ground under the cursor |
| left mouse button  | fire the selected weapon (hold to keep firing)  |
| `1`, `2`, `3`      | select weapon slot 1, 2 or 3                    |
| `F1`               | toggle the debug overlay                        |
| `F2`               | restart the round                               |

The three weapons:

1. a quick pistol: small yellow rounds, one every 0.5 s;
2. a slow, long-range gun: red rounds with high damage, one every 2 s;
3. a shotgun: a fan of three magenta rounds 10 degrees apart, every 1.5 s.

Bullets shrink as they fly and vanish at the end of their range or on the
first enemy they hit.

You start with 50 health. Enemies appear 10 to 15 units ahead of you along the
world's +Z axis; the first after 3 seconds, then 0.05 seconds sooner each time,
down to one every 0.1 seconds. They steer towards you and push apart from each
other. Touching an enemy destroys it and costs you 10 health. A killed enemy
drops a pickup that shrinks away over 6 seconds; come within 3 units and it
homes in on you, healing 5 health (up to your maximum) when it reaches you.
When your health reaches zero the best score is updated and the round restarts.

The debug overlay (on by default) shows collider outlines, pickup radii, your
forward and right axes and the point under the cursor.

## Using the pieces

The game logic runs without a window, which is how the tests exercise it:

```python
from survivalrush.game import Game

game = Game()
for _ in range(600):
    game.step(1 / 60)
print(game.score, game.player.health, len(game.enemies))
```

`Game.draw(surface, fonts)` renders a frame onto any pygame surface, given a
pair of (large, small) pygame fonts, and `Game.handle_event(event)` applies a
pygame event, returning `False` on quit.

Other modules:

- `survivalrush.vector`: the immutable `Vector3` and helpers `clamp`,
  `random_float`, `signed_angle_between`, `circle_collision` and
  `raycast_plane`.
- `survivalrush.transform`: `Transform` with position, rotation (Euler
  degrees), scale, `forward()`, `right()`, a column-major `matrix()` and
  `apply(point)`.
- `survivalrush.camera`: `Camera` with a perspective projection,
  `world_to_screen` and `screen_to_world`.
- `survivalrush.clock`: `FrameClock`, measuring seconds between frames.
- `survivalrush.hud`: `score_text`, `health_text` and `draw_text`.
- `survivalrush.player`, `enemy`, `bullet`, `weapon`, `collectible`: the
  entities and their managers.

## Tests

```
pip install .[test]
pytest
```