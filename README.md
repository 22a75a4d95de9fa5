# advent

A small side-scrolling platformer. The player is a box that falls under
gravity onto a tile level. It can run left and right and jump off the ground.
Collisions between boxes are found with the separating-axis test, the boxes
are pushed apart, and a simple impulse is applied along the collision normal.

## Installing

```
pip install .
```

This pulls in `pygame`, which is used to open the window and draw the level.

## Playing

```
advent
```

The window is 1280 by 960 pixels and runs at up to 60 frames per second.

- **Left / Right arrows** move the player. Movement is slower in the air.
- **Space** jumps when the player is standing on ground.

Close the window to quit. The text in the top-left corner shows how long the
last physics step took (in seconds, to whole milliseconds) and how many bodies
the world holds.

## Using the pieces

The simulation does not need a window. You can drive it yourself:

```python
from advent.game import Game

game = Game()
for _ in range(60):
    game.run(1 / 60, jump=False, right=True, left=False)
print(game.status_text())
```

- `advent.vector.Vec2`: an immutable 2D vector with `+`, `-`, `*`, `/` and
  unary `-`. Adding or subtracting a plain number applies it to both
  components, and a `Vec2` unpacks as `x, y`.
- `advent.transform.Transform2D`: a translation plus a rotation stored as its
  cosine and sine. Build one with `Transform2D.from_angle(x, y, angle)` or
  `Transform2D.from_position(position, angle)`.
- `advent.geometry`: `transform`, `dot_product`, `vector_length` and
  `unit_vector` (a vector shorter than 0.0001 comes back unchanged).
- `advent.body.BoxBody`: a rotatable rectangle with `position`, `rotation`,
  cached world-space `vertices`, `linear_velocity`, `inv_mass` (zero for
  static bodies) and a `touch_ground` flag. `move`, `move_to`, `rotate` and
  `rotate_to` change its placement; `update_vertices` refreshes the corners;
  `step` advances it one sub-step under gravity.
- `advent.world`: `World` holds the player (`World.player`, always the first
  body) and one static block per `#` tile of the built-in level. `step(time)`
  advances it in 30 sub-steps. `add_body(position)` adds a square dynamic box
  of random size and colour; `remove_body(index)` removes one and raises
  `IndexError` for an index that does not exist. `intersect_polygons` returns
  a `Collision` (unit normal and depth) or `None`; `project_vertices` returns
  the minimum and maximum projection onto an axis.
- `advent.controller.Controller`: `move_player(time, jump, right, left)`
  applies one frame of input to the player body.
- `advent.palette`: the `Color` type, the level colours, and the `random_int`
  and `random_float` helpers.
- `advent.game`: `Game` ties the world and controller together; `draw`
  renders the bodies and status text onto a pygame surface; `main` is the
  `advent` command.

## What it does not do

There is one built-in level and nothing else: no score, no goal, no level
loading and no saving. `World.add_body` and `World.remove_body` can be called
from code, but the `advent` command binds no keys or mouse buttons to them.
Bodies are rotatable in code, but collisions never rotate them.

## Running the tests

```
pip install .[test]
pytest
```