# mobagen

mobagen is a small 2D engine for game AI experiments. It draws in a pygame
window and comes with two simulations:

- **Catch the cat** is a hex-grid game. A cat starts in the centre and tries
  to reach the edge of the board. A catcher blocks one cell per turn and
  tries to surround the cat.
- **Flocking** shows boids steered by weighted rules: separation, cohesion,
  alignment, mouse influence, bounded area and wind.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the simulations

### Catch the cat

```
catchthecat [--size N] [--turn-duration SECONDS]
```

- `--size` sets the side size of the board. It must be odd. The default is 21.
- `--turn-duration` sets the number of seconds between turns. The default is 1.0.

Both players move at random. The cat steps to a random neighbouring cell. The
catcher blocks a random free cell that is in neither the cat's row nor its
column. An illegal move loses the game. When a game is over, the board is
reset and play stops.

### Flocking

```
flocking [--boids N] [--show-radius] [--show-rules]
```

- `--boids` sets how many boids to create. The default is 300.
- `--show-radius` draws each boid's detection radius.
- `--show-rules` draws the force each rule applies to each boid.

Hold the left mouse button to attract the boids to the pointer. Hold an arrow
key to push the first boid around. Boids that leave the window come back on
the opposite side. At start the separation, cohesion, alignment and mouse
rules are enabled, and the bounded-area and wind rules are disabled.

## Using the library

The `mobagen.core` package holds the math types and the engine:

```python
from mobagen.core.vector2 import Vector2
from mobagen.core.colors import Color32, hsv_to_rgb, rgb_to_hsv, RED

v = Vector2.up().rotate(90)          # rotated clockwise in screen space
print(v.magnitude(), v.normalized(), v.angle_degree())

red = Color32.from_packed(0xff0000ff)  # packed as 0xAABBGGRR
print(red == RED, red.light(), red.dark())
print(hsv_to_rgb(0.5, 1.0, 1.0, False))
```

`mobagen.core.geometry` provides `Point2D` and `Transform`.
`mobagen.core.polygon` provides `Polygon` and three ready-made shapes:
`Circle`, `Square` and `Hexagon`.

A game is built from `GameObject` subclasses. Each one registers with an
`Engine` when it is created. The engine calls the object's `start` hook once,
and calls its `update`, `on_gui` and `on_draw` hooks every frame:

```python
from mobagen.core.engine import Engine
from mobagen.core.gameobject import GameObject
from mobagen.core.polygon import Square
from mobagen.core.colors import WHITE
from mobagen.core.vector2 import Vector2

class Spinner(GameObject):
    def start(self):
        self.transform.position = Vector2(640, 360)
        self.transform.scale = Vector2(50, 50)
        self.transform.rotation = Vector2.up()

    def update(self, delta_time):
        self.transform.rotation = self.transform.rotation.rotate(90 * delta_time)

    def on_draw(self, surface):
        Square().draw(surface, self.transform, WHITE)

with Engine() as engine:
    Spinner(engine)
    if engine.start("Spinner"):
        engine.run()
```

The catch-the-cat `World` does not need a window. You can step it and print
the board:

```python
from mobagen.core.engine import Engine
from mobagen.catchthecat.world import World

world = World(Engine(), 11)
world.step()
print(world.render_text())
```

The flocking rules live in `mobagen.flocking.rules`. The `Particle` and `Boid`
classes are in `mobagen.flocking.boid`, and the flocking `World` is in
`mobagen.flocking.world`.

## What it does not do

There is no on-screen settings panel or menu. The `on_gui` hook exists, but no
object in the package builds an interface with it. Rule weights, speeds and
display options are set from code or from the command-line options above, and
cannot be changed while a simulation is running. Catch the cat has no
game-over dialog and no restart control. To play again, close the window and
run the command again.