# skirmish

Two small games in one package:

* **Aggro** (`skirmish.aggro`) — a text-mode boss fight. A random party of
  knights, mages and archers attacks a boss goblin. The boss keeps a running
  tally of the damage each player deals and the top four dealers are printed
  every round.
* **Window playground** (`skirmish.app`) — a 2D scene viewer built on tkinter
  with circle and box colliders, line-segment intersection, and a cannon that
  fires balls which fall under gravity.

No third-party libraries are needed; the window uses the tkinter module that
ships with Python.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Running the boss fight

```
skirmish-aggro [--seed N] [--size N]
```

`--seed` fixes the random seed so a fight can be replayed; `--size` sets the
number of players (10 by default). The boss is `bobo` with 13000 hit points.

Each round, every living player attacks once. For each attack the output shows
whether it was a critical hit and the boss's remaining hit points. Then the
four players with the highest total damage are listed, followed by
`bobo's attack!` and the stats of every player. A line of dashes closes the
round. When the boss, or every player, is dead, a final summary of all players
and the boss is printed.

Damage per hit is the player's attack power times a random factor between
0.95 and 1.05, truncated to a whole number. A critical hit doubles it, and a
player at half health or below deals double damage as well. Players that have
died are dropped from the boss's damage table.

## Running the window

```
skirmish-window [--scene NAME] [--seed N]
```

The window is 1200 × 720 and updates every 10 ms. Its menu has *File → Exit*
and *Help → About*. `--scene` picks the scene to show; `LineScene` is the
default:

* `LineScene` — one line runs from a fixed point to the mouse pointer; the
  fixed line turns red while the two cross.
* `CollisionScene` — a box follows the mouse pointer; a fixed circle turns red
  while the box touches it.
* `PaintScene` — a circle, a line, and a box that glides towards the mouse
  pointer.
* `CannonScene` — `A` / `D` / `W` / `S` move the cannon, the mouse pointer aims
  the barrel, and holding `Space` fires balls from a pool of 80. Balls fly along
  the barrel's direction, fall under gravity, and return to the pool once they
  leave the left, right or bottom edge of the window.

## Using it as a library

```python
import random

from skirmish.creatures import BossGoblin, Knight

rng = random.Random(1)
knight = Knight("knight1", 350, 150, 0.5, rng)
boss = BossGoblin("bobo", 13000, 100, 0.0, rng)

hit = knight.attack(boss)          # a Hit with .damage and .critical
print(boss.hp, boss.ranking())     # ranking: [(name, total), ...], highest first
```

`skirmish.aggro.make_party(rng, size)` builds a random party and
`skirmish.aggro.run_battle(players, boss, out)` fights it out, writing the log
to `out` (standard output by default) and returning the final ranking.

```python
from skirmish.colliders import BoxCollider, CircleCollider, Line
from skirmish.geometry import Vector

circle = CircleCollider(Vector(400, 400), 70)
box = BoxCollider(Vector(450, 400), Vector(100, 100))
print(circle.is_collision(box))              # circle against box
print(box.is_collision(Vector(450, 400)))    # point inside the box

a = Line(Vector(0, 0), Vector(10, 10))
b = Line(Vector(0, 10), Vector(10, 0))
print(a.is_collision(b), a.intersection)     # crossing point of the two lines
```

The scenes in `skirmish.scenes` and the cannon in `skirmish.cannon` take a
`Controls` value each frame (mouse position and held keys) and draw onto any
object with `ellipse`, `rectangle` and `line` methods, so they can be driven
without a window.

## What it does not do

* The boss never strikes back: `bobo's attack!` is printed each round, but no
  damage is dealt to the players, so in practice a fight always ends with the
  boss's death.
* The window needs tkinter to be available in the Python installation; the
  scenes themselves do not.