# hatgame

The rules of a small top-down arcade shooter. A hat-wearing gunslinger
fights waves of imps, beholders and reapers, picks up experience crystals
and chooses new abilities on each level-up. The package has no renderer
and no input layer. It holds the game logic, and any front end can drive it.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is inside

- `hatgame.vec`: the small `Vec2` and `Vec3` value types used everywhere.
- `hatgame.timing`: `Timer` (once or repeating) and `Stopwatch`, both driven by explicit time deltas.
- `hatgame.animation`: building sprite-sheet animation tables with `AnimationInfoBuilder` and advancing frames with `update_animation_frames`.
- `hatgame.collider`: rectangle and circle `Collider` shapes, plus a `CollisionTracker` that uses a spatial grid and reports collisions as they start, continue and end.
- `hatgame.health`, `hatgame.projectile`, `hatgame.combat_effects`: damage, teams, piercing projectiles, knockback, burning and explosions.
- `hatgame.enemy`, `hatgame.ai`, `hatgame.spawning`, `hatgame.bestiary`, `hatgame.beholder`: the enemy roster, their steering and shooting behaviour, and the wave spawner, which scales with difficulty.
- `hatgame.experience`, `hatgame.xp_bar`, `hatgame.xp_crystal`: crystals, levelling, and the state of the experience bar.
- `hatgame.actions`: turning pressed keys or a touch position into a movement direction.
- `hatgame.assets`, `hatgame.audio`, `hatgame.game`: the asset manifest, volume-controlled audio channels, game states and debug cheats.

## Example

```python
from hatgame.collider import Collider, CollisionTracker
from hatgame.vec import Vec2, Vec3

tracker = CollisionTracker()
report = tracker.tick([
    ("player", Collider.new_circle(20.0), Vec3(0.0, 0.0, 0.0)),
    ("imp", Collider.new_rect(Vec2(50.0, 20.0)), Vec3(30.0, 0.0, 0.0)),
])
for collision in report.started:
    print(collision.entity_a, "hit", collision.entity_b)
```

Time always advances through explicit deltas in seconds, so a simulation
gives the same result on every run. Spawning, crystal drops and explosions
take their own seeded random generators.