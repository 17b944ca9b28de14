# boinglogic

The block rules of a blockout style arcade game, without a display: the
grid of block slots, the triangular hit regions around each block, which
side of a block a ball has struck, explosions (bombs and dynamite
included), pop-up special and bonus-coin blocks, and the per-frame
animations of roaming, dropping, random and flashing blocks.

Nothing is drawn or played. Sounds and messages are recorded on a
`GameState` object (`state.sounds`, `state.messages`,
`state.current_message`) for a front end to render.

## Installation

```
pip install boinglogic
```

To run the tests:

```
pip install "boinglogic[test]"
pytest
```

## Modules

- `boinglogic.blocktypes`: the `BlockType` enum, `ArenaConfig` (arena
  dimensions, timings and limits), and the per-type data:
  `block_size`, `hit_points_for`, `sound_for_block` (raises `ValueError`
  for `KILL` and for types that have no sound), `counts_for_level_end`
  and `survives_level_skip`.
- `boinglogic.geometry`: `polygon_intersects_rect`, `block_regions` and
  `BlockRegions`, the four triangles (top, bottom, left, right) meeting at a
  block's centre.
- `boinglogic.state`: `GameState`, holding the frame counter, score,
  bullets, bonus count and multiplier, special flags, a `random.Random`,
  and the sounds and messages produced. `add_score` and `add_bullets`
  reject negative amounts; `set_bonus_multiplier` accepts only 1, 2 or 4.
- `boinglogic.grid`: `Block` (one slot) and `BlockGrid`, with `add`,
  `clear`, `clear_all`, `block` (raises `IndexError` off the grid),
  `in_bounds`, `occupied_cells`, `cell_of` and `still_active`.
- `boinglogic.explosion`: `set_up_for_explosion`, `kill_block`,
  `explode_all_of_type`, `set_explode_all_type` and `explode_pending`,
  which advances every running explosion one frame, scores finished blocks
  and applies their effect (bomb chain, extra time, bullets, unlimited
  ammo, bonus coins and killer mode, x2/x4 multipliers).
- `boinglogic.specials`: `random_block_type`, `add_special_block`,
  `add_bonus_block`, `handle_pending_specials` and
  `handle_pending_bonuses`.
- `boinglogic.animation`: `can_move_into`, `handle_pending_animations` and
  `skip_to_next_level`.
- `boinglogic.collision`: the `Region` flags, `check_regions` and
  `check_for_collision`, which report the sides of a block touched by a ball
  centred at a given point and moving with a given velocity.

## Example

```python
from boinglogic.blocktypes import BlockType
from boinglogic.explosion import explode_pending, kill_block
from boinglogic.grid import BlockGrid
from boinglogic.state import GameState

state = GameState()
grid = BlockGrid()
grid.add(3, 4, BlockType.RED, 0, state.frame, state.rng)

kill_block(grid, state, 3, 4)
while grid.block(3, 4).occupied:
    explode_pending(grid, state)
    state.advance_frame()

print(state.score)   # 100
print(state.sounds)  # [('touch', 99)]
```

Everything that needs randomness takes it from a `random.Random` (usually
`state.rng`), so seeding it makes a run repeatable.

## What the package does not do

- It has no model of the balls or the paddle: no ball movement, wall and
  paddle bounces, ball-to-ball rebounds, launching or losing a ball. The
  collision functions take a ball's position and velocity from the caller.
- It does not draw, play sound, read input or load level files.
- It provides no command to run; it is a library only.