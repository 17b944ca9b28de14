"""Block destruction: explosion set-up, the explosion sequence and its rewards."""

from __future__ import annotations

from typing import Optional

from boinglogic.blocktypes import BlockType, sound_for_block
from boinglogic.grid import BlockGrid
from boinglogic.state import GameState

_KILLER_BONUS_COUNT = 10
_SHAKE_FRAMES = 70
_LAST_SLIDE = 4

_BOMB_NEIGHBOURS = (
    (1, 0), (0, 1), (-1, 0), (0, -1),
    (-1, -1), (-1, 1), (1, -1), (1, 1),
)


def set_up_for_explosion(
    grid: BlockGrid, state: GameState, row: int, col: int, frame: int
) -> bool:
    """Start the explosion sequence of an occupied block at ``frame``.

    Returns True when an explosion was started. Slots off the grid, empty
    slots, hyperspace blocks and blocks already exploding are left alone.
    """
    if not grid.in_bounds(row, col):
        return False
    blk = grid.block(row, col)
    if blk.block_type is BlockType.HYPERSPACE:
        return False
    if not blk.occupied or blk.exploding:
        return False

    grid.blocks_exploding += 1
    blk.explode_start_frame = frame
    blk.explode_next_frame = frame
    blk.explode_slide = 1
    blk.exploding = True

    if blk.special_popup:
        state.bonus_block = False
    blk.drop = False
    return True


def kill_block(grid: BlockGrid, state: GameState, row: int, col: int) -> bool:
    """Play the block's hit sound and set it to explode this frame."""
    if not grid.in_bounds(row, col):
        raise IndexError(f"block position out of range: ({row}, {col})")
    blk = grid.block(row, col)
    if not state.no_sound:
        name, volume = sound_for_block(blk.block_type)
        state.play_sound(name, volume)
    return set_up_for_explosion(grid, state, row, col, state.frame)


def explode_all_of_type(grid: BlockGrid, state: GameState, block_type: BlockType) -> None:
    """Set every occupied block of ``block_type`` to explode next frame."""
    targets = [
        (row, col)
        for row, col, blk in grid.occupied_cells()
        if blk.block_type is block_type
    ]
    for row, col in targets:
        set_up_for_explosion(grid, state, row, col, state.frame + 1)


def set_explode_all_type(
    grid: BlockGrid, state: GameState, block_type: BlockType
) -> Optional[tuple[int, int]]:
    """Put dynamite on one random block of ``block_type``; return its cell or None."""
    candidates = [
        (row, col)
        for row, col, blk in grid.occupied_cells()
        if blk.block_type is block_type
    ]
    if not candidates:
        return None
    row, col = candidates[state.rng.randrange(len(candidates))]
    grid.block(row, col).explode_all = True
    return row, col


def _reward(grid: BlockGrid, state: GameState, row: int, col: int, block_type: BlockType) -> None:
    cfg = state.config
    if block_type is BlockType.BOMB:
        for dr, dc in _BOMB_NEIGHBOURS:
            set_up_for_explosion(grid, state, row + dr, col + dc, state.frame + cfg.explode_delay)
        state.shake_until = state.frame + _SHAKE_FRAMES
    elif block_type is BlockType.TIMER:
        state.time_bonus += cfg.extra_time
        state.show_message(f"- Extra Time = {cfg.extra_time} seconds -")
    elif block_type is BlockType.BULLET:
        state.show_message("More ammunition, cool!")
        state.add_bullets(cfg.bullets_new_level)
    elif block_type is BlockType.MAXAMMO:
        state.show_message("Unlimited bullets!")
        state.unlimited_bullets = True
        state.bullets = cfg.max_bullets + 1
    elif block_type is BlockType.BONUS:
        state.bonus_count += 1
        if state.bonus_count <= cfg.max_bonus:
            state.show_message(f"- Bonus #{state.bonus_count} -")
        else:
            state.show_message("<<< Super Bonus >>>")
        state.bonus_block = False
        if state.bonus_count == _KILLER_BONUS_COUNT:
            state.killer = True
            state.show_message("- Killer Mode -")
    elif block_type is BlockType.BONUSX2:
        state.set_bonus_multiplier(2)
        state.bonus_block = False
        state.show_message("- x2 Bonus -")
    elif block_type is BlockType.BONUSX4:
        state.set_bonus_multiplier(4)
        state.bonus_block = False
        state.show_message("- x4 Bonus -")


def explode_pending(grid: BlockGrid, state: GameState) -> list[tuple[int, int]]:
    """Advance every running explosion by one frame.

    Returns the cells whose explosion finished this frame; their points
    have been scored and their block's effect applied.
    """
    finished: list[tuple[int, int]] = []
    if grid.blocks_exploding == 0:
        return finished

    cfg = state.config
    for row in range(cfg.max_row):
        for col in range(cfg.max_col):
            blk = grid.block(row, col)
            if not blk.explode_start_frame or blk.explode_next_frame != state.frame:
                continue

            if blk.explode_slide == 1:
                blk.explode_next_frame = blk.explode_start_frame
                if blk.explode_all:
                    explode_all_of_type(grid, state, blk.block_type)

            blk.explode_slide += 1
            blk.explode_next_frame += cfg.explode_delay

            if blk.explode_slide > _LAST_SLIDE:
                grid.blocks_exploding -= 1
                blk.occupied = False
                blk.exploding = False
                state.add_score(blk.hit_points)
                _reward(grid, state, row, col, blk.block_type)
                grid.clear(row, col)
                finished.append((row, col))
    return finished