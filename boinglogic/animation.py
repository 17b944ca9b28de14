"""Per-frame block animations: coins, specials, roamers, droppers and random blocks."""

from __future__ import annotations

from typing import Iterable

from boinglogic.blocktypes import BlockType, survives_level_skip
from boinglogic.explosion import kill_block
from boinglogic.grid import Block, BlockGrid
from boinglogic.specials import (
    handle_pending_bonuses,
    handle_pending_specials,
    random_block_type,
)
from boinglogic.state import GameState

Cell = tuple[int, int]

_SKIP_SHAKE_FRAMES = 140
_DEATH_LAST_SLIDE = 4
_EXTRABALL_LAST_SLIDE = 1
_ROAMER_EYE_FRAMES = 5

# Roamer bonus slides 0-3 pick a direction: left, right, up, down.
_ROAM_DIRECTIONS: dict[int, Cell] = {
    1: (0, -1),
    2: (0, 1),
    3: (-1, 0),
    4: (1, 0),
}

_TIMED_SPECIALS = frozenset({
    BlockType.PAD_SHRINK,
    BlockType.PAD_EXPAND,
    BlockType.MULTIBALL,
    BlockType.REVERSE,
    BlockType.MGUN,
    BlockType.WALLOFF,
})

_BONUS_COINS = frozenset({BlockType.BONUS, BlockType.BONUSX2, BlockType.BONUSX4})


def can_move_into(grid: BlockGrid, row: int, col: int, ball_cells: Iterable[Cell]) -> bool:
    """True when a moving block may step into (row, col).

    The slot must be on the grid, empty, not exploding, above the bottom
    rows and free of any active ball.
    """
    if not grid.in_bounds(row, col):
        return False
    blk = grid.block(row, col)
    if blk.occupied or blk.explode_start_frame != 0:
        return False
    if row + 1 >= grid.config.max_row - 2:
        return False
    return all(tuple(cell) != (row, col) for cell in ball_cells)


def _animate_death(blk: Block, state: GameState) -> None:
    frame = state.frame
    if blk.next_frame != frame:
        return
    blk.next_frame = frame + state.config.death_delay1
    blk.bonus_slide += 1
    if blk.bonus_slide > _DEATH_LAST_SLIDE:
        blk.bonus_slide = 0
        blk.next_frame = frame + state.config.death_delay2


def _animate_extraball(blk: Block, state: GameState) -> None:
    frame = state.frame
    if blk.next_frame != frame:
        return
    blk.next_frame = frame + state.config.extraball_delay
    blk.bonus_slide += 1
    if blk.bonus_slide > _EXTRABALL_LAST_SLIDE:
        blk.bonus_slide = 0


def _animate_roamer(
    grid: BlockGrid,
    state: GameState,
    row: int,
    col: int,
    blk: Block,
    balls: frozenset[Cell],
    direction: Cell,
) -> Cell:
    """Blink or move a roamer; returns the direction last chosen this pass."""
    cfg = state.config
    rng = state.rng
    frame = state.frame
    if blk.next_frame == frame:
        blk.next_frame = frame + rng.randrange(cfg.roam_eyes_delay) + 50
        blk.bonus_slide = rng.randrange(_ROAMER_EYE_FRAMES)
    elif blk.last_frame == frame:
        # An eye slide with no direction keeps the previous choice of this pass.
        direction = _ROAM_DIRECTIONS.get(blk.bonus_slide + 1, direction)
        dr, dc = direction
        if can_move_into(grid, row + dr, col + dc, balls):
            moved = grid.add(row + dr, col + dc, BlockType.ROAMER, 0, frame, rng)
            moved.next_frame = frame + rng.randrange(cfg.roam_eyes_delay) + 50
            grid.clear(row, col)
        else:
            blk.last_frame = frame + rng.randrange(cfg.roam_delay) + 300
    return direction


def _change_random(blk: Block, state: GameState) -> None:
    frame = state.frame
    if not blk.random or blk.next_frame != frame:
        return
    blk.block_type = random_block_type(state.rng, False)
    blk.bonus_slide = 0
    blk.explode_all = False
    blk.next_frame = frame + state.rng.randrange(state.config.random_delay) + 300


def _drop(
    grid: BlockGrid, state: GameState, row: int, col: int, blk: Block, balls: frozenset[Cell]
) -> None:
    frame = state.frame
    if not blk.drop or blk.next_frame != frame:
        return
    cfg = state.config
    if can_move_into(grid, row + 1, col, balls):
        moved = grid.add(row + 1, col, BlockType.DROP, 0, frame, state.rng)
        moved.next_frame = frame + state.rng.randrange(cfg.drop_delay) + 200
        grid.clear(row, col)
    else:
        blk.next_frame = frame + cfg.drop_delay


def handle_pending_animations(
    grid: BlockGrid, state: GameState, ball_cells: Iterable[Cell]
) -> None:
    """Run this frame's animation step for every occupied block."""
    balls = frozenset(tuple(cell) for cell in ball_cells)
    direction: Cell = (0, 0)

    for row, col, blk in grid.occupied_cells():
        kind = blk.block_type
        if kind in _TIMED_SPECIALS:
            handle_pending_specials(grid, state, row, col)
        elif kind in _BONUS_COINS:
            handle_pending_bonuses(grid, state, row, col)
        elif kind is BlockType.DEATH:
            _animate_death(blk, state)
            handle_pending_specials(grid, state, row, col)
        elif kind is BlockType.EXTRABALL:
            _animate_extraball(blk, state)
            handle_pending_specials(grid, state, row, col)
        elif kind is BlockType.BLACK:
            if blk.next_frame == state.frame:
                blk.next_frame = state.frame - 1
        elif kind is BlockType.ROAMER:
            direction = _animate_roamer(grid, state, row, col, blk, balls, direction)

        _change_random(blk, state)
        _drop(grid, state, row, col, blk, balls)


def skip_to_next_level(grid: BlockGrid, state: GameState) -> list[Cell]:
    """Blow up every block standing in the way of the next level.

    Returns the cells that were set to explode, and starts a screen shake.
    """
    killed: list[Cell] = []
    for row, col, blk in list(grid.occupied_cells()):
        if not survives_level_skip(blk.block_type):
            kill_block(grid, state, row, col)
            killed.append((row, col))
    state.shake_until = state.frame + _SKIP_SHAKE_FRAMES
    return killed