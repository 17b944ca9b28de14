"""Pop-up special and bonus-coin blocks, and random block types."""

from __future__ import annotations

from typing import Optional, Protocol

from boinglogic.blocktypes import BlockType
from boinglogic.grid import BlockGrid
from boinglogic.state import GameState

_RANDOM_TYPES = (
    BlockType.RED,
    BlockType.BLUE,
    BlockType.GREEN,
    BlockType.TAN,
    BlockType.YELLOW,
    BlockType.PURPLE,
    BlockType.BULLET,
)


class _Rng(Protocol):
    def randrange(self, stop: int) -> int: ...


def random_block_type(rng: _Rng, blank_allowed: bool) -> BlockType:
    """Pick a random ordinary block type, or NONE one time in eight if allowed."""
    choice = rng.randrange(8)
    if choice < len(_RANDOM_TYPES):
        return _RANDOM_TYPES[choice]
    return BlockType.NONE if blank_allowed else BlockType.YELLOW


def _random_free_cell(grid: BlockGrid, state: GameState) -> Optional[tuple[int, int]]:
    cfg = grid.config
    row = state.rng.randrange(cfg.max_row - 7) + 1
    col = state.rng.randrange(cfg.max_col)
    blk = grid.block(row, col)
    if blk.occupied or blk.explode_start_frame != 0:
        return None
    return row, col


def add_special_block(
    grid: BlockGrid, state: GameState, block_type: BlockType, kill_shots: int
) -> Optional[tuple[int, int]]:
    """Try to pop a special block into a random free slot; return its cell or None."""
    cell = _random_free_cell(grid, state)
    if cell is None:
        return None
    row, col = cell
    blk = grid.add(row, col, block_type, kill_shots, state.frame, state.rng)
    state.bonus_block = True
    blk.next_frame = state.frame + 1
    blk.last_frame = state.frame + state.config.bonus_length
    blk.bonus_slide = 0
    blk.special_popup = True
    return cell


def add_bonus_block(
    grid: BlockGrid, state: GameState, block_type: BlockType
) -> Optional[tuple[int, int]]:
    """Try to pop a bonus coin into a random free slot; return its cell or None."""
    cell = _random_free_cell(grid, state)
    if cell is None:
        return None
    row, col = cell
    blk = grid.add(row, col, block_type, 0, state.frame, state.rng)
    state.bonus_block = True
    blk.next_frame = state.frame + state.config.bonus_delay
    blk.last_frame = state.frame + state.config.bonus_length
    blk.bonus_slide = 3
    blk.special_popup = True
    return cell


def handle_pending_specials(grid: BlockGrid, state: GameState, row: int, col: int) -> bool:
    """Remove a special block whose time is up; True when it was removed."""
    blk = grid.block(row, col)
    if state.frame < blk.last_frame:
        return False
    state.bonus_block = False
    if blk.exploding:
        grid.blocks_exploding -= 1
    grid.clear(row, col)
    return True


def handle_pending_bonuses(grid: BlockGrid, state: GameState, row: int, col: int) -> bool:
    """Turn a bonus coin one frame, or remove it once expired; True when removed."""
    blk = grid.block(row, col)
    if blk.next_frame != state.frame:
        return False
    if state.frame <= blk.last_frame:
        blk.next_frame = state.frame + state.config.bonus_delay
        blk.bonus_slide -= 1
        if blk.bonus_slide < 0:
            blk.bonus_slide = 3
        return False
    state.bonus_block = False
    grid.clear(row, col)
    return True