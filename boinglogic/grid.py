"""The grid of block slots that makes up a level."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Protocol

from boinglogic.blocktypes import (
    ArenaConfig,
    BlockType,
    block_size,
    counts_for_level_end,
    hit_points_for,
)
from boinglogic.geometry import BlockRegions, block_regions

_DEFAULTS = ArenaConfig()


class _Rng(Protocol):
    def randrange(self, stop: int) -> int: ...


def _div(value: int, divisor: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(value) // abs(divisor)
    return quotient if (value >= 0) == (divisor > 0) else -quotient


@dataclass
class Block:
    """One grid slot and the block (if any) occupying it."""

    occupied: bool = False
    exploding: bool = False
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    hit_points: int = 0
    block_type: BlockType = BlockType.NONE
    explode_start_frame: int = 0
    explode_next_frame: int = 0
    explode_slide: int = 0
    counter_slide: int = 0
    bonus_slide: int = 0
    offset_x: int = 0
    offset_y: int = 0
    last_frame: int = _DEFAULTS.infinite_delay
    next_frame: int = 0
    current_frame: int = 0
    random: bool = False
    drop: bool = False
    ball_hit_index: int = 0
    ball_dx: int = 0
    ball_dy: int = 0
    special_popup: bool = False
    explode_all: bool = False
    regions: Optional[BlockRegions] = None

    def reset(self) -> None:
        """Empty the slot, returning every field to its initial value."""
        for name, value in vars(Block()).items():
            setattr(self, name, value)


class BlockGrid:
    """All block slots of the arena plus the count of running explosions."""

    def __init__(self, config: Optional[ArenaConfig] = None) -> None:
        self.config = config or ArenaConfig()
        self.blocks_exploding = 0
        self._rows = [
            [self._fresh_block() for _ in range(self.config.max_col)]
            for _ in range(self.config.max_row)
        ]

    def _fresh_block(self) -> Block:
        return Block(last_frame=self.config.infinite_delay)

    def in_bounds(self, row: int, col: int) -> bool:
        """True when (row, col) names a slot of the grid."""
        return 0 <= row < self.config.max_row and 0 <= col < self.config.max_col

    def block(self, row: int, col: int) -> Block:
        """Return the slot at (row, col)."""
        if not self.in_bounds(row, col):
            raise IndexError(f"block position out of range: ({row}, {col})")
        return self._rows[row][col]

    def add(
        self,
        row: int,
        col: int,
        block_type: BlockType,
        counter_slide: int,
        frame: int,
        rng: _Rng,
    ) -> Optional[Block]:
        """Place a new block in a slot; returns it, or None when off the grid."""
        if not self.in_bounds(row, col):
            return None
        self.clear(row, col)
        cfg = self.config
        blk = self._rows[row][col]

        blk.block_type = block_type
        blk.occupied = True
        blk.counter_slide = counter_slide
        blk.last_frame = frame + cfg.infinite_delay

        if block_type is BlockType.RANDOM:
            blk.random = True
            blk.block_type = BlockType.RED
            blk.next_frame = frame + 1
        elif block_type is BlockType.DROP:
            blk.drop = True
            blk.next_frame = frame + rng.randrange(cfg.drop_delay) + 200
        elif block_type is BlockType.ROAMER:
            blk.next_frame = frame + rng.randrange(cfg.roam_eyes_delay) + 50
            blk.last_frame = frame + rng.randrange(cfg.roam_delay) + 300

        self._place(blk, row, col)

        blk.hit_points = hit_points_for(block_type, row, cfg.max_row)
        if block_type is BlockType.EXTRABALL:
            blk.next_frame = frame + cfg.extraball_delay
        elif block_type is BlockType.DEATH:
            blk.next_frame = frame + cfg.death_delay2
        return blk

    def _place(self, blk: Block, row: int, col: int) -> None:
        cfg = self.config
        width, height = block_size(blk.block_type)
        blk.width = width
        blk.height = height
        blk.offset_x = _div(cfg.col_width - width, 2)
        blk.offset_y = _div(cfg.row_height - height, 2)
        blk.x = col * cfg.col_width + blk.offset_x
        blk.y = row * cfg.row_height + blk.offset_y
        blk.regions = block_regions(blk.x, blk.y, width, height)

    def clear(self, row: int, col: int) -> None:
        """Empty a slot, cancelling any explosion running in it."""
        if not self.in_bounds(row, col):
            return
        blk = self._rows[row][col]
        if blk.exploding and self.blocks_exploding > 0:
            self.blocks_exploding -= 1
        blk.reset()
        blk.last_frame = self.config.infinite_delay

    def clear_all(self) -> None:
        """Empty every slot of the grid."""
        for row in range(self.config.max_row):
            for col in range(self.config.max_col):
                self.clear(row, col)

    def still_active(self) -> bool:
        """False once the level is finished, True while blocks remain to clear."""
        if any(counts_for_level_end(blk.block_type) for _, _, blk in self.occupied_cells()):
            return True
        return self.blocks_exploding > 1

    def occupied_cells(self) -> Iterator[tuple[int, int, Block]]:
        """Yield (row, col, block) for every occupied slot, row by row."""
        for row, blocks in enumerate(self._rows):
            for col, blk in enumerate(blocks):
                if blk.occupied:
                    yield row, col, blk

    def cell_of(self, x: int, y: int) -> tuple[int, int]:
        """Return the (row, col) of the slot containing the pixel (x, y)."""
        return _div(y, self.config.row_height), _div(x, self.config.col_width)