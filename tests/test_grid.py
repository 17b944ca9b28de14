import random

import pytest

from boinglogic.blocktypes import ArenaConfig, BlockType, block_size, hit_points_for
from boinglogic.geometry import block_regions
from boinglogic.grid import Block, BlockGrid


@pytest.fixture
def grid():
    return BlockGrid()


@pytest.fixture
def rng():
    return random.Random(1234)


def test_new_grid_is_empty(grid):
    assert list(grid.occupied_cells()) == []
    assert grid.still_active() is False


def test_in_bounds(grid):
    cfg = grid.config
    assert grid.in_bounds(0, 0)
    assert grid.in_bounds(cfg.max_row - 1, cfg.max_col - 1)
    assert not grid.in_bounds(cfg.max_row, 0)
    assert not grid.in_bounds(0, -1)


def test_block_out_of_range_raises(grid):
    with pytest.raises(IndexError):
        grid.block(grid.config.max_row, 0)


def test_add_red_block(grid, rng):
    blk = grid.add(2, 3, BlockType.RED, 0, 10, rng)
    assert blk is grid.block(2, 3)
    assert blk.occupied
    assert blk.block_type is BlockType.RED
    assert blk.hit_points == 100
    assert (blk.width, blk.height) == block_size(BlockType.RED)
    assert blk.x == 3 * grid.config.col_width + blk.offset_x
    assert blk.y == 2 * grid.config.row_height + blk.offset_y
    assert blk.last_frame == 10 + grid.config.infinite_delay


def test_add_builds_regions(grid, rng):
    blk = grid.add(1, 1, BlockType.BLACK, 0, 0, rng)
    assert blk.regions == block_regions(blk.x, blk.y, blk.width, blk.height)


def test_add_off_grid_returns_none(grid, rng):
    assert grid.add(-1, 0, BlockType.RED, 0, 0, rng) is None
    assert list(grid.occupied_cells()) == []


def test_random_block_becomes_red(grid, rng):
    blk = grid.add(4, 4, BlockType.RANDOM, 0, 7, rng)
    assert blk.random
    assert blk.block_type is BlockType.RED
    assert blk.next_frame == 8
    assert blk.hit_points == 0


def test_drop_block(grid, rng):
    blk = grid.add(5, 2, BlockType.DROP, 0, 100, rng)
    assert blk.drop
    assert 300 <= blk.next_frame < 300 + grid.config.drop_delay
    assert blk.hit_points == hit_points_for(BlockType.DROP, 5, grid.config.max_row)


def test_roamer_timings(grid, rng):
    cfg = grid.config
    blk = grid.add(3, 3, BlockType.ROAMER, 0, 0, rng)
    assert 50 <= blk.next_frame < 50 + cfg.roam_eyes_delay
    assert 300 <= blk.last_frame < 300 + cfg.roam_delay


def test_death_and_extraball_next_frame(grid, rng):
    cfg = grid.config
    death = grid.add(2, 2, BlockType.DEATH, 0, 20, rng)
    extra = grid.add(2, 4, BlockType.EXTRABALL, 0, 20, rng)
    assert death.next_frame == 20 + cfg.death_delay2
    assert extra.next_frame == 20 + cfg.extraball_delay


def test_counter_slide_kept(grid, rng):
    blk = grid.add(2, 2, BlockType.COUNTER, 5, 0, rng)
    assert blk.counter_slide == 5
    assert blk.hit_points == 200


def test_clear_resets_and_decrements_explosions(grid, rng):
    blk = grid.add(2, 2, BlockType.RED, 0, 0, rng)
    blk.exploding = True
    grid.blocks_exploding = 1
    grid.clear(2, 2)
    assert grid.blocks_exploding == 0
    assert grid.block(2, 2) == Block()


def test_clear_all(grid, rng):
    grid.add(1, 1, BlockType.RED, 0, 0, rng)
    grid.add(2, 2, BlockType.BLUE, 0, 0, rng)
    grid.clear_all()
    assert list(grid.occupied_cells()) == []


def test_block_reset():
    blk = Block(occupied=True, hit_points=120, block_type=BlockType.GREEN)
    blk.reset()
    assert blk == Block()


def test_still_active_only_for_required_blocks(grid, rng):
    grid.add(1, 1, BlockType.BLACK, 0, 0, rng)
    grid.add(1, 2, BlockType.BOMB, 0, 0, rng)
    assert grid.still_active() is False
    grid.add(1, 3, BlockType.PURPLE, 0, 0, rng)
    assert grid.still_active() is True


def test_still_active_while_explosions_run(grid):
    grid.blocks_exploding = 2
    assert grid.still_active() is True
    grid.blocks_exploding = 1
    assert grid.still_active() is False


def test_occupied_cells_in_row_order(grid, rng):
    grid.add(3, 1, BlockType.RED, 0, 0, rng)
    grid.add(1, 4, BlockType.TAN, 0, 0, rng)
    cells = [(r, c) for r, c, _ in grid.occupied_cells()]
    assert cells == [(1, 4), (3, 1)]


def test_cell_of_block_centre_round_trip(grid, rng):
    for row, col in [(0, 0), (5, 3), (10, 8)]:
        blk = grid.add(row, col, BlockType.YELLOW, 0, 0, rng)
        assert grid.cell_of(blk.x + blk.width // 2, blk.y + blk.height // 2) == (row, col)


def test_custom_config_used():
    cfg = ArenaConfig(max_row=4, max_col=3)
    small = BlockGrid(cfg)
    assert small.in_bounds(3, 2)
    assert not small.in_bounds(4, 0)
    with pytest.raises(IndexError):
        small.block(0, 3)