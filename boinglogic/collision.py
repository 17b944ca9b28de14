"""Which side of a block a ball has run into."""

from __future__ import annotations

from enum import IntFlag

from boinglogic.grid import BlockGrid


class Region(IntFlag):
    """Sides of a block a ball can strike; corners combine two sides."""

    NONE = 0
    LEFT = 1
    RIGHT = 2
    TOP = 4
    BOTTOM = 8


_NEIGHBOUR_SEARCH = (
    (0, 0), (1, 0), (-1, 0), (0, 1), (0, -1),
    (1, 1), (-1, -1), (1, -1),
)


def _neighbour_occupied(grid: BlockGrid, row: int, col: int) -> bool:
    return grid.in_bounds(row, col) and grid.block(row, col).occupied


def check_regions(
    grid: BlockGrid,
    row: int,
    col: int,
    x: int,
    y: int,
    dx: int,
    dy: int,
    half_width: int,
    half_height: int,
) -> Region:
    """Sides of the block at (row, col) touched by a ball centred on (x, y).

    A side only counts when the neighbouring slot on that side is empty.
    """
    if not grid.in_bounds(row, col):
        return Region.NONE
    blk = grid.block(row, col)
    if not blk.occupied or blk.exploding or blk.regions is None:
        return Region.NONE

    cfg = grid.config
    left = x - half_width
    top = y - half_height
    regions = blk.regions

    horizontal = (
        (regions.hit_left, Region.LEFT, (row, col - 1)),
        (regions.hit_right, Region.RIGHT, (row, col + 1)),
    )
    vertical = (
        (regions.hit_bottom, Region.BOTTOM, (row + 1, col)),
        (regions.hit_top, Region.TOP, (row - 1, col)),
    )
    checks = horizontal + vertical if abs(dx) > abs(dy) else vertical + horizontal

    result = Region.NONE
    for hit, side, (n_row, n_col) in checks:
        if hit(left, top, cfg.ball_width, cfg.ball_height) and not _neighbour_occupied(
            grid, n_row, n_col
        ):
            result |= side
    return result


def check_for_collision(
    grid: BlockGrid,
    x: int,
    y: int,
    row: int,
    col: int,
    dx: int,
    dy: int,
    half_width: int,
    half_height: int,
) -> tuple[Region, int, int]:
    """Search the ball's cell and its neighbours for a hit.

    Returns (sides hit, row, col) of the first block found. A hit found only
    in the upper-right neighbour moves the cell there but reports no sides.
    """
    for d_row, d_col in _NEIGHBOUR_SEARCH:
        region = check_regions(
            grid, row + d_row, col + d_col, x, y, dx, dy, half_width, half_height
        )
        if region:
            return region, row + d_row, col + d_col

    if check_regions(grid, row - 1, col + 1, x, y, dx, dy, half_width, half_height):
        return Region.NONE, row - 1, col + 1
    return Region.NONE, row, col