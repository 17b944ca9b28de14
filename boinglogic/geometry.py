"""Triangular hit regions around a block and rectangle overlap tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

Point = tuple[int, int]


def _distinct_vertices(points: Sequence[Point]) -> list[Point]:
    """Drop repeated consecutive vertices and a closing copy of the first."""
    vertices: list[Point] = []
    for point in points:
        point = (point[0], point[1])
        if not vertices or vertices[-1] != point:
            vertices.append(point)
    while len(vertices) > 1 and vertices[-1] == vertices[0]:
        vertices.pop()
    return vertices


def _signed_area(vertices: Sequence[Point]) -> float:
    pairs = zip(vertices, vertices[1:] + vertices[:1])
    return sum(x1 * y2 - x2 * y1 for (x1, y1), (x2, y2) in pairs) / 2.0


def _project(vertices: Sequence[Point], axis: tuple[float, float]) -> tuple[float, float]:
    values = [vx * axis[0] + vy * axis[1] for vx, vy in vertices]
    return min(values), max(values)


def polygon_intersects_rect(
    points: Sequence[Point], x: int, y: int, width: int, height: int
) -> bool:
    """True when the convex polygon and the rectangle share any interior area.

    Touching along an edge or at a corner does not count as overlap, and a
    polygon without area (or an empty rectangle) never overlaps anything.
    """
    if width <= 0 or height <= 0:
        return False
    vertices = _distinct_vertices(points)
    if len(vertices) < 3 or _signed_area(vertices) == 0:
        return False

    rect = [(x, y), (x + width, y), (x + width, y + height), (x, y + height)]
    axes: list[tuple[float, float]] = [(1.0, 0.0), (0.0, 1.0)]
    for (x1, y1), (x2, y2) in zip(vertices, vertices[1:] + vertices[:1]):
        edge = (x2 - x1, y2 - y1)
        if edge != (0, 0):
            axes.append((-edge[1], edge[0]))

    for axis in axes:
        poly_min, poly_max = _project(vertices, axis)
        rect_min, rect_max = _project(rect, axis)
        if poly_max <= rect_min or rect_max <= poly_min:
            return False
    return True


@dataclass(frozen=True)
class BlockRegions:
    """The four triangles meeting at a block's centre, one per side."""

    top: tuple[Point, ...]
    bottom: tuple[Point, ...]
    left: tuple[Point, ...]
    right: tuple[Point, ...]

    def hit_top(self, x: int, y: int, width: int, height: int) -> bool:
        return polygon_intersects_rect(self.top, x, y, width, height)

    def hit_bottom(self, x: int, y: int, width: int, height: int) -> bool:
        return polygon_intersects_rect(self.bottom, x, y, width, height)

    def hit_left(self, x: int, y: int, width: int, height: int) -> bool:
        return polygon_intersects_rect(self.left, x, y, width, height)

    def hit_right(self, x: int, y: int, width: int, height: int) -> bool:
        return polygon_intersects_rect(self.right, x, y, width, height)


def block_regions(x: int, y: int, width: int, height: int) -> BlockRegions:
    """Build the side regions of a block whose top-left corner is (x, y)."""
    centre = (x + width // 2, y + height // 2)
    bottom_y = y + height
    right_x = x + width
    return BlockRegions(
        top=((x, y), centre, (right_x, y), (x, y)),
        bottom=((x, bottom_y), centre, (right_x, bottom_y), (x, bottom_y)),
        left=((x, y), centre, (x, bottom_y), (x, y)),
        right=((right_x, y), centre, (right_x, bottom_y), (right_x, y)),
    )