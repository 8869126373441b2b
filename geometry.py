import numpy as np

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True, order=True)
class Point:
    """
    Immutable point in the plane.

    Equality is exact, ordering is lexicographic by (x, y).
    """
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y


Line = tuple[Point, Point]


def as_point(pair: Sequence[float]) -> Point:
    if isinstance(pair, Point):
        return pair
    x, y = pair
    return Point(float(x), float(y))


def cross(o: Point, a: Point, b: Point) -> float:
    """
    Cross product of segments oa and ob.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def is_right_of(line: Line, point: Point) -> bool:
    """
    Checks if point lies strictly to the right of the directed line.
    Points on the line itself are not right of it, there is no tolerance.
    """
    a, b = line
    return cross(a, b, point) < 0


def perp_distance(line: Line, point: Point) -> float:
    """
    Perpendicular distance from point to the line through line's endpoints.
    Note that for a zero-length line the result is inf (or nan
    if the point coincides with it) instead of an error.
    """
    a, b = line
    num = abs((b.y - a.y) * point.x - (b.x - a.x) * point.y + (b.x * a.y - b.y * a.x))
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(num) / np.hypot(b.x - a.x, b.y - a.y))


def extreme_points(points: Iterable[Point]) -> Line | None:
    """
    Lexicographically minimal and maximal points, or None for an empty input.
    """
    it = iter(points)
    try:
        lo = hi = next(it)
    except StopIteration:
        return None
    for p in it:
        if p < lo:
            lo = p
        elif hi < p:
            hi = p
    return lo, hi


def convex_hull_andrew(points: list[Point]) -> list[Point]:
    """
    Andrew's monotone chain algorithm for convex hull.
    Collinear points on the boundary are dropped. Time complexity: O(n*log(n)).
    """
    points = sorted(set(points))
    if len(points) <= 2:
        return points

    lower = []
    for p in points:
        while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper = []
    for p in reversed(points):
        while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    # remove duplicate points
    return list(set(lower[:-1] + upper[:-1]))


def hull_vertices(edges: Iterable[Line]) -> set[Point]:
    return {p for edge in edges for p in edge}


def sort_hull_points(points):
    """
    Sort hull points by polar angle.
    """
    points = list(points)
    if len(points) <= 2:
        return points

    cx = sum(p.x for p in points) / len(points)
    cy = sum(p.y for p in points) / len(points)

    def polar_angle(p: Point):
        return np.arctan2(p.y - cy, p.x - cx)

    return sorted(points, key=polar_angle)
