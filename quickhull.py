import logging
from typing import Iterable, Sequence

from geometry import Line, Point, as_point, extreme_points, is_right_of, perp_distance

logger = logging.getLogger(__name__)

Task = tuple[list[Point], Line]


class QuickHullBuilder:
    """
    Convex hull of a planar point set by divide and conquer (quickhull).

    The hull is returned as an unordered list of directed edges. Every input
    point lies on or to the left of each edge.
    """

    def __init__(self):
        self.steps = 0
        self.max_stack = 0

    @staticmethod
    def split(candidates: list[Point], line: Line) -> tuple[list[Point], Point | None]:
        """
        Keep candidates strictly right of the line and pick the furthest of them.

        Ties on distance go to the lexicographically largest point. Tied points
        are collinear, so this picks an end of their run, which is a hull vertex.
        Returns (right, None) if nothing is right of the line, i.e. the line is a hull edge.
        """
        right = [p for p in candidates if is_right_of(line, p)]
        if not right:
            return right, None
        furthest = max(right, key=lambda p: (perp_distance(line, p), p))
        return right, furthest

    @staticmethod
    def children(right: list[Point], line: Line, furthest: Point) -> list[Task]:
        a, b = line
        return [(right, (furthest, b)), (right, (a, furthest))]

    def build(self, candidates: list[Point], line: Line) -> list[Line]:
        """
        Find hull edges on the right side of the line.

        Each subproblem gets the already filtered candidates of its parent,
        so candidate sets only shrink and the loop terminates.
        An explicit stack replaces recursion, so depth is not limited by the interpreter.
        """
        edges = []
        stack = [(candidates, line)]
        while stack:
            self.max_stack = max(self.max_stack, len(stack))
            candidates, line = stack.pop()
            self.steps += 1

            right, furthest = self.split(candidates, line)
            if furthest is None:
                edges.append(line)
                continue
            # reversed, so that (furthest, b) is processed first
            stack.extend(reversed(self.children(right, line, furthest)))
        return edges

    def initial_tasks(self, points: list[Point]) -> list[Task]:
        line = extreme_points(points)
        if line is None:
            return []
        a, b = line
        return [(points, (a, b)), (points, (b, a))]

    def compute_hull(self, points: Iterable[Sequence[float]]) -> list[Line]:
        """
        Compute convex hull edges of a given multiset of points.

        Empty input gives no edges. A single distinct point gives zero-length edges,
        and collinear input gives the segment between extreme points in both directions.
        Time complexity: O(n*log(n)) on average, O(n^2) in the worst case.
        """
        points = [as_point(p) for p in points]
        self.steps = self.max_stack = 0

        edges = []
        for candidates, line in self.initial_tasks(points):
            edges.extend(self.build(candidates, line))

        logger.debug(
            "quickhull: %d points -> %d edges (%d steps, max stack %d)",
            len(points), len(edges), self.steps, self.max_stack,
        )
        return edges


def quickhull(points: Iterable[Sequence[float]]) -> list[Line]:
    return QuickHullBuilder().compute_hull(points)
