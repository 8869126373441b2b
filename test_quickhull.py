from collections import Counter

import numpy as np
import pytest

from geometry import Point, as_point, convex_hull_andrew, hull_vertices, is_right_of
from quickhull import QuickHullBuilder, quickhull


def P(x, y):
    return Point(float(x), float(y))


def undirected(edges):
    return Counter(frozenset(edge) for edge in edges)


def check_convex(points, edges):
    points = [as_point(p) for p in points]
    for edge in edges:
        outside = [p for p in points if is_right_of(edge, p)]
        assert not outside, f"Points {outside} lie outside of edge {edge}"


def check_hull_equal(points):
    points = [as_point(p) for p in points]
    edges = quickhull(points)
    check_convex(points, edges)
    vertices_naive = sorted(convex_hull_andrew(points))
    vertices_fast = sorted(hull_vertices(edges))
    assert vertices_naive == vertices_fast, (
        f"Hull vertices differ:\n{vertices_naive}\n{vertices_fast}"
    )
    return edges


def test_empty():
    assert quickhull([]) == []


def test_single_point():
    assert quickhull([(0, 0)]) == [(P(0, 0), P(0, 0)), (P(0, 0), P(0, 0))]


def test_duplicate_points():
    assert quickhull([(1, 1)] * 5) == [(P(1, 1), P(1, 1))] * 2


def test_two_points():
    assert Counter(quickhull([(2, 3), (0, 0)])) == Counter([
        (P(0, 0), P(2, 3)),
        (P(2, 3), P(0, 0)),
    ])


def test_square_with_interior_point():
    edges = quickhull([(0, 0), (1, 0), (1, 1), (0, 1), (0.5, 0.5)])
    assert Counter(edges) == Counter([
        (P(0, 0), P(1, 0)),
        (P(1, 0), P(1, 1)),
        (P(1, 1), P(0, 1)),
        (P(0, 1), P(0, 0)),
    ])
    assert P(0.5, 0.5) not in hull_vertices(edges)


def test_collinear():
    edges = quickhull([(0, 0), (1, 0), (2, 0)])
    assert Counter(edges) == Counter([(P(0, 0), P(2, 0)), (P(2, 0), P(0, 0))])


def test_many_collinear_points():
    points = [(x, 0) for x in range(2000)]
    edges = quickhull(points)
    assert Counter(edges) == Counter([(P(0, 0), P(1999, 0)), (P(1999, 0), P(0, 0))])


def test_all_points_on_hull():
    # a long convex chain, every point is a hull vertex
    points = [(x, x * x) for x in range(3000)]
    edges = quickhull(points)
    assert len(edges) == 3000
    assert hull_vertices(edges) == {as_point(p) for p in points}


def test_edges_are_counterclockwise():
    edges = quickhull([(0, 0), (4, 0), (4, 3), (0, 3), (1, 1), (2, 2)])
    for a, b in edges:
        assert not is_right_of((a, b), P(2, 1.5))


def test_numpy_input():
    points = np.array([[0, 0], [2, 0], [1, 2], [1, 1]])
    edges = quickhull(points)
    assert hull_vertices(edges) == {P(0, 0), P(2, 0), P(1, 2)}


def test_split_picks_furthest():
    line = (P(0, 0), P(4, 0))
    right, furthest = QuickHullBuilder.split([P(1, -1), P(2, 5), P(3, -2)], line)
    assert right == [P(1, -1), P(3, -2)]
    assert furthest == P(3, -2)


@pytest.mark.parametrize("candidates", [
    [P(2, -2), P(1, -2), P(3, -2)],
    [P(3, -2), P(2, -2), P(1, -2)],
    [P(1, -2), P(2, -2), P(3, -2)],
])
def test_split_tie_goes_to_largest_point(candidates):
    _, furthest = QuickHullBuilder.split(candidates, (P(0, 0), P(4, 0)))
    assert furthest == P(3, -2)


def test_collinear_ties_are_not_hull_vertices():
    points = [(0, 0), (4, 0), (2, -2), (1, -2), (3, -2)]
    edges = quickhull(points)
    assert hull_vertices(edges) == {P(0, 0), P(4, 0), P(1, -2), P(3, -2)}
    assert len(edges) == 4


def test_split_terminal_line():
    right, furthest = QuickHullBuilder.split([P(1, 1), P(2, 0)], (P(0, 0), P(4, 0)))
    assert right == []
    assert furthest is None


def test_builder_counters():
    builder = QuickHullBuilder()
    edges = builder.compute_hull([(0, 0), (1, 0), (1, 1), (0, 1)])
    assert len(edges) == 4
    # two internal nodes, four terminal
    assert builder.steps == 6
    assert builder.max_stack >= 1


@pytest.mark.parametrize("scale", [0.5, 2.0, 3.0])
def test_scale_invariance(scale):
    np.random.seed(7)
    points = [P(x, y) for x, y in np.random.randint(-100, 100, size=(200, 2))]
    edges = quickhull(points)
    scaled_edges = quickhull([P(p.x * scale, p.y * scale) for p in points])
    expected = [(P(a.x * scale, a.y * scale), P(b.x * scale, b.y * scale)) for a, b in edges]
    assert Counter(scaled_edges) == Counter(expected)


@pytest.mark.parametrize("n_points", [3, 10, 100, 1000])
def test_hull_is_fixed_point(n_points):
    np.random.seed(n_points)
    points = [P(x, y) for x, y in np.random.randint(0, 50, size=(n_points, 2))]
    edges = quickhull(points)
    assert undirected(quickhull(hull_vertices(edges))) == undirected(edges)


@pytest.fixture
def distribution_gen_func():
    return {
        "uniform": lambda low, high, s: np.random.rand(s) * high + low,
        "normal": lambda low, high, s: np.random.randn(s) * high + low,
        "uniform_int": np.random.randint,
    }


@pytest.mark.parametrize("n_points", [1, 2, 3, 10, 100, 1000])
@pytest.mark.parametrize("distribution_type", ["uniform_int", "uniform", "normal"])
@pytest.mark.parametrize("limits", [(0, 10), (0, 100), (-100, 100), (-10**6, 10**6)])
def test_quickhull_matches_monotone_chain(n_points, distribution_type, limits, distribution_gen_func):
    np.random.seed(42)

    seeds = np.random.randint(0, 100_000, size=20)
    for seed in seeds:
        np.random.seed(seed)

        gen_func = distribution_gen_func[distribution_type]
        low, high = limits
        xs = gen_func(low, high, n_points).astype(float)
        ys = gen_func(low, high, n_points).astype(float)
        points = [Point(xs[i], ys[i]) for i in range(n_points)]

        check_hull_equal(points)
