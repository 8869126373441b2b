import argparse
import logging
import sys

import constants
from benchmark import run_benchmark
from concurrency import quickhull_parallel
from errors import PointsFileError
from geometry import convex_hull_andrew, hull_vertices, sort_hull_points
from quickhull import quickhull
from util import read_points, timeit, write_edges

logger = logging.getLogger("program")


def parse_args(argv=None):
    parser = argparse.ArgumentParser("quickhull", description="Convex hull of planar points")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    hull = commands.add_parser("hull", help="compute hull edges of a points file")
    hull.add_argument("file", help="points file: count, then one 'x y' per line")
    hull.add_argument("--out", help="write edges here instead of stdout")
    hull.add_argument("--parallel", action="store_true", help="use the fork-join builder")
    hull.add_argument("--fan-out", type=int, default=constants.DEFAULT_FAN_OUT)
    hull.add_argument("--check", action="store_true",
                      help="compare hull vertices with the monotone chain algorithm")

    bench = commands.add_parser("bench", help="time quickhull on uniform random points")
    bench.add_argument("--sizes", type=int, nargs="+", default=list(constants.BENCHMARK_SIZES))
    bench.add_argument("--repeat", type=int, default=constants.BENCHMARK_REPEAT)
    bench.add_argument("--parallel", action="store_true")

    return parser.parse_args(argv)


@timeit
def compute(points, parallel: bool, fan_out: int):
    if parallel:
        return quickhull_parallel(points, fan_out=fan_out)
    return quickhull(points)


def run_hull(args) -> int:
    try:
        points = read_points(args.file)
    except (PointsFileError, OSError) as e:
        logger.error("cannot load points: %s", e)
        return 2

    try:
        edges = compute(points, args.parallel, args.fan_out)
    except ValueError as e:
        logger.error("%s", e)
        return 2
    vertices = sort_hull_points(hull_vertices(edges))
    logger.info("%d points, %d hull edges, %d hull vertices", len(points), len(edges), len(vertices))

    if args.out:
        try:
            with open(args.out, 'w', encoding='utf-8') as f:
                write_edges(f, edges)
        except OSError as e:
            logger.error("cannot write edges: %s", e)
            return 2
    else:
        write_edges(sys.stdout, edges)

    if args.check:
        expected = set(convex_hull_andrew(points))
        if expected != set(vertices):
            logger.error("hull mismatch: missing %s, extra %s",
                         sorted(expected - set(vertices)), sorted(set(vertices) - expected))
            return 1
        logger.info("hull matches monotone chain")
    return 0


def run_bench(args) -> int:
    try:
        results = run_benchmark(args.sizes, repeat=args.repeat, parallel=args.parallel)
    except ValueError as e:
        logger.error("%s", e)
        return 2
    for r in results:
        print(f"{r.n:>10} {r.best:.6f} {r.mean:.6f} {r.points_per_sec:.0f} {r.edges}")
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else constants.LOG_LEVEL,
        format=constants.LOG_FORMAT,
        datefmt=constants.LOG_DATE_FORMAT,
    )
    if args.command == "hull":
        return run_hull(args)
    return run_bench(args)


if __name__ == "__main__":
    sys.exit(main())
