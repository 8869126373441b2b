import logging
import os
import time
import typing as t

from errors import PointsFileError
from geometry import Line, Point

logger = logging.getLogger(__name__)


def timeit(method):
    def timed(*args, **kw):
        ts = time.perf_counter()
        result = method(*args, **kw)
        te = time.perf_counter()
        logger.debug("%s elapsed time: %f sec", method.__qualname__, (te - ts))
        return result

    return timed


def _decoded_lines(path, f):
    for i, raw in enumerate(f, start=1):
        try:
            yield i, raw.decode('utf-8').strip()
        except UnicodeDecodeError as e:
            raise PointsFileError(path, i, f"not valid UTF-8: {e.reason}") from None


def read_points(path: str | os.PathLike) -> list[Point]:
    """
    Read points from a UTF-8 text file: the first line holds the number of points n,
    followed by n lines "x y". Blank lines are skipped.
    """
    points = []
    with open(path, 'rb') as f:
        lines = ((i, line) for i, line in _decoded_lines(path, f) if line)

        header = next(lines, None)
        if header is None:
            raise PointsFileError(path, 1, "missing point count")
        line_no, line = header
        try:
            n = int(line)
        except ValueError:
            raise PointsFileError(path, line_no, f"bad point count {line!r}") from None
        if n < 0:
            raise PointsFileError(path, line_no, f"negative point count {n}")

        for line_no, line in lines:
            if len(points) == n:
                raise PointsFileError(path, line_no, f"more than {n} points")
            fields = line.split()
            if len(fields) != 2:
                raise PointsFileError(path, line_no, f"expected 2 coordinates, got {len(fields)}")
            try:
                x, y = map(float, fields)
            except ValueError:
                raise PointsFileError(path, line_no, f"bad coordinates {line!r}") from None
            points.append(Point(x, y))

    if len(points) < n:
        raise PointsFileError(path, line_no, f"expected {n} points, got {len(points)}")
    logger.debug("read %d points from %s", n, path)
    return points


def write_edges(out: t.TextIO, edges: t.Iterable[Line]):
    for a, b in edges:
        out.write(f"{a.x} {a.y} {b.x} {b.y}\n")
