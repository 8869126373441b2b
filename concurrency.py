from collections import deque
from concurrent import futures
import logging
import os
import typing as t

import constants
from geometry import Line, as_point
from quickhull import QuickHullBuilder, Task


logger = logging.getLogger(__name__)

EXECUTORS = {
    "thread": futures.ThreadPoolExecutor,
    "process": futures.ProcessPoolExecutor,
}


def _build_task(task: Task) -> tuple[list[Line], int, int]:
    candidates, line = task
    builder = QuickHullBuilder()
    edges = builder.build(candidates, line)
    return edges, builder.steps, builder.max_stack


class ParallelQuickHullBuilder(QuickHullBuilder):
    """
    Quickhull with fork-join fan-out.

    The worklist is expanded breadth-first until there are at least `fan_out`
    independent subproblems, which then run as separate executor tasks.
    Every task collects its own edges; they are concatenated at join.
    """

    executor: str
    max_workers: int
    fan_out: int

    def __init__(self, max_workers: t.Optional[int] = None,
                 fan_out: int = constants.DEFAULT_FAN_OUT,
                 executor: str = "thread"):
        super().__init__()
        if executor not in EXECUTORS:
            raise ValueError(f"Unknown executor: {executor!r}, expected one of {sorted(EXECUTORS)}")
        if fan_out < 1:
            raise ValueError(f"fan_out must be positive, got {fan_out}")
        self.executor = executor
        self.max_workers = max_workers or os.cpu_count() or 1
        self.fan_out = fan_out

    def expand(self, tasks: list[Task]) -> tuple[list[Task], list[Line]]:
        """
        Split tasks breadth-first on the calling thread.
        Returns pending subproblems and the edges already found terminal.
        """
        edges = []
        queue = deque(tasks)
        while queue and len(queue) < self.fan_out:
            candidates, line = queue.popleft()
            self.steps += 1
            right, furthest = self.split(candidates, line)
            if furthest is None:
                edges.append(line)
            else:
                queue.extend(self.children(right, line, furthest))
        return list(queue), edges

    def compute_hull(self, points) -> list[Line]:
        points = [as_point(p) for p in points]
        self.steps = self.max_stack = 0
        tasks, edges = self.expand(self.initial_tasks(points))
        if not tasks:
            return edges

        logger.debug("fan-out: %d tasks on %d %s workers", len(tasks), self.max_workers, self.executor)
        with EXECUTORS[self.executor](self.max_workers) as pool:
            # steps add up over tasks, max_stack is the deepest single task
            for task_edges, steps, max_stack in pool.map(_build_task, tasks):
                edges.extend(task_edges)
                self.steps += steps
                self.max_stack = max(self.max_stack, max_stack)
        return edges


def quickhull_parallel(points, **kwargs) -> list[Line]:
    return ParallelQuickHullBuilder(**kwargs).compute_hull(points)
