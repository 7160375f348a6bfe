# gridpath/core/bfs.py
#!/usr/bin/env python3
"""
Breadth-first search, one level per step().

The queue length at the start of a step bounds how many cells are
dequeued in it. Discovered cells are marked visited on the grid as they
are enqueued, so the grid's visited flags double as the discovered set;
reset the grid between runs.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List

from gridpath.core.grid import is_obstacle, is_visited, mark_visited
from gridpath.core.reconstruct import path_from_parents
from gridpath.core.stepper import Stepper
from gridpath.core.types import Coord, StepResult


@dataclass
class BFSAlgo(Stepper):
    name: str = "BFS"

    queue: Deque[Coord] = field(default_factory=deque)
    parent: Dict[Coord, Coord] = field(default_factory=dict)
    levels: int = 0

    def _clear(self) -> None:
        self.queue.clear()
        self.parent.clear()
        self.levels = 0

    def _seed(self) -> None:
        s = self.start
        self.parent[s] = s
        self.queue.append(s)
        mark_visited(self.grid.cell(s))

    def _advance(self) -> StepResult:
        if not self.queue:
            return self._fail()

        self.levels += 1
        opened_now: List[Coord] = []
        closed_now: List[Coord] = []
        for _ in range(len(self.queue)):
            if self.queue[0] == self.end:
                u = self.queue[0]
                return self._finish(self._path(), opened_now, closed_now, u)

            u = self.queue.popleft()
            closed_now.append(u)
            for v in self.grid.neighbors4(u):
                cell = self.grid.cell(v)
                if is_obstacle(cell) or is_visited(cell):
                    continue
                self.parent[v] = u
                if v == self.end:
                    return self._finish(self._path(), opened_now, closed_now, u)
                self.queue.append(v)
                mark_visited(cell)
                self.visited_count += 1
                opened_now.append(v)

        return StepResult(status="running", opened=opened_now, closed=closed_now,
                          current=closed_now[-1] if closed_now else None,
                          metrics=self._metrics())

    def _path(self) -> List[Coord]:
        return path_from_parents(self.parent, self.start, self.end)

    def _open_size(self) -> int:
        return len(self.queue)

    def _closed_count(self) -> int:
        return len(self.parent) - len(self.queue)
