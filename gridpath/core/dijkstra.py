# gridpath/core/dijkstra.py
#!/usr/bin/env python3

from dataclasses import dataclass, field
from typing import Dict, Tuple, List, Optional
import heapq
from math import inf

from gridpath.core.grid import is_obstacle, mark_visited
from gridpath.core.reconstruct import path_from_parents
from gridpath.core.stepper import Stepper
from gridpath.core.types import Coord, StepResult


@dataclass
class DijkstraAlgo(Stepper):
    """Uniform-cost search; one min-distance pop per step().

    Unlike A*, the end is accepted as soon as it is discovered as a
    neighbour, not when it is popped.
    """

    name: str = "Dijkstra"

    open_pq: List[Tuple[float, int, Coord]] = field(default_factory=list)   # (distance, seq, cell)
    open_set: Dict[Coord, int] = field(default_factory=dict)
    closed_set: set = field(default_factory=set)
    distance: Dict[Coord, float] = field(default_factory=dict)
    parent: Dict[Coord, Coord] = field(default_factory=dict)
    popped_count: int = 0
    seq: int = 0

    def _clear(self) -> None:
        self.open_pq.clear()
        self.open_set.clear()
        self.closed_set.clear()
        self.distance.clear()
        self.parent.clear()
        self.popped_count = 0
        self.seq = 0

    def _seed(self) -> None:
        s = self.start
        self.distance[s] = 0
        self.parent[s] = s
        self.seq += 1
        self.open_set[s] = self.seq
        heapq.heappush(self.open_pq, (0, self.seq, s))

    def _pop_min(self) -> Optional[Coord]:
        while self.open_pq:
            d_u, _, u = heapq.heappop(self.open_pq)
            if u in self.open_set and d_u == self.distance[u]:
                return u
        return None

    def _advance(self) -> StepResult:
        u = self._pop_min()
        if u is None:
            return self._fail()

        self.popped_count += 1
        del self.open_set[u]
        self.closed_set.add(u)

        if u == self.end:
            return self._finish(path_from_parents(self.parent, self.start, self.end), [], [u], u)

        opened_now: List[Coord] = []
        for v in self.grid.neighbors4(u):
            if v in self.closed_set or is_obstacle(self.grid.cell(v)):
                continue
            alt = self.distance[u] + 1
            if v == self.end:
                self.distance[v] = alt
                self.parent[v] = u
                path = path_from_parents(self.parent, self.start, self.end)
                return self._finish(path, opened_now, [u], u)
            if alt < self.distance.get(v, inf):
                self.distance[v] = alt
                self.parent[v] = u
                if v not in self.open_set:
                    self.seq += 1
                    self.open_set[v] = self.seq
                    mark_visited(self.grid.cell(v))
                    self.visited_count += 1
                    opened_now.append(v)
                heapq.heappush(self.open_pq, (alt, self.open_set[v], v))

        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self._metrics())

    def _open_size(self) -> int:
        return len(self.open_set)

    def _closed_count(self) -> int:
        return len(self.closed_set)
