# gridpath/core/astar.py
#!/usr/bin/env python3
"""
A*: one min-f expansion per step() for animation.

Heuristic:
- Manhattan distance (admissible and consistent for 4-connected unit cost).

Tie-breaking in the PQ:
- (f, seq, cell): lower f, then the cell that entered the open set first.
  An improved cell keeps its first seq, so ordering matches a linear
  scan of the open set in insertion order.

Termination:
- Success when the end cell is popped (after its neighbours are processed).
- Failure when the open set runs dry.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple, List, Optional
import heapq
from math import inf

from gridpath.core.grid import is_obstacle, mark_visited
from gridpath.core.heuristic import manhattan
from gridpath.core.reconstruct import path_from_parents
from gridpath.core.stepper import Stepper
from gridpath.core.types import Coord, StepResult


@dataclass
class AStarAlgo(Stepper):
    name: str = "A*"

    # Internal state
    open_pq: List[Tuple[float, int, Coord]] = field(default_factory=list)  # (f, seq, cell)
    open_set: Dict[Coord, int] = field(default_factory=dict)  # cell -> seq
    closed_set: set = field(default_factory=set)
    g: Dict[Coord, float] = field(default_factory=dict)
    f: Dict[Coord, float] = field(default_factory=dict)
    parent: Dict[Coord, Coord] = field(default_factory=dict)
    popped_count: int = 0
    seq: int = 0  # monotonic counter for PQ stability

    # -------------------- lifecycle --------------------

    def _clear(self) -> None:
        self.open_pq.clear()
        self.open_set.clear()
        self.closed_set.clear()
        self.g.clear()
        self.f.clear()
        self.parent.clear()
        self.popped_count = 0
        self.seq = 0

    def _seed(self) -> None:
        s = self.start
        self.g[s] = 0
        self.f[s] = self._h(s)
        self.parent[s] = s
        self.open_set[s] = self._bump()
        heapq.heappush(self.open_pq, (self.f[s], self.open_set[s], s))

    # -------------------- helpers --------------------

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def _h(self, c: Coord) -> int:
        return manhattan(c, self.end)

    def _pop_min(self) -> Optional[Coord]:
        while self.open_pq:
            f_u, _, u = heapq.heappop(self.open_pq)
            # Ignore stale entries left behind by later improvements
            if u in self.open_set and f_u == self.f[u]:
                return u
        return None

    # -------------------- main stepping logic --------------------

    def _advance(self) -> StepResult:
        """
        Run ONE A* expansion step:
          - Pop the lowest-f node and close it.
          - Relax its neighbours; newly discovered ones are marked visited.
          - If the popped node is the end, reconstruct and finish.
        """
        u = self._pop_min()
        if u is None:
            return self._fail()

        self.popped_count += 1
        del self.open_set[u]
        self.closed_set.add(u)

        opened_now: List[Coord] = []
        for v in self.grid.neighbors4(u):
            if v in self.closed_set or is_obstacle(self.grid.cell(v)):
                continue
            alt = self.g[u] + 1
            improved = alt < self.g.get(v, inf)
            if improved:
                self.g[v] = alt
                self.f[v] = alt + self._h(v)
                self.parent[v] = u
            if v not in self.open_set:
                self.open_set[v] = self._bump()
                mark_visited(self.grid.cell(v))
                self.visited_count += 1
                opened_now.append(v)
            if improved:
                heapq.heappush(self.open_pq, (self.f[v], self.open_set[v], v))

        if u == self.end:
            path = path_from_parents(self.parent, self.start, self.end)
            return self._finish(path, opened_now, [u], u)

        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self._metrics())

    # -------------------- metrics --------------------

    def _open_size(self) -> int:
        return len(self.open_set)

    def _closed_count(self) -> int:
        return len(self.closed_set)
