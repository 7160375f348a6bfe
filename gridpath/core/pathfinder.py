# gridpath/core/pathfinder.py
#!/usr/bin/env python3
"""
PathFinder owns the grid reference, the start/end markers and the
is_running flag, and turns an algorithm name into a SearchRun.

A SearchRun is advanced one step at a time by its host: first the
algorithm's own steps, then one step per final-path cell. Hosts with an
event loop (the pygame viewer) call step() on their own schedule;
run() drives a whole search synchronously through a Pacer.
"""

import dataclasses
import logging
from typing import Callable, Dict, List, Optional

from gridpath.core.astar import AStarAlgo
from gridpath.core.bfs import BFSAlgo
from gridpath.core.dfs import DFSAlgo
from gridpath.core.dijkstra import DijkstraAlgo
from gridpath.core.errors import InvalidSelection, ReentrancyViolation
from gridpath.core.grid import is_visited, reset_grid
from gridpath.core.pacer import Pacer
from gridpath.core.reconstruct import iter_final_path
from gridpath.core.stepper import Stepper
from gridpath.core.types import Coord, Grid, StepResult

logger = logging.getLogger(__name__)

ALGORITHMS: Dict[str, Callable[[], Stepper]] = {
    "a*":       AStarAlgo,
    "dijkstra": DijkstraAlgo,
    "dfs":      DFSAlgo,
    "bfs":      BFSAlgo,
}


class SearchRun:
    """One in-flight search plus the marking of its final path."""

    def __init__(self, finder: "PathFinder", key: str, algo: Stepper):
        self.finder = finder
        self.key = key
        self.algo = algo
        self.phase = "search"          # "search" -> "path" -> "finished"
        self.found: Optional[bool] = None
        self.path: List[Coord] = []
        self.last: StepResult = StepResult(status="idle", metrics={"algo": algo.name})
        self._marker = None
        self._to_mark = 0
        self._search_metrics: dict = {}

    @property
    def finished(self) -> bool:
        return self.phase == "finished"

    @property
    def pace_kind(self) -> str:
        return "path" if self.phase == "path" else self.key

    def step(self) -> StepResult:
        if self.finished:
            return self.last
        try:
            if self.phase == "search":
                self.last = self._search_step()
            else:
                self.last = self._mark_step()
        except Exception:
            self.phase = "finished"
            self.finder.is_running = False
            raise
        return self.last

    def _search_step(self) -> StepResult:
        res = self.algo.step()
        if res.status == "no_path":
            self._complete(False)
            return res
        if res.status != "done":
            return res

        self.path = list(res.path)
        self._search_metrics = res.metrics
        if self.algo.clears_trail:
            reset_grid(self.finder.grid, is_visited)
        self._marker = iter_final_path(self.finder.grid, self.path)
        self._to_mark = len(self.path)
        self.phase = "path"
        return dataclasses.replace(res, status="running")

    def _mark_step(self) -> StepResult:
        c = next(self._marker)
        self._to_mark -= 1
        metrics = dict(self._search_metrics, marked=len(self.path) - self._to_mark)
        if self._to_mark == 0:
            self._complete(True)
            return StepResult(status="done", current=c, path=self.path, metrics=metrics)
        return StepResult(status="running", current=c, path=self.path, metrics=metrics)

    def _complete(self, found: bool) -> None:
        self.phase = "finished"
        self.found = found
        self.finder.is_running = False
        if found:
            logger.info("%s found a path of %d cells from %s to %s", self.algo.name,
                        len(self.path), self.algo.start, self.algo.end)
        else:
            logger.info("%s: no path exists from %s to %s", self.algo.name,
                        self.algo.start, self.algo.end)


class PathFinder:
    def __init__(self, grid: Grid, start_point: Coord, end_point: Coord):
        self.grid = grid
        self.start_point = self._checked(start_point)
        self.end_point = self._checked(end_point)
        self.is_running = False

    # ---------- construction / update ----------
    def set_start_point(self, new_start: Coord) -> None:
        self.start_point = self._checked(new_start)

    def set_end_point(self, new_end: Coord) -> None:
        self.end_point = self._checked(new_end)

    def update_grid(self, new_grid: Grid) -> None:
        self.grid = new_grid

    def _checked(self, c: Coord) -> Coord:
        c = tuple(c)
        if self.grid is not None and not self.grid.in_bounds(c):
            raise ValueError(f"{c} is outside the {self.grid.row_count}x{self.grid.col_count} grid")
        return c

    # ---------- invocation ----------
    @staticmethod
    def normalize(name: str) -> str:
        key = str(name).strip().lower()
        if key not in ALGORITHMS:
            raise InvalidSelection(name, ALGORITHMS)
        return key

    def start(self, name: str) -> SearchRun:
        """Validate and begin a run; nothing on the grid is touched if this raises."""
        key = self.normalize(name)
        if self.is_running:
            logger.warning("rejected %s: a traversal is already in progress", key)
            raise ReentrancyViolation("A traversal is already in progress")
        self.start_point = self._checked(self.start_point)
        self.end_point = self._checked(self.end_point)
        algo = ALGORITHMS[key]()
        algo.init(self.grid, self.start_point, self.end_point)
        self.is_running = True
        logger.debug("starting %s from %s to %s on a %dx%d grid", algo.name,
                     self.start_point, self.end_point, self.grid.row_count, self.grid.col_count)
        return SearchRun(self, key, algo)

    def run(self, name: str, pacer: Optional[Pacer] = None) -> bool:
        """Run to completion, pausing before every step. True when a path was marked."""
        search = self.start(name)
        pacer = pacer if pacer is not None else Pacer()
        while not search.finished:
            pacer.pause(search.pace_kind)
            search.step()
        return bool(search.found)

    def a_star_search(self, pacer: Optional[Pacer] = None) -> bool:
        return self.run("a*", pacer)

    def dijkstra_search(self, pacer: Optional[Pacer] = None) -> bool:
        return self.run("dijkstra", pacer)

    def breadth_first_search(self, pacer: Optional[Pacer] = None) -> bool:
        return self.run("bfs", pacer)

    def depth_first_search(self, pacer: Optional[Pacer] = None) -> bool:
        return self.run("dfs", pacer)
