# gridpath/core/stepper.py
#!/usr/bin/env python3
"""
Shared lifecycle for the search algorithms.

Every algorithm implements the same API so hosts can drive any of them:
- init(grid, start, end) - reset() - step() -> StepResult

One step() is one unit of observable work (a node pop, a BFS level, a DFS
direction attempt). Subclasses fill in _clear(), _seed() and _advance().
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from gridpath.core.types import Coord, Grid, StepResult

logger = logging.getLogger(__name__)


@dataclass
class Stepper:
    name: str = "(no algorithm)"

    grid: Optional[Grid] = None
    start: Optional[Coord] = None
    end: Optional[Coord] = None
    path: Optional[List[Coord]] = None
    steps: int = 0
    visited_count: int = 0
    done: bool = False
    no_path: bool = False

    # DFS wipes its exploration trail before the final path is drawn
    clears_trail = False

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid, start: Coord, end: Coord) -> None:
        self.grid = grid
        self.start = tuple(start)
        self.end = tuple(end)
        self.reset()

    def reset(self) -> None:
        """Drop all search state and seed with the start coordinate."""
        if self.grid is None:
            return
        self.path = None
        self.steps = 0
        self.visited_count = 0
        self.done = False
        self.no_path = False
        self._clear()
        self._seed()

    def step(self) -> StepResult:
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})
        if self.done:
            return StepResult(status="done", path=self.path,
                              metrics=self._metrics())
        if self.no_path:
            return StepResult(status="no_path", metrics=self._metrics())
        self.steps += 1
        return self._advance()

    # -------------------- subclass hooks --------------------

    def _clear(self) -> None:
        raise NotImplementedError

    def _seed(self) -> None:
        raise NotImplementedError

    def _advance(self) -> StepResult:
        raise NotImplementedError

    # -------------------- outcomes --------------------

    def _finish(self, path: List[Coord], opened: List[Coord], closed: List[Coord],
                current: Optional[Coord]) -> StepResult:
        self.done = True
        self.path = path
        logger.debug("%s reached %s after %d steps", self.name, self.end, self.steps)
        return StepResult(status="done", opened=opened, closed=closed, current=current,
                          path=path, metrics=self._metrics())

    def _fail(self, opened: Optional[List[Coord]] = None) -> StepResult:
        self.no_path = True
        logger.debug("%s exhausted its search space after %d steps", self.name, self.steps)
        return StepResult(status="no_path", opened=opened or [], metrics=self._metrics())

    def _open_size(self) -> int:
        return 0

    def _closed_count(self) -> int:
        return 0

    def _metrics(self) -> dict:
        return {
            "algo": self.name,
            "steps": self.steps,
            "visited": self.visited_count,
            "open_size": self._open_size(),
            "closed_count": self._closed_count(),
            "path_len": len(self.path) if self.path else 0,
        }
