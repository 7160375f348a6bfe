# gridpath/core/dfs.py
#!/usr/bin/env python3
"""
Depth-first search on an explicit stack, one direction attempt per step().

Each frame is [cell, next direction index]. Directions are tried in the
fixed right/down/left/up order, so the first path found is deterministic
but not necessarily the shortest. No parent table is kept: when the end
is entered, the cells on the stack are the path.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from gridpath.core.grid import is_obstacle, is_visited, mark_visited
from gridpath.core.reconstruct import path_from_list
from gridpath.core.stepper import Stepper
from gridpath.core.types import Coord, DIRECTIONS, StepResult

_BLOCKED, _FOUND, _ENTERED = range(3)


@dataclass
class DFSAlgo(Stepper):
    name: str = "DFS"

    stack: List[list] = field(default_factory=list)   # [cell, next_dir]
    started: bool = False

    clears_trail = True

    def _clear(self) -> None:
        self.stack.clear()
        self.started = False

    def _seed(self) -> None:
        # the start cell is entered by the first step()
        pass

    def _enter(self, c: Coord) -> int:
        if not self.grid.in_bounds(c):
            return _BLOCKED
        cell = self.grid.cell(c)
        if is_obstacle(cell) or is_visited(cell):
            return _BLOCKED
        if c == self.end:
            return _FOUND
        mark_visited(cell)
        self.visited_count += 1
        self.stack.append([c, 0])
        return _ENTERED

    def _advance(self) -> StepResult:
        if not self.started:
            self.started = True
            return self._outcome(self.start, self._enter(self.start), None)

        # unwind exhausted frames
        while self.stack and self.stack[-1][1] == len(DIRECTIONS):
            self.stack.pop()
        if not self.stack:
            return self._fail()

        frame = self.stack[-1]
        (r, c), i = frame
        frame[1] += 1
        dr, dc = DIRECTIONS[i]
        nxt = (r + dr, c + dc)
        return self._outcome(nxt, self._enter(nxt), (r, c))

    def _outcome(self, target: Coord, result: int, current: Optional[Coord]) -> StepResult:
        if result == _FOUND:
            path = path_from_list([f[0] for f in self.stack] + [target])
            return self._finish(path, [], [], target)
        if result == _ENTERED:
            return StepResult(status="running", opened=[target], current=target,
                              metrics=self._metrics())
        if not self.stack:
            # the start cell itself was unusable
            return self._fail()
        return StepResult(status="running", current=current, metrics=self._metrics())

    def _open_size(self) -> int:
        return len(self.stack)

    def _closed_count(self) -> int:
        return self.visited_count - len(self.stack)
