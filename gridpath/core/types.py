# gridpath/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Any

Coord = Tuple[int, int]  # (row, col)

# right, down, left, up
DIRECTIONS: Tuple[Coord, ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))

NO_PARENT: Coord = (-1, -1)


@dataclass
class Cell:
    obstacle: bool = False
    visited: bool = False
    final: bool = False


@dataclass
class Grid:
    rows: List[List[Cell]]             # [row][col]

    @classmethod
    def blank(cls, row_count: int, col_count: int) -> "Grid":
        if row_count <= 0 or col_count <= 0:
            raise ValueError("grid dimensions must be positive")
        return cls([[Cell() for _ in range(col_count)] for _ in range(row_count)])

    @classmethod
    def from_strings(cls, lines: List[str]) -> "Grid":
        """Build a grid from text rows; '#' is an obstacle, anything else is open."""
        if not lines or any(len(line) != len(lines[0]) for line in lines):
            raise ValueError("ragged grid")
        return cls([[Cell(obstacle=(ch == "#")) for ch in line] for line in lines])

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def col_count(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def in_bounds(self, c: Coord) -> bool:
        r, col = c
        return 0 <= r < self.row_count and 0 <= col < self.col_count

    def cell(self, c: Coord) -> Cell:
        r, col = c
        return self.rows[r][col]

    def neighbors4(self, c: Coord) -> List[Coord]:
        """In-bounds 4-connected neighbours of c, in right/down/left/up order."""
        r, col = c
        out: List[Coord] = []
        for dr, dc in DIRECTIONS:
            n = (r + dr, col + dc)
            if self.in_bounds(n):
                out.append(n)
        return out


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    opened: List[Coord] = field(default_factory=list)
    closed: List[Coord] = field(default_factory=list)
    current: Optional[Coord] = None
    path: Optional[List[Coord]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
