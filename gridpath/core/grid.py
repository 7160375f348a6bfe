"""
Cell-state accessors over a Grid.

The search engine only ever touches cells through these functions:
predicates (is_obstacle / is_visited), mutators (mark_visited /
mark_final_path) and reset_grid. The obstacle editors are used by the
viewer and by tests to set up boards.
"""

from typing import Callable, Optional

from gridpath.core.types import Cell, Coord, Grid

CellPredicate = Callable[[Cell], bool]


def is_obstacle(cell: Cell) -> bool:
    return cell.obstacle


def is_visited(cell: Cell) -> bool:
    return cell.visited


def is_final(cell: Cell) -> bool:
    return cell.final


def mark_visited(cell: Cell) -> None:
    cell.visited = True


def mark_final_path(cell: Cell) -> None:
    cell.final = True


def mark_obstacle(cell: Cell) -> None:
    cell.obstacle = True


def clear_obstacle(cell: Cell) -> None:
    cell.obstacle = False


def reset_grid(grid: Grid, predicate: Optional[CellPredicate] = None) -> None:
    """Clear visited and final-path marks, only on cells matching predicate if given."""
    for row in grid.rows:
        for cell in row:
            if predicate is None or predicate(cell):
                cell.visited = False
                cell.final = False


def clear_grid(grid: Grid) -> None:
    """Full board reset: marks and obstacles."""
    for row in grid.rows:
        for cell in row:
            cell.obstacle = cell.visited = cell.final = False


def default_endpoints(row_count: int, col_count: int):
    """Initial start/end placement: middle row, a quarter and three quarters across."""
    start: Coord = (row_count // 2, col_count // 4)
    end: Coord = (row_count // 2, (3 * col_count) // 4)
    return start, end
