from typing import Dict, Iterator, List, Optional, Sequence

from gridpath.core.grid import mark_final_path
from gridpath.core.types import Coord, Grid, NO_PARENT


def path_from_parents(parent: Dict[Coord, Coord], start: Coord, end: Coord,
                      limit: Optional[int] = None) -> List[Coord]:
    """Walk parent pointers from end back to start; returns the path start..end.

    limit bounds the walk (defaults to the table size) so a corrupted table
    raises instead of looping forever.
    """
    if limit is None:
        limit = len(parent) + 1
    path: List[Coord] = []
    cur = end
    while cur != start:
        path.append(cur)
        if len(path) > limit:
            raise RuntimeError(f"parent table cycles while walking back from {end}")
        cur = parent.get(cur, NO_PARENT)
        if cur == NO_PARENT:
            raise RuntimeError(f"no parent recorded for {path[-1]}")
    path.append(start)
    path.reverse()
    return path


def path_from_list(path: Sequence[Coord]) -> List[Coord]:
    """A path already ordered start..end (DFS) is used as is."""
    return [tuple(c) for c in path]


def iter_final_path(grid: Grid, path: Sequence[Coord]) -> Iterator[Coord]:
    """Mark each path cell as final, in order, yielding after every mark."""
    for c in path:
        mark_final_path(grid.cell(c))
        yield c
