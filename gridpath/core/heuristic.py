from gridpath.core.types import Coord


def manhattan(c: Coord, goal: Coord) -> int:
    """Manhattan distance; admissible and consistent on a 4-connected unit-cost grid."""
    (r, col) = c
    (gr, gc) = goal
    return abs(r - gr) + abs(col - gc)
