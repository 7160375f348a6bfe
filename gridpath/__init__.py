"""Step-by-step grid pathfinding: A*, Dijkstra, BFS and DFS over an editable grid."""

from gridpath.core import (
    ALGORITHMS,
    AStarAlgo,
    BFSAlgo,
    Cell,
    Coord,
    DFSAlgo,
    DijkstraAlgo,
    Grid,
    InvalidSelection,
    Pacer,
    PathFinder,
    PathfindingError,
    ReentrancyViolation,
    SearchRun,
    StepResult,
)

__version__ = "0.1.0"
