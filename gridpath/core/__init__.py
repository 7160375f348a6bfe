from gridpath.core.astar import AStarAlgo
from gridpath.core.bfs import BFSAlgo
from gridpath.core.dfs import DFSAlgo
from gridpath.core.dijkstra import DijkstraAlgo
from gridpath.core.errors import InvalidSelection, PathfindingError, ReentrancyViolation
from gridpath.core.pacer import Pacer
from gridpath.core.pathfinder import ALGORITHMS, PathFinder, SearchRun
from gridpath.core.types import Cell, Coord, Grid, StepResult
