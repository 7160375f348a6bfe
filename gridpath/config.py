# gridpath/config.py
#!/usr/bin/env python3
"""
Defaults and run-time settings.

Every setting can be overridden from the environment or the command line:
- ENV: GRIDPATH_ROWS / GRIDPATH_COLS / GRIDPATH_ALGO / GRIDPATH_SPEED / GRIDPATH_LOG_LEVEL
- CLI: --rows= / --cols= / --algo= / --speed= / --log-level=
The command line wins over the environment.
"""

import os
import sys
from typing import Dict, List, Optional, Tuple

# ---------- Grid ----------
DEFAULT_ROWS = 30
DEFAULT_COLS = 60
DEFAULT_ALGORITHM = "a*"

# ---------- Pacing (milliseconds before each step) ----------
STEP_DELAYS_MS: Dict[str, float] = {
    "a*":       0.1,
    "dijkstra": 1.0,
    "bfs":      50.0,
    "dfs":      7.0,
    "path":     20.0,   # per final-path cell
}

# ---------- Viewer ----------
CELL_SIZE_DEFAULT = 25
GRID_MARGIN = 16
PANEL_W = 300
FPS = 60

ALGORITHM_LABELS: Dict[str, str] = {
    "a*":       "A*",
    "dijkstra": "Dijkstra",
    "bfs":      "BFS",
    "dfs":      "DFS",
}


def _setting(env_name: str, flag: str, default: str, argv: Optional[List[str]] = None) -> str:
    value = os.getenv(env_name, default)
    prefix = f"--{flag}="
    for arg in (sys.argv[1:] if argv is None else argv):
        if arg.startswith(prefix):
            value = arg.split("=", 1)[1]
    return value


def _positive_int(raw: str, default: int) -> int:
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def resolve_grid_size(argv: Optional[List[str]] = None) -> Tuple[int, int]:
    rows = _positive_int(_setting("GRIDPATH_ROWS", "rows", str(DEFAULT_ROWS), argv), DEFAULT_ROWS)
    cols = _positive_int(_setting("GRIDPATH_COLS", "cols", str(DEFAULT_COLS), argv), DEFAULT_COLS)
    return rows, cols


def resolve_algorithm(argv: Optional[List[str]] = None) -> str:
    return _setting("GRIDPATH_ALGO", "algo", DEFAULT_ALGORITHM, argv).strip().lower()


def resolve_speed(argv: Optional[List[str]] = None) -> float:
    """Delay scale: 1.0 is the stock pace, 0 disables waiting."""
    raw = _setting("GRIDPATH_SPEED", "speed", "1.0", argv)
    try:
        return max(0.0, float(raw))
    except ValueError:
        return 1.0


def resolve_log_level(argv: Optional[List[str]] = None) -> str:
    return _setting("GRIDPATH_LOG_LEVEL", "log-level", "INFO", argv).upper()
