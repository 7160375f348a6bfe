# gridpath/app/viewer.py
#!/usr/bin/env python3
"""
Grid Pathfinding Viewer: paint walls, drag markers, watch the search

- Mouse:
    [LEFT drag]   -> paint obstacles (or drag the start / end marker)
    [RIGHT drag]  -> erase obstacles
- Keyboard:
    [1]/[2]/[3]/[4] -> select algorithm (A* / Dijkstra / BFS / DFS)
    [SPACE]/[ENTER] -> visualize
    [C]             -> clear visited + path marks
    [R]             -> reset board
    [+]/[-]         -> faster / slower
    [Q]/[ESC]       -> quit

Settings: see gridpath.config (--rows= --cols= --algo= --speed= --log-level=)
"""

import logging
import sys
from typing import List, Optional, Tuple

import pygame

from gridpath import config
from gridpath.core.errors import InvalidSelection, ReentrancyViolation
from gridpath.core.grid import (
    clear_grid, clear_obstacle, default_endpoints, mark_obstacle, reset_grid,
)
from gridpath.core.pacer import Pacer
from gridpath.core.pathfinder import PathFinder, SearchRun
from gridpath.core.types import Coord, Grid

logger = logging.getLogger(__name__)

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
OPEN_GRAY   = (222,226,230)
WALL_DARK   = ( 44, 62, 80)
VISITED_A   = (0,150,255,130)
FINAL_MINT  = (0,255,200)

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)
WARN_ORANGE = (255,165,0)

MAX_STEPS_PER_FRAME = 400


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False  # highlight state

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg_idle   = (36, 40, 48, 220)
        bg_hover  = (46, 50, 60, 230)
        bg_active = (58, 86, 160, 235)
        border_active = (120, 170, 255, 255)

        if self.active and self.togglable:
            bg = bg_active
        elif self.hover:
            bg = bg_hover
        else:
            bg = bg_idle
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, border_active, self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, rows: int, cols: int, algorithm: str, speed: float):
        pygame.init()

        self.grid = Grid.blank(rows, cols)
        self.start, self.end = default_endpoints(rows, cols)
        self.finder = PathFinder(self.grid, self.start, self.end)
        self.pacer = Pacer(scale=speed)
        self.search: Optional[SearchRun] = None
        try:
            self.selected_algo = PathFinder.normalize(algorithm)
        except InvalidSelection as ex:
            logger.warning("%s; falling back to %s", ex, config.DEFAULT_ALGORITHM)
            self.selected_algo = config.DEFAULT_ALGORITHM

        self.font_small = pygame.font.Font(None, 16)
        self.font = pygame.font.Font(None, 20)
        self.font_big = pygame.font.Font(None, 24)

        self.cell_size = config.CELL_SIZE_DEFAULT
        win_w = config.GRID_MARGIN*2 + cols*self.cell_size + config.PANEL_W
        win_h = max(config.GRID_MARGIN*2 + rows*self.cell_size, 560)
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Grid Pathfinding")

        self._buttons: List[UIButton] = []
        self._layout(win_w, win_h)

        self.clock = pygame.time.Clock()
        self.state = "Idle"
        self.message = ""
        self._last_metrics: dict = {}
        self._budget_ms = 0.0

        # mouse editing
        self._mouse_button: Optional[int] = None
        self._dragging: Optional[str] = None  # "start" | "end"

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and place the grid top-left."""
        avail_w = max(1, win_w - config.PANEL_W - 2 * config.GRID_MARGIN)
        avail_h = max(1, win_h - 2 * config.GRID_MARGIN)
        self.cell_size = int(max(6, min(avail_w // self.grid.col_count,
                                        avail_h // self.grid.row_count)))

        self._grid_origin = (config.GRID_MARGIN, config.GRID_MARGIN)
        grid_right = config.GRID_MARGIN*2 + self.grid.col_count * self.cell_size
        self._right_band = pygame.Rect(grid_right, 0,
                                       max(config.PANEL_W, win_w - grid_right), win_h)
        self._build_buttons()

    def _cell_at(self, pos: Tuple[int, int]) -> Optional[Coord]:
        ox, oy = self._grid_origin
        x, y = pos
        if x < ox or y < oy:
            return None
        c = ((y - oy) // self.cell_size, (x - ox) // self.cell_size)
        return c if self.grid.in_bounds(c) else None

    # ---------- main loop ----------
    def run(self):
        while True:
            elapsed = self.clock.tick(config.FPS)
            self._handle_events()
            if self.search is not None and not self.search.finished:
                self._tick_algorithm(elapsed)
            self._draw()

    def _tick_algorithm(self, elapsed_ms: float):
        self._budget_ms += elapsed_ms
        steps = 0
        while not self.search.finished and steps < MAX_STEPS_PER_FRAME:
            delay_ms = self.pacer.delay_for(self.search.pace_kind) * 1000.0
            if delay_ms > self._budget_ms:
                break
            self._budget_ms -= delay_ms
            self._do_step()
            steps += 1
        if self.search.finished:
            self._budget_ms = 0.0

    def _do_step(self):
        res = self.search.step()
        if res.metrics:
            self._last_metrics = res.metrics
        if res.status == "done":
            self.state = "Done"
            self.message = f"Path found: {len(res.path)} cells"
        elif res.status == "no_path":
            self.state = "No path"
            self.message = "No path exists :("
        else:
            self.state = "Running"

    def _start_visualization(self):
        if self.finder.is_running:
            self.message = "A traversal is already in progress. Please wait."
            return
        reset_grid(self.grid)
        self.finder.update_grid(self.grid)
        self.finder.set_start_point(self.start)
        self.finder.set_end_point(self.end)
        try:
            self.search = self.finder.start(self.selected_algo)
        except (InvalidSelection, ReentrancyViolation) as ex:
            self.message = str(ex)
            return
        self._budget_ms = 0.0
        self.state = "Running"
        self.message = ""

    # ---------- events ----------
    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                self._handle_key(e.key)
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                if any(b.handle_mouse(e) for b in self._buttons):
                    continue
                self._handle_grid_mouse(e)

    def _handle_key(self, key):
        if key in (pygame.K_ESCAPE, pygame.K_q):
            pygame.quit(); sys.exit(0)
        elif key in (pygame.K_SPACE, pygame.K_RETURN):
            self._start_visualization()
        elif key == pygame.K_c:
            self._clear_marks()
        elif key == pygame.K_r:
            self._reset_board()
        elif key in (pygame.K_PLUS, pygame.K_EQUALS):
            self._bump_speed(0.5)
        elif key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
            self._bump_speed(2.0)
        elif key == pygame.K_1:
            self._switch_algo("a*")
        elif key == pygame.K_2:
            self._switch_algo("dijkstra")
        elif key == pygame.K_3:
            self._switch_algo("bfs")
        elif key == pygame.K_4:
            self._switch_algo("dfs")

    def _handle_grid_mouse(self, e: pygame.event.Event):
        if e.type == pygame.MOUSEBUTTONUP:
            self._mouse_button = None
            self._dragging = None
            return
        if self.finder.is_running:
            return
        c = self._cell_at(e.pos)
        if c is None:
            return
        if e.type == pygame.MOUSEBUTTONDOWN:
            self._mouse_button = e.button
            if c == self.start:
                self._dragging = "start"
            elif c == self.end:
                self._dragging = "end"
        if self._mouse_button is None:
            return

        cell = self.grid.cell(c)
        if self._dragging == "start":
            if c != self.end and not cell.obstacle:
                self.start = c
        elif self._dragging == "end":
            if c != self.start and not cell.obstacle:
                self.end = c
        elif c not in (self.start, self.end):
            if self._mouse_button == 1:
                mark_obstacle(cell)
            elif self._mouse_button == 3:
                clear_obstacle(cell)

    def _switch_algo(self, key: str):
        if self.finder.is_running:
            return
        self.selected_algo = key
        self._refresh_active_states()

    def _clear_marks(self):
        if self.finder.is_running:
            return
        reset_grid(self.grid)
        self.search = None
        self.state = "Idle"
        self.message = ""
        self._last_metrics = {}

    def _reset_board(self):
        if self.finder.is_running:
            return
        clear_grid(self.grid)
        self.start, self.end = default_endpoints(self.grid.row_count, self.grid.col_count)
        self._clear_marks()

    def _bump_speed(self, factor: float):
        self.pacer.scale = max(0.05, min(20.0, self.pacer.scale * factor))

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h-1)
            c = tuple(int(top[i] + (bot[i]-top[i]) * t) for i in range(3))
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _draw_grid(self):
        cs = self.cell_size
        ox, oy = self._grid_origin
        visited = pygame.Surface((cs, cs), pygame.SRCALPHA); visited.fill(VISITED_A)

        for r, row in enumerate(self.grid.rows):
            for c, cell in enumerate(row):
                rect = pygame.Rect(ox + c*cs, oy + r*cs, cs, cs)
                if cell.obstacle:
                    pygame.draw.rect(self.screen, WALL_DARK, rect)
                else:
                    pygame.draw.rect(self.screen, OPEN_GRAY, rect)
                    if cell.final:
                        pygame.draw.rect(self.screen, FINAL_MINT, rect)
                    elif cell.visited:
                        self.screen.blit(visited, rect.topleft)
                pygame.draw.rect(self.screen, BLACK, rect, 1)

        self._draw_badge(self.start, BLUE, "S")
        self._draw_badge(self.end, RED, "E")

    def _draw_badge(self, c: Coord, color: Tuple[int, int, int], label: str):
        cs = self.cell_size
        ox, oy = self._grid_origin
        row, col = c
        center = (ox + col*cs + cs//2, oy + row*cs + cs//2)
        pygame.draw.circle(self.screen, color, center, max(4, cs//2 - 2))
        txt = self.font_small.render(label, True, WHITE)
        self.screen.blit(txt, txt.get_rect(center=center))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 250  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 34
        gap = 8

        def add(label, cb, *, togglable=False, store_as: Optional[str] = None):
            btn = UIButton(label, pygame.Rect(x, y, w, h), cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Visualize", self._start_visualization); y += h + gap
        add("Clear Path", self._clear_marks);        y += h + gap
        add("Reset Board", self._reset_board);       y += h + gap

        half = (w - 8) // 2
        self._buttons.append(UIButton("Slower", pygame.Rect(x, y, half, h), lambda: self._bump_speed(2.0)))
        self._buttons.append(UIButton("Faster", pygame.Rect(x + half + 8, y, half, h), lambda: self._bump_speed(0.5)))
        y += h + gap

        self._algo_buttons = {}
        for key, label in config.ALGORITHM_LABELS.items():
            btn = UIButton(f"Algo: {label}", pygame.Rect(x, y, w, h),
                           lambda k=key: self._switch_algo(k), togglable=True)
            self._buttons.append(btn)
            self._algo_buttons[key] = btn
            y += h + gap

        self._refresh_active_states()

    def _refresh_active_states(self):
        for key, btn in getattr(self, "_algo_buttons", {}).items():
            btn.set_active(key == self.selected_algo)

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card = pygame.Surface((rb.width - 20, 230), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Metrics", big=True, color=ACCENT_GOLD)
        m = self._last_metrics
        line(f"Steps: {m.get('steps', 0)}")
        line(f"Visited: {m.get('visited', 0)}")
        line(f"Open: {m.get('open_size', 0)}")
        line(f"Path Len: {m.get('path_len', 0)}")
        line("-" * 26)
        line(f"Algo: {config.ALGORITHM_LABELS[self.selected_algo]}")
        line(f"State: {self.state}")
        line(f"Delay scale: {self.pacer.scale:.2f}x")
        if self.message:
            line(self.message, color=WARN_ORANGE if self.state != "Done" else ACCENT_GOLD)

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main(argv: Optional[List[str]] = None):
    logging.basicConfig(level=config.resolve_log_level(argv),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    rows, cols = config.resolve_grid_size(argv)
    Viewer(rows, cols, config.resolve_algorithm(argv), config.resolve_speed(argv)).run()


if __name__ == "__main__":
    main()
