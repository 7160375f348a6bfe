"""
Tests for the PathFinder facade: selection, re-entrancy, pacing,
path marking and repeatability across grid resets.
"""

import unittest

from gridpath.core.errors import InvalidSelection, PathfindingError, ReentrancyViolation
from gridpath.core.grid import reset_grid
from gridpath.core.pacer import Pacer
from gridpath.core.pathfinder import ALGORITHMS, PathFinder
from gridpath.core.types import Grid

NO_WAIT = Pacer(scale=0)


def marked(grid, flag):
    return {(r, c) for r, row in enumerate(grid.rows) for c, cell in enumerate(row)
            if getattr(cell, flag)}


class TestSelection(unittest.TestCase):

    def setUp(self):
        self.grid = Grid.blank(4, 4)
        self.finder = PathFinder(self.grid, (0, 0), (3, 3))

    def test_unknown_algorithm_rejected_before_mutation(self):
        with self.assertRaises(InvalidSelection) as ctx:
            self.finder.run("greedy", NO_WAIT)
        self.assertIsInstance(ctx.exception, ValueError)
        self.assertEqual(ctx.exception.name, "greedy")
        self.assertEqual(set(ctx.exception.choices), set(ALGORITHMS))
        self.assertFalse(self.finder.is_running)
        self.assertEqual(marked(self.grid, "visited"), set())

    def test_names_are_normalized(self):
        self.assertEqual(PathFinder.normalize(" A* "), "a*")
        self.assertEqual(PathFinder.normalize("BFS"), "bfs")

    def test_entry_points(self):
        for method in (self.finder.a_star_search, self.finder.dijkstra_search,
                       self.finder.breadth_first_search, self.finder.depth_first_search):
            with self.subTest(method=method.__name__):
                reset_grid(self.grid)
                self.assertTrue(method(NO_WAIT))
                self.assertFalse(self.finder.is_running)

    def test_out_of_bounds_markers(self):
        with self.assertRaises(ValueError):
            self.finder.set_start_point((4, 0))
        with self.assertRaises(ValueError):
            PathFinder(self.grid, (0, 0), (0, 9))

    def test_markers_rechecked_after_grid_shrinks(self):
        self.finder.update_grid(Grid.blank(2, 2))
        with self.assertRaises(ValueError):
            self.finder.start("bfs")
        self.assertFalse(self.finder.is_running)

    def test_update_grid_and_markers(self):
        other = Grid.from_strings([".#", ".."])
        self.finder.update_grid(other)
        self.finder.set_start_point((0, 0))
        self.finder.set_end_point([1, 1])
        self.assertEqual(self.finder.end_point, (1, 1))
        self.assertTrue(self.finder.breadth_first_search(NO_WAIT))
        self.assertEqual(marked(other, "final"), {(0, 0), (1, 0), (1, 1)})


class TestReentrancy(unittest.TestCase):

    def test_second_run_rejected_while_first_in_flight(self):
        finder = PathFinder(Grid.blank(5, 5), (0, 0), (4, 4))
        search = finder.start("bfs")
        search.step()
        self.assertTrue(finder.is_running)

        with self.assertRaises(ReentrancyViolation) as ctx:
            finder.start("dfs")
        self.assertIsInstance(ctx.exception, PathfindingError)
        self.assertTrue(finder.is_running)

        while not search.finished:
            search.step()
        self.assertFalse(finder.is_running)
        self.assertTrue(search.found)

        reset_grid(finder.grid)
        self.assertTrue(finder.run("a*", NO_WAIT))


class TestSearchRun(unittest.TestCase):

    def test_path_is_marked_one_cell_per_step(self):
        grid = Grid.blank(1, 4)
        search = PathFinder(grid, (0, 0), (0, 3)).start("a*")
        statuses = []
        while not search.finished:
            statuses.append((search.pace_kind, search.step().status))

        search_steps = [s for kind, s in statuses if kind == "a*"]
        path_steps = [s for kind, s in statuses if kind == "path"]
        self.assertTrue(all(s == "running" for s in search_steps))
        self.assertEqual(path_steps, ["running", "running", "running", "done"])
        self.assertEqual(marked(grid, "final"), {(0, 0), (0, 1), (0, 2), (0, 3)})
        self.assertEqual(search.last.metrics["marked"], 4)
        self.assertEqual(search.step().status, "done")

    def test_failed_run_marks_nothing_final(self):
        grid = Grid.from_strings([".#."])
        finder = PathFinder(grid, (0, 0), (0, 2))
        self.assertFalse(finder.run("dijkstra", NO_WAIT))
        self.assertEqual(marked(grid, "final"), set())

    def test_dfs_clears_its_trail_before_drawing(self):
        grid = Grid.blank(3, 3)
        finder = PathFinder(grid, (0, 0), (1, 0))
        self.assertTrue(finder.depth_first_search(NO_WAIT))
        self.assertEqual(marked(grid, "visited"), set())
        self.assertEqual(len(marked(grid, "final")), 8)

    def test_bfs_keeps_exploration_marks(self):
        grid = Grid.blank(3, 3)
        finder = PathFinder(grid, (0, 0), (2, 2))
        self.assertTrue(finder.breadth_first_search(NO_WAIT))
        self.assertIn((0, 1), marked(grid, "visited"))
        self.assertEqual(len(marked(grid, "final")), 5)


class TestPacing(unittest.TestCase):

    def test_pause_before_every_step(self):
        waits = []
        pacer = Pacer(sleep=waits.append)
        finder = PathFinder(Grid.blank(1, 3), (0, 0), (0, 2))
        self.assertTrue(finder.run("bfs", pacer))

        # two BFS levels, then three path cells
        self.assertEqual(len(waits), 5)
        for got, want in zip(waits, [0.05, 0.05, 0.02, 0.02, 0.02]):
            self.assertAlmostEqual(got, want)

    def test_zero_scale_never_sleeps(self):
        waits = []
        finder = PathFinder(Grid.blank(2, 2), (0, 0), (1, 1))
        finder.run("dfs", Pacer(scale=0, sleep=waits.append))
        self.assertEqual(waits, [])

    def test_unknown_kind_has_no_delay(self):
        self.assertEqual(Pacer().delay_for("teleport"), 0.0)
        self.assertAlmostEqual(Pacer(scale=2.0).delay_for("dfs"), 0.014)


class TestRepeatability(unittest.TestCase):

    def traversal(self, finder, name):
        search = finder.start(name)
        order = []
        while not search.finished:
            order.extend(search.step().opened)
        return order, search.path

    def test_reset_between_runs_reproduces_traversal(self):
        grid = Grid.from_strings([
            "........",
            ".##.###.",
            "...#....",
            ".#...#..",
        ])
        finder = PathFinder(grid, (0, 0), (3, 7))
        for name in ALGORITHMS:
            with self.subTest(algo=name):
                reset_grid(grid)
                first = self.traversal(finder, name)
                reset_grid(grid)
                second = self.traversal(finder, name)
                self.assertEqual(first, second)
                self.assertTrue(first[0])


if __name__ == "__main__":
    unittest.main()
