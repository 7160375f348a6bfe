"""
Unit tests for the grid model and its cell-state accessors.
"""

import unittest

from gridpath.core.grid import (
    clear_grid, clear_obstacle, default_endpoints, is_final, is_obstacle,
    is_visited, mark_final_path, mark_obstacle, mark_visited, reset_grid,
)
from gridpath.core.heuristic import manhattan
from gridpath.core.types import Grid


class TestGridModel(unittest.TestCase):
    """Grid construction, bounds and neighbour order."""

    def test_from_strings_marks_obstacles(self):
        grid = Grid.from_strings([".#.", "..#"])
        self.assertEqual((grid.row_count, grid.col_count), (2, 3))
        self.assertTrue(is_obstacle(grid.cell((0, 1))))
        self.assertTrue(is_obstacle(grid.cell((1, 2))))
        self.assertFalse(is_obstacle(grid.cell((1, 0))))

    def test_from_strings_rejects_ragged_or_empty_rows(self):
        with self.assertRaises(ValueError):
            Grid.from_strings(["...", "."])
        with self.assertRaises(ValueError):
            Grid.from_strings([])

    def test_blank_rejects_empty_dimensions(self):
        with self.assertRaises(ValueError):
            Grid.blank(0, 4)

    def test_in_bounds(self):
        grid = Grid.blank(3, 4)
        self.assertTrue(grid.in_bounds((0, 0)))
        self.assertTrue(grid.in_bounds((2, 3)))
        self.assertFalse(grid.in_bounds((3, 0)))
        self.assertFalse(grid.in_bounds((0, -1)))

    def test_neighbors_follow_right_down_left_up(self):
        grid = Grid.blank(3, 3)
        self.assertEqual(grid.neighbors4((1, 1)), [(1, 2), (2, 1), (1, 0), (0, 1)])
        self.assertEqual(grid.neighbors4((0, 0)), [(0, 1), (1, 0)])

    def test_default_endpoints(self):
        self.assertEqual(default_endpoints(30, 60), ((15, 15), (15, 45)))


class TestCellAccessors(unittest.TestCase):
    """Predicates, mutators and resets."""

    def setUp(self):
        self.grid = Grid.blank(2, 2)

    def test_marks_are_independent(self):
        cell = self.grid.cell((0, 0))
        mark_visited(cell)
        self.assertTrue(is_visited(cell))
        self.assertFalse(is_final(cell))
        mark_final_path(cell)
        self.assertTrue(is_final(cell))
        mark_obstacle(cell)
        self.assertTrue(is_obstacle(cell))
        clear_obstacle(cell)
        self.assertFalse(is_obstacle(cell))

    def test_reset_grid_clears_marks_but_keeps_obstacles(self):
        for row in self.grid.rows:
            for cell in row:
                mark_visited(cell)
                mark_final_path(cell)
        mark_obstacle(self.grid.cell((1, 1)))

        reset_grid(self.grid)

        for row in self.grid.rows:
            for cell in row:
                self.assertFalse(cell.visited)
                self.assertFalse(cell.final)
        self.assertTrue(is_obstacle(self.grid.cell((1, 1))))

    def test_reset_grid_with_predicate(self):
        mark_visited(self.grid.cell((0, 0)))
        mark_final_path(self.grid.cell((0, 1)))

        reset_grid(self.grid, is_visited)

        self.assertFalse(is_visited(self.grid.cell((0, 0))))
        self.assertTrue(is_final(self.grid.cell((0, 1))))

    def test_clear_grid_removes_obstacles(self):
        mark_obstacle(self.grid.cell((0, 1)))
        mark_visited(self.grid.cell((1, 0)))
        clear_grid(self.grid)
        self.assertFalse(is_obstacle(self.grid.cell((0, 1))))
        self.assertFalse(is_visited(self.grid.cell((1, 0))))


class TestHeuristic(unittest.TestCase):

    def test_manhattan(self):
        self.assertEqual(manhattan((0, 0), (2, 3)), 5)
        self.assertEqual(manhattan((4, 1), (1, 5)), 7)
        self.assertEqual(manhattan((2, 2), (2, 2)), 0)


if __name__ == "__main__":
    unittest.main()
