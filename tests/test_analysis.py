import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_game.core.grid import Grid
from maze_game.core.analysis import MazeAnalyzer
from maze_game.algo import Algorithm, generate


class TestAnalysis(unittest.TestCase):
    def create_simple_maze(self):
        # 5x5, corridor (1,1) -> (1,3) -> (3,3) plus an isolated cell at (3,1)
        grid = Grid(5, 5)
        for cell in [(1, 1), (1, 2), (1, 3), (2, 3), (3, 3), (3, 1)]:
            grid.set_cell(*cell, Grid.PASSAGE)
        return grid

    def test_flood_fill(self):
        grid = self.create_simple_maze()
        reached = MazeAnalyzer.flood_fill(grid, (1, 1))
        self.assertEqual(reached, {(1, 1), (1, 2), (1, 3), (2, 3), (3, 3)})
        self.assertEqual(MazeAnalyzer.flood_fill(grid, (0, 0)), set())

    def test_components(self):
        grid = self.create_simple_maze()
        components = MazeAnalyzer.connected_components(grid)
        self.assertEqual(sorted(len(c) for c in components), [1, 5])
        self.assertFalse(MazeAnalyzer.is_connected(grid))

    def test_shortest_path(self):
        grid = self.create_simple_maze()
        path = MazeAnalyzer.shortest_path(grid, (1, 1), (3, 3))
        self.assertEqual(path, [(1, 1), (1, 2), (1, 3), (2, 3), (3, 3)])
        self.assertEqual(MazeAnalyzer.shortest_path(grid, (1, 1), (1, 1)), [(1, 1)])

    def test_no_path(self):
        grid = self.create_simple_maze()
        self.assertEqual(MazeAnalyzer.shortest_path(grid, (1, 1), (3, 1)), [])
        self.assertEqual(MazeAnalyzer.shortest_path(grid, (1, 1), (2, 2)), [])

    def test_open_block(self):
        grid = self.create_simple_maze()
        self.assertFalse(MazeAnalyzer.has_open_block(grid))
        grid.set_cell(2, 2, Grid.PASSAGE)
        self.assertTrue(MazeAnalyzer.has_open_block(grid))

    def test_stats(self):
        grid = self.create_simple_maze()
        stats = MazeAnalyzer.calculate_stats(grid)
        self.assertEqual(stats["passages"], 6)
        self.assertEqual(stats["walls"], 19)
        self.assertEqual(stats["dead_ends"], 2)
        self.assertEqual(stats["corridors"], 3)
        self.assertEqual(stats["junctions"], 0)
        self.assertAlmostEqual(stats["passage_percent"], 24.0)

    def test_perfect_maze_paths(self):
        grid = generate(21, 21, Algorithm.BACKTRACK, seed=42)
        path = MazeAnalyzer.shortest_path(grid, (1, 1), (19, 19))
        self.assertEqual(path[0], (1, 1))
        self.assertEqual(path[-1], (19, 19))
        # Consecutive steps are 4-neighbours through passages
        for (x1, y1), (x2, y2) in zip(path, path[1:]):
            self.assertEqual(abs(x1 - x2) + abs(y1 - y2), 1)
            self.assertTrue(grid.is_passage(x2, y2))


if __name__ == '__main__':
    unittest.main()
