import random
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_game.core.grid import Grid
from maze_game.core.errors import InvalidDimensions
from maze_game.core.analysis import MazeAnalyzer
from maze_game.algo import Algorithm, generate
from maze_game.algo.dfs import RecursiveBacktracker
from maze_game.algo.noise import NoiseGenerator

SIZES = [(5, 5), (6, 7), (9, 5), (16, 12), (21, 15), (30, 20)]


def carve_recursive(grid, x, y, rng):
    """Plain recursive carver, used as a reference for the stack version."""
    dirs = list(Grid.DIRECTIONS)
    rng.shuffle(dirs)
    for dx, dy in dirs:
        nx, ny = x + dx * 2, y + dy * 2
        if 0 < nx < grid.width - 1 and 0 < ny < grid.height - 1 and grid.is_wall(nx, ny):
            grid.set_cell(x + dx, y + dy, Grid.PASSAGE)
            grid.set_cell(nx, ny, Grid.PASSAGE)
            carve_recursive(grid, nx, ny, rng)


def border_cells(grid):
    for y in range(grid.height):
        for x in range(grid.width):
            if grid.is_border(x, y):
                yield x, y


class TestBacktracker(unittest.TestCase):
    def test_connectivity(self):
        for w, h in SIZES:
            for seed in range(10):
                grid = generate(w, h, Algorithm.BACKTRACK, seed=seed)
                components = MazeAnalyzer.connected_components(grid)
                self.assertEqual(len(components), 1, f"{w}x{h} seed {seed} is not connected")
                self.assertIn((1, 1), components[0])

    def test_no_cycles(self):
        for w, h in SIZES:
            for seed in range(10):
                grid = generate(w, h, Algorithm.BACKTRACK, seed=seed)
                self.assertFalse(MazeAnalyzer.has_open_block(grid), f"{w}x{h} seed {seed} has an open 2x2 block")

    def test_spanning_tree(self):
        # Every odd cell is carved and joined by exactly one wall removal: 2N - 1 passages
        for w, h in SIZES:
            grid = generate(w, h, Algorithm.BACKTRACK, seed=7)
            nodes = ((w - 1) // 2) * ((h - 1) // 2)
            self.assertEqual(MazeAnalyzer.calculate_stats(grid)["passages"], 2 * nodes - 1)

    def test_border_walls(self):
        for w, h in SIZES:
            grid = generate(w, h, Algorithm.BACKTRACK, seed=3)
            for x, y in border_cells(grid):
                self.assertTrue(grid.is_wall(x, y))

    def test_matches_recursive_reference(self):
        for w, h in SIZES:
            expected = Grid(w, h)
            expected.set_cell(1, 1, Grid.PASSAGE)
            carve_recursive(expected, 1, 1, random.Random(99))

            grid = generate(w, h, Algorithm.BACKTRACK, seed=99)
            self.assertEqual(grid.cells.tobytes(), expected.cells.tobytes())

    def test_large_grid(self):
        # Deep carve paths must not hit the recursion limit
        grid = generate(401, 401, Algorithm.BACKTRACK, seed=1)
        self.assertTrue(grid.is_passage(399, 399))

    def test_scenario_16x12(self):
        grid = generate(16, 12, Algorithm.BACKTRACK, seed=42)
        components = MazeAnalyzer.connected_components(grid)
        self.assertEqual(len(components), 1)
        self.assertIn((1, 1), components[0])

    def test_progress(self):
        grid = Grid(41, 41)
        messages = list(RecursiveBacktracker(grid, seed=5).run())
        self.assertEqual(messages[-1], "Done")
        self.assertGreater(len(messages), 1)


class TestNoise(unittest.TestCase):
    def test_border_walls(self):
        for w, h in SIZES:
            for seed in range(10):
                grid = generate(w, h, Algorithm.NOISE, seed=seed)
                for x, y in border_cells(grid):
                    self.assertTrue(grid.is_wall(x, y))

    def test_all_walls(self):
        grid = generate(4, 4, Algorithm.NOISE, wall_probability=1.0, seed=0)
        self.assertTrue(all(v == Grid.WALL for v in grid.cells))

    def test_no_walls(self):
        grid = generate(6, 5, Algorithm.NOISE, wall_probability=0.0, seed=0)
        for y in range(5):
            for x in range(6):
                self.assertEqual(grid.is_wall(x, y), grid.is_border(x, y))

    def test_wall_ratio(self):
        grid = generate(102, 102, Algorithm.NOISE, wall_probability=0.3, seed=11)
        interior = [grid.cell_at(x, y) for y in range(1, 101) for x in range(1, 101)]
        ratio = sum(interior) / len(interior)
        self.assertAlmostEqual(ratio, 0.3, delta=0.03)

    def test_can_be_disconnected(self):
        # No connectivity guarantee: some layouts split into several regions
        disconnected = [
            seed for seed in range(20)
            if not MazeAnalyzer.is_connected(generate(14, 14, Algorithm.NOISE, seed=seed))
        ]
        self.assertTrue(disconnected)

    def test_invalid_probability(self):
        with self.assertRaises(ValueError):
            NoiseGenerator(Grid(5, 5), wall_probability=1.5)
        with self.assertRaises(ValueError):
            generate(5, 5, Algorithm.NOISE, wall_probability=-0.1)


class TestGenerate(unittest.TestCase):
    def test_invalid_dimensions(self):
        for algo in (Algorithm.NOISE, Algorithm.BACKTRACK):
            with self.assertRaises(InvalidDimensions):
                generate(2, 5, algo)
            with self.assertRaises(InvalidDimensions):
                generate(5, 0, algo)

        with self.assertRaises(InvalidDimensions):
            RecursiveBacktracker(Grid(2, 2))

    def test_string_algorithm(self):
        grid = generate(9, 9, "backtrack", seed=1)
        self.assertTrue(grid.is_passage(1, 1))

    def test_determinism(self):
        for algo in (Algorithm.NOISE, Algorithm.BACKTRACK):
            grid1 = generate(20, 15, algo, seed=12345)
            grid2 = generate(20, 15, algo, seed=12345)
            self.assertEqual(grid1.cells.tobytes(), grid2.cells.tobytes())

    def test_shared_rng(self):
        grid1 = generate(20, 15, Algorithm.BACKTRACK, rng=random.Random(8))
        grid2 = generate(20, 15, Algorithm.BACKTRACK, seed=8)
        self.assertEqual(grid1.cells.tobytes(), grid2.cells.tobytes())


if __name__ == '__main__':
    unittest.main()
