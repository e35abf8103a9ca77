import random
from typing import Iterator
from maze_game.core.grid import Grid
from maze_game.algo.base import Generator


class NoiseGenerator(Generator):
    """
    Marks each cell as a wall with probability `wall_probability`, and
    always walls in the border. There is no connectivity guarantee: the
    start or the goal may end up sealed off.
    """

    DEFAULT_WALL_PROBABILITY = 0.3

    def __init__(self, grid: Grid, seed: int = None, rng: random.Random = None,
                 wall_probability: float = DEFAULT_WALL_PROBABILITY):
        super().__init__(grid, seed=seed, rng=rng)
        if not 0.0 <= wall_probability <= 1.0:
            raise ValueError(f"wall_probability must be within [0, 1], got {wall_probability}")
        self.wall_probability = wall_probability

    def run(self) -> Iterator[str]:
        grid = self.grid
        rng = self.rng

        for y in range(grid.height):
            for x in range(grid.width):
                # Draw for every cell, border included, so a seed maps to one layout
                roll = rng.random()
                if roll < self.wall_probability or grid.is_border(x, y):
                    grid.cells[y * grid.width + x] = Grid.WALL
                else:
                    grid.cells[y * grid.width + x] = Grid.PASSAGE
                self.step_count += 1

            yield f"Row {y + 1}/{grid.height}"

        yield "Done"
