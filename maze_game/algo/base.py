import random
from abc import ABC, abstractmethod
from typing import Iterator
from maze_game.core.grid import Grid
from maze_game.core.errors import InvalidDimensions

MIN_SIZE = 3


class Generator(ABC):
    def __init__(self, grid: Grid, seed: int = None, rng: random.Random = None):
        if grid.width < MIN_SIZE or grid.height < MIN_SIZE:
            raise InvalidDimensions(grid.width, grid.height, MIN_SIZE)
        self.grid = grid
        self.seed = seed
        # A shared rng lets a session draw generation and placement from one seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
