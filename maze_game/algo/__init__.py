import logging
import random
from enum import Enum

from maze_game.core.grid import Grid
from maze_game.core.errors import InvalidDimensions
from maze_game.algo.base import Generator, MIN_SIZE
from maze_game.algo.dfs import RecursiveBacktracker
from maze_game.algo.noise import NoiseGenerator

logger = logging.getLogger(__name__)


class Algorithm(str, Enum):
    NOISE = "noise"
    BACKTRACK = "backtrack"


def create_generator(grid: Grid, algorithm: Algorithm, wall_probability: float = NoiseGenerator.DEFAULT_WALL_PROBABILITY,
                     seed: int = None, rng: random.Random = None) -> Generator:
    algorithm = Algorithm(algorithm)
    if algorithm == Algorithm.NOISE:
        return NoiseGenerator(grid, seed=seed, rng=rng, wall_probability=wall_probability)
    return RecursiveBacktracker(grid, seed=seed, rng=rng)


def generate(width: int, height: int, algorithm: Algorithm = Algorithm.BACKTRACK,
             wall_probability: float = NoiseGenerator.DEFAULT_WALL_PROBABILITY,
             seed: int = None, rng: random.Random = None) -> Grid:
    """
    Builds a width x height maze with the chosen algorithm.
    Pass `rng` to share one random stream with the placement step.
    """
    if width < MIN_SIZE or height < MIN_SIZE:
        raise InvalidDimensions(width, height, MIN_SIZE)

    grid = Grid(width, height)
    generator = create_generator(grid, algorithm, wall_probability=wall_probability, seed=seed, rng=rng)
    generator.run_all()

    logger.debug(f"Generated {width}x{height} maze with {Algorithm(algorithm).value} ({generator.step_count} steps)")
    return grid


__all__ = ["Algorithm", "Generator", "NoiseGenerator", "RecursiveBacktracker", "create_generator", "generate"]
