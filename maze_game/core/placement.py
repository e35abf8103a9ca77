import logging
import random
from enum import Enum
from typing import Callable, Optional, Tuple

from maze_game.core.grid import Grid
from maze_game.core.geometry import Point, Rect
from maze_game.core.errors import PlacementExhausted

logger = logging.getLogger(__name__)

DEFAULT_CELL_SIZE = 50
ATTEMPTS_PER_CELL = 10


class StartStrategy(str, Enum):
    DEFAULT = "default"  # try the default point, reposition if it collides
    SAMPLE = "sample"    # rejection-sample from the start


def default_attempts(grid: Grid) -> int:
    return ATTEMPTS_PER_CELL * grid.width * grid.height


def sample_cell_center(grid: Grid, rng: random.Random, cell_size: float) -> Point:
    """Uniform interior cell (border excluded), returned as its centre point."""
    x = rng.randint(1, grid.width - 2)
    y = rng.randint(1, grid.height - 2)
    return Grid.cell_center(x, y, cell_size)


def _rejection_sample(grid: Grid, what: str, accept: Callable[[Point], bool],
                      rng: random.Random, cell_size: float, max_attempts: int) -> Point:
    for attempt in range(1, max_attempts + 1):
        candidate = sample_cell_center(grid, rng, cell_size)
        if accept(candidate):
            logger.debug(f"Placed {what} at {tuple(candidate)} after {attempt} attempts")
            return candidate
    raise PlacementExhausted(what, max_attempts)


def find_start_position(grid: Grid, footprint_width: float, footprint_height: float,
                        default_point: Optional[Tuple[float, float]] = None,
                        cell_size: float = DEFAULT_CELL_SIZE, rng: random.Random = None,
                        strategy: StartStrategy = StartStrategy.DEFAULT,
                        max_attempts: int = None, wall_scale: float = Grid.WALL_SCALE) -> Point:
    """
    Returns a point where a footprint_width x footprint_height box does not
    overlap any wall rectangle.

    With StartStrategy.DEFAULT the default point (centre of cell (1, 1) unless
    given) is kept when clear; otherwise, and with StartStrategy.SAMPLE, an
    interior cell centre is rejection-sampled. Raises PlacementExhausted once
    max_attempts draws (default 10 per cell) fail.
    """
    rng = rng if rng is not None else random.Random()
    if max_attempts is None:
        max_attempts = default_attempts(grid)

    def is_clear(point: Point) -> bool:
        box = Rect.centered(point, footprint_width, footprint_height)
        return not grid.overlaps_wall(box, cell_size, wall_scale)

    if StartStrategy(strategy) == StartStrategy.DEFAULT:
        if default_point is None:
            default_point = Grid.cell_center(1, 1, cell_size)
        default_point = Point(*default_point)
        if is_clear(default_point):
            return default_point
        logger.warning(f"Default start {tuple(default_point)} collides with a wall, repositioning")

    return _rejection_sample(grid, "start", is_clear, rng, cell_size, max_attempts)


def find_goal_position(grid: Grid, player_point: Tuple[float, float], min_distance: float = None,
                       cell_size: float = DEFAULT_CELL_SIZE, rng: random.Random = None,
                       max_attempts: int = None, wall_scale: float = Grid.WALL_SCALE) -> Point:
    """
    Rejection-samples an interior cell centre whose cell-sized box is clear of
    walls and, when min_distance is set, lies further than min_distance
    from the player.
    """
    rng = rng if rng is not None else random.Random()
    if max_attempts is None:
        max_attempts = default_attempts(grid)
    player = Point(*player_point)

    def is_valid(point: Point) -> bool:
        box = Rect.centered(point, cell_size, cell_size)
        if grid.overlaps_wall(box, cell_size, wall_scale):
            return False
        if min_distance is not None and player.distance_to(point) <= min_distance:
            return False
        return True

    return _rejection_sample(grid, "goal", is_valid, rng, cell_size, max_attempts)
