import logging
import random
import time
from dataclasses import dataclass, asdict
from typing import Callable, Optional, Tuple

import numpy as np

from maze_game.algo import Algorithm, generate
from maze_game.core.grid import Grid
from maze_game.core.geometry import Point, Rect
from maze_game.core.placement import StartStrategy, find_start_position, find_goal_position

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    viewport_width: int = 800
    viewport_height: int = 600
    # Cell size is the largest square that fits this many divisions
    columns: int = 16
    rows: int = 12
    algorithm: Algorithm = Algorithm.BACKTRACK
    wall_probability: float = 0.3
    wall_scale: float = Grid.WALL_SCALE
    player_scale: float = 0.5
    light_radius_cells: float = 2.0
    goal_min_distance: Optional[float] = 5.0  # in cells, None disables
    start_strategy: StartStrategy = StartStrategy.DEFAULT
    seed: Optional[int] = None


class GameSession:
    """
    Per-session state of one maze game: the grid, player and goal points,
    timer and the maze visibility toggle. Everything is regenerated by
    restart(); only the player position changes in between, and it is
    supplied by the caller's movement layer.
    """

    def __init__(self, config: GameConfig = None, clock: Callable[[], float] = time.monotonic):
        self.config = config or GameConfig()
        self.clock = clock
        self.rng = random.Random(self.config.seed)

        self.grid: Optional[Grid] = None
        self.player: Optional[Point] = None
        self.goal: Optional[Point] = None
        self.start_time = 0.0
        self.maze_visible = False
        self.restarts = 0

        self.cell_size = 0.0
        self.maze_width = 0
        self.maze_height = 0

    def _layout(self):
        cfg = self.config
        self.cell_size = min(cfg.viewport_width / cfg.columns, cfg.viewport_height / cfg.rows)
        self.maze_width = int(cfg.viewport_width // self.cell_size)
        self.maze_height = int(cfg.viewport_height // self.cell_size)

    @property
    def player_size(self) -> float:
        return self.cell_size * self.config.player_scale

    @property
    def light_radius(self) -> float:
        return self.cell_size * self.config.light_radius_cells

    def start(self):
        cfg = self.config
        self._layout()

        self.grid = generate(self.maze_width, self.maze_height, cfg.algorithm,
                             wall_probability=cfg.wall_probability, rng=self.rng)

        self.player = find_start_position(self.grid, self.player_size, self.player_size,
                                          cell_size=self.cell_size, rng=self.rng,
                                          strategy=cfg.start_strategy, wall_scale=cfg.wall_scale)

        min_distance = None
        if cfg.goal_min_distance is not None:
            min_distance = cfg.goal_min_distance * self.cell_size
        self.goal = find_goal_position(self.grid, self.player, min_distance=min_distance,
                                       cell_size=self.cell_size, rng=self.rng, wall_scale=cfg.wall_scale)

        self.start_time = self.clock()
        logger.info(f"Session started: {self.maze_width}x{self.maze_height} {Algorithm(cfg.algorithm).value} maze, "
                    f"cell {self.cell_size:.1f}px, player {tuple(self.player)}, goal {tuple(self.goal)}")

    def restart(self):
        self.restarts += 1
        self.start()

    def resize(self, width: int, height: int):
        logger.debug(f"Viewport resized to {width}x{height}")
        self.config.viewport_width = width
        self.config.viewport_height = height
        self.restart()

    def move_player(self, point: Tuple[float, float]):
        self.player = Point(*point)

    def toggle_visibility(self) -> bool:
        self.maze_visible = not self.maze_visible
        return self.maze_visible

    def elapsed_seconds(self) -> int:
        return int(self.clock() - self.start_time)

    def player_rect(self) -> Rect:
        return Rect.centered(self.player, self.player_size, self.player_size)

    def goal_rect(self) -> Rect:
        size = self.cell_size * self.config.player_scale
        return Rect.centered(self.goal, size, size)

    def reached_goal(self) -> bool:
        return self.player_rect().intersects(self.goal_rect())

    def complete(self) -> int:
        """Records the finishing time and starts a fresh maze."""
        elapsed = self.elapsed_seconds()
        logger.info(f"Goal reached in {elapsed}s")
        self.restart()
        return elapsed

    def is_lit(self, x: int, y: int) -> bool:
        if self.maze_visible:
            return True
        center = Grid.cell_center(x, y, self.cell_size)
        return self.player.distance_to(center) <= self.light_radius

    def light_mask(self) -> np.ndarray:
        """Boolean (height, width) array of cells inside the player's light."""
        if self.maze_visible:
            return np.ones((self.maze_height, self.maze_width), dtype=bool)

        ys, xs = np.mgrid[0:self.maze_height, 0:self.maze_width]
        cx = xs * self.cell_size + self.cell_size / 2
        cy = ys * self.cell_size + self.cell_size / 2
        dist_sq = (cx - self.player.x) ** 2 + (cy - self.player.y) ** 2
        return dist_sq <= self.light_radius ** 2

    def metadata(self):
        meta = asdict(self.config)
        meta["algorithm"] = Algorithm(self.config.algorithm).value
        meta["start_strategy"] = StartStrategy(self.config.start_strategy).value
        meta["cell_size"] = self.cell_size
        meta["player"] = list(self.player) if self.player else None
        meta["goal"] = list(self.goal) if self.goal else None
        return meta
