from typing import Iterator, List, Tuple
from maze_game.core.grid import Grid
from maze_game.algo.base import Generator


class RecursiveBacktracker(Generator):
    """
    Perfect maze carver. Passages live on odd coordinates and each step
    removes exactly one intermediate wall, so the result is a spanning tree
    rooted at (1, 1).

    Uses an explicit stack of frames (x, y, shuffled directions, next index)
    which replays the recursive formulation step for step.
    """

    START = (1, 1)

    def run(self) -> Iterator[str]:
        grid = self.grid
        rng = self.rng

        # Start from a solid block
        for i in range(len(grid.cells)):
            grid.cells[i] = Grid.WALL

        sx, sy = self.START
        grid.set_cell(sx, sy, Grid.PASSAGE)

        stack: List[Tuple[int, int, List[Tuple[int, int]], int]] = [(sx, sy, self._shuffled(), 0)]

        while stack:
            cx, cy, dirs, i = stack[-1]

            if i == len(dirs):
                # Backtrack
                stack.pop()
                continue

            stack[-1] = (cx, cy, dirs, i + 1)
            dx, dy = dirs[i]
            nx, ny = cx + dx * 2, cy + dy * 2

            # Target must be strictly inside the border
            if not (0 < nx < grid.width - 1 and 0 < ny < grid.height - 1):
                continue
            if not grid.is_wall(nx, ny):
                continue

            # Carve
            grid.set_cell(cx + dx, cy + dy, Grid.PASSAGE)
            grid.set_cell(nx, ny, Grid.PASSAGE)
            stack.append((nx, ny, self._shuffled(), 0))
            self.step_count += 1

            # Yield every N steps to keep callers responsive without spamming
            if self.step_count % 100 == 0:
                yield f"Carving... Stack: {len(stack)}"

        yield "Done"

    def _shuffled(self) -> List[Tuple[int, int]]:
        dirs = list(Grid.DIRECTIONS)
        self.rng.shuffle(dirs)
        return dirs
