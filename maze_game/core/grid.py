from array import array
from typing import Iterator, List, Tuple

from maze_game.core.geometry import Point, Rect


class Grid:
    # Cell states
    PASSAGE = 0
    WALL = 1

    # Walls are drawn at 80% of the cell so neighbouring walls leave a gap
    WALL_SCALE = 0.8

    # Direction Helpers (dx, dy)
    DIRECTIONS = ((0, -1), (1, 0), (0, 1), (-1, 0))

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int, fill: int = WALL):
        self.width = width
        self.height = height
        # 'B' (unsigned char) -> 1 byte per cell, row-major
        self.cells = array('B', [fill] * (width * height))

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> int:
        return self.cells[self.get_index(x, y)]

    def set_cell(self, x: int, y: int, state: int):
        self.cells[self.get_index(x, y)] = state

    def is_wall(self, x: int, y: int) -> bool:
        return self.cells[self.get_index(x, y)] == self.WALL

    def is_passage(self, x: int, y: int) -> bool:
        return self.cells[self.get_index(x, y)] == self.PASSAGE

    def is_border(self, x: int, y: int) -> bool:
        return x == 0 or y == 0 or x == self.width - 1 or y == self.height - 1

    def passages(self) -> Iterator[Tuple[int, int]]:
        for y in range(self.height):
            row = y * self.width
            for x in range(self.width):
                if self.cells[row + x] == self.PASSAGE:
                    yield (x, y)

    def walls(self) -> Iterator[Tuple[int, int]]:
        for y in range(self.height):
            row = y * self.width
            for x in range(self.width):
                if self.cells[row + x] == self.WALL:
                    yield (x, y)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for the 4-directional neighbours that are passages.
        """
        for dx, dy in self.DIRECTIONS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                if self.cells[ny * self.width + nx] == self.PASSAGE:
                    yield (nx, ny)

    @staticmethod
    def cell_center(x: int, y: int, cell_size: float) -> Point:
        return Point(x * cell_size + cell_size / 2, y * cell_size + cell_size / 2)

    @staticmethod
    def wall_rect(x: int, y: int, cell_size: float, wall_scale: float = WALL_SCALE) -> Rect:
        side = cell_size * wall_scale
        return Rect.centered(Grid.cell_center(x, y, cell_size), side, side)

    def to_wall_rectangles(self, cell_size: float, wall_scale: float = WALL_SCALE) -> List[Rect]:
        """Axis-aligned rectangles of every wall cell, for collision/render layers."""
        return [self.wall_rect(x, y, cell_size, wall_scale) for x, y in self.walls()]

    def overlaps_wall(self, rect: Rect, cell_size: float, wall_scale: float = WALL_SCALE) -> bool:
        """
        True if rect intersects any wall rectangle.
        Only the cells under the rect (plus a one cell margin) are checked.
        """
        x0 = max(0, int(rect.x // cell_size) - 1)
        y0 = max(0, int(rect.y // cell_size) - 1)
        x1 = min(self.width - 1, int(rect.right // cell_size) + 1)
        y1 = min(self.height - 1, int(rect.bottom // cell_size) + 1)

        for y in range(y0, y1 + 1):
            for x in range(x0, x1 + 1):
                if self.cells[y * self.width + x] != self.WALL:
                    continue
                if rect.intersects(self.wall_rect(x, y, cell_size, wall_scale)):
                    return True
        return False

    def to_text(self, wall: str = "#", passage: str = ".") -> str:
        rows = []
        for y in range(self.height):
            row = self.cells[y * self.width:(y + 1) * self.width]
            rows.append("".join(wall if v == self.WALL else passage for v in row))
        return "\n".join(rows)
