from collections import deque
from typing import Dict, List, Set, Tuple
from maze_game.core.grid import Grid

Cell = Tuple[int, int]


class MazeAnalyzer:
    @staticmethod
    def flood_fill(grid: Grid, start: Cell) -> Set[Cell]:
        """All passage cells reachable from start via 4-directional moves."""
        if not grid.is_passage(*start):
            return set()

        seen = {start}
        queue = deque([start])
        while queue:
            cx, cy = queue.popleft()
            for n in grid.get_open_neighbors(cx, cy):
                if n not in seen:
                    seen.add(n)
                    queue.append(n)
        return seen

    @staticmethod
    def connected_components(grid: Grid) -> List[Set[Cell]]:
        components = []
        assigned: Set[Cell] = set()
        for cell in grid.passages():
            if cell in assigned:
                continue
            component = MazeAnalyzer.flood_fill(grid, cell)
            assigned |= component
            components.append(component)
        return components

    @staticmethod
    def is_connected(grid: Grid) -> bool:
        return len(MazeAnalyzer.connected_components(grid)) <= 1

    @staticmethod
    def has_open_block(grid: Grid) -> bool:
        """True if any 2x2 block is entirely passage (a loop in a carved maze)."""
        for y in range(grid.height - 1):
            for x in range(grid.width - 1):
                if (grid.is_passage(x, y) and grid.is_passage(x + 1, y)
                        and grid.is_passage(x, y + 1) and grid.is_passage(x + 1, y + 1)):
                    return True
        return False

    @staticmethod
    def shortest_path(grid: Grid, start: Cell, end: Cell) -> List[Cell]:
        """
        BFS over passage cells. Returns the path including both ends,
        or an empty list when end is unreachable.
        """
        if not (grid.is_passage(*start) and grid.is_passage(*end)):
            return []

        parents: Dict[Cell, Cell] = {start: start}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            if current == end:
                break
            for n in grid.get_open_neighbors(*current):
                if n not in parents:
                    parents[n] = current
                    queue.append(n)

        if end not in parents:
            return []

        # Reconstruct path
        path = [end]
        while path[-1] != start:
            path.append(parents[path[-1]])
        path.reverse()
        return path

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0
        corridors = 0  # 2 open neighbours
        junctions = 0  # 3+ open neighbours
        passages = 0

        for x, y in grid.passages():
            passages += 1
            exits = sum(1 for _ in grid.get_open_neighbors(x, y))
            if exits == 1: dead_ends += 1
            elif exits == 2: corridors += 1
            elif exits >= 3: junctions += 1

        total = grid.width * grid.height
        return {
            "passages": passages,
            "walls": total - passages,
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "passage_percent": (passages / total) * 100 if total > 0 else 0
        }
