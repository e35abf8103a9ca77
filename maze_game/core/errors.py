class MazeError(Exception):
    """Base class for all maze_game errors."""


class InvalidDimensions(MazeError, ValueError):
    def __init__(self, width: int, height: int, minimum: int = 3):
        self.width = width
        self.height = height
        self.minimum = minimum
        super().__init__(
            f"Maze dimensions {width}x{height} are too small (minimum {minimum}x{minimum})"
        )


class PlacementExhausted(MazeError, RuntimeError):
    """
    Raised when rejection sampling runs out of attempts without finding
    a cell that satisfies the placement constraints.
    """

    def __init__(self, what: str, attempts: int):
        self.what = what
        self.attempts = attempts
        super().__init__(f"No valid {what} position found after {attempts} attempts")
