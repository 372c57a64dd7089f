"""Exceptions raised by the maze core."""


class MazeError(Exception):
    """Base class for all maze errors."""

    pass


class MazeSchemaError(MazeError):
    """Exception raised when maze text is malformed."""

    pass


class MazeParseError(MazeSchemaError):
    """Exception raised when maze parsing fails."""

    pass


class MazeValidationError(MazeSchemaError):
    """Exception raised when maze validation fails."""

    pass


class NoEntranceError(MazeError):
    """Exception raised when the grid has no entrance cell."""

    pass


class NoSolutionError(MazeError):
    """Exception raised when the walk ends without reaching the exit."""

    def __init__(self, message: str, steps: int = 0):
        super().__init__(message)
        self.steps = steps


class StuckError(NoSolutionError):
    """Exception raised when a cell offers no possible direction."""

    pass
