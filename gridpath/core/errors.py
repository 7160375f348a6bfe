class PathfindingError(Exception):
    """Base class for rejected pathfinder invocations."""


class InvalidSelection(PathfindingError, ValueError):
    """Requested algorithm name is not one of the recognized ones."""

    def __init__(self, name, choices):
        super().__init__(f"unknown algorithm {name!r}; expected one of {', '.join(choices)}")
        self.name = name
        self.choices = tuple(choices)


class ReentrancyViolation(PathfindingError, RuntimeError):
    """A run was requested while another one is still in flight."""
