# src/ellermaze/errors.py


class MazeError(Exception):
    """Base class for everything this package raises on bad input."""


class InvalidDimension(MazeError, ValueError):
    def __init__(self, name: str, value: object):
        super().__init__(f"{name} must be a positive integer, got {value!r}")
        self.name = name
        self.value = value


class InvalidProbability(MazeError, ValueError):
    def __init__(self, value: object):
        super().__init__(f"merge probability must be within [0, 1], got {value!r}")
        self.value = value
