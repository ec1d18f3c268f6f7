from __future__ import annotations


class GeometryError(Exception):
    """Base class for board geometry errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidCellError(GeometryError):
    """Cell address does not satisfy x + y + z == 0."""

    def __init__(self, message: str, coordinates: tuple[int, ...] | None = None):
        self.coordinates = coordinates
        super().__init__(message)


class InvalidPointError(GeometryError):
    """Point has non-finite or missing components."""
    pass


class InvalidLayoutError(GeometryError):
    """Layout scale is zero, negative or non-finite."""
    pass
