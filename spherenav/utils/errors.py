"""Custom exception types for consistent error handling."""


class InvalidInputError(Exception):
    """Raised when a coordinate, bearing, distance or format argument is invalid."""
