"""Error classes and helpers"""

__all__ = ["PathError"]


class PathError(ValueError):
    """Exception raised for path text that cannot be parsed.

    Args:
        message: (str) Error description
        position: (int | None) Optional character position where error occurred

    Attributes:
        message: (str) Error description
        position: (int | None) Character position where error occurred
    """

    def __init__(self, message, position=None):
        self.message = message
        self.position = position
        super().__init__(message)

    def __str__(self):
        if self.position is None:
            return self.message
        return f"{self.message} (at position {self.position})"
