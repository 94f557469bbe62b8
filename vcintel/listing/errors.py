"""Errors raised by the listing engine."""


class InvalidQuery(ValueError):
    """Raised when a listing query cannot be executed as given."""

    def __init__(self, message: str, field: str = "") -> None:
        super().__init__(message)
        self.field = field
