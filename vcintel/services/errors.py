"""Errors raised by the record services."""


class RecordNotFoundError(LookupError):
    """Raised when a list, saved search or note id does not exist."""

    def __init__(self, kind: str, record_id: str) -> None:
        super().__init__(f"{kind} not found: {record_id}")
        self.kind = kind
        self.record_id = record_id
