class RepositoryError(Exception):
    """Base exception for all text store errors."""


class DuplicateTextError(RepositoryError):
    """Raised when an insert violates a uniqueness constraint."""

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} already exists")
        self.field = field
