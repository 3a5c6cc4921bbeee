class ApiError(Exception):
    """Base exception for errors raised by request handlers."""


class TextNotFoundError(ApiError):
    """Raised when a text is absent or has not been analyzed yet."""


class InvalidTextIdError(ApiError):
    """Raised when a path id is not a valid record identifier."""
