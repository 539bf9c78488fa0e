class NewsdeskError(Exception):
    """Base application exception."""


class NewsNotFoundError(NewsdeskError):
    """Raised when no news record has the requested identifier."""

    def __init__(self, news_id: int) -> None:
        super().__init__(f"news {news_id} not found")
        self.news_id = news_id


class InvalidInputError(NewsdeskError):
    """Raised when a request payload cannot be decoded."""


class StorageError(NewsdeskError):
    """Raised when the record store fails: connectivity, constraints or timeout."""
