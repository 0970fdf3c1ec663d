from typing import Optional


class DeckError(Exception):
    """Base exception for deck persistence errors."""

    def __init__(
        self, message: str, original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.original_exception = original_exception


class DeckSaveError(DeckError):
    """Raised when a deck cannot be written to disk."""

    pass


class DeckDecodeError(DeckError):
    """Indicates a file was read but does not hold a validly encoded deck."""

    pass
