"""
Exceptions for comm-finder

Every failure raised by the lookup engine derives from CommFinderError.
Not finding a pattern is a result state, not an exception.
"""


class CommFinderError(Exception):
    """Base class for all comm-finder errors."""
    pass


class InvalidQueryError(CommFinderError, ValueError):
    """Raised when a search is not three letters naming three distinct positions."""

    def __init__(self, message: str = "invalid search"):
        super().__init__(message)


class InvalidLetterError(CommFinderError, ValueError):
    """Raised for a letter outside the lettering scheme or a malformed scheme."""
    pass


class UnknownPieceTypeError(CommFinderError, ValueError):
    """Raised when a piece type name is not recognised."""
    pass


class DatasetUnavailableError(CommFinderError):
    """Raised when a piece type dataset cannot be fetched or parsed."""

    def __init__(self, piece_type: str, reason: str):
        self.piece_type = piece_type
        self.reason = reason
        super().__init__(f"Dataset for {piece_type} unavailable: {reason}")
