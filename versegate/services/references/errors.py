# versegate/services/references/errors.py
"""
Errors raised while turning a reference string into a range query.

Every error is recoverable: callers show the message and let the user
enter another query. The ``kind`` attribute is a machine-readable
snake_case code suitable for API responses.
"""


class ReferenceParseError(ValueError):
    """Base class for all reference parsing failures."""

    kind = "invalid_reference"

    def __init__(self, message: str, query: str = None):
        super().__init__(message)
        self.message = message
        self.query = query

    def to_dict(self) -> dict:
        payload = {"error": self.kind, "detail": self.message}
        if self.query is not None:
            payload["query"] = self.query
        return payload


class InvalidCharacter(ReferenceParseError):
    """The tokenizer met a character it has no token for."""

    kind = "invalid_character"


class BookNotFound(ReferenceParseError):
    """No book name or abbreviation matched."""

    kind = "book_not_found"


class InvalidChapter(ReferenceParseError):
    """The chapter position did not hold a positive number."""

    kind = "invalid_chapter"


class InvalidVerse(ReferenceParseError):
    """A colon was not followed by a positive number."""

    kind = "invalid_verse"


class InvalidRangeContinuation(ReferenceParseError):
    """The part after a dash could not be resolved to an end reference."""

    kind = "invalid_range_continuation"
