"""
Errors raised while reading a document number.

Both error kinds subclass `ValueError`, so callers that only care about "bad
input" can catch that. A checksum mismatch is *not* an error: it is a plain
`False` from the validators.
"""

from __future__ import annotations


class DocumentError(ValueError):
    """Base class for malformed document numbers."""

    def __init__(self, document: str, value: str, message: str) -> None:
        super().__init__(message)
        self.document = document
        self.value = value


class InvalidLength(DocumentError):
    """The normalized number does not have the length the document requires."""

    def __init__(self, document: str, value: str, expected: int) -> None:
        self.expected = expected
        self.actual = len(value)
        super().__init__(
            document,
            value,
            f"{document} must have {expected} digits, got {self.actual}",
        )


class InvalidFormat(DocumentError):
    """A character left after normalization is not a digit."""

    def __init__(self, document: str, value: str, position: int) -> None:
        self.position = position
        self.char = value[position]
        super().__init__(
            document,
            value,
            f"{document} has non-digit {self.char!r} at position {position}",
        )
