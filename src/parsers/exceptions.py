from dataclasses import dataclass
from enum import StrEnum, auto


class ParseErrorKind(StrEnum):
    HEADER_MISMATCH = auto()
    NO_FIELD_LEFT = auto()
    TEXT_DECODE = auto()
    INVALID_NUMBER = auto()
    INSUFFICIENT_BYTES = auto()


@dataclass(frozen=True)
class ParseError:
    """
    A recoverable parse error.

    Errors raised by third-party decoders (e.g. `UnicodeDecodeError`) are not kept
    as objects; their message is stored in `detail` so errors stay comparable.
    """

    kind: ParseErrorKind
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.kind}: {self.detail}"
        return str(self.kind)


class ParserInvariantError(RuntimeError):
    """Raised when the parser core violates one of its own invariants (a bug, not bad input)."""

    def __init__(self, message: str):
        super().__init__(message)


class PGMDecodeError(Exception):
    """Raised when a byte buffer could not be decoded into a PGM image."""

    def __init__(self, error: ParseError, offset: int, message: str):
        self.error = error
        self.offset = offset
        super().__init__(message)

    @property
    def kind(self) -> ParseErrorKind:
        return self.error.kind


class TrailingDataError(Exception):
    """Raised when bytes follow the pixel data and trailing data is not allowed."""

    def __init__(self, offset: int, count: int):
        self.offset = offset
        self.count = count
        super().__init__(f"{count} unexpected bytes after the pixel data at byte offset {offset}")
