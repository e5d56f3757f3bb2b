"""Primitive parsers reading directly from a :class:`~parsers.cursor.Cursor`."""

import re
from typing import Final

from returns.result import Failure, Success

from .combinators import ParseFailure, ParseResult, Parsed, Parser
from .cursor import Cursor
from .exceptions import ParseError, ParseErrorKind, ParserInvariantError

PGM_VERSION_TAG: Final[bytes] = b"P5"

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1

# leading whitespace, then a maximal run of non-whitespace bytes
_FIELD: Final[re.Pattern[bytes]] = re.compile(rb"[ \t\n\r\x0b\x0c]*([^ \t\n\r\x0b\x0c]+)")
_DECIMAL: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


def _failure(kind: ParseErrorKind, detail: str, cursor: Cursor) -> ParseResult:
    return Failure(ParseFailure(ParseError(kind, detail), cursor))


def match_tag(tag: bytes) -> Parser[None]:
    """
    Build a parser matching `tag` followed by one separator byte.

    The byte after the tag is skipped without checking that it is a newline.

    :param tag: The exact bytes the input has to start with.
    :returns: A parser yielding `None` and the input after the tag and its separator.
    """
    skip = len(tag) + 1

    def parse(cursor: Cursor) -> ParseResult[None]:
        if cursor.startswith(tag) and len(cursor) >= skip:
            return Success(Parsed(None, cursor.advance(skip)))
        return _failure(
            ParseErrorKind.HEADER_MISMATCH,
            f"expected {tag.decode('ascii')!r} followed by a newline",
            cursor,
        )

    return parse


match_header_version: Final[Parser[None]] = match_tag(PGM_VERSION_TAG)


def _parse_int32(text: str) -> int | str:
    """Parse a signed 32-bit decimal, returning the reason as a string when it is invalid."""
    if not _DECIMAL.fullmatch(text):
        return f"invalid digit found in {text!r}"
    number = int(text)
    if number > INT32_MAX:
        return f"number too large to fit in 32 bits: {text}"
    if number < INT32_MIN:
        return f"number too small to fit in 32 bits: {text}"
    return number


def get_num(cursor: Cursor) -> ParseResult[int]:
    """
    Read the first whitespace-delimited field as a signed 32-bit decimal integer.

    Leading whitespace is skipped when looking for the field, but the amount
    consumed is the field length plus one delimiter byte, counted from the start
    of `cursor`; the delimiter is dropped when the field is as long as the whole
    remaining input. Every failure reports the cursor it was given.

    :param cursor: The remaining input.
    :returns: The parsed integer and the input after the consumed bytes.
    """
    match = _FIELD.match(cursor.buffer, cursor.offset)
    if match is None:
        return _failure(ParseErrorKind.NO_FIELD_LEFT, "expected a number", cursor)

    start, end = match.span(1)
    try:
        text = cursor.buffer[start:end].decode("utf-8")
    except UnicodeDecodeError as error:
        return _failure(ParseErrorKind.TEXT_DECODE, str(error), cursor)

    number = _parse_int32(text)
    if isinstance(number, str):
        return _failure(ParseErrorKind.INVALID_NUMBER, number, cursor)

    field_len = end - start
    if field_len > len(cursor):
        raise ParserInvariantError("Field was parsed beyond the end of the input")
    consumed = field_len + 1 if field_len < len(cursor) else field_len
    return Success(Parsed(number, cursor.advance(consumed)))


def get_bytes(count: int) -> Parser[bytes]:
    """
    Build a parser reading exactly `count` raw bytes into an owned buffer.

    :param count: The number of bytes to read.
    :returns: A parser yielding the bytes and the input after them.
    """

    def parse(cursor: Cursor) -> ParseResult[bytes]:
        if count < 0:
            return _failure(
                ParseErrorKind.INSUFFICIENT_BYTES,
                f"cannot read a negative number of bytes ({count})",
                cursor,
            )
        if count > len(cursor):
            return _failure(
                ParseErrorKind.INSUFFICIENT_BYTES,
                f"expected {count} bytes, got {len(cursor)}",
                cursor,
            )
        return Success(Parsed(bytes(cursor.peek(count)), cursor.advance(count)))

    return parse
