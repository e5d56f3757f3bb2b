"""Decoder for binary 8-bit grayscale PGM ("P5") images."""

from typing import Final

from container_models.pgm_image import PGMImage

from .combinators import ParserChain, ParseResult, Parser, ensure
from .cursor import Cursor
from .exceptions import ParseError, ParseErrorKind
from .primitives import get_bytes, get_num, match_header_version

MAX_SAMPLE_VALUE: Final[int] = 255


def _dimension(name: str) -> Parser[int]:
    return ensure(
        get_num,
        lambda value: value >= 0,
        lambda value: ParseError(ParseErrorKind.INVALID_NUMBER, f"{name} must not be negative, got {value}"),
    )


_max_grey_value: Final[Parser[int]] = ensure(
    get_num,
    lambda value: 0 <= value <= MAX_SAMPLE_VALUE,
    lambda value: ParseError(
        ParseErrorKind.INVALID_NUMBER,
        f"maximum grey value must lie in [0, {MAX_SAMPLE_VALUE}], got {value}",
    ),
)

_pgm: Final[Parser[PGMImage]] = (
    ParserChain()
    .then(match_header_version)
    .bind("width", _dimension("width"))
    .bind("height", _dimension("height"))
    .bind("max_grey_val", _max_grey_value)
    .bind_with("contents", lambda width, height, **_: get_bytes(width * height))
    .returns(PGMImage)
)


def parse_pgm(data: Cursor | bytes | bytearray | memoryview) -> ParseResult[PGMImage]:
    """
    Parse a complete PGM image from the start of `data`.

    The header tag, width, height and maximum grey value are read in that order,
    followed by exactly ``width * height`` pixel bytes. The first failing step ends
    the parse; no partially filled image is ever built.

    A :class:`Cursor` or ``bytes`` object is parsed in place. Mutable buffers
    (``bytearray``, ``memoryview``) are copied once into ``bytes`` first, so a
    later change to the caller's buffer cannot affect the parse.

    :param data: The raw file contents, or a cursor into them.
    :returns: ``Success(Parsed(image, rest))`` with any trailing bytes in `rest`, or
        ``Failure(ParseFailure(error, rest))`` with `rest` positioned at the failure.
    """
    match data:
        case Cursor():
            cursor = data
        case bytes():
            cursor = Cursor(data)
        case _:
            cursor = Cursor(bytes(data))
    return _pgm(cursor)
