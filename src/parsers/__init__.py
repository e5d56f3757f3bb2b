"""
Parser combinators and the PGM decoder built on top of them.

The package is layered:

1. **Cursor**: an immutable position in the input buffer (`Cursor`).
2. **Combinators**: the parser type and the functions composing parsers
   (`succeed`, `map_value`, `and_then`, `ensure`, `pair`, `ParserChain`).
3. **Primitives**: parsers reading bytes directly (`match_header_version`,
   `get_num`, `get_bytes`).
4. **PGM decoder**: `parse_pgm`, composing the primitives into one parser.
5. **Loaders**: railway functions turning bytes or files into a `PGMImage`
   (`decode_pgm`, `load_pgm`).

Railway Integration
-------------------
Parsers return `returns` `Result` containers holding the parsed value and the
remaining input, or the error and the input position where parsing stopped. The
loaders translate failures into exceptions carried by `Failure`/`IOFailure` and log
the outcome, so they can be used directly in `returns` pipelines.

Notes
-----
- Only the binary 8-bit "P5" variant is supported: no comments and exactly one
  separator byte between header fields.
- The input buffer is never copied while parsing; only the pixel block is.
"""

from .combinators import (
    ParseFailure,
    Parsed,
    ParseResult,
    Parser,
    ParserChain,
    and_then,
    ensure,
    fail,
    map_value,
    pair,
    succeed,
)
from .cursor import Cursor
from .exceptions import (
    ParseError,
    ParseErrorKind,
    ParserInvariantError,
    PGMDecodeError,
    TrailingDataError,
)
from .loaders import decode_pgm, describe_failure, load_pgm
from .pgm import parse_pgm
from .primitives import get_bytes, get_num, match_header_version, match_tag

__all__ = (
    "Cursor",
    "ParseError",
    "ParseErrorKind",
    "ParseFailure",
    "Parsed",
    "ParseResult",
    "Parser",
    "ParserChain",
    "ParserInvariantError",
    "PGMDecodeError",
    "TrailingDataError",
    "and_then",
    "decode_pgm",
    "describe_failure",
    "ensure",
    "fail",
    "get_bytes",
    "get_num",
    "load_pgm",
    "map_value",
    "match_header_version",
    "match_tag",
    "pair",
    "parse_pgm",
    "succeed",
)
