from functools import partial
from pathlib import Path

from returns.io import IOResultE, impure_safe
from returns.result import Failure, ResultE, Success

from container_models.pgm_image import PGMImage
from settings import get_settings
from utils.logger import log_railway_function

from .combinators import ParseFailure, Parsed
from .exceptions import PGMDecodeError, TrailingDataError
from .pgm import parse_pgm


def describe_failure(failure: ParseFailure) -> str:
    """Build a user-facing message for a failed parse, including the byte offset of the failure."""
    return (
        f"{failure.error} at byte offset {failure.rest.offset} "
        f"({len(failure.rest)} bytes remaining)"
    )


def _to_decode_error(failure: ParseFailure) -> PGMDecodeError:
    return PGMDecodeError(failure.error, failure.rest.offset, describe_failure(failure))


def _reject_trailing_data(parsed: Parsed[PGMImage], strict: bool) -> ResultE[PGMImage]:
    if strict and not parsed.rest.at_end:
        return Failure(TrailingDataError(offset=parsed.rest.offset, count=len(parsed.rest)))
    return Success(parsed.value)


@log_railway_function(
    "Failed to decode PGM image",
    "Successfully decoded PGM image",
)
def decode_pgm(data: bytes) -> ResultE[PGMImage]:
    """
    Decode a complete PGM file held in memory.

    :param data: The raw file contents.
    :returns: `Success` with the decoded image, or `Failure` with a `PGMDecodeError`
        (or a `TrailingDataError` when strict trailing data checking is enabled).
    """
    return (
        parse_pgm(data)
        .alt(_to_decode_error)
        .bind(partial(_reject_trailing_data, strict=get_settings().strict_trailing_data))
    )


@impure_safe
def _read_file(path: Path, max_size: int) -> bytes:
    if (size := path.stat().st_size) > max_size:
        raise ValueError(f"File {path} is {size} bytes, larger than the maximum of {max_size} bytes")
    return path.read_bytes()


@log_railway_function(
    "Failed to load PGM file",
    "Successfully loaded PGM file",
)
def load_pgm(path: Path) -> IOResultE[PGMImage]:
    """
    Read a PGM file into memory and decode it.

    :param path: The path to the PGM file.
    :returns: `IOSuccess` with the decoded image, or `IOFailure` with the I/O or decode error.
    """
    return _read_file(path, get_settings().max_file_size).bind_result(decode_pgm)
