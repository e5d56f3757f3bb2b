from collections.abc import Callable
from enum import Enum
from functools import wraps
from itertools import chain
import logging
from typing import Any, Final

from loguru import logger
from returns.io import IOFailure, IOSuccess
from returns.result import Failure, Result, Success
from returns.unsafe import unsafe_perform_io

VERBOSE: Final[bool] = False


class FailureLevel(Enum):
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


def _log_call(func: Callable[..., Any], *args, **kwargs) -> None:
    arguments = ", ".join(
        chain(
            (repr(arg) for arg in args),
            (f"{key}={value!r}" for key, value in kwargs.items()),
        )
    )
    logger.debug(f"Calling {func.__name__}({arguments})")


def log_failure(failure_message: str, failure_level: FailureLevel, error: object) -> None:
    """Log the failure details at DEBUG and the failure message at `failure_level`."""
    logger.debug(f"{failure_message}: {error}")
    logger.log(failure_level.name, failure_message)


def _log_result(
    result: Result,
    failure_message: str,
    success_message: str | None,
    failure_level: FailureLevel,
) -> None:
    match result:
        case Success():
            if success_message:
                logger.info(success_message)
        case Failure(error):
            log_failure(failure_message, failure_level, error)


def log_railway_function(
    failure_message: str,
    success_message: str | None = None,
    failure_level: FailureLevel = FailureLevel.ERROR,
):
    """
    Log the outcome of a function returning a `Result` or `IOResult` container.

    The decorated function's return value is passed through untouched.

    :param failure_message: Logged at `failure_level` when the container is a failure.
    :param success_message: Logged at INFO on success, skipped when empty.
    :param failure_level: The level used for `failure_message`.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if VERBOSE:
                _log_call(func, *args, **kwargs)
            result = func(*args, **kwargs)
            match result:
                case IOSuccess() | IOFailure():
                    _log_result(unsafe_perform_io(result), failure_message, success_message, failure_level)
                case Result():
                    _log_result(result, failure_message, success_message, failure_level)
            return result

        return wrapper

    return decorator
