"""
Parser combinator core.

A parser is any callable taking a :class:`~parsers.cursor.Cursor` and returning a
`returns` :class:`~returns.result.Result`:

- ``Success(Parsed(value, rest))`` where `rest` is the unconsumed suffix of the input;
- ``Failure(ParseFailure(error, rest))`` where `rest` is the cursor the failing
  parser was given (a failure never consumes input).

Combinators build new parsers out of existing ones. They never inspect the bytes
themselves and know nothing about any file format, so every failure travels through
them untouched: the first failing parser decides the error and the reported position.

Example
-------

    two_numbers = (
        ParserChain()
        .bind("first", get_num)
        .bind("second", get_num)
        .returns(lambda first, second: (first, second))
    )
    two_numbers(Cursor(b"12 14 16"))  # Success(Parsed((12, 14), Cursor(offset=6, ...)))
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, NamedTuple, TypeAlias, TypeVar

from returns.result import Failure, Result, Success

from .cursor import Cursor
from .exceptions import ParseError

T = TypeVar("T")
U = TypeVar("U")


class Parsed(NamedTuple, Generic[T]):
    value: T
    rest: Cursor


class ParseFailure(NamedTuple):
    error: ParseError
    rest: Cursor


ParseResult: TypeAlias = Result[Parsed[T], ParseFailure]
Parser: TypeAlias = Callable[[Cursor], ParseResult[T]]


def succeed(value: T) -> Parser[T]:
    """Build a parser that consumes nothing and yields `value`."""

    def parse(cursor: Cursor) -> ParseResult[T]:
        return Success(Parsed(value, cursor))

    return parse


def fail(error: ParseError) -> Parser[Any]:
    """Build a parser that always fails with `error` at its input."""

    def parse(cursor: Cursor) -> ParseResult[Any]:
        return Failure(ParseFailure(error, cursor))

    return parse


def map_value(parser: Parser[T], func: Callable[[T], U]) -> Parser[U]:
    """
    Transform the value produced by `parser` with `func`.

    The remainder is passed through unchanged, and so is any failure.
    """

    def parse(cursor: Cursor) -> ParseResult[U]:
        return parser(cursor).map(lambda parsed: Parsed(func(parsed.value), parsed.rest))

    return parse


def and_then(parser: Parser[T], func: Callable[[T], Parser[U]]) -> Parser[U]:
    """
    Sequence `parser` with a second parser built from its value.

    On success `func(value)` produces the next parser, which is run on the remainder.
    On failure the first parser's error and cursor are returned as they are.

    :param parser: The parser to run first.
    :param func: Builds the parser to run next from the value of the first one.
    :returns: A parser yielding the value of the second parser.
    """

    def parse(cursor: Cursor) -> ParseResult[U]:
        return parser(cursor).bind(lambda parsed: func(parsed.value)(parsed.rest))

    return parse


def ensure(
    parser: Parser[T],
    predicate: Callable[[T], bool],
    error: Callable[[T], ParseError],
) -> Parser[T]:
    """
    Reject values of `parser` that do not satisfy `predicate`.

    A rejected value fails with `error(value)` reported at the cursor `parser` started
    from, so the position points at the offending field rather than past it.
    """

    def parse(cursor: Cursor) -> ParseResult[T]:
        def check(parsed: Parsed[T]) -> ParseResult[T]:
            if predicate(parsed.value):
                return Success(parsed)
            return Failure(ParseFailure(error(parsed.value), cursor))

        return parser(cursor).bind(check)

    return parse


def pair(first: Parser[T], second: Parser[U]) -> Parser[tuple[T, U]]:
    """Run `first` then `second` and yield both values as a tuple."""
    return and_then(first, lambda a: map_value(second, lambda b: (a, b)))


StepFactory: TypeAlias = Callable[..., Parser[Any]]


@dataclass(frozen=True)
class ParserChain:
    """
    Builder for a sequence of parsers whose values are bound to names.

    Every bound name is visible to the steps that follow (see `bind_with`) and to the
    final `returns` clause. The resulting parser is nothing but nested `and_then` calls:
    the first failing step ends the chain.
    """

    steps: tuple[tuple[str | None, StepFactory], ...] = ()

    def _append(self, name: str | None, factory: StepFactory) -> ParserChain:
        return ParserChain(steps=(*self.steps, (name, factory)))

    def then(self, parser: Parser[Any]) -> ParserChain:
        """Add a step whose value is discarded."""
        return self._append(None, lambda **_: parser)

    def bind(self, name: str, parser: Parser[Any]) -> ParserChain:
        """Add a step and bind its value to `name`."""
        return self._append(name, lambda **_: parser)

    def bind_with(self, name: str, factory: StepFactory) -> ParserChain:
        """
        Add a step that depends on earlier bindings.

        `factory` is called with all names bound so far as keyword arguments and must
        return the parser to run, e.g. ``lambda width, height, **_: get_bytes(width * height)``.
        """
        return self._append(name, factory)

    def returns(self, func: Callable[..., T]) -> Parser[T]:
        """Close the chain: `func` receives all bound names as keyword arguments."""
        steps = self.steps

        def step(index: int, bound: dict[str, Any]) -> Parser[Any]:
            if index == len(steps):
                return map_value(succeed(bound), lambda values: func(**values))
            name, factory = steps[index]

            def next_step(value: Any) -> Parser[Any]:
                return step(index + 1, bound if name is None else bound | {name: value})

            return and_then(factory(**bound), next_step)

        def parse(cursor: Cursor) -> ParseResult[T]:
            return step(0, {})(cursor)

        return parse
