"""Immutable read position into a byte buffer.

A :class:`Cursor` is the "remaining input" every parser receives and returns.
It never copies the underlying buffer: advancing produces a new cursor that
shares the same buffer with a larger offset, so the absolute position of any
failure can be read straight from the cursor that is handed back.
"""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import ParserInvariantError


@dataclass(frozen=True, slots=True)
class Cursor:
    buffer: bytes
    offset: int = 0

    def __len__(self) -> int:
        """The number of bytes not yet consumed."""
        return len(self.buffer) - self.offset

    def __bytes__(self) -> bytes:
        return self.buffer[self.offset :]

    def __repr__(self) -> str:
        return f"Cursor(offset={self.offset}, remaining={len(self)})"

    @property
    def remaining(self) -> memoryview:
        """Zero-copy view of the unconsumed bytes."""
        return memoryview(self.buffer)[self.offset :]

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.buffer)

    def peek(self, count: int) -> memoryview:
        """Zero-copy view of (at most) the first `count` unconsumed bytes."""
        return memoryview(self.buffer)[self.offset : self.offset + count]

    def startswith(self, prefix: bytes) -> bool:
        return self.buffer.startswith(prefix, self.offset)

    def advance(self, count: int) -> Cursor:
        """
        Return a new cursor `count` bytes further into the buffer.

        :param count: The number of bytes to consume.
        :returns: A cursor over the remaining suffix.
        :raises ParserInvariantError: If `count` is negative or runs past the end of the buffer.
        """
        if not 0 <= count <= len(self):
            raise ParserInvariantError(
                f"Cannot advance {count} bytes at offset {self.offset}, only {len(self)} remain"
            )
        return Cursor(self.buffer, self.offset + count)
