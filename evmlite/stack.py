"""The operand stack of an execution frame."""

from __future__ import annotations

from typing import List

from .errors import ExitError, ExitException, ExitReason

STACK_LIMIT = 1024


def _fail(code: ExitError) -> ExitException:
    return ExitException(ExitReason.of(code))


class Stack:
    """A bounded stack of 32-byte words; index 0 of peek/set is the top."""

    def __init__(self, limit: int = STACK_LIMIT) -> None:
        self.limit = limit
        self._data: List[bytes] = []

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Stack(limit={self.limit}, data={self._data!r})"

    @property
    def data(self) -> List[bytes]:
        """The stack contents, bottom first."""
        return list(self._data)

    def pop(self) -> bytes:
        """Remove and return the top value."""
        if not self._data:
            raise _fail(ExitError.STACK_UNDERFLOW)
        return self._data.pop()

    def push(self, value: bytes) -> None:
        """Push a value; the stack is left unchanged if it is full."""
        if len(self._data) + 1 > self.limit:
            raise _fail(ExitError.STACK_OVERFLOW)
        self._data.append(value)

    def peek(self, no_from_top: int) -> bytes:
        """Return the value ``no_from_top`` places below the top."""
        if len(self._data) > no_from_top:
            return self._data[-no_from_top - 1]
        raise _fail(ExitError.STACK_UNDERFLOW)

    def set(self, no_from_top: int, value: bytes) -> None:
        """Replace the value ``no_from_top`` places below the top."""
        if len(self._data) > no_from_top:
            self._data[-no_from_top - 1] = value
            return
        raise _fail(ExitError.STACK_UNDERFLOW)