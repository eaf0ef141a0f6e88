"""Byte-addressed frame memory and helpers for reading return data."""

from __future__ import annotations

from typing import Optional

from .errors import ExitException, ExitFatal, ExitReason

U256_MAX = (1 << 256) - 1
USIZE_MAX = (1 << 64) - 1


def next_multiple_of_32(x: int) -> Optional[int]:
    """Round ``x`` up to a multiple of 32, or None if that exceeds 256 bits."""
    result = x + (-x % 32)
    return result if result <= U256_MAX else None


def _not_supported() -> ExitException:
    return ExitException(ExitReason.of(ExitFatal.NOT_SUPPORTED))


class Memory:
    """Sequential memory that grows on write up to ``limit`` bytes."""

    def __init__(self, limit: int = USIZE_MAX) -> None:
        self.limit = limit
        self.effective_len = 0
        self._data = bytearray()

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Memory(limit={self.limit}, len={len(self._data)})"

    @property
    def data(self) -> bytes:
        """The whole memory contents."""
        return bytes(self._data)

    def get(self, offset: int, size: int) -> bytes:
        """Read ``size`` bytes at ``offset``; bytes past the end read as zero."""
        chunk = bytes(self._data[offset:offset + size])
        return chunk + bytes(size - len(chunk))

    def set(self, offset: int, value: bytes, target_size: Optional[int] = None) -> None:
        """Write ``value`` at ``offset``, truncated or zero-padded to ``target_size``."""
        if target_size is None:
            target_size = len(value)
        if target_size == 0:
            return
        end = offset + target_size
        if end > USIZE_MAX or end > self.limit:
            raise _not_supported()
        if len(self._data) < end:
            self._data.extend(bytes(end - len(self._data)))
        self._data[offset:end] = bytes(value[:target_size]).ljust(target_size, b"\0")

    def copy_large(self, memory_offset: int, data_offset: int, length: int, data: bytes) -> None:
        """Copy ``length`` bytes of ``data`` from ``data_offset`` into memory."""
        if length == 0:
            return
        if memory_offset > USIZE_MAX or length > USIZE_MAX:
            raise _not_supported()
        end = data_offset + length
        if end > USIZE_MAX or data_offset > len(data):
            source = b""
        else:
            source = bytes(data[data_offset:min(end, len(data))])
        self.set(memory_offset, source, length)


def read_return_range(memory: Memory, start: int, end: int) -> bytes:
    """Copy the return data ``start..end`` out of ``memory``."""
    size = end - start
    if start > USIZE_MAX:
        return bytes(size)
    if end > USIZE_MAX:
        return memory.get(start, USIZE_MAX - start).ljust(size, b"\0")
    return memory.get(start, size)