"""Recursive Length Prefix encoding of byte strings, integers and lists."""

from __future__ import annotations

from typing import Iterable, Union

Item = Union[bytes, bytearray, memoryview, int, list, tuple]

_SHORT_LIMIT = 55
_STRING_OFFSET = 0x80
_LIST_OFFSET = 0xC0


def _length_prefix(length: int, offset: int) -> bytes:
    if length <= _SHORT_LIMIT:
        return bytes([offset + length])
    size = length.to_bytes((length.bit_length() + 7) // 8, "big")
    return bytes([offset + _SHORT_LIMIT + len(size)]) + size


def _encode_bytes(data: bytes) -> bytes:
    if len(data) == 1 and data[0] < _STRING_OFFSET:
        return data
    return _length_prefix(len(data), _STRING_OFFSET) + data


def _encode_payload_list(encoded_items: Iterable[bytes]) -> bytes:
    """Wrap items that are already RLP-encoded into an RLP list."""
    payload = b"".join(encoded_items)
    return _length_prefix(len(payload), _LIST_OFFSET) + payload


def encode(item: Item) -> bytes:
    """Encode bytes, a non-negative integer, or a (nested) list of those."""
    if isinstance(item, (bytes, bytearray, memoryview)):
        return _encode_bytes(bytes(item))
    if isinstance(item, bool):
        raise TypeError("booleans are not RLP items")
    if isinstance(item, int):
        if item < 0:
            raise ValueError("cannot encode a negative integer")
        return _encode_bytes(item.to_bytes((item.bit_length() + 7) // 8, "big"))
    if isinstance(item, (list, tuple)):
        return _encode_payload_list(encode(element) for element in item)
    raise TypeError(f"cannot RLP-encode {type(item).__name__}")