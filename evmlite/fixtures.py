"""Parsers for the string encodings used in state-test fixtures."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_HEX_OR_EMPTY = re.compile(r"[0-9a-fA-F]*")
_DECIMAL = re.compile(r"[0-9]+")
_ADDRESS_DIGITS = re.compile(r"[0-9a-fA-F]{40}")


def _require_str(text: object) -> str:
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    return text


def _parse_uint(text: str, bits: int) -> int:
    text = _require_str(text)
    if text.startswith("0x"):
        digits = text[2:]
        if not _HEX_DIGITS.fullmatch(digits):
            raise ValueError(f"invalid hex number: {text!r}")
        value = int(digits, 16)
    else:
        if not _DECIMAL.fullmatch(text):
            raise ValueError(f"invalid decimal number: {text!r}")
        value = int(text)
    if value >> bits:
        raise ValueError(f"{text!r} does not fit in {bits} bits")
    return value


def parse_u64(text: str) -> int:
    """Parse a decimal or ``0x``-prefixed hex number that fits in 64 bits."""
    return _parse_uint(text, 64)


def parse_u256(text: str) -> int:
    """Parse a decimal or ``0x``-prefixed hex number that fits in 256 bits."""
    return _parse_uint(text, 256)


def parse_bytes(text: str) -> bytes:
    """Decode hex, with or without a ``0x`` prefix."""
    text = _require_str(text)
    digits = text[2:] if text.startswith("0x") else text
    if len(digits) % 2 or not _HEX_OR_EMPTY.fullmatch(digits):
        raise ValueError(f"invalid hex data: {text!r}")
    return bytes.fromhex(digits)


def parse_bytes_list(items: Iterable[str]) -> List[bytes]:
    """Decode each hex string of ``items``."""
    return [parse_bytes(item) for item in items]


def parse_maybe_address(text: str) -> Optional[bytes]:
    """Decode a 20-byte address; an empty string means no address."""
    text = _require_str(text)
    if not text:
        return None
    digits = text[2:] if text.startswith("0x") else text
    if not _ADDRESS_DIGITS.fullmatch(digits):
        raise ValueError(f"invalid address: {text!r}")
    return bytes.fromhex(digits)