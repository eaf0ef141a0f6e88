"""Root hash of a Merkle Patricia trie built from key/value pairs."""

from __future__ import annotations

from itertools import groupby
from typing import Iterable, List, Sequence, Tuple

from .models import keccak256
from .rlp import _encode_payload_list, encode

Nibbles = Tuple[int, ...]
_Entry = Tuple[Nibbles, bytes]

_EMPTY = encode(b"")


def _nibbles(key: bytes) -> Nibbles:
    return tuple(nibble for byte in key for nibble in (byte >> 4, byte & 0x0F))


def _hex_prefix(nibbles: Sequence[int], leaf: bool) -> bytes:
    flag = 2 if leaf else 0
    if len(nibbles) % 2:
        head = bytes([((flag + 1) << 4) | nibbles[0]])
        rest = nibbles[1:]
    else:
        head = bytes([flag << 4])
        rest = nibbles
    return head + bytes((hi << 4) | lo for hi, lo in zip(rest[0::2], rest[1::2]))


def _shared_prefix_len(a: Sequence[int], b: Sequence[int]) -> int:
    count = 0
    for x, y in zip(a, b):
        if x != y:
            break
        count += 1
    return count


def _reference(node: bytes) -> bytes:
    """Inline small nodes, refer to larger ones by hash."""
    return node if len(node) < 32 else encode(keccak256(node))


def _encode_node(entries: List[_Entry], depth: int) -> bytes:
    if len(entries) == 1:
        key, value = entries[0]
        return _encode_payload_list([encode(_hex_prefix(key[depth:], True)), encode(value)])

    first, last = entries[0][0], entries[-1][0]
    shared = _shared_prefix_len(first[depth:], last[depth:])
    if shared:
        child = _encode_node(entries, depth + shared)
        extension = _hex_prefix(first[depth:depth + shared], False)
        return _encode_payload_list([encode(extension), _reference(child)])

    slots = [_EMPTY] * 16
    value = _EMPTY
    rest = entries
    if len(first) == depth:
        value = encode(entries[0][1])
        rest = entries[1:]
    for nibble, group in groupby(rest, key=lambda entry: entry[0][depth]):
        slots[nibble] = _reference(_encode_node(list(group), depth + 1))
    return _encode_payload_list(slots + [value])


def trie_root(pairs: Iterable[Tuple[bytes, bytes]]) -> bytes:
    """Root hash of the trie holding ``pairs``; a repeated key keeps its last value."""
    entries = {bytes(key): bytes(value) for key, value in pairs}
    if not entries:
        return keccak256(_EMPTY)
    ordered = sorted((_nibbles(key), value) for key, value in entries.items())
    return keccak256(_encode_node(ordered, 0))


def sec_trie_root(pairs: Iterable[Tuple[bytes, bytes]]) -> bytes:
    """Root hash of the trie whose keys are the Keccak-256 hashes of the given keys."""
    return trie_root((keccak256(key), value) for key, value in pairs)