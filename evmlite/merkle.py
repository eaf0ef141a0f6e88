"""State root calculation for account sets and JSON state dumps."""

from __future__ import annotations

import json
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .fixtures import parse_bytes
from .models import AccountInfo, keccak256
from .rlp import encode
from .trie import sec_trie_root

_ACCOUNT_FIELDS = frozenset({"balance", "code", "nonce", "storage"})
_QUANTITY = re.compile(r"0x[0-9a-fA-F]{1,64}")
_DEFAULT_PATH = "./storage.json"


@dataclass
class StateAccount:
    """An account as it appears in a JSON state dump."""

    balance: int = 0
    code: bytes = b""
    nonce: int = 0
    storage: Dict[bytes, bytes] = field(default_factory=dict)


def _parse_fixed(text: object, size: int) -> bytes:
    if not isinstance(text, str) or not re.fullmatch(rf"0x[0-9a-fA-F]{{{2 * size}}}", text):
        raise ValueError(f"expected 0x-prefixed {size}-byte hex, got {text!r}")
    return bytes.fromhex(text[2:])


def _parse_quantity(text: object) -> int:
    if not isinstance(text, str) or not _QUANTITY.fullmatch(text):
        raise ValueError(f"expected 0x-prefixed hex quantity, got {text!r}")
    return int(text[2:], 16)


def _parse_account(raw: object) -> StateAccount:
    if not isinstance(raw, dict):
        raise ValueError(f"account must be an object, got {raw!r}")
    unknown = set(raw) - _ACCOUNT_FIELDS
    if unknown:
        raise ValueError(f"unknown account fields: {sorted(unknown)}")
    missing = _ACCOUNT_FIELDS - set(raw)
    if missing:
        raise ValueError(f"missing account fields: {sorted(missing)}")
    nonce = raw["nonce"]
    if isinstance(nonce, bool) or not isinstance(nonce, int) or not 0 <= nonce < 2**64:
        raise ValueError(f"nonce must be a 64-bit unsigned integer, got {nonce!r}")
    code = raw["code"]
    if not isinstance(code, str):
        raise ValueError(f"code must be a hex string, got {code!r}")
    storage = raw["storage"]
    if not isinstance(storage, dict):
        raise ValueError(f"storage must be an object, got {storage!r}")
    return StateAccount(
        balance=_parse_quantity(raw["balance"]),
        code=parse_bytes(code),
        nonce=nonce,
        storage={_parse_fixed(k, 32): _parse_fixed(v, 32) for k, v in storage.items()},
    )


def parse_state(text: str) -> Dict[bytes, StateAccount]:
    """Parse a JSON object that maps addresses to accounts."""
    raw = json.loads(text)
    if not isinstance(raw, dict):
        raise ValueError("state must be a JSON object")
    return {_parse_fixed(address, 20): _parse_account(acc) for address, acc in raw.items()}


def _storage_root(storage: Mapping[bytes, bytes]) -> bytes:
    return sec_trie_root(
        (slot, encode(number))
        for slot, number in ((slot, int.from_bytes(value, "big")) for slot, value in storage.items())
        if number
    )


def trie_account_rlp(info: AccountInfo, storage: Mapping[bytes, bytes]) -> bytes:
    """RLP of an account as stored in the state trie."""
    return encode([info.nonce, info.balance, _storage_root(storage), info.code_hash])


def state_account_rlp(account: StateAccount) -> bytes:
    """RLP of an account from a state dump, hashing its code."""
    info = AccountInfo(
        balance=account.balance,
        code_hash=keccak256(account.code),
        nonce=account.nonce,
    )
    return trie_account_rlp(info, account.storage)


def trie_root(acc_data: Iterable[Tuple[bytes, bytes]]) -> bytes:
    """State root of (address, account RLP) pairs."""
    return sec_trie_root(acc_data)


def merkle_trie_root(
    accounts: Mapping[bytes, AccountInfo],
    storage: Mapping[bytes, Mapping[bytes, bytes]],
) -> bytes:
    """State root of accounts and their storage."""
    return trie_root(
        (address, trie_account_rlp(info, storage.get(address, {})))
        for address, info in accounts.items()
    )


def merkelize(state: Mapping[bytes, StateAccount]) -> bytes:
    """State root of a parsed state dump."""
    return trie_root((address, state_account_rlp(acc)) for address, acc in state.items())


def main(argv: Optional[List[str]] = None) -> int:
    """Print the state root of a JSON dump; its path is the second argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[1] if len(args) > 1 else _DEFAULT_PATH
    state = parse_state(Path(path).read_text(encoding="utf-8"))
    root = merkelize(state)
    print(f'MERKLE ROOT:"{root.hex()}"')
    return 0


if __name__ == "__main__":
    raise SystemExit(main())