"""State databases the interpreter reads accounts, storage and code from."""

from __future__ import annotations

import abc
from dataclasses import replace
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from .models import KECCAK_EMPTY, ZERO_HASH, AccountInfo, Log, keccak256


class Database(abc.ABC):
    """Source of account state."""

    @abc.abstractmethod
    def exists(self, address: bytes) -> Optional[AccountInfo]:
        """The account at ``address`` if it exists, otherwise None."""

    @abc.abstractmethod
    def basic(self, address: bytes) -> AccountInfo:
        """Balance, nonce and code hash of the account at ``address``."""

    @abc.abstractmethod
    def code_by_hash(self, code_hash: bytes) -> bytes:
        """Code stored under ``code_hash``."""

    @abc.abstractmethod
    def storage(self, address: bytes, index: bytes) -> bytes:
        """Storage value of ``address`` at slot ``index``."""

    @abc.abstractmethod
    def block_hash(self, number: int) -> bytes:
        """Hash of the block with the given number."""


class DummyStateDB(Database):
    """In-memory state; cached accounts hold no code, which lives by hash."""

    def __init__(self) -> None:
        self._accounts: Dict[bytes, AccountInfo] = {}
        self._storage: Dict[bytes, Dict[bytes, bytes]] = {}
        self._contracts: Dict[bytes, bytes] = {KECCAK_EMPTY: b"", ZERO_HASH: b""}
        self._logs: List[Log] = []

    def __repr__(self) -> str:
        return f"DummyStateDB(accounts={self._accounts!r}, storage={self._storage!r})"

    def accounts(self) -> Mapping[bytes, AccountInfo]:
        """Read-only view of the cached accounts."""
        return MappingProxyType(self._accounts)

    def storages(self) -> Mapping[bytes, Dict[bytes, bytes]]:
        """Read-only view of the storage of every account."""
        return MappingProxyType(self._storage)

    def insert_cache(self, address: bytes, account: AccountInfo) -> None:
        """Store an account, moving its code into the code table."""
        stored = replace(account, code=None)
        if account.code:
            stored.code_hash = keccak256(account.code)
            self._contracts[stored.code_hash] = bytes(account.code)
        if stored.code_hash == ZERO_HASH:
            stored.code_hash = KECCAK_EMPTY
        self._accounts[address] = stored

    def insert_cache_storage(self, address: bytes, slot: bytes, value: bytes) -> None:
        self._storage.setdefault(address, {})[slot] = value

    def _fetch_account(self, address: bytes) -> bool:
        account = self._accounts.get(address)
        return account is not None and account.exists()

    def exists(self, address: bytes) -> Optional[AccountInfo]:
        if self._fetch_account(address):
            return replace(self._accounts[address])
        return None

    def basic(self, address: bytes) -> AccountInfo:
        if self._fetch_account(address):
            return replace(self._accounts[address], code=None)
        return AccountInfo()

    def code_by_hash(self, code_hash: bytes) -> bytes:
        return self._contracts.get(code_hash, b"")

    def storage(self, address: bytes, index: bytes) -> bytes:
        if self._fetch_account(address):
            return self._storage.get(address, {}).get(index, ZERO_HASH)
        return ZERO_HASH

    def block_hash(self, number: int) -> bytes:
        """Block hashes are not kept here, so every valid number maps to zero."""
        if number < 0:
            raise ValueError(f"block number must not be negative: {number}")
        return ZERO_HASH