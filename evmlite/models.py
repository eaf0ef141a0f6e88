"""Plain data shared by the interpreter: accounts, environment and results."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional

from Crypto.Hash import keccak

ZERO_ADDRESS = bytes(20)
ZERO_HASH = bytes(32)

KECCAK_EMPTY = bytes.fromhex(
    "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
)


def keccak256(data: bytes) -> bytes:
    """Return the Keccak-256 digest of ``data``."""
    return keccak.new(digest_bits=256, data=bytes(data)).digest()


@dataclass
class AccountInfo:
    """Balance, nonce and code of an account."""

    balance: int = 0
    code_hash: bytes = KECCAK_EMPTY
    code: Optional[bytes] = None
    nonce: int = 0

    def is_empty(self) -> bool:
        code_empty = self.code_hash in (KECCAK_EMPTY, ZERO_HASH)
        return self.balance == 0 and self.nonce == 0 and code_empty

    def exists(self) -> bool:
        return not self.is_empty()

    @classmethod
    def from_balance(cls, balance: int) -> "AccountInfo":
        return cls(balance=balance)


@dataclass(frozen=True)
class CreateScheme:
    """CREATE when ``salt`` is None, otherwise CREATE2 with that salt."""

    salt: Optional[bytes] = None

    @classmethod
    def create(cls) -> "CreateScheme":
        return cls()

    @classmethod
    def create2(cls, salt: bytes) -> "CreateScheme":
        return cls(bytes(salt))

    @property
    def is_create2(self) -> bool:
        return self.salt is not None


class CallScheme(enum.Enum):
    CALL = "Call"
    CALL_CODE = "CallCode"
    DELEGATE_CALL = "DelegateCall"
    STATIC_CALL = "StaticCall"


@dataclass(frozen=True)
class TransactTo:
    """Target of a transaction: a call to an address or a contract creation."""

    address: Optional[bytes] = None
    scheme: Optional[CreateScheme] = None

    def __post_init__(self) -> None:
        if (self.address is None) == (self.scheme is None):
            raise ValueError("exactly one of address or scheme must be given")

    @classmethod
    def call(cls, address: bytes) -> "TransactTo":
        return cls(address=bytes(address))

    @classmethod
    def create(cls) -> "TransactTo":
        return cls(scheme=CreateScheme.create())

    @property
    def is_create(self) -> bool:
        return self.scheme is not None


@dataclass(frozen=True)
class TransactOut:
    """Output of a transaction.

    ``output`` is None when the transaction produced nothing; for a creation
    ``created`` is set and ``address`` holds the new contract, if any.
    """

    output: Optional[bytes] = None
    address: Optional[bytes] = None
    created: bool = False


@dataclass
class CallContext:
    address: bytes = ZERO_ADDRESS
    caller: bytes = ZERO_ADDRESS
    apparent_value: int = 0


@dataclass
class GlobalEnv:
    """Block and transaction environment of an execution."""

    gas_max_fee: int = 0
    gas_priority_fee: Optional[int] = None
    block_number: int = 0
    block_coinbase: bytes = ZERO_ADDRESS
    block_timestamp: int = 0
    block_difficulty: int = 0
    block_gas_limit: int = 0
    chain_id: int = 0
    block_basefee: Optional[int] = None
    origin: bytes = ZERO_ADDRESS

    def effective_gas_price(self) -> int:
        if self.block_basefee is None or self.gas_priority_fee is None:
            return self.gas_max_fee
        return min(self.gas_max_fee, self.block_basefee + self.gas_priority_fee)


@dataclass
class Transfer:
    source: bytes
    target: bytes
    value: int


@dataclass
class Log:
    address: bytes
    topics: List[bytes] = field(default_factory=list)
    data: bytes = b""


@dataclass
class SelfDestructResult:
    had_value: bool = False
    exists: bool = False
    is_cold: bool = False
    previously_destroyed: bool = False