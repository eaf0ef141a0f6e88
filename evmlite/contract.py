"""Code and call data of an execution frame, with its valid jump targets."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from typing import FrozenSet

from .models import ZERO_ADDRESS, CallContext

JUMPDEST = 0x5B
PUSH1 = 0x60
PUSH32 = 0x7F


def push_size(opcode: int) -> int:
    """Number of immediate bytes after a PUSH opcode, 0 for anything else."""
    if PUSH1 <= opcode <= PUSH32:
        return opcode - PUSH1 + 1
    return 0


class ValidJumpAddress:
    """Positions in code that hold a JUMPDEST outside of PUSH data."""

    def __init__(self, code: bytes) -> None:
        self._length = len(code)
        valid = set()
        positions = iter(enumerate(code))
        for position, opcode in positions:
            if opcode == JUMPDEST:
                valid.add(position)
            else:
                skip = push_size(opcode)
                if skip:
                    next(islice(positions, skip, skip), None)
        self._valid: FrozenSet[int] = frozenset(valid)

    def __len__(self) -> int:
        return self._length

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidJumpAddress):
            return NotImplemented
        return self._length == other._length and self._valid == other._valid

    def __hash__(self) -> int:
        return hash((self._length, self._valid))

    def __repr__(self) -> str:
        return f"ValidJumpAddress(len={self._length}, valid={sorted(self._valid)})"

    def is_valid(self, position: int) -> bool:
        return position in self._valid


@dataclass
class Contract:
    """Code being executed together with its input and call context."""

    input: bytes = b""
    code: bytes = b""
    address: bytes = ZERO_ADDRESS
    caller: bytes = ZERO_ADDRESS
    value: int = 0
    jumpdest: ValidJumpAddress = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.jumpdest = ValidJumpAddress(self.code)

    def is_valid_jump(self, position: int) -> bool:
        return self.jumpdest.is_valid(position)

    @classmethod
    def new_with_context(cls, input: bytes, code: bytes, call_context: CallContext) -> "Contract":
        return cls(
            input=input,
            code=code,
            address=call_context.address,
            caller=call_context.caller,
            value=call_context.apparent_value,
        )