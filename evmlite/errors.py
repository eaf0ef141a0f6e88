"""Reasons an execution frame stops, and the exception that carries one."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union


class ExitKind(enum.Enum):
    """The broad class of an exit."""

    SUCCEED = "Succeed"
    ERROR = "Error"
    REVERT = "Revert"
    FATAL = "Fatal"


class ExitSucceed(enum.Enum):
    """Ways a frame can finish successfully."""

    STOPPED = "Stopped"
    RETURNED = "Returned"
    SELF_DESTRUCTED = "SelfDestructed"


class ExitRevert(enum.Enum):
    """Ways a frame can revert."""

    REVERTED = "Reverted"
    OUT_OF_FUND = "OutOfFund"
    CALL_TOO_DEEP = "CallTooDeep"


class ExitError(enum.Enum):
    """Normal EVM errors."""

    STACK_UNDERFLOW = "StackUnderflow"
    STACK_OVERFLOW = "StackOverflow"
    INVALID_JUMP = "InvalidJump"
    INVALID_RANGE = "InvalidRange"
    DESIGNATED_INVALID = "DesignatedInvalid"
    CREATE_COLLISION = "CreateCollision"
    CREATE_CONTRACT_LIMIT = "CreateContractLimit"
    CREATE_CONTRACT_WITH_EF = "CreateContractWithEF"
    OUT_OF_OFFSET = "OutOfOffset"
    OUT_OF_GAS = "OutOfGas"
    OUT_OF_FUND = "OutOfFund"
    GAS_PRICE_LESS_THEN_BASEFEE = "GasPriceLessThenBasefee"
    LACK_OF_FUND_FOR_GAS_LIMIT = "LackOfFundForGasLimit"
    CALLER_GAS_LIMIT_MORE_THEN_BLOCK = "CallerGasLimitMoreThenBlock"
    GAS_MAX_FEE_GREATER_THAN_PRIORITY_FEE = "GasMaxFeeGreaterThanPriorityFee"
    REJECT_CALLER_WITH_CODE = "RejectCallerWithCode"
    OVERFLOW_PAYMENT = "OverflowPayment"
    PC_UNDERFLOW = "PCUnderflow"
    CREATE_EMPTY = "CreateEmpty"
    OPCODE_NOT_FOUND = "OpcodeNotFound"
    CALL_NOT_ALLOWED_INSIDE_STATIC = "CallNotAllowedInsideStatic"
    OTHER = "Other"
    PRECOMPILE = "Precompile"


class ExitFatal(enum.Enum):
    """Errors that are not supposed to happen during normal execution."""

    NOT_SUPPORTED = "NotSupported"
    CALL_ERROR_AS_FATAL = "CallErrorAsFatal"
    OTHER = "Other"


ExitCode = Union[ExitSucceed, ExitRevert, ExitError, ExitFatal]

_KINDS = {
    ExitSucceed: ExitKind.SUCCEED,
    ExitRevert: ExitKind.REVERT,
    ExitError: ExitKind.ERROR,
    ExitFatal: ExitKind.FATAL,
}

_CARRIES_MESSAGE = frozenset(
    {
        ExitError.OTHER,
        ExitError.PRECOMPILE,
        ExitFatal.CALL_ERROR_AS_FATAL,
        ExitFatal.OTHER,
    }
)


@dataclass(frozen=True)
class ExitReason:
    """Why a frame stopped: a kind, a specific code and an optional detail."""

    kind: ExitKind
    code: ExitCode
    message: Optional[str] = None

    def __post_init__(self) -> None:
        expected = _KINDS.get(type(self.code))
        if expected is None:
            raise TypeError(f"not an exit code: {self.code!r}")
        if expected is not self.kind:
            raise ValueError(f"{self.code!r} does not belong to {self.kind!r}")
        if self.message is not None and self.code not in _CARRIES_MESSAGE:
            raise ValueError(f"{self.code!r} carries no message")

    @classmethod
    def of(cls, code: ExitCode, message: Optional[str] = None) -> "ExitReason":
        """Build a reason from a code, deriving its kind."""
        kind = _KINDS.get(type(code))
        if kind is None:
            raise TypeError(f"not an exit code: {code!r}")
        return cls(kind, code, message)

    def is_succeed(self) -> bool:
        return self.kind is ExitKind.SUCCEED

    def is_error(self) -> bool:
        return self.kind is ExitKind.ERROR

    def is_revert(self) -> bool:
        return self.kind is ExitKind.REVERT

    def is_fatal(self) -> bool:
        return self.kind is ExitKind.FATAL

    def __str__(self) -> str:
        inner = self.code.value
        if self.message is not None:
            inner = f"{inner}({self.message})"
        return f"{self.kind.value}({inner})"


class ExitException(Exception):
    """Raised where an operation ends a frame with the given reason."""

    def __init__(self, reason: ExitReason) -> None:
        super().__init__(str(reason))
        self.reason = reason