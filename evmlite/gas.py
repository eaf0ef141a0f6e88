"""Gas accounting of an execution frame."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import ExitReason


@dataclass
class Gas:
    """Gas limit, execution cost, memory cost and refund counter."""

    limit: int
    used: int = field(default=0, init=False)
    memory: int = field(default=0, init=False)
    refunded: int = field(default=0, init=False)

    def spend(self) -> int:
        """Gas consumed, memory expansion included."""
        return self.used + self.memory

    def remaining(self) -> int:
        return self.limit - self.used - self.memory

    def erase_cost(self, returned: int) -> None:
        """Give back ``returned`` units of previously recorded cost."""
        if returned > self.used:
            raise ValueError("cannot return more gas than was used")
        self.used -= returned

    def record_refund(self, refund: int) -> None:
        self.refunded += refund

    def record_cost(self, cost: int) -> bool:
        """Charge ``cost``; return False and charge nothing if it does not fit."""
        if self.limit < self.used + self.memory + cost:
            return False
        self.used += cost
        return True

    def record_memory(self, gas_memory: int) -> bool:
        """Raise the memory cost to ``gas_memory``; False if it does not fit."""
        if self.limit < self.used + gas_memory:
            return False
        self.memory = max(self.memory, gas_memory)
        return True

    def reimburse_unspend(self, exit: ExitReason, other: "Gas") -> None:
        """Take back what a finished sub-frame did not use."""
        if exit.is_succeed():
            self.erase_cost(other.remaining())
            self.record_refund(other.refunded)
        elif exit.is_revert():
            self.erase_cost(other.remaining())