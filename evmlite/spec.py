"""Hard-fork identifiers and the rule sets selected by them."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class SpecId(enum.IntEnum):
    """Hard forks in chronological order."""

    FRONTIER = 1
    HOMESTEAD = 2
    TANGERINE = 3
    SPURIOUS_DRAGON = 4
    BYZANTINE = 5
    CONSTANTINOPLE = 6
    PETERSBURG = 7
    ISTANBUL = 8
    MUIRGLACIER = 9
    BERLIN = 10
    LONDON = 11
    LATEST = 12

    @classmethod
    def from_name(cls, name: str) -> "SpecId":
        """Map a fork name to its id; unknown names map to LATEST."""
        return _NAMES.get(name, cls.LATEST)

    def enabled(self, current_id: int) -> bool:
        """True when this fork comes strictly after ``current_id``."""
        return int(self) > int(current_id)


_NAMES = {
    "Frontier": SpecId.FRONTIER,
    "Homestead": SpecId.HOMESTEAD,
    "Tangerine": SpecId.TANGERINE,
    "Spurious": SpecId.SPURIOUS_DRAGON,
    "Byzantium": SpecId.BYZANTINE,
    "Constantinople": SpecId.CONSTANTINOPLE,
    "Petersburg": SpecId.PETERSBURG,
    "Istanbul": SpecId.ISTANBUL,
    "MuirGlacier": SpecId.MUIRGLACIER,
    "Berlin": SpecId.BERLIN,
    "London": SpecId.LONDON,
}


@dataclass(frozen=True)
class Spec:
    """Rule set of one fork, optionally inside a static call."""

    spec_id: SpecId
    is_static_call: bool = False

    def enabled(self, spec_id: SpecId) -> bool:
        """True when the rules of ``spec_id`` apply under this spec."""
        return int(self.spec_id) >= int(spec_id)

    def static(self) -> "Spec":
        """The same fork with the static-call flag set."""
        return Spec(self.spec_id, True)


LATEST_SPEC = Spec(SpecId.LATEST)
LONDON_SPEC = Spec(SpecId.LONDON)
BERLIN_SPEC = Spec(SpecId.BERLIN)
ISTANBUL_SPEC = Spec(SpecId.ISTANBUL)
BYZANTINE_SPEC = Spec(SpecId.BYZANTINE)
FRONTIER_SPEC = Spec(SpecId.FRONTIER)


class SpecName(enum.Enum):
    """Fork names as they appear in state-test fixtures."""

    EIP150 = "EIP150"
    EIP158 = "EIP158"
    FRONTIER = "Frontier"
    HOMESTEAD = "Homestead"
    BYZANTIUM = "Byzantium"
    CONSTANTINOPLE = "Constantinople"
    CONSTANTINOPLE_FIX = "ConstantinopleFix"
    ISTANBUL = "Istanbul"
    EIP158_TO_BYZANTIUM_AT5 = "EIP158ToByzantiumAt5"
    FRONTIER_TO_HOMESTEAD_AT5 = "FrontierToHomesteadAt5"
    HOMESTEAD_TO_DAO_AT5 = "HomesteadToDaoAt5"
    HOMESTEAD_TO_EIP150_AT5 = "HomesteadToEIP150At5"
    BYZANTIUM_TO_CONSTANTINOPLE_AT5 = "ByzantiumToConstantinopleAt5"
    BYZANTIUM_TO_CONSTANTINOPLE_FIX_AT5 = "ByzantiumToConstantinopleFixAt5"
    BERLIN = "Berlin"
    LONDON = "London"
    BERLIN_TO_LONDON_AT5 = "BerlinToLondonAt5"

    def to_spec_id(self) -> SpecId:
        """Return the fork id; only London, Berlin and Istanbul are supported."""
        try:
            return _SUPPORTED[self]
        except KeyError:
            raise ValueError(f"Conversion failed: {self.value}") from None


_SUPPORTED = {
    SpecName.LONDON: SpecId.LONDON,
    SpecName.BERLIN: SpecId.BERLIN,
    SpecName.ISTANBUL: SpecId.ISTANBUL,
}