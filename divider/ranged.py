"""Quantities described by a typical value and a worst-case band."""
from __future__ import annotations

import enum
from dataclasses import dataclass


@dataclass(frozen=True)
class RangedValue:
    """A ``(value, min, max)`` triple.

    ``min <= value <= max`` is expected but not checked; whoever builds the
    triple is responsible for computing the bounds consistently.
    """

    value: float
    min: float
    max: float

    @property
    def typical(self) -> float:
        return self.value


Gain = RangedValue


@dataclass(frozen=True)
class Voltage(RangedValue):
    @classmethod
    def by_values(cls, value: float, min: float, max: float) -> "Voltage":
        return cls(value, min, max)

    @classmethod
    def by_allowance(cls, value: float, allowance: float) -> "Voltage":
        """Symmetric band: ``value * (1 -/+ allowance)``."""
        return cls(value, value * (1.0 - allowance), value * (1.0 + allowance))


class SourceKind(str, enum.Enum):
    VCC = "vcc"
    REGULATOR = "regulator"


@dataclass(frozen=True)
class VrefSource:
    """Where the divider's top node is fed from."""

    kind: SourceKind
    voltage: Voltage

    @classmethod
    def vcc(cls, voltage: Voltage) -> "VrefSource":
        return cls(SourceKind.VCC, voltage)

    @classmethod
    def regulator(cls, voltage: Voltage) -> "VrefSource":
        return cls(SourceKind.REGULATOR, voltage)
