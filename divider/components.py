"""Passive components with a nominal value and a symmetric tolerance."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PassiveComponent:
    value: float
    tolerance: float

    @property
    def typical(self) -> float:
        return self.value

    @property
    def max(self) -> float:
        return self.value * (1.0 + self.tolerance)

    @property
    def min(self) -> float:
        return self.value * (1.0 - self.tolerance)


@dataclass(frozen=True)
class Resistor(PassiveComponent):
    @classmethod
    def from_value(cls, value: float) -> "Resistor":
        return cls(value, 0.05)


@dataclass(frozen=True)
class Capacitor(PassiveComponent):
    @classmethod
    def from_value(cls, value: float) -> "Capacitor":
        return cls(value, 0.20)
