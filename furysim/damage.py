"""Hit results and bookkeeping of damage per source."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

__all__ = ["HitResult", "DamageSource", "DamageInstance", "DamageSources"]


class HitResult(IntEnum):
    """Outcome of an attack roll."""

    TBD = 0
    MISS = 0x1
    DODGE = 0x2
    GLANCING = 0x4
    CRIT = 0x8
    HIT = 0x10


class DamageSource(Enum):
    """Origin of a piece of damage; the order is significant."""

    WHITE_MH = 0
    WHITE_OH = 1
    BLOODTHIRST = 2
    EXECUTE = 3
    HEROIC_STRIKE = 4
    CLEAVE = 5
    WHIRLWIND = 6
    HAMSTRING = 7
    DEEP_WOUNDS = 8
    ITEM_HIT_EFFECTS = 9
    OVERPOWER = 10
    SLAM = 11
    MORTAL_STRIKE = 12
    SWEEPING_STRIKES = 13

    def __str__(self) -> str:
        return _SOURCE_NAMES[self]


_SOURCE_NAMES = {
    DamageSource.WHITE_MH: "white_mh",
    DamageSource.WHITE_OH: "white_oh",
    DamageSource.BLOODTHIRST: "bloodthirst",
    DamageSource.EXECUTE: "execute",
    DamageSource.HEROIC_STRIKE: "heroic_strike",
    DamageSource.CLEAVE: "cleave",
    DamageSource.WHIRLWIND: "whirlwind",
    DamageSource.HAMSTRING: "hamstring",
    DamageSource.DEEP_WOUNDS: "deep_wound",
    DamageSource.ITEM_HIT_EFFECTS: "item_hit_effects",
    DamageSource.OVERPOWER: "overpower",
    DamageSource.SLAM: "slam",
    DamageSource.MORTAL_STRIKE: "mortal_strike",
    DamageSource.SWEEPING_STRIKES: "sweeping_strikes",
}


@dataclass(frozen=True)
class DamageInstance:
    """A single damage event."""

    damage_source: DamageSource
    damage: float
    time_stamp: int


def _zero_damage() -> dict[DamageSource, float]:
    return {source: 0.0 for source in DamageSource}


def _zero_counts() -> dict[DamageSource, int]:
    return {source: 0 for source in DamageSource}


@dataclass
class DamageSources:
    """Total damage and number of hits for every damage source."""

    damage: dict[DamageSource, float] = field(default_factory=_zero_damage)
    counts: dict[DamageSource, int] = field(default_factory=_zero_counts)

    def add_damage(self, source: DamageSource, damage: float) -> None:
        """Record one hit of ``damage`` from ``source``."""
        if not isinstance(source, DamageSource):
            raise ValueError(f"unknown damage source: {source!r}")
        self.damage[source] += damage
        self.counts[source] += 1

    def sum_damage_sources(self) -> float:
        """Total damage over all sources."""
        return sum(self.damage.values())

    def sum_counts(self) -> int:
        """Total number of hits over all sources."""
        return sum(self.counts.values())

    def __add__(self, other: DamageSources) -> DamageSources:
        if not isinstance(other, DamageSources):
            return NotImplemented
        return DamageSources(
            damage={s: self.damage[s] + other.damage[s] for s in DamageSource},
            counts={s: self.counts[s] + other.counts[s] for s in DamageSource},
        )