"""Playable races and their base stats at level 70."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

__all__ = ["Race", "BaseStats", "LEVEL", "get_race", "base_stats"]

_log = logging.getLogger(__name__)

LEVEL = 70
"""Level of every simulated character."""


class Race(Enum):
    """Playable race."""

    HUMAN = "human"
    DWARF = "dwarf"
    NIGHT_ELF = "night_elf"
    GNOME = "gnome"
    DRAENEI = "draenei"
    ORC = "orc"
    TAUREN = "tauren"
    TROLL = "troll"
    UNDEAD = "undead"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BaseStats:
    """Stats a character of some race has without any gear."""

    strength: int
    agility: int
    attack_power: int = 190
    critical_strike: float = 1.141
    sword_expertise: int = 0
    mace_expertise: int = 0
    axe_expertise: int = 0


_BASE_STATS = {
    Race.HUMAN: BaseStats(145, 96, sword_expertise=5, mace_expertise=5),
    Race.DWARF: BaseStats(147, 92),
    Race.NIGHT_ELF: BaseStats(142, 101),
    Race.GNOME: BaseStats(140, 99),
    Race.DRAENEI: BaseStats(146, 93),
    Race.ORC: BaseStats(148, 93, axe_expertise=5),
    Race.TAUREN: BaseStats(150, 91),
    Race.TROLL: BaseStats(146, 98),
    Race.UNDEAD: BaseStats(144, 94),
}


def get_race(name: str) -> Race:
    """Race called ``name``; unknown names fall back to human with a warning."""
    try:
        return Race(name)
    except ValueError:
        _log.warning("Race %r not found, picking human", name)
        return Race.HUMAN


def base_stats(race: Race) -> BaseStats:
    """Base stats of ``race``."""
    return _BASE_STATS[Race(race)]