"""Building blocks of the combat simulation: hit tables, rage and queued abilities."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from furysim.damage import HitResult
from furysim.timekeeper import NEVER

__all__ = [
    "DamageMultipliers",
    "HitOutcome",
    "HitTable",
    "SlamManager",
    "AbilityQueueManager",
    "RageManager",
    "RageTracker",
]

MAX_RAGE = 100.0


@dataclass(frozen=True)
class DamageMultipliers:
    """Damage factors for glancing blows, critical strikes and normal hits."""

    glance: float = 0.0
    crit: float = 0.0
    hit: float = 0.0


@dataclass
class HitOutcome:
    """Damage dealt by an attack and the damage that counts for rage."""

    damage: float = 0.0
    hit_result: HitResult = HitResult.TBD
    rage_damage: Optional[float] = None

    def __post_init__(self) -> None:
        if self.rage_damage is None:
            self.rage_damage = 0.0 if self.hit_result is HitResult.TBD else self.damage


class HitTable:
    """Attack table of miss, dodge, glance and crit chances, in percent."""

    def __init__(
        self,
        name: str = "",
        miss: float = 0.0,
        dodge: float = 0.0,
        glance: float = 0.0,
        crit: float = 0.0,
        multipliers: DamageMultipliers | None = None,
    ) -> None:
        self.name = name
        self._miss = miss
        self._dodge = miss + dodge
        self._glance = self._dodge + glance
        self._crit = self._glance + crit
        self._multipliers = multipliers if multipliers is not None else DamageMultipliers()

    def alter_white_crit(self, crit_delta: float) -> None:
        """Change the crit chance of a white attack."""
        self._crit += crit_delta

    def alter_yellow_crit(self, crit_delta: float) -> None:
        """Change the crit chance of an ability, scaled by the chance to connect."""
        self._crit += (100 - self._dodge) / 100 * crit_delta

    def is_miss_or_dodge(self, rng: random.Random) -> bool:
        """Roll whether the attack misses or is dodged."""
        return rng.random() * 100.0 < self._dodge

    def miss(self) -> float:
        return self._miss

    def dodge(self) -> float:
        return self._dodge - self._miss

    def glance(self) -> float:
        return self._glance - self._dodge

    def crit(self) -> float:
        return self._crit - self._glance if self._crit <= 100 else 100 - self._glance

    def hit(self) -> float:
        return 100 - self._crit if self._crit <= 100 else 0.0

    def glancing_penalty(self) -> float:
        """Damage factor of a glancing blow."""
        return self._multipliers.glance

    def generate_hit(self, damage: float, rng: random.Random) -> HitOutcome:
        """Roll the table and scale ``damage`` by the outcome."""
        roll = rng.random() * 100.0
        dm = self._multipliers
        if roll < self._miss:
            return HitOutcome(0.0, HitResult.MISS)
        if roll < self._dodge:
            return HitOutcome(0.0, HitResult.DODGE, damage * dm.hit)
        if roll < self._glance:
            return HitOutcome(damage * dm.glance, HitResult.GLANCING)
        if roll < self._crit:
            return HitOutcome(damage * dm.crit, HitResult.CRIT)
        return HitOutcome(damage * dm.hit, HitResult.HIT)


class SlamManager:
    """Tracks a slam cast in progress."""

    def __init__(self, slam_cast_time: int = 1500) -> None:
        self._slam_cast_time = slam_cast_time
        self._is_casting = False
        self._next_finish = NEVER

    def is_slam_casting(self) -> bool:
        return self._is_casting

    def next_finish(self) -> int:
        return self._next_finish

    def cast_slam(self, time_stamp: int) -> None:
        """Start casting at ``time_stamp``."""
        self._is_casting = True
        self._next_finish = time_stamp + self._slam_cast_time

    def finish_slam(self) -> None:
        """End the current cast."""
        self._is_casting = False
        self._next_finish = NEVER

    def ready(self, current_time: int) -> bool:
        """Whether the cast finishes exactly at ``current_time``."""
        if self._next_finish < current_time:
            raise ValueError(
                f"slam finished at {self._next_finish}, before current time {current_time}"
            )
        return self._next_finish == current_time


@dataclass
class AbilityQueueManager:
    """Heroic strike or cleave queued on the next main-hand swing."""

    heroic_strike_queued: bool = False
    cleave_queued: bool = False

    def is_ability_queued(self) -> bool:
        return self.heroic_strike_queued or self.cleave_queued

    def queue_heroic_strike(self) -> None:
        self.heroic_strike_queued = True
        self.cleave_queued = False

    def queue_cleave(self) -> None:
        self.heroic_strike_queued = False
        self.cleave_queued = True

    def reset(self) -> None:
        self.heroic_strike_queued = False
        self.cleave_queued = False


class RageManager(ABC):
    """Anything that holds rage."""

    @abstractmethod
    def gain_rage(self, amount: float) -> None: ...

    @abstractmethod
    def spend_rage(self, amount: float) -> None: ...

    @abstractmethod
    def spend_all_rage(self) -> None: ...

    @abstractmethod
    def swap_stance(self) -> None: ...

    @abstractmethod
    def get_rage(self) -> float: ...


class RageTracker(RageManager):
    """Rage pool capped at 100 that keeps statistics of gains and losses."""

    def __init__(self, tactical_mastery_rage: float = 0.0, rage: float = 0.0) -> None:
        self.tactical_mastery_rage = tactical_mastery_rage
        self.rage = rage
        self.rage_gained = 0.0
        self.rage_spent = 0.0
        self.rage_spent_on_execute = 0.0
        self.rage_lost_stance_swap = 0.0
        self.rage_lost_capped = 0.0

    def gain_rage(self, amount: float) -> None:
        """Add rage; anything above the cap is lost."""
        self.rage_gained += amount
        self.rage += amount
        if self.rage > MAX_RAGE:
            self.rage_lost_capped += self.rage - MAX_RAGE
            self.rage = MAX_RAGE

    def spend_rage(self, amount: float) -> None:
        """Spend ``amount`` rage; raises ValueError if there is not enough."""
        if self.rage - amount < 0:
            raise ValueError(f"cannot spend {amount} rage with only {self.rage}")
        self.rage_spent += amount
        self.rage -= amount

    def spend_all_rage(self) -> None:
        """Spend all rage on an execute."""
        self.rage_spent_on_execute += self.rage
        self.rage = 0.0

    def swap_stance(self) -> None:
        """Drop rage down to what tactical mastery keeps."""
        if self.rage > self.tactical_mastery_rage:
            self.rage_lost_stance_swap += self.rage - self.tactical_mastery_rage
            self.rage = self.tactical_mastery_rage

    def get_rage(self) -> float:
        return self.rage