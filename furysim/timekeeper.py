"""Simulation clock and ability cooldown bookkeeping (times in milliseconds)."""

from __future__ import annotations

from enum import Enum

__all__ = ["NEVER", "to_millis", "Cooldown", "TimeKeeper"]

NEVER = 2**31 - 1
"""Time stamp of an event that never happens."""

_AURA_DURATION = 5000


def to_millis(seconds: float) -> int:
    """Convert seconds to whole milliseconds, rounding half to even."""
    return int(round(1000 * seconds))


class Cooldown(Enum):
    """Abilities whose cooldowns the time keeper tracks."""

    OVERPOWER = "overpower"
    RAMPAGE = "rampage"
    SWEEPING_STRIKES = "sweeping_strikes"
    BLOODTHIRST = "bloodthirst"
    MORTAL_STRIKE = "mortal_strike"
    WHIRLWIND = "whirlwind"
    GLOBAL = "global"


class TimeKeeper:
    """Current simulation time together with cooldown and aura expiry times."""

    def __init__(self) -> None:
        self.time = -1
        self._cooldowns: dict[Cooldown, int] = {}
        self._overpower_aura = -1
        self._rampage_aura = -1
        self.reset()

    def from_offset(self, offset: float) -> int:
        """Time stamp ``offset`` milliseconds from now, rounded half to even."""
        return int(round(self.time + offset))

    def increment(self, next_event: int) -> None:
        """Advance the clock to ``next_event``."""
        self.time = next_event

    def reset(self) -> None:
        """Clear all cooldowns and auras and rewind the clock."""
        self._cooldowns = {ability: -1 for ability in Cooldown}
        self.time = -1
        self._overpower_aura = -1
        self._rampage_aura = -1

    def prepare(self, prepare_time: int) -> None:
        """Set the clock and the global cooldown to ``prepare_time``."""
        self._cooldowns[Cooldown.GLOBAL] = prepare_time
        self.time = prepare_time

    def get_next_event(
        self,
        next_mh_swing: int,
        next_oh_swing: int,
        next_buff_event: int,
        next_slam_finish: int,
        sim_time: int,
    ) -> int:
        """Earliest future event, never later than ``sim_time``.

        Cooldowns, swings and slam finishes count only when they lie after the
        current time; the buff event and the end of the fight always count.
        """
        candidates = [*self._cooldowns.values(), next_mh_swing, next_oh_swing, next_slam_finish]
        future = [t for t in candidates if t > self.time]
        return min([NEVER, *future, next_buff_event, sim_time])

    def cast(self, ability: Cooldown, cooldown: int) -> None:
        """Start the cooldown of ``ability`` lasting ``cooldown`` milliseconds."""
        self._cooldowns[ability] = self.time + cooldown

    def ready(self, ability: Cooldown) -> bool:
        """Whether ``ability`` is off cooldown."""
        return self._cooldowns[ability] <= self.time

    def remaining(self, ability: Cooldown) -> int:
        """Milliseconds until ``ability`` is ready (negative once ready)."""
        return self._cooldowns[ability] - self.time

    def gain_overpower_aura(self) -> None:
        """Allow overpower for the next five seconds."""
        self._overpower_aura = self.time + _AURA_DURATION

    def can_do_overpower(self) -> bool:
        """Whether the overpower window is open."""
        return self.time <= self._overpower_aura

    def gain_rampage_aura(self) -> None:
        """Allow rampage for the next five seconds."""
        self._rampage_aura = self.time + _AURA_DURATION

    def can_do_rampage(self) -> bool:
        """Whether the rampage window is open."""
        return self.time <= self._rampage_aura