"""Combat log collected as an HTML-ish text."""

from __future__ import annotations

from furysim.timekeeper import TimeKeeper

__all__ = ["CombatLogger"]


def _format_number(value: float) -> str:
    return f"{value:.3g}"


class CombatLogger:
    """Collects time-stamped combat messages when given a time keeper."""

    def __init__(self, time_keeper: TimeKeeper | None = None) -> None:
        self._time_keeper = time_keeper
        self._parts: list[str] = []

    def log(self, *args: object) -> None:
        """Append one line made of ``args``; does nothing when disabled."""
        if self._time_keeper is None:
            return
        self._parts.append(f"Time: {_format_number(self._time_keeper.time * 0.001)}s. ")
        for arg in args:
            if isinstance(arg, float):
                self._parts.append(_format_number(arg))
            else:
                self._parts.append(str(arg))
        self._parts.append("<br>")

    def reset(self) -> None:
        """Drop everything logged so far."""
        self._parts.clear()

    def is_enabled(self) -> bool:
        """Whether messages are recorded."""
        return self._time_keeper is not None

    def debug_topic(self) -> str:
        """The collected log."""
        return "".join(self._parts)