"""Arithmetic helpers for character stats."""

from __future__ import annotations

import logging

__all__ = ["multiplicative_addition", "multiplicative_subtraction", "as_rating"]

_log = logging.getLogger(__name__)


def multiplicative_addition(val1: float, val2: float) -> float:
    """Stack two percentage modifiers multiplicatively."""
    return (1 + val1) * (1 + val2) - 1


def multiplicative_subtraction(val1: float, val2: float) -> float:
    """Remove modifier ``val2`` from the stacked modifier ``val1``."""
    return (1 + val1) / (1 + val2) - 1


def as_rating(raw: float, factor: float) -> float:
    """Convert a raw percentage to a level 70 rating, rounded to a whole number.

    Logs a warning when the result is far from a whole rating.
    """
    x = raw * factor * 82 / 52.0
    rv = float(round(x))
    if abs(x - rv) > 0.05:
        _log.warning("raw = %s, factor = %s seems off (%s vs. %s)", raw, factor, x, rv)
    return rv