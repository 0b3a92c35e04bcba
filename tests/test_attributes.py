import logging

import pytest

from furysim.attributes import as_rating, multiplicative_addition, multiplicative_subtraction


@pytest.mark.parametrize("a,b", [(0.1, 0.2), (0.0, 0.5), (-0.3, 0.25)])
def test_addition_then_subtraction_round_trips(a, b):
    assert multiplicative_subtraction(multiplicative_addition(a, b), b) == pytest.approx(a)


def test_addition_is_commutative():
    assert multiplicative_addition(0.1, 0.3) == pytest.approx(multiplicative_addition(0.3, 0.1))


def test_addition_with_zero_is_identity():
    assert multiplicative_addition(0.42, 0.0) == pytest.approx(0.42)
    assert multiplicative_subtraction(0.42, 0.0) == pytest.approx(0.42)


@pytest.mark.parametrize("rating,factor", [(22, 14), (10, 10), (5, 2.5), (1, 1)])
def test_as_rating_round_trips(rating, factor, caplog):
    raw = rating * 52 / 82 / factor
    with caplog.at_level(logging.WARNING, logger="furysim.attributes"):
        assert as_rating(raw, factor) == rating
    assert caplog.records == []


def test_as_rating_warns_when_off(caplog):
    with caplog.at_level(logging.WARNING, logger="furysim.attributes"):
        result = as_rating(0.1, 1)
    assert result == 0.0
    assert any("seems off" in r.getMessage() for r in caplog.records)