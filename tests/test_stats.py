import math

import pytest

from furysim import stats

DATA = [1, 2, 3, 4, 5, 6, 7, 8, 9]
POPULATION_STD = 2.5820


def test_average_of_data():
    assert stats.average(DATA) == pytest.approx(5)


def test_standard_deviation_and_variance():
    avg = stats.average(DATA)
    std = stats.standard_deviation(DATA, avg)
    var = stats.variance(DATA, avg)
    assert std == pytest.approx(POPULATION_STD, abs=0.01)
    assert var == pytest.approx(POPULATION_STD * POPULATION_STD, abs=0.01)


def test_sample_deviation():
    avg = stats.average(DATA)
    std = stats.standard_deviation(DATA, avg)
    assert stats.sample_deviation(std, 9) == pytest.approx(POPULATION_STD / 3, abs=0.01)


def test_add_standard_deviations():
    assert stats.add_standard_deviations(0, 0) == 0
    assert stats.add_standard_deviations(1, 1) == pytest.approx(math.sqrt(2))


def test_average_of_empty_raises():
    with pytest.raises(ZeroDivisionError):
        stats.average([])


def test_incremental_updates_match_batch():
    mean = 0.0
    var = 0.0
    for n, sample in enumerate(DATA, start=1):
        var = stats.update_variance(var, mean, n, sample)
        mean = stats.update_mean(mean, n, sample)
    avg = stats.average(DATA)
    assert mean == pytest.approx(avg)
    assert var == pytest.approx(stats.variance(DATA, avg))


def test_two_sided_p_value():
    assert stats.get_two_sided_p_value(0.99) == pytest.approx(0.995)
    assert stats.get_two_sided_p_value(0.0) == pytest.approx(0.5)


def test_normal_cdf_symmetry():
    assert stats.normal_cdf(0.0) == pytest.approx(0.5)
    assert stats.normal_cdf(1.3) + stats.normal_cdf(-1.3) == pytest.approx(1.0)


def test_find_cdf_quantile_reaches_target():
    precision = 0.01
    x = stats.find_cdf_quantile(0.995, precision)
    assert stats.normal_cdf(x) >= 0.995
    assert stats.normal_cdf(x - precision) < 0.995


def test_find_cdf_quantile_at_median_is_zero():
    assert stats.find_cdf_quantile(0.5, 0.01) == 0.0


def test_geometric_series():
    assert stats.geometric_series(0.5) == pytest.approx(2.0)
    assert stats.geometric_series(0.0) == pytest.approx(1.0)