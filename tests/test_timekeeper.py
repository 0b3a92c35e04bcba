import pytest

from furysim.timekeeper import NEVER, Cooldown, TimeKeeper, to_millis


@pytest.mark.parametrize("seconds", [0.1, 1.5, 3.3, 60.0])
def test_to_millis_round_trip(seconds):
    assert to_millis(seconds) / 1000 == pytest.approx(seconds)


def test_to_millis_is_int():
    assert to_millis(1.5) == 1500


def test_reset_state():
    keeper = TimeKeeper()
    keeper.prepare(200)
    keeper.cast(Cooldown.WHIRLWIND, 10000)
    keeper.reset()
    assert keeper.time == -1
    assert all(keeper.ready(ability) for ability in Cooldown)


def test_prepare_sets_time_and_global():
    keeper = TimeKeeper()
    keeper.prepare(300)
    assert keeper.time == 300
    assert keeper.remaining(Cooldown.GLOBAL) == 0
    assert keeper.ready(Cooldown.GLOBAL)


@pytest.mark.parametrize("ability", list(Cooldown))
def test_cast_and_ready(ability):
    keeper = TimeKeeper()
    keeper.prepare(0)
    keeper.cast(ability, 6000)
    assert not keeper.ready(ability)
    assert keeper.remaining(ability) == 6000
    keeper.increment(5999)
    assert not keeper.ready(ability)
    keeper.increment(6000)
    assert keeper.ready(ability)
    assert keeper.remaining(ability) == 0


def test_next_event_picks_earliest_cooldown():
    keeper = TimeKeeper()
    keeper.prepare(0)
    keeper.cast(Cooldown.WHIRLWIND, 10000)
    keeper.cast(Cooldown.GLOBAL, 1500)
    assert keeper.get_next_event(NEVER, NEVER, NEVER, NEVER, 60000) == 1500


def test_next_event_limited_by_sim_time():
    keeper = TimeKeeper()
    keeper.prepare(0)
    keeper.cast(Cooldown.WHIRLWIND, 10000)
    assert keeper.get_next_event(20000, 20000, NEVER, NEVER, 4000) == 4000


def test_next_event_ignores_past_swings_but_not_buffs():
    keeper = TimeKeeper()
    keeper.prepare(1000)
    assert keeper.get_next_event(1000, 500, NEVER, NEVER, 60000) == 60000
    assert keeper.get_next_event(1000, 500, 800, NEVER, 60000) == 800


def test_next_event_swing():
    keeper = TimeKeeper()
    keeper.prepare(0)
    assert keeper.get_next_event(2600, 1800, NEVER, 2000, 60000) == 1800


def test_from_offset():
    keeper = TimeKeeper()
    keeper.prepare(100)
    assert keeper.from_offset(0.0) == keeper.time
    assert keeper.from_offset(0.4) == keeper.time


def test_overpower_aura_window():
    keeper = TimeKeeper()
    keeper.prepare(0)
    assert not keeper.can_do_overpower()
    keeper.gain_overpower_aura()
    keeper.increment(5000)
    assert keeper.can_do_overpower()
    keeper.increment(5001)
    assert not keeper.can_do_overpower()


def test_rampage_aura_window():
    keeper = TimeKeeper()
    keeper.prepare(1000)
    keeper.gain_rampage_aura()
    assert keeper.can_do_rampage()
    keeper.increment(6000)
    assert keeper.can_do_rampage()
    keeper.increment(6001)
    assert not keeper.can_do_rampage()