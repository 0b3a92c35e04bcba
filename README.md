# furysim

Building blocks for simulating a warrior's damage output in combat:
statistics over simulation runs, attack tables, rage, the simulation clock,
damage bookkeeping, and the enums and base stats that describe a character.
The package has no runtime dependencies.

## Modules

### `furysim.stats`

Plain functions over numbers and sequences of numbers:

- `average(values)`, `variance(values, mean)` and
  `standard_deviation(values, mean)`. Variance and standard deviation are
  population values.
- `sample_deviation(standard_dev, n_samples)`: the standard deviation of
  the mean.
- `add_standard_deviations(std1, std2)`: `sqrt(std1**2 + std2**2)`.
- `update_mean(mean, tot_samples, new_sample)` and
  `update_variance(variance, mean, tot_samples, new_sample)`: incremental
  updates. `tot_samples` includes the new sample.
- `get_two_sided_p_value(p_value)`, `normal_cdf(value)`, and
  `find_cdf_quantile(target_quantile, precision)`. The last one steps
  through multiples of `precision` until the standard normal CDF reaches
  the target.
- `geometric_series(p)`: `1 / (1 - p)`.

### `furysim.distribution`

- `Distribution` collects samples one at a time with `add_sample` (Welford's
  online algorithm). It keeps the fields `samples`, `mean`, `m2` and
  `last_sample`.
  - `add(other)` merges in another distribution.
  - `variance()`, `std()`, `var_of_the_mean()` and `std_of_the_mean()` give
    the spread.
  - `confidence_interval(p_value)` and
    `confidence_interval_of_the_mean(p_value)` return `(low, high)` tuples.
  - `str()` gives `mean = ..., std_of_the_mean = ..., samples = ...`.
- `BinomialDistribution(trials, success_rate)` has the attributes `mean`
  and `variance`, and the methods `std()`, `confidence_interval(p_value)`
  and `confidence_interval_width(p_value)`. The interval uses a symmetric
  normal approximation.

### `furysim.damage`

- `HitResult`: `TBD`, `MISS`, `DODGE`, `GLANCING`, `CRIT`, `HIT`, as an
  `IntEnum` of bit flags.
- `DamageSource`: the damage sources, in a fixed order. `str()` gives the
  short name, for example `"white_mh"` or `"deep_wound"`.
- `DamageInstance`: a frozen record of source, damage and time stamp.
- `DamageSources` keeps per-source `damage` and `counts` dictionaries.
  - `add_damage(source, damage)` records one hit. It raises `ValueError`
    for anything that is not a `DamageSource`.
  - `sum_damage_sources()` and `sum_counts()` give the totals.
  - `+` returns a new combined object.

### `furysim.timekeeper`

- `to_millis(seconds)` converts seconds to whole milliseconds.
- `NEVER` is the time stamp of an event that never happens.
- `TimeKeeper` holds the current `time` in milliseconds and the cooldown of
  every `Cooldown` member: `OVERPOWER`, `RAMPAGE`, `SWEEPING_STRIKES`,
  `BLOODTHIRST`, `MORTAL_STRIKE`, `WHIRLWIND` and `GLOBAL`.
  - `cast(ability, cooldown)`, `ready(ability)` and `remaining(ability)`
    work with cooldowns.
  - `reset()`, `prepare(prepare_time)`, `increment(next_event)` and
    `from_offset(offset)` move and read the clock.
  - `get_next_event(...)` returns the earliest upcoming event, capped at
    the simulation end.
  - `gain_overpower_aura()`, `can_do_overpower()`, `gain_rampage_aura()`
    and `can_do_rampage()` track five-second windows.

### `furysim.logger`

`CombatLogger(time_keeper=None)` builds a combat log.

- `log(*args)` appends one line: `Time: <seconds>s. ` followed by the
  arguments and `<br>`. Floats are shown with three significant digits.
- Without a time keeper the logger is disabled and `log` does nothing.
- `is_enabled()` tells whether the logger is recording.
- `debug_topic()` returns the collected text, and `reset()` clears it.

### `furysim.combat`

- `DamageMultipliers(glance, crit, hit)`.
- `HitOutcome(damage, hit_result, rage_damage)`. If `rage_damage` is not
  given, it equals `damage`, or 0 for `HitResult.TBD`.
- `HitTable(name, miss, dodge, glance, crit, multipliers)` is an attack
  table with chances in percent.
  - `miss()`, `dodge()`, `glance()`, `crit()` and `hit()` give the chances,
    with crit capped so that the total stays at 100.
  - `alter_white_crit` and `alter_yellow_crit` change the crit chance.
  - `glancing_penalty()` gives the glancing multiplier.
  - `is_miss_or_dodge(rng)` and `generate_hit(damage, rng)` roll the table
    with a `random.Random`.
- `SlamManager(slam_cast_time=1500)` tracks a slam cast.
  - `cast_slam`, `finish_slam`, `is_slam_casting` and `next_finish` manage
    the cast.
  - `ready(current_time)` raises `ValueError` if the cast should already
    have finished.
- `AbilityQueueManager` records whether a heroic strike or a cleave is
  queued. Only one can be queued at a time.
- `RageManager` is the abstract rage interface. `RageTracker` implements it.
  - Rage is capped at 100.
  - `spend_rage` raises `ValueError` when there is not enough rage.
  - `swap_stance` drops rage to `tactical_mastery_rage`.
  - The tracker keeps the totals `rage_gained`, `rage_spent`,
    `rage_spent_on_execute`, `rage_lost_stance_swap` and `rage_lost_capped`.

### `furysim.items`

- The enums `Socket`, `WeaponSocket`, `WeaponType` and `HitEffectType`.
  `str()` gives each member's short name.
- `friendly_socket_name(socket)`, for example `"Helmet"` or `"Main hand"`.
- `friendly_weapon_socket_name(weapon_socket)`, for example `"two-hand"`.

### `furysim.attributes`

- `multiplicative_addition(val1, val2)` and
  `multiplicative_subtraction(val1, val2)`.
- `as_rating(raw, factor)` converts a percentage into a whole rating. It
  logs a warning through `logging` when the value is far from a whole
  number.

### `furysim.races`

- `Race` lists the playable races, and `LEVEL` is 70.
- `get_race(name)` falls back to `Race.HUMAN`, with a logged warning, for
  unknown names.
- `base_stats(race)` returns a frozen `BaseStats`. It holds strength,
  agility, attack power, crit and the racial weapon expertise.

### `furysim.popularity`

`ItemPopularity(name, counter)` counts how often an item is used.

- Entries order and compare equal by counter.
- `<` against a plain string compares the name.
- `matches(name)` tests the name.

## Example

```python
import random

from furysim.combat import DamageMultipliers, HitTable
from furysim.distribution import Distribution

dps = Distribution()
for sample in (1, 2, 3, 4, 5, 6, 7, 8, 9):
    dps.add_sample(sample)
print(dps)                         # mean = 5, std_of_the_mean = ..., samples = 9
print(dps.confidence_interval(0.99))

table = HitTable("white_mh", miss=5.0, dodge=6.5, glance=24.0, crit=25.0,
                 multipliers=DamageMultipliers(glance=0.75, crit=2.0, hit=1.0))
outcome = table.generate_hit(1000.0, random.Random(1))
print(outcome.hit_result, outcome.damage)
```

## What it does not do

These are pieces for a simulator, not a simulator. The package has none of
the following:

- a fight loop that swings weapons, uses abilities and procs buffs;
- an item, enchant, gem or buff database;
- a way to assemble a character's total stats from gear and talents;
- a command-line tool or any other front end.

## Running the tests

```
pip install -e ".[test]"
pytest
```