import random

import pytest

from algokit.clock import SECONDS_PER_DAY, ClockTime, add_times


def _random_time(rng):
    return ClockTime(rng.randint(0, 23), rng.randint(0, 59), rng.randint(0, 59))


def test_worked_example():
    first = ClockTime.parse("11 59 59")
    second = ClockTime.parse("3 2 5")
    assert add_times(first, second) == ClockTime(15, 2, 4)
    assert str(first + second) == "15 2 4"


def test_addition_matches_seconds_modulo_day():
    rng = random.Random(11)
    for _ in range(200):
        a, b = _random_time(rng), _random_time(rng)
        total = add_times(a, b).total_seconds
        assert total == (a.total_seconds + b.total_seconds) % SECONDS_PER_DAY


def test_addition_is_commutative():
    rng = random.Random(12)
    for _ in range(100):
        a, b = _random_time(rng), _random_time(rng)
        assert add_times(a, b) == add_times(b, a)


def test_midnight_is_identity():
    midnight = ClockTime(0, 0, 0)
    sample = ClockTime(11, 59, 59)
    assert sample + midnight == sample


def test_parse_str_round_trip():
    sample = ClockTime(11, 59, 59)
    assert ClockTime.parse(str(sample)) == sample


@pytest.mark.parametrize("fields", [(24, 0, 0), (0, 60, 0), (0, 0, 60), (-1, 0, 0)])
def test_out_of_range_fields_raise(fields):
    with pytest.raises(ValueError):
        ClockTime(*fields)


def test_parse_rejects_wrong_field_count():
    with pytest.raises(ValueError):
        ClockTime.parse("11 59")