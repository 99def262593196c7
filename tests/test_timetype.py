import pytest

from railledger.timetype import MINUTES_PER_DAY, TimeType, parse_int


def test_parse_int_reads_digits():
    assert parse_int("0123") == 123
    assert parse_int("") == 0


def test_origin_is_zero():
    assert int(TimeType.from_string("06-01 00:00")) == 0
    assert TimeType(0).format() == "06-01 00:00"


def test_one_day_apart():
    a = TimeType.from_string("06-01 00:00")
    b = TimeType.from_string("06-02 00:00")
    assert b - a == MINUTES_PER_DAY


@pytest.mark.parametrize(
    "text",
    ["06-01 00:00", "06-30 23:59", "07-01 00:00", "07-15 12:05", "08-01 06:30", "08-31 23:59"],
)
def test_string_round_trip(text):
    assert TimeType.from_string(text).format() == text
    assert str(TimeType.from_string(text)) == text


@pytest.mark.parametrize("minute", [0, 59, 1439, 1440, 43199, 43200, 87000, 132479])
def test_minute_round_trip(minute):
    assert TimeType.from_string(TimeType(minute).format()) == TimeType(minute)


def test_month_boundary_is_ordered():
    june_end = TimeType.from_string("06-30 23:59")
    july_start = TimeType.from_string("07-01 00:00")
    assert july_start - june_end == 1
    assert june_end < july_start


def test_date_plus_time_of_day_restores():
    t = TimeType.from_string("07-15 12:05")
    assert t.date() + t.time_of_day() == t
    assert t.date().format() == "07-15 00:00"
    assert int(t.time_of_day()) < MINUTES_PER_DAY


def test_addition_with_int_and_time():
    t = TimeType.from_string("06-01 10:00")
    assert t + 30 == TimeType.from_string("06-01 10:30")
    assert 30 + t == t + 30
    assert t + TimeType(MINUTES_PER_DAY) == TimeType.from_string("06-02 10:00")


def test_subtract_int_gives_time():
    t = TimeType.from_string("06-02 00:00")
    assert t - MINUTES_PER_DAY == TimeType.from_string("06-01 00:00")


def test_augmented_assignment():
    t = TimeType.from_string("06-01 08:00")
    start = t
    t += 60
    assert t == TimeType.from_string("06-01 09:00")
    t -= 60
    assert t == start


def test_comparisons():
    a = TimeType.from_string("06-01 08:00")
    b = TimeType.from_string("06-01 09:00")
    assert a < b and b > a and a <= a and b >= a and a != b


def test_malformed_string_rejected():
    with pytest.raises(ValueError):
        TimeType.from_string("06-01")