"""Tests for constructing, shifting and converting Seconds."""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from epoch import Seconds, from_datetime, now
from epoch.util import INT64_MAX, INT64_MIN


def test_seconds_behaves_like_int() -> None:
    s = Seconds(123)

    assert s == 123
    assert hash(s) == hash(123)
    assert s.to_int() == 123
    assert type(s.to_int()) is int
    assert repr(s) == "Seconds(123)"
    assert str(s) == "123"
    assert Seconds() == 0


def test_seconds_rejects_floats_and_out_of_range() -> None:
    with pytest.raises(TypeError):
        Seconds(1.5)  # type: ignore[arg-type]

    assert Seconds(INT64_MAX) == INT64_MAX
    assert Seconds(INT64_MIN) == INT64_MIN
    with pytest.raises(OverflowError, match="int64 range"):
        Seconds(INT64_MAX + 1)
    with pytest.raises(OverflowError, match="int64 range"):
        Seconds(INT64_MIN - 1)


def test_now_is_within_one_second_of_clock():
    """now() and from_datetime(current time) differ by at most a second."""
    s = now()
    n = from_datetime(datetime.now(timezone.utc))

    assert isinstance(s, Seconds)
    assert 0 <= n - s <= 1


def test_from_datetime_drops_microseconds():
    dt = datetime(2025, 1, 6, 12, 0, 0, 999_999, tzinfo=timezone.utc)
    expected = int(datetime(2025, 1, 6, 12, 0, 0, tzinfo=timezone.utc).timestamp())

    assert Seconds.from_datetime(dt) == expected


def test_from_datetime_before_epoch_keeps_calendar_second():
    """Pre-epoch instants name the second shown in the calendar fields."""
    dt = datetime(1969, 12, 31, 23, 59, 59, 500_000, tzinfo=timezone.utc)

    assert Seconds.from_datetime(dt) == -1


def test_from_datetime_ignores_offset_of_same_instant():
    utc = datetime(2025, 1, 6, 8, 0, 0, tzinfo=timezone.utc)
    pacific = utc.astimezone(ZoneInfo("US/Pacific"))

    assert Seconds.from_datetime(pacific) == Seconds.from_datetime(utc)


def test_from_datetime_rejects_naive_datetime():
    with pytest.raises(TypeError, match="timezone-aware"):
        Seconds.from_datetime(datetime(2025, 1, 1))


def test_from_isoformat():
    assert Seconds.from_isoformat("1970-01-01T00:02:03Z") == 123
    assert Seconds.from_isoformat("1970-01-01T02:02:03+02:00") == 123
    assert Seconds.from_isoformat("1970-01-01T00:02:03.750Z") == 123

    with pytest.raises(TypeError, match="timezone-aware"):
        Seconds.from_isoformat("1970-01-01T00:02:03")
    with pytest.raises(ValueError):
        Seconds.from_isoformat("not a timestamp")


def test_add_whole_second():
    s = Seconds(123)
    got = s.add(timedelta(seconds=1))

    assert got == 124
    assert isinstance(got, Seconds)
    assert s == 123


def test_add_truncates_sub_second_remainder_toward_zero():
    s = Seconds(123)

    assert s.add(timedelta(milliseconds=1500)) == 124
    assert s.add(timedelta(milliseconds=999)) == 123
    assert s.add(timedelta(milliseconds=-1500)) == 122
    assert s.add(timedelta(milliseconds=-999)) == 123
    assert s.add(timedelta(days=-1)) == 123 - 86400


def test_to_datetime_in_utc():
    dt = Seconds(123).to_datetime(timezone.utc)

    assert dt == datetime(1970, 1, 1, 0, 2, 3, tzinfo=timezone.utc)
    assert dt.utcoffset() == timedelta(0)


@pytest.mark.parametrize(
    "tz",
    [
        timezone.utc,
        timezone(timedelta(hours=5, minutes=30)),
        timezone(timedelta(hours=-8)),
        "US/Pacific",
        "Asia/Tokyo",
    ],
)
def test_to_datetime_round_trips_in_any_zone(tz):
    """Zone choice changes calendar fields, never the underlying integer."""
    s = Seconds(123)
    dt = s.to_datetime(tz)

    assert dt.tzinfo is not None
    assert dt.microsecond == 0
    assert Seconds.from_datetime(dt) == 123


def test_to_datetime_shifts_calendar_fields_by_offset():
    dt = Seconds(0).to_datetime(timezone(timedelta(hours=-8)))

    assert (dt.year, dt.month, dt.day, dt.hour) == (1969, 12, 31, 16)


def test_to_datetime_defaults_to_local_zone():
    want = datetime.now().astimezone().replace(microsecond=0)
    got = Seconds.from_datetime(want).to_datetime()

    assert got == want
    assert got.utcoffset() == want.utcoffset()


def test_to_datetime_negative_value():
    dt = Seconds(-86400).to_datetime("UTC")

    assert dt == datetime(1969, 12, 31, tzinfo=timezone.utc)


def test_to_datetime_unknown_zone_propagates():
    with pytest.raises(ZoneInfoNotFoundError):
        Seconds(123).to_datetime("Not/AZone")


@pytest.mark.parametrize("value", [INT64_MAX, INT64_MIN, 300_000_000_000])
def test_to_datetime_outside_datetime_range(value):
    with pytest.raises(OverflowError, match="years 1-9999"):
        Seconds(value).to_datetime("UTC")
