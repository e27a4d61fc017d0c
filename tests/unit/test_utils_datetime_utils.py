"""Unit tests for datetime helpers used by the storage adapters."""

from datetime import datetime, timedelta, timezone

from webinars.utils.datetime_utils import to_storage_precision, to_utc


def test_to_utc_assumes_utc_for_naive() -> None:
    assert to_utc(datetime(2024, 1, 1, 12, 0)) == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def test_to_utc_converts_offsets() -> None:
    paris = datetime(2024, 1, 1, 13, 0, tzinfo=timezone(timedelta(hours=1)))

    converted = to_utc(paris)

    assert converted.tzinfo == timezone.utc
    assert converted.hour == 12


def test_to_storage_precision_truncates_to_milliseconds() -> None:
    value = to_storage_precision(datetime(2024, 1, 1, 0, 0, 0, 123999, tzinfo=timezone.utc))

    assert value.microsecond == 123000
    assert to_storage_precision(value) == value
