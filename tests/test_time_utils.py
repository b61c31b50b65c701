from datetime import datetime, timedelta, timezone

from utils.time_utils import iso_timestamp, local_time_string


def test_iso_timestamp_uses_z_suffix_and_milliseconds():
    now = datetime(2026, 10, 19, 8, 15, 30, 123456, tzinfo=timezone.utc)

    assert iso_timestamp(now) == "2026-10-19T08:15:30.123Z"


def test_iso_timestamp_converts_to_utc():
    cet = timezone(timedelta(hours=2))
    now = datetime(2026, 10, 19, 10, 0, 0, tzinfo=cet)

    assert iso_timestamp(now) == "2026-10-19T08:00:00.000Z"


def test_iso_timestamp_treats_naive_as_utc():
    assert iso_timestamp(datetime(2026, 1, 2, 3, 4, 5)) == "2026-01-02T03:04:05.000Z"


def test_iso_timestamp_defaults_to_now():
    before = datetime.now(timezone.utc).replace(microsecond=0)
    stamp = datetime.fromisoformat(iso_timestamp().replace("Z", "+00:00"))

    assert stamp >= before


def test_local_time_string_morning():
    assert local_time_string(datetime(2026, 10, 19, 8, 5, 9)) == "8:05:09 AM"


def test_local_time_string_afternoon():
    assert local_time_string(datetime(2026, 10, 19, 15, 4, 5)) == "3:04:05 PM"


def test_local_time_string_midnight_and_noon():
    assert local_time_string(datetime(2026, 10, 19, 0, 0, 0)) == "12:00:00 AM"
    assert local_time_string(datetime(2026, 10, 19, 12, 30, 0)) == "12:30:00 PM"
