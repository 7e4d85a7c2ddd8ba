from datetime import datetime, timedelta, timezone

from messfit.utils import date_keys


def test_key_uses_plus_0530_offset():
    # 18:29 UTC is 23:59 at +05:30, 18:30 UTC rolls over to the next day
    assert date_keys.today(datetime(2024, 3, 10, 18, 29, tzinfo=timezone.utc)) == "2024-03-10"
    assert date_keys.today(datetime(2024, 3, 10, 18, 30, tzinfo=timezone.utc)) == "2024-03-11"


def test_key_independent_of_input_timezone():
    instant = datetime(2024, 3, 10, 20, 0, tzinfo=timezone.utc)
    elsewhere = instant.astimezone(timezone(timedelta(hours=-7)))
    assert date_keys.key_for(instant) == date_keys.key_for(elsewhere) == "2024-03-11"


def test_naive_datetime_is_utc():
    assert date_keys.today(datetime(2024, 1, 1, 19, 0)) == "2024-01-02"


def test_days_ago_and_shift_cross_month_boundaries():
    now = datetime(2024, 3, 1, 6, 0, tzinfo=timezone.utc)
    assert date_keys.days_ago(0, now) == "2024-03-01"
    assert date_keys.days_ago(1, now) == "2024-02-29"
    assert date_keys.shift_key("2023-12-31", 1) == "2024-01-01"


def test_keys_are_zero_padded_and_sort_chronologically():
    keys = date_keys.keys_between("2024-09-28", "2024-10-02")
    assert keys == ["2024-09-28", "2024-09-29", "2024-09-30", "2024-10-01", "2024-10-02"]
    assert sorted(keys) == keys


def test_window_keys_oldest_first():
    now = datetime(2024, 1, 7, 12, 0, tzinfo=timezone.utc)
    keys = date_keys.window_keys(7, now)
    assert len(keys) == 7
    assert keys[0] == "2024-01-01"
    assert keys[-1] == "2024-01-07"


def test_is_valid_key():
    assert date_keys.is_valid_key("2024-02-29")
    assert not date_keys.is_valid_key("2023-02-29")
    assert not date_keys.is_valid_key("2024-1-5")
    assert not date_keys.is_valid_key(None)


def test_days_ago_steps_back_one_calendar_day_at_a_time():
    for now in (
        datetime(2024, 1, 2, 6, 0, tzinfo=timezone.utc),
        datetime(2024, 3, 2, 20, 0, tzinfo=timezone.utc),
        datetime(2023, 3, 1, 1, 0, tzinfo=timezone.utc),
    ):
        for n in range(1, 400):
            newer = date_keys.parse_key(date_keys.days_ago(n - 1, now))
            older = date_keys.parse_key(date_keys.days_ago(n, now))
            assert newer - older == timedelta(days=1)
