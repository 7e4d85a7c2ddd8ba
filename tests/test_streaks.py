from datetime import datetime, timezone

from messfit.services.streak_service import calculate_streaks, current_streak, longest_streak, streak_message

# 2024-01-10 at +05:30
NOW = datetime(2024, 1, 10, 6, 0, tzinfo=timezone.utc)


def test_empty_history():
    result = calculate_streaks([], NOW)
    assert result["current_streak"] == 0
    assert result["longest_streak"] == 0
    assert result["days_logged"] == 0
    assert result["message"] == "Start your streak today!"


def test_streak_ending_today():
    assert current_streak(["2024-01-08", "2024-01-09", "2024-01-10"], NOW) == 3


def test_today_missing_is_forgiven():
    assert current_streak(["2024-01-08", "2024-01-09"], NOW) == 2


def test_two_missed_days_reset():
    assert current_streak(["2024-01-07", "2024-01-08"], NOW) == 0


def test_gap_stops_the_walk():
    assert current_streak(["2024-01-05", "2024-01-06", "2024-01-09", "2024-01-10"], NOW) == 2


def test_longest_streak_over_history():
    dates = ["2023-12-01", "2023-12-02", "2023-12-03", "2023-12-04", "2024-01-10"]
    assert longest_streak(dates) == 4
    result = calculate_streaks(dates, NOW)
    assert result["current_streak"] == 1
    assert result["longest_streak"] == 4
    assert result["days_logged"] == 5


def test_duplicates_count_once():
    result = calculate_streaks(["2024-01-10", "2024-01-10", "2024-01-09"], NOW)
    assert result["current_streak"] == 2
    assert result["days_logged"] == 2


def test_longest_never_below_current():
    result = calculate_streaks(["2024-01-09", "2024-01-10"], NOW)
    assert result["longest_streak"] >= result["current_streak"]


def test_streak_across_month_boundary():
    now = datetime(2024, 3, 1, 6, 0, tzinfo=timezone.utc)
    assert current_streak(["2024-02-28", "2024-02-29", "2024-03-01"], now) == 3


def test_messages():
    assert streak_message(1) == "Great start! Keep going!"
    assert streak_message(3) == "You're on fire!"
    assert streak_message(10) == "Incredible consistency!"
    assert streak_message(45) == "You're a legend!"
