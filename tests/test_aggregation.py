from datetime import datetime, timezone

import pytest

from messfit.services.aggregation_service import (
    daily_series,
    group_by_date,
    group_by_meal_type,
    summarize_days,
    sum_nutrition,
)

MEALS = [
    {"date": "2024-01-01", "meal_type": "breakfast", "calories": 300, "protein": 10, "carbs": 40, "fats": 5, "fiber": 3, "sugars": 2},
    {"date": "2024-01-01", "meal_type": "lunch", "calories": 500, "protein": 20, "carbs": 60, "fats": 15, "fiber": 5, "sugars": 4},
]

NOW = datetime(2024, 1, 3, 6, 0, tzinfo=timezone.utc)


def test_day_totals():
    assert sum_nutrition(MEALS) == {
        "calories": 800, "protein": 30, "carbs": 100, "fats": 20, "fiber": 8, "sugars": 6,
    }


def test_missing_nutrients_count_as_zero():
    totals = sum_nutrition([{"calories": 100}, {"calories": None, "protein": 4}])
    assert totals["calories"] == 100
    assert totals["protein"] == 4
    assert totals["sugars"] == 0


def test_meal_type_sections_sum_to_day_totals():
    sections = group_by_meal_type(MEALS)
    assert list(sections) == ["breakfast", "lunch", "snacks", "dinner"]
    assert sections["snacks"]["items"] == []
    assert sections["lunch"]["totals"]["calories"] == 500

    grouped = sum(section["totals"]["calories"] for section in sections.values())
    assert grouped == sum_nutrition(MEALS)["calories"]


def test_group_by_date_dense_with_keys():
    days = group_by_date(MEALS, ["2023-12-31", "2024-01-01", "2024-01-02"])
    assert list(days) == ["2023-12-31", "2024-01-01", "2024-01-02"]
    assert days["2023-12-31"]["calories"] == 0
    assert days["2024-01-01"]["calories"] == 800


def test_daily_series_window():
    series = daily_series(MEALS, 7, NOW)
    assert len(series) == 7
    assert series[0]["date"] == "2023-12-28"
    assert series[-1]["date"] == "2024-01-03"
    assert [d["calories"] for d in series if d["date"] == "2024-01-01"] == [800]


def test_daily_series_lifetime_starts_at_first_record():
    series = daily_series(MEALS, None, NOW)
    assert [d["date"] for d in series] == ["2024-01-01", "2024-01-02", "2024-01-03"]


def test_lifetime_without_records_is_just_today():
    assert [d["date"] for d in daily_series([], None, NOW)] == ["2024-01-03"]


def test_summary_averages_over_tracked_days():
    series = daily_series(MEALS, 7, NOW)
    summary = summarize_days(series, calorie_target=2000)
    assert summary["days_tracked"] == 1
    assert summary["total_days"] == 7
    assert summary["averages"]["calories"] == 800
    assert summary["totals"]["protein"] == 30
    assert summary["avg_rda_percentage"] == 40


def test_summary_without_data():
    summary = summarize_days(daily_series([], 7, NOW), calorie_target=2000)
    assert summary["days_tracked"] == 0
    assert summary["averages"]["calories"] == 0
    assert summary["avg_rda_percentage"] == 0


def test_per_day_sums_add_up_to_overall_totals():
    records = MEALS + [
        {"date": "2023-12-31", "meal_type": "dinner", "calories": 420, "protein": 18, "carbs": 50, "fats": 12, "fiber": 6, "sugars": 3},
        {"date": "2024-01-02", "meal_type": "snacks", "calories": 95, "protein": 0.5, "carbs": 25, "fats": 0.3, "fiber": 4},
        {"date": "2024-01-02", "meal_type": "breakfast", "calories": 150, "protein": 5, "carbs": 27, "fats": 3, "fiber": 4, "sugars": 1},
    ]
    days = group_by_date(records)
    assert list(days) == ["2023-12-31", "2024-01-01", "2024-01-02"]
    assert days["2024-01-02"]["calories"] == 245

    overall = sum_nutrition(records)
    for nutrient, total in overall.items():
        assert sum(day[nutrient] for day in days.values()) == pytest.approx(total)
