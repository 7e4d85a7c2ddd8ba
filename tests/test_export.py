import csv
import io
import json
from datetime import datetime, timezone

import pytest

from messfit.services.export_service import (
    CSV_HEADERS,
    NothingToExport,
    calculate_summary,
    to_csv,
    to_json,
    to_mail,
    to_text,
    water_to_csv,
)

MEALS = [
    {"date": "2024-01-01", "meal_type": "breakfast", "food_name": "Oats", "quantity": 1, "unit": "bowl",
     "calories": 300, "protein": 10, "carbs": 40, "fats": 5, "fiber": 3, "sugars": 2},
    {"date": "2024-01-01", "meal_type": "lunch", "food_name": "Veg Biryani", "quantity": 1.5, "unit": "bowl",
     "calories": 570, "protein": 12, "carbs": 102, "fats": 15, "fiber": 9, "sugars": 0},
    {"date": "2024-01-02", "meal_type": "dinner", "food_name": "Dal, tadka", "quantity": 2, "unit": "bowl",
     "calories": 430, "protein": 18, "carbs": 40, "fats": 6, "fiber": 10, "sugars": 1},
]

USER = {"name": "Asha", "calorie_target": 2000}
GENERATED = datetime(2024, 1, 3, 4, 5, 6, tzinfo=timezone.utc)


def test_summary():
    summary = calculate_summary(MEALS)
    assert summary["total_meals"] == 3
    assert summary["days_tracked"] == 2
    assert summary["total_calories"] == 1300
    assert summary["avg_calories_per_day"] == 650
    assert summary["total_protein"] == 40
    assert summary["meal_type_breakdown"] == {"breakfast": 1, "lunch": 1, "dinner": 1}


def test_csv_rows():
    content = to_csv(MEALS)
    lines = content.split("\n")
    assert lines[0] == ",".join(CSV_HEADERS)
    assert lines[1] == '"2024-01-01","breakfast","Oats","1","bowl","300.0","10.0","40.0","5.0","3.0","2.0"'
    assert len(lines) == 4

    parsed = list(csv.reader(io.StringIO(content)))
    assert parsed[2][3] == "1.5"
    assert parsed[3][2] == "Dal, tadka"


def test_csv_summary_and_water_trailers():
    content = to_csv(MEALS, include_summary=True, water_logs=[{"date": "2024-01-01", "amount_ml": 750}])
    assert "--- SUMMARY ---" in content
    assert "Total Calories,1300" in content
    assert "Days Tracked,2" in content
    assert "breakfast,1" in content
    assert "--- WATER LOGS ---" in content
    assert '"2024-01-01","750"' in content


def test_csv_date_range():
    content = to_csv(MEALS, date_range={"start": "2024-01-02", "end": "2024-01-02"})
    assert len(content.split("\n")) == 2
    assert "Dal, tadka" in content


def test_nothing_to_export():
    with pytest.raises(NothingToExport):
        to_csv([])
    with pytest.raises(NothingToExport):
        to_json(MEALS, date_range={"start": "2025-01-01", "end": "2025-01-31"})


def test_json_document():
    document = json.loads(to_json(MEALS, include_summary=True, exported_at=GENERATED,
                                  date_range={"start": "2024-01-01", "end": "2024-01-31"}))
    assert document["meals"] == MEALS
    assert document["exportedAt"] == "2024-01-03T04:05:06.000Z"
    assert document["dateRange"] == {"start": "2024-01-01", "end": "2024-01-31"}
    assert document["summary"] == calculate_summary(MEALS)
    assert document["summary"]["total_calories"] == 1300
    assert "waterLogs" not in document

    for exported, original in zip(document["meals"], MEALS):
        for field, value in original.items():
            assert exported[field] == value


def test_text_report():
    report = to_text(MEALS, USER, generated_at=GENERATED)
    assert "NUTRITION TRACKING REPORT" in report
    assert "User: Asha" in report
    assert "Goal: 2000 calories/day" in report
    assert "Report Period: 2024-01-01 to 2024-01-02" in report
    assert "Total Calories: 1,300" in report
    assert "   Breakfast: 1 meals" in report
    assert "   Total: 870 calories" in report
    assert "   - dinner: Dal, tadka (430 cal)" in report


def test_mail_body():
    mail = to_mail(MEALS, USER, water_logs=[{"date": "2024-01-01", "amount_ml": 1500}], today_key="2024-01-05")
    assert mail["subject"] == "MessFit Nutrition Report - 2024-01-05"
    assert "Total: 1500ml (1.5L)" in mail["body"]
    assert "2024-01-01: 870 cal" in mail["body"]
    assert mail["mailto"].startswith("mailto:?subject=MessFit%20Nutrition%20Report")


def test_water_csv():
    content = water_to_csv([{"date": "2024-01-01", "amount_ml": 500, "timestamp": None}, {"date": "2024-01-02", "glasses": 3}])
    assert content.split("\n") == [
        "Date,Amount (ml),Timestamp",
        '"2024-01-01","500",""',
        '"2024-01-02","750",""',
    ]
