"""
Export Service

Serializes a user's meal (and optionally water) history as CSV, JSON, a
plain-text report or a mail body. Output depends only on the inputs: the
export/generation timestamp is passed in by the caller.
"""

import csv
import io
import json
from collections import OrderedDict
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Sequence
from urllib.parse import quote

from messfit.services.aggregation_service import group_by_date, sum_nutrition
from messfit.services.food_constants import LEGACY_GLASS_ML
from messfit.services.nutrition_service import round_half_up
from messfit.utils.http import ServiceError

CSV_HEADERS = [
    "Date",
    "Meal Type",
    "Food Name",
    "Quantity",
    "Unit",
    "Calories",
    "Protein (g)",
    "Carbs (g)",
    "Fats (g)",
    "Fiber (g)",
    "Sugars (g)",
]

REPORT_WIDTH = 40
HEAVY_RULE = "═" * REPORT_WIDTH
LIGHT_RULE = "─" * REPORT_WIDTH


class NothingToExport(ServiceError):
    def __init__(self, message: str = "No data to export"):
        super().__init__("NOTHING_TO_EXPORT", message, 404)


def filter_by_date_range(meals: Sequence[Mapping[str, Any]], start: str, end: str) -> List[Mapping[str, Any]]:
    return [m for m in meals if start <= m["date"] <= end]


def _select(meals, date_range: Optional[Mapping[str, str]] = None):
    if not meals:
        raise NothingToExport()
    selected = list(meals)
    if date_range:
        selected = filter_by_date_range(selected, date_range["start"], date_range["end"])
        if not selected:
            raise NothingToExport("No data in the selected date range")
    return selected


def water_ml(log: Mapping[str, Any]) -> int:
    if log.get("amount_ml") is not None:
        return int(log["amount_ml"])
    return int(log.get("glasses") or 0) * LEGACY_GLASS_ML


def calculate_summary(meals: Sequence[Mapping[str, Any]]) -> Dict[str, Any]:
    totals = sum_nutrition(meals)
    days_tracked = sum(1 for day in group_by_date(meals).values() if day["calories"] > 0)

    breakdown: "OrderedDict[str, int]" = OrderedDict()
    for meal in meals:
        breakdown[meal["meal_type"]] = breakdown.get(meal["meal_type"], 0) + 1

    return {
        "total_meals": len(meals),
        "days_tracked": days_tracked,
        "total_calories": round_half_up(totals["calories"]),
        "avg_calories_per_day": round_half_up(totals["calories"] / days_tracked) if days_tracked else 0,
        "total_protein": round_half_up(totals["protein"]),
        "total_carbs": round_half_up(totals["carbs"]),
        "total_fats": round_half_up(totals["fats"]),
        "total_fiber": round_half_up(totals["fiber"]),
        "total_sugars": round_half_up(totals["sugars"]),
        "meal_type_breakdown": dict(breakdown),
    }


def _format_quantity(quantity) -> str:
    q = float(quantity)
    return str(int(q)) if q.is_integer() else str(q)


def _fixed(value) -> str:
    return f"{float(value or 0):.1f}"


def _quoted_rows(rows) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue()


def to_csv(
    meals: Sequence[Mapping[str, Any]],
    include_summary: bool = False,
    water_logs: Optional[Sequence[Mapping[str, Any]]] = None,
    date_range: Optional[Mapping[str, str]] = None,
) -> str:
    selected = _select(meals, date_range)

    rows = [
        [
            meal["date"],
            meal["meal_type"],
            meal["food_name"],
            _format_quantity(meal["quantity"]),
            meal["unit"],
            _fixed(meal.get("calories")),
            _fixed(meal.get("protein")),
            _fixed(meal.get("carbs")),
            _fixed(meal.get("fats")),
            _fixed(meal.get("fiber")),
            _fixed(meal.get("sugars")),
        ]
        for meal in selected
    ]
    content = ",".join(CSV_HEADERS) + "\n" + _quoted_rows(rows).rstrip("\n")

    if include_summary:
        summary = calculate_summary(selected)
        content += "\n\n--- SUMMARY ---\n"
        content += f"Total Meals,{summary['total_meals']}\n"
        content += f"Days Tracked,{summary['days_tracked']}\n"
        content += f"Total Calories,{summary['total_calories']}\n"
        content += f"Avg Calories/Day,{summary['avg_calories_per_day']}\n"
        content += f"Total Protein (g),{summary['total_protein']}\n"
        content += f"Total Carbs (g),{summary['total_carbs']}\n"
        content += f"Total Fats (g),{summary['total_fats']}\n"
        content += f"Total Fiber (g),{summary['total_fiber']}\n"
        content += f"Total Sugars (g),{summary['total_sugars']}\n"
        content += "\nMeal Type Breakdown:\n"
        for meal_type, count in summary["meal_type_breakdown"].items():
            content += f"{meal_type},{count}\n"

    if water_logs:
        content += "\n\n--- WATER LOGS ---\n"
        content += "Date,Amount (ml)\n"
        content += _quoted_rows([[log["date"], water_ml(log)] for log in water_logs])

    return content


def _iso(moment: Optional[datetime]) -> str:
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_json_document(
    meals: Sequence[Mapping[str, Any]],
    include_summary: bool = False,
    water_logs: Optional[Sequence[Mapping[str, Any]]] = None,
    date_range: Optional[Mapping[str, str]] = None,
    exported_at: Optional[datetime] = None,
) -> Dict[str, Any]:
    selected = _select(meals, date_range)

    document: Dict[str, Any] = {
        "meals": [dict(m) for m in selected],
        "exportedAt": _iso(exported_at),
    }
    if water_logs:
        document["waterLogs"] = [dict(log) for log in water_logs]
    if date_range:
        document["dateRange"] = {"start": date_range["start"], "end": date_range["end"]}
    if include_summary:
        document["summary"] = calculate_summary(selected)
    return document


def to_json(meals, include_summary=False, water_logs=None, date_range=None, exported_at=None) -> str:
    return json.dumps(
        build_json_document(meals, include_summary, water_logs, date_range, exported_at),
        indent=2,
        ensure_ascii=False,
    )


def _centered(title: str) -> str:
    return title.center(REPORT_WIDTH).rstrip()


def _days(meals):
    by_date: "OrderedDict[str, List[Mapping[str, Any]]]" = OrderedDict()
    for key in sorted({m["date"] for m in meals}):
        by_date[key] = []
    for meal in meals:
        by_date[meal["date"]].append(meal)
    return by_date


def _user_lines(user: Optional[Mapping[str, Any]]) -> List[str]:
    if not user:
        return []
    return [
        f"User: {user.get('name') or ''}",
        f"Goal: {user.get('calorie_target')} calories/day",
        "",
    ]


def to_text(
    meals: Sequence[Mapping[str, Any]],
    user: Optional[Mapping[str, Any]] = None,
    generated_at: Optional[datetime] = None,
    date_range: Optional[Mapping[str, str]] = None,
) -> str:
    """Human-readable report with summary, macros, meal distribution and a day-by-day breakdown."""
    selected = _select(meals, date_range)
    summary = calculate_summary(selected)
    days = _days(selected)
    dates = list(days)

    lines = [HEAVY_RULE, _centered("NUTRITION TRACKING REPORT"), HEAVY_RULE, ""]
    lines += _user_lines(user)
    lines += [
        f"Report Period: {dates[0]} to {dates[-1]}",
        f"Generated: {_iso(generated_at)}",
        "",
        LIGHT_RULE,
        _centered("SUMMARY"),
        LIGHT_RULE,
        "",
        f"Days Tracked: {summary['days_tracked']}",
        f"Total Meals: {summary['total_meals']}",
        "",
        f"Total Calories: {summary['total_calories']:,}",
        f"Average/Day: {summary['avg_calories_per_day']:,}",
        "",
        "Macronutrients:",
        f"   Protein: {summary['total_protein']}g",
        f"   Carbs: {summary['total_carbs']}g",
        f"   Fats: {summary['total_fats']}g",
        f"   Fiber: {summary['total_fiber']}g",
        f"   Sugars: {summary['total_sugars']}g",
        "",
        "Meal Distribution:",
    ]
    for meal_type, count in summary["meal_type_breakdown"].items():
        lines.append(f"   {meal_type.capitalize()}: {count} meals")

    lines += ["", LIGHT_RULE, _centered("DAILY BREAKDOWN"), LIGHT_RULE, ""]
    for key, day_meals in days.items():
        day_calories = sum(float(m.get("calories") or 0) for m in day_meals)
        lines.append(key)
        lines.append(f"   Total: {round_half_up(day_calories)} calories")
        for meal in day_meals:
            lines.append(f"   - {meal['meal_type']}: {meal['food_name']} ({round_half_up(float(meal.get('calories') or 0))} cal)")
        lines.append("")

    lines += [HEAVY_RULE, _centered("Generated by MessFit"), HEAVY_RULE]
    return "\n".join(lines) + "\n"


def to_mail(
    meals: Sequence[Mapping[str, Any]],
    user: Optional[Mapping[str, Any]] = None,
    water_logs: Optional[Sequence[Mapping[str, Any]]] = None,
    today_key: Optional[str] = None,
    date_range: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """Mail subject/body for sharing a report, plus a ready ``mailto:`` link."""
    selected = _select(meals, date_range)
    summary = calculate_summary(selected)
    days = _days(selected)
    dates = list(days)

    lines = ["MessFit Nutrition Report", "========================", ""]
    lines += _user_lines(user)
    lines += [
        f"Period: {dates[0]} to {dates[-1]}",
        "",
        "SUMMARY",
        "-------",
        f"Days Tracked: {summary['days_tracked']}",
        f"Total Meals: {summary['total_meals']}",
        f"Total Calories: {summary['total_calories']}",
        f"Avg Calories/Day: {summary['avg_calories_per_day']}",
        "",
        "MACRONUTRIENTS",
        "--------------",
        f"Protein: {summary['total_protein']}g",
        f"Carbs: {summary['total_carbs']}g",
        f"Fats: {summary['total_fats']}g",
        f"Fiber: {summary['total_fiber']}g",
        f"Sugars: {summary['total_sugars']}g",
        "",
    ]

    if water_logs:
        total_water = sum(water_ml(log) for log in water_logs)
        lines += [
            "WATER INTAKE",
            "------------",
            f"Entries: {len(water_logs)}",
            f"Total: {total_water}ml ({total_water / 1000:.1f}L)",
            "",
        ]

    lines += ["DAILY BREAKDOWN", "---------------"]
    for key, day_meals in days.items():
        day_calories = sum(float(m.get("calories") or 0) for m in day_meals)
        lines.append(f"{key}: {round_half_up(day_calories)} cal")
        for meal in day_meals:
            lines.append(f"  - {meal['meal_type']}: {meal['food_name']} ({round_half_up(float(meal.get('calories') or 0))} cal)")

    body = "\n".join(lines) + "\n"
    subject = f"MessFit Nutrition Report - {today_key or dates[-1]}"
    return {
        "subject": subject,
        "body": body,
        "mailto": f"mailto:?subject={quote(subject, safe='')}&body={quote(body, safe='')}",
    }


def water_to_csv(logs: Sequence[Mapping[str, Any]]) -> str:
    if not logs:
        raise NothingToExport("No water data to export")
    rows = [[log["date"], water_ml(log), log.get("timestamp") or ""] for log in logs]
    return "Date,Amount (ml),Timestamp\n" + _quoted_rows(rows).rstrip("\n")
