"""
Summary Service

Daily and multi-day nutrition summaries for the dashboard and charts.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from messfit.models.user import User
from messfit.services.aggregation_service import daily_series, series_keys, summarize_days
from messfit.services.food_constants import RANGE_DAYS
from messfit.services.meal_log_service import day_overview, list_meal_logs
from messfit.services.nutrition_service import calculate_nutritional_targets, water_target_for, water_amount_ml
from messfit.services.water_service import get_water_log
from messfit.utils.http import ServiceError


def daily_summary(user: User, date: str) -> Dict[str, Any]:
    overview = day_overview(user.id, date)
    targets = calculate_nutritional_targets(user)
    calories = overview["totals"]["calories"]

    overview["targets"] = targets
    overview["rda_percentage"] = round(calories / targets["calories"] * 100, 1) if targets["calories"] else 0
    overview["remaining_calories"] = round(targets["calories"] - calories, 1)
    overview["water"] = water_target_for(user, water_amount_ml(get_water_log(user.id, date)))
    return overview


def range_summary(user: User, range_name: str = "week", now: Optional[datetime] = None) -> Dict[str, Any]:
    if range_name not in RANGE_DAYS:
        raise ServiceError("VALIDATION_ERROR", f"range must be one of {', '.join(RANGE_DAYS)}", 400)

    days = RANGE_DAYS[range_name]
    if days:
        keys = series_keys([], days, now)
        records = [log.to_dict() for log in list_meal_logs(user.id, start=keys[0], end=keys[-1])]
    else:
        records = [log.to_dict() for log in list_meal_logs(user.id)]

    series = daily_series(records, days, now)
    calorie_target = calculate_nutritional_targets(user)["calories"]

    summary = summarize_days(series, calorie_target)
    summary.update({
        "range": range_name,
        "start": series[0]["date"],
        "end": series[-1]["date"],
        "series": series,
        "calorie_target": calorie_target,
    })
    return summary
