"""
Aggregation Service

Sums meal-log nutrition for day totals, per-meal-type sections and dense
per-day chart series. Records are plain mappings (``MealLog.to_dict()``);
any missing nutrient counts as zero.
"""

from collections import OrderedDict
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional

from messfit.services.food_constants import MEAL_TYPES, NUTRIENT_FIELDS
from messfit.utils import date_keys


def _zero() -> Dict[str, float]:
    return {field: 0.0 for field in NUTRIENT_FIELDS}


def _add(acc: Dict[str, float], record: Mapping[str, Any]) -> Dict[str, float]:
    for field in NUTRIENT_FIELDS:
        acc[field] += float(record.get(field) or 0)
    return acc


def sum_nutrition(records: Iterable[Mapping[str, Any]]) -> Dict[str, float]:
    totals = _zero()
    for record in records:
        _add(totals, record)
    return totals


def group_by_meal_type(records: Iterable[Mapping[str, Any]]) -> "OrderedDict[str, Dict[str, Any]]":
    """Every meal type is present, in display order, even without items."""
    sections: "OrderedDict[str, Dict[str, Any]]" = OrderedDict(
        (meal_type, {"items": [], "totals": _zero()}) for meal_type in MEAL_TYPES
    )
    for record in records:
        section = sections.setdefault(record.get("meal_type"), {"items": [], "totals": _zero()})
        section["items"].append(record)
        _add(section["totals"], record)
    return sections


def group_by_date(records: Iterable[Mapping[str, Any]], keys: Optional[List[str]] = None) -> "OrderedDict[str, Dict[str, float]]":
    """
    Per-day totals keyed by date.

    With ``keys`` the result contains exactly those days, in that order, with
    zero-valued entries for days without meals; records outside are ignored.
    Without ``keys`` only days that have records appear, ascending.
    """
    records = list(records)
    if keys is None:
        keys = sorted({r.get("date") for r in records if r.get("date")})

    days: "OrderedDict[str, Dict[str, float]]" = OrderedDict((key, _zero()) for key in keys)
    for record in records:
        day = days.get(record.get("date"))
        if day is not None:
            _add(day, record)
    return days


def series_keys(records: Iterable[Mapping[str, Any]], days: Optional[int], now: Optional[datetime] = None) -> List[str]:
    """Window keys for ``days`` (7/30/90/365), or earliest record to today for all-time."""
    if days:
        return date_keys.window_keys(days, now)

    today = date_keys.today(now)
    dated = [r.get("date") for r in records if r.get("date")]
    start = min(dated) if dated else today
    return date_keys.keys_between(min(start, today), today)


def daily_series(records: Iterable[Mapping[str, Any]], days: Optional[int], now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    records = list(records)
    grouped = group_by_date(records, series_keys(records, days, now))
    return [{"date": key, **totals} for key, totals in grouped.items()]


def summarize_days(series: List[Mapping[str, Any]], calorie_target: Optional[float] = None) -> Dict[str, Any]:
    """
    Totals and averages over a per-day series.

    Averages divide by the days that have data (calories > 0), not by the
    length of the window.
    """
    totals = sum_nutrition(series)
    days_tracked = sum(1 for day in series if float(day.get("calories") or 0) > 0)

    averages = {
        field: (round(totals[field] / days_tracked) if days_tracked else 0)
        for field in NUTRIENT_FIELDS
    }
    avg_rda = 0
    if days_tracked and calorie_target:
        avg_rda = round(totals["calories"] / days_tracked / calorie_target * 100)

    return {
        "totals": {field: round(value, 1) for field, value in totals.items()},
        "averages": averages,
        "days_tracked": days_tracked,
        "total_days": len(series),
        "avg_rda_percentage": avg_rda,
    }
