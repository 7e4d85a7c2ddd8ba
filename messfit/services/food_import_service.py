"""
Food Import Service

Turns pasted or uploaded spreadsheet text into catalog foods.

Headers are matched through an explicit ordered alias table: for each
canonical field the first alias whose cell is non-empty wins. Rows are
processed one at a time; a bad row is counted and reported, never fatal,
and rows already inserted stay inserted.
"""

import logging
import math
from collections import OrderedDict
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from messfit.extensions import db
from messfit.models.food import Food
from messfit.services.food_constants import DEFAULT_GRAMS_PER_UNIT, DEFAULT_UNIT, VALID_UNITS
from messfit.services.food_helpers import delete_foods
from messfit.utils.http import ServiceError

logger = logging.getLogger(__name__)

DEFAULT_ERROR_DETAIL_LIMIT = 10

FIELD_ALIASES: "OrderedDict[str, Tuple[str, ...]]" = OrderedDict([
    ("name", ("name", "food name", "food_name", "item", "food")),
    ("calories_per_portion", ("calories_per_portion", "calories", "cal", "energy")),
    ("protein_g", ("protein_g", "protein", "prot")),
    ("carbs_g", ("carbs_g", "carbs", "carbohydrates", "carb")),
    ("fat_g", ("fat_g", "fats", "fat")),
    ("fiber_g", ("fiber_g", "fiber", "fibre")),
    ("sugar_g", ("sugar_g", "sugar", "sugars")),
    ("unit", ("unit", "serving")),
    ("grams_per_unit", ("grams_per_unit", "grams", "weight")),
])

OPTIONAL_MACROS = ("protein_g", "carbs_g", "fat_g", "fiber_g")


def _clean(cell: str) -> str:
    return cell.strip().replace('"', "").replace("'", "").strip()


def split_table(text: str) -> Tuple[List[str], List[Dict[str, str]]]:
    """
    Split raw CSV/TSV text into lower-cased headers and row mappings.

    The delimiter is a tab when the header line contains one, otherwise a
    comma. Blank lines are dropped and missing trailing cells read as "".
    """
    lines = [line for line in (text or "").replace("\r\n", "\n").split("\n") if line.strip()]
    if not lines:
        return [], []

    separator = "\t" if "\t" in lines[0] else ","
    headers = [_clean(h).lower() for h in lines[0].split(separator)]

    rows = []
    for line in lines[1:]:
        values = [_clean(v) for v in line.split(separator)]
        rows.append({
            header: (values[index] if index < len(values) else "")
            for index, header in enumerate(headers)
        })
    return headers, rows


def resolve_field(row: Dict[str, str], field: str) -> Optional[str]:
    for alias in FIELD_ALIASES[field]:
        value = row.get(alias)
        if value:
            return value
    return None


def parse_number(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def normalize_unit(value: Optional[str]) -> str:
    unit = (value or DEFAULT_UNIT).strip().lower()
    return unit if unit in VALID_UNITS else DEFAULT_UNIT


def normalize_row(row: Dict[str, str]) -> Tuple[Optional[Dict[str, Any]], Optional[str]]:
    """
    Normalize one parsed row into a catalog food.

    Returns:
        (food, None) when the row is valid, (None, reason) otherwise
    """
    name = (resolve_field(row, "name") or "").strip()
    if not name:
        return None, "Missing name"

    # An absent calorie cell reads as 0; zero-calorie foods are valid
    calories = parse_number(resolve_field(row, "calories_per_portion") or "0")
    if calories is None:
        return None, f"Invalid calories for {name}"

    food: Dict[str, Any] = {"name": name, "calories_per_portion": calories}
    for field in OPTIONAL_MACROS:
        food[field] = parse_number(resolve_field(row, field)) or 0.0

    food["sugar_g"] = parse_number(resolve_field(row, "sugar_g"))
    food["unit"] = normalize_unit(resolve_field(row, "unit"))

    grams = parse_number(resolve_field(row, "grams_per_unit"))
    food["grams_per_unit"] = grams if grams is not None else DEFAULT_GRAMS_PER_UNIT
    return food, None


def import_rows(
    rows: Iterable[Dict[str, str]],
    insert: Callable[[Dict[str, Any]], Any],
    error_limit: int = DEFAULT_ERROR_DETAIL_LIMIT,
) -> Dict[str, Any]:
    """
    Normalize and insert rows sequentially.

    Returns:
        {"total", "success", "errors", "error_details"} where error_details
        holds the reasons of the first ``error_limit`` failures
    """
    result: Dict[str, Any] = {"total": 0, "success": 0, "errors": 0, "error_details": []}

    def record_error(message: str):
        result["errors"] += 1
        if len(result["error_details"]) < error_limit:
            result["error_details"].append(message)

    for index, row in enumerate(rows, start=1):
        result["total"] += 1
        food, reason = normalize_row(row)
        if food is None:
            record_error(f"Row {index}: {reason}")
            continue

        try:
            insert(food)
        except Exception as e:
            logger.warning("Import row %s (%s) failed: %s", index, food["name"], e)
            record_error(f"Row {index}: Could not save {food['name']}")
            continue

        result["success"] += 1
        logger.debug("Imported row %s: %s", index, food["name"])

    return result


def insert_catalog_food(food: Dict[str, Any]) -> Food:
    """Insert and commit a single catalog food."""
    item = Food(**food)
    try:
        db.session.add(item)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise
    return item


def import_table(text: str, insert: Optional[Callable[[Dict[str, Any]], Any]] = None, error_limit: Optional[int] = None) -> Dict[str, Any]:
    headers, rows = split_table(text)
    if not headers or not rows:
        raise ServiceError("EMPTY_IMPORT", "No data rows found. Include a header line and at least one food.", 400)

    if error_limit is None:
        error_limit = current_app.config.get("IMPORT_ERROR_DETAIL_LIMIT", DEFAULT_ERROR_DETAIL_LIMIT)

    logger.info("Importing %s food rows (headers: %s)", len(rows), ", ".join(headers))
    result = import_rows(rows, insert or insert_catalog_food, error_limit)
    logger.info("Import complete: %s added, %s skipped", result["success"], result["errors"])
    if result["errors"]:
        logger.info("Import errors: %s", result["error_details"])
    return result


def name_key(name: str) -> str:
    return (name or "").strip().lower()


def find_duplicate_groups(foods: Iterable[Food]) -> "OrderedDict[str, List[Food]]":
    """Groups of foods sharing a case-insensitive trimmed name, only groups of 2+."""
    grouped: "OrderedDict[str, List[Food]]" = OrderedDict()
    for food in foods:
        grouped.setdefault(name_key(food.name), []).append(food)
    return OrderedDict((key, group) for key, group in grouped.items() if len(group) > 1)


def list_duplicates() -> List[Dict[str, Any]]:
    groups = find_duplicate_groups(Food.query.order_by(Food.id).all())
    return [
        {"name": key, "count": len(group), "ids": [f.id for f in group]}
        for key, group in groups.items()
    ]


def merge_duplicates() -> int:
    """Keep the first (lowest id) food of every duplicate group, delete the rest."""
    groups = find_duplicate_groups(Food.query.order_by(Food.id).all())
    doomed = []
    for key, group in groups.items():
        logger.info("Found %s duplicates of %r", len(group), key)
        doomed.extend(food.id for food in group[1:])

    try:
        removed = delete_foods(doomed)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise

    logger.info("Merged duplicates: %s foods removed", removed)
    return removed
