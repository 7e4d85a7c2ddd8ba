"""
Meal Log Service

Handles meal logging operations including creation, retrieval and deletion.
Logs are immutable: an edit is a delete followed by a new log.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from messfit.extensions import db
from messfit.models.meal_log import MealLog
from messfit.services.aggregation_service import group_by_meal_type, sum_nutrition
from messfit.services.food_helpers import resolve_food, scale_nutrition
from messfit.utils import date_keys
from messfit.utils.http import ServiceError

logger = logging.getLogger(__name__)


def create_meal_log(
    user_id: int,
    food_id,
    quantity: float,
    meal_type: str,
    date: Optional[str] = None,
    logged_at: Optional[datetime] = None,
    commit: bool = True,
) -> MealLog:
    """
    Create a meal log entry for a catalog food.

    Args:
        user_id: User ID
        food_id: Catalog food id; unknown ids fall back to the built-in list
        quantity: Portion multiplier
        meal_type: breakfast/lunch/snacks/dinner
        date: Date key; defaults to today
        logged_at: Timestamp of the meal

    Returns:
        The created MealLog

    Raises:
        ServiceError: If quantity is not positive
    """
    if quantity is None or float(quantity) <= 0:
        raise ServiceError("VALIDATION_ERROR", "quantity must be greater than 0", 400)

    food = resolve_food(food_id)
    if food["is_fallback"]:
        logger.info("Food %s not in catalog, logging fallback %r", food_id, food["name"])

    totals = scale_nutrition(food, quantity)
    meal_log = MealLog(
        user_id=user_id,
        food_id=None if food["is_fallback"] else food["id"],
        food_name=food["name"],
        quantity=float(quantity),
        unit=food["unit"],
        meal_type=meal_type,
        date=date or date_keys.today(),
        timestamp=logged_at or datetime.utcnow(),
        **totals,
    )
    db.session.add(meal_log)
    if commit:
        db.session.commit()
    return meal_log


def list_meal_logs(user_id: int, date: Optional[str] = None, start: Optional[str] = None, end: Optional[str] = None) -> List[MealLog]:
    """Meal logs for one day, or for an inclusive key range, oldest first."""
    query = MealLog.query.filter_by(user_id=user_id)
    if date:
        query = query.filter(MealLog.date == date)
    if start:
        query = query.filter(MealLog.date >= start)
    if end:
        query = query.filter(MealLog.date <= end)
    return query.order_by(MealLog.date, MealLog.timestamp, MealLog.id).all()


def day_overview(user_id: int, date: str) -> Dict[str, Any]:
    records = [log.to_dict() for log in list_meal_logs(user_id, date=date)]
    return {
        "date": date,
        "meals": group_by_meal_type(records),
        "totals": sum_nutrition(records),
        "count": len(records),
    }


def delete_meal_log(user_id: int, meal_log_id: int) -> bool:
    log = MealLog.query.filter_by(id=meal_log_id, user_id=user_id).first()
    if not log:
        return False

    db.session.delete(log)
    db.session.commit()
    return True
