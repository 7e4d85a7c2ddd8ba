"""
Water Service

One water log per user per day holding the cumulative millilitres.
"""

from typing import List, Optional

from messfit.extensions import db
from messfit.models.water_log import WaterLog
from messfit.services.nutrition_service import water_amount_ml
from messfit.utils.http import ServiceError


def get_water_log(user_id: int, date: str) -> Optional[WaterLog]:
    return WaterLog.query.filter_by(user_id=user_id, date=date).first()


def set_water(user_id: int, date: str, amount_ml: int) -> WaterLog:
    """Overwrite the day's amount, creating the record on first use."""
    if amount_ml is None or amount_ml < 0:
        raise ServiceError("VALIDATION_ERROR", "amount_ml must be 0 or more", 400)

    log = get_water_log(user_id, date)
    if log is None:
        log = WaterLog(user_id=user_id, date=date)
        db.session.add(log)
    log.amount_ml = int(amount_ml)
    log.glasses = None
    db.session.commit()
    return log


def add_water(user_id: int, date: str, amount_ml: int) -> WaterLog:
    current = water_amount_ml(get_water_log(user_id, date))
    return set_water(user_id, date, max(0, current + int(amount_ml)))


def list_water_logs(user_id: int, start: Optional[str] = None, end: Optional[str] = None) -> List[WaterLog]:
    query = WaterLog.query.filter_by(user_id=user_id)
    if start:
        query = query.filter(WaterLog.date >= start)
    if end:
        query = query.filter(WaterLog.date <= end)
    return query.order_by(WaterLog.date).all()
