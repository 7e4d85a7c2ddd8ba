"""
Pending Food Service

User-submitted catalog candidates and their admin disposition.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from messfit.extensions import db
from messfit.models.food import Food
from messfit.models.pending_food import PendingFood
from messfit.models.user import User
from messfit.utils.enums import PendingStatus
from messfit.utils.http import ServiceError

logger = logging.getLogger(__name__)


def submit_food(user: User, data: Dict[str, Any]) -> PendingFood:
    pending = PendingFood(
        submitted_by=user.id,
        submitted_by_name=user.name or user.email,
        status=PendingStatus.PENDING.value,
        **data,
    )
    db.session.add(pending)
    db.session.commit()
    logger.info("Food %r submitted by user %s", pending.name, user.id)
    return pending


def list_pending(status: Optional[str] = PendingStatus.PENDING.value):
    query = PendingFood.query
    if status:
        query = query.filter_by(status=status)
    return query.order_by(PendingFood.submitted_at.desc(), PendingFood.id.desc())


def _open_submission(pending_id: int) -> PendingFood:
    pending = db.session.get(PendingFood, pending_id)
    if not pending:
        raise ServiceError("NOT_FOUND", "Pending food not found", 404)
    if pending.status != PendingStatus.PENDING.value:
        raise ServiceError("ALREADY_REVIEWED", f"Submission already {pending.status}", 409)
    return pending


def approve(pending_id: int, reviewer_id: int) -> Tuple[PendingFood, Food]:
    """Copy the submission into the catalog and mark it approved."""
    pending = _open_submission(pending_id)

    food = Food(**pending.nutrition())
    db.session.add(food)
    pending.status = PendingStatus.APPROVED.value
    pending.reviewed_at = datetime.utcnow()
    pending.reviewed_by = reviewer_id
    db.session.commit()

    logger.info("Pending food %s approved as catalog food %s", pending.id, food.id)
    return pending, food


def reject(pending_id: int, reviewer_id: int) -> PendingFood:
    pending = _open_submission(pending_id)
    pending.status = PendingStatus.REJECTED.value
    pending.reviewed_at = datetime.utcnow()
    pending.reviewed_by = reviewer_id
    db.session.commit()

    logger.info("Pending food %s rejected", pending.id)
    return pending
