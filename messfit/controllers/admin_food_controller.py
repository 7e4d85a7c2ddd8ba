import logging

from flask import request
from sqlalchemy import func
from messfit.extensions import db
from messfit.models.food import Food
from messfit.models.meal_log import MealLog
from messfit.models.pending_food import PendingFood
from messfit.models.user import User
from messfit.schemas.food_schema import FoodSchema, BulkDeleteSchema
from messfit.services.food_helpers import delete_foods
from messfit.services.food_import_service import import_table, list_duplicates, merge_duplicates
from messfit.services.pending_food_service import list_pending, approve, reject
from messfit.utils import date_keys
from messfit.utils.http import ok, error, json_body, validate_schema, arg_int, arg_str, ServiceError

logger = logging.getLogger(__name__)


def create_food_handler():
    data, errors = validate_schema(FoodSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid food data", 400, details=errors)

    try:
        food = Food(**data)
        db.session.add(food)
        db.session.commit()
        logger.info("Catalog food %s created: %s", food.id, food.name)
        return ok(food.to_dict(), 201)
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)


def update_food_handler(id):
    food = db.session.get(Food, id)
    if not food:
        return error("NOT_FOUND", "Food not found", 404)

    data, errors = validate_schema(FoodSchema, json_body(), partial=True)
    if errors:
        return error("VALIDATION_ERROR", "Invalid food data", 400, details=errors)

    for field, value in data.items():
        setattr(food, field, value)

    try:
        db.session.commit()
        return ok(food.to_dict())
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)


def delete_food_handler(id):
    if not db.session.get(Food, id):
        return error("NOT_FOUND", "Food not found", 404)

    try:
        delete_foods([id])
        db.session.commit()
        return ok({"message": "Food deleted successfully"})
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)


def bulk_delete_foods_handler():
    data, errors = validate_schema(BulkDeleteSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "ids must be a non-empty list", 400, details=errors)

    try:
        deleted = delete_foods(data["ids"])
        db.session.commit()
        logger.info("Bulk deleted %s foods", deleted)
        return ok({"deleted": deleted})
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)


def _import_text():
    upload = request.files.get("file")
    if upload:
        try:
            return upload.read().decode("utf-8-sig")
        except UnicodeDecodeError:
            raise ServiceError("VALIDATION_ERROR", "Upload must be UTF-8 encoded text", 400)
    data = json_body()
    return data.get("text") or data.get("data") or ""


def import_foods_handler():
    """
    Bulk import foods from a CSV/TSV upload (``file``) or pasted ``text``.

    Returns the import tally: total, success, errors and the first error
    details. Bad rows never abort the batch.
    """
    try:
        text = _import_text()
        if not text.strip():
            return error("VALIDATION_ERROR", "Provide a file or text to import", 400)
        result = import_table(text)
    except ServiceError as e:
        return error(e.code, e.message, e.status)
    return ok(result)


def list_duplicates_handler():
    groups = list_duplicates()
    return ok({"groups": groups, "total_groups": len(groups)})


def merge_duplicates_handler():
    try:
        removed = merge_duplicates()
    except Exception as e:
        return error("UNKNOWN_ERROR", str(e), 500)
    return ok({"removed": removed})


def list_pending_handler():
    page = arg_int("page", 1, min_value=1)
    limit = arg_int("limit", 20, min_value=1, max_value=100)
    status = (arg_str("status", "pending") or "").strip().lower()

    query = list_pending(None if status == "all" else status)
    pagination = query.paginate(page=page, per_page=limit, error_out=False)
    return ok({
        "items": [p.to_dict() for p in pagination.items],
        "total": pagination.total,
        "page": page,
        "limit": limit,
        "pages": pagination.pages,
    })


def approve_pending_handler(id):
    try:
        pending, food = approve(id, request.user_id)
    except ServiceError as e:
        return error(e.code, e.message, e.status)
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)
    return ok({"pending": pending.to_dict(), "food": food.to_dict()})


def reject_pending_handler(id):
    try:
        pending = reject(id, request.user_id)
    except ServiceError as e:
        return error(e.code, e.message, e.status)
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)
    return ok(pending.to_dict())


def get_stats_handler():
    today = date_keys.today()
    active_today = (
        db.session.query(func.count(func.distinct(MealLog.user_id)))
        .filter(MealLog.date == today)
        .scalar()
    )

    return ok({
        "total_users": User.query.count(),
        "total_foods": Food.query.count(),
        "pending_foods": PendingFood.query.filter_by(status="pending").count(),
        "meal_logs_today": MealLog.query.filter_by(date=today).count(),
        "active_users_today": active_today or 0,
    })
