from flask import request
from messfit.extensions import db
from messfit.schemas.meal_schema import CreateMealLogSchema
from messfit.services.meal_log_service import create_meal_log, day_overview, delete_meal_log, list_meal_logs
from messfit.utils import date_keys
from messfit.utils.http import ok, error, json_body, validate_schema, arg_str, ServiceError


def _date_arg(name, default=None):
    value = arg_str(name, default)
    if value is not None and not date_keys.is_valid_key(value):
        raise ServiceError("VALIDATION_ERROR", f"{name} must be a YYYY-MM-DD date", 400)
    return value


def list_meal_log_handler():
    """
    Meals for a day grouped by meal type, or a flat list for ``start``..``end``.
    """
    start = _date_arg("start")
    end = _date_arg("end")
    if start or end:
        logs = list_meal_logs(request.user_id, start=start, end=end)
        return ok({"items": [log.to_dict() for log in logs], "count": len(logs)})

    date = _date_arg("date", date_keys.today())
    return ok(day_overview(request.user_id, date))


def create_meal_log_handler():
    data, errors = validate_schema(CreateMealLogSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid meal log data", 400, details=errors)

    try:
        meal_log = create_meal_log(
            user_id=request.user_id,
            food_id=data["food_id"],
            quantity=data["quantity"],
            meal_type=data["meal_type"],
            date=data["date"],
            logged_at=data["logged_at"],
        )
        return ok(meal_log.to_dict(), 201)
    except ServiceError as e:
        return error(e.code, e.message, e.status)
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)


def delete_meal_log_handler(id):
    if not delete_meal_log(request.user_id, id):
        return error("NOT_FOUND", "Meal log not found", 404)
    return ok({"message": "Meal log deleted successfully"})
