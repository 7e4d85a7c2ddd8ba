from flask import request
from messfit.extensions import db
from messfit.schemas.meal_schema import WaterSchema
from messfit.services.nutrition_service import water_target_for, water_amount_ml
from messfit.services.user_service import get_user
from messfit.services.water_service import get_water_log, add_water, set_water
from messfit.utils import date_keys
from messfit.utils.http import ok, error, json_body, validate_schema, arg_str, ServiceError


def _progress(user, date, log):
    data = water_target_for(user, water_amount_ml(log))
    data["date"] = date
    return data


def get_water_handler():
    date = arg_str("date") or date_keys.today()
    if not date_keys.is_valid_key(date):
        return error("VALIDATION_ERROR", "date must be a YYYY-MM-DD date", 400)

    user = get_user(request.user_id)
    return ok(_progress(user, date, get_water_log(user.id, date)))


def _write(operation):
    data, errors = validate_schema(WaterSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid water data", 400, details=errors)

    user = get_user(request.user_id)
    date = data["date"] or date_keys.today()
    try:
        log = operation(user.id, date, data["amount_ml"])
    except ServiceError as e:
        return error(e.code, e.message, e.status)
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)
    return ok(_progress(user, date, log))


def add_water_handler():
    return _write(add_water)


def set_water_handler():
    return _write(set_water)
