import logging

from flask import request, Response
from messfit.schemas.meal_schema import ExportQuerySchema
from messfit.services.export_service import to_csv, to_json, to_text, to_mail, water_to_csv
from messfit.services.meal_log_service import list_meal_logs
from messfit.services.nutrition_service import effective_calorie_target
from messfit.services.user_service import get_user
from messfit.services.water_service import list_water_logs
from messfit.utils import date_keys
from messfit.utils.http import ok, error, validate_schema, ServiceError

logger = logging.getLogger(__name__)

MIMETYPES = {
    "csv": ("text/csv", "csv"),
    "json": ("application/json", "json"),
    "text": ("text/plain", "txt"),
}


def _attachment(content, fmt, prefix="messfit-export"):
    mimetype, extension = MIMETYPES[fmt]
    filename = f"{prefix}-{date_keys.today()}.{extension}"
    return Response(
        content,
        mimetype=mimetype,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


def _date_range(params, meals):
    start, end = params["start"], params["end"]
    if not start and not end:
        return None
    start = start or (meals[0]["date"] if meals else date_keys.today())
    end = end or date_keys.today()
    if start > end:
        raise ServiceError("VALIDATION_ERROR", "start must not be after end", 400)
    return {"start": start, "end": end}


def export_handler():
    """
    Export the caller's meal history.

    Query Parameters:
        - format: csv, json, text or mail (default: csv)
        - start, end: Optional inclusive date keys
        - include_summary: Append totals and meal-type breakdown
        - include_water: Append water logs
    """
    params, errors = validate_schema(ExportQuerySchema, request.args.to_dict())
    if errors:
        return error("VALIDATION_ERROR", "Invalid export parameters", 400, details=errors)

    user = get_user(request.user_id)
    meals = [log.to_dict() for log in list_meal_logs(user.id)]

    try:
        date_range = _date_range(params, meals)
        water_logs = None
        if params["include_water"]:
            window = date_range or {}
            water_logs = [w.to_dict() for w in list_water_logs(user.id, window.get("start"), window.get("end"))]

        fmt = params["format"]
        profile = {"name": user.name, "calorie_target": effective_calorie_target(user)}
        if fmt == "csv":
            content = to_csv(meals, params["include_summary"], water_logs, date_range)
        elif fmt == "json":
            content = to_json(meals, params["include_summary"], water_logs, date_range)
        elif fmt == "text":
            content = to_text(meals, profile, date_range=date_range)
        else:
            return ok(to_mail(meals, profile, water_logs, date_keys.today(), date_range))
    except ServiceError as e:
        return error(e.code, e.message, e.status)

    logger.info("User %s exported %s meals as %s", user.id, len(meals), fmt)
    return _attachment(content, fmt)


def export_water_handler():
    logs = [w.to_dict() for w in list_water_logs(request.user_id)]
    try:
        content = water_to_csv(logs)
    except ServiceError as e:
        return error(e.code, e.message, e.status)
    return _attachment(content, "csv", prefix="messfit-water")
