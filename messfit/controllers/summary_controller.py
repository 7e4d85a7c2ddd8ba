from flask import request
from messfit.services.streak_service import get_user_streaks
from messfit.services.summary_service import daily_summary, range_summary
from messfit.services.user_service import get_user
from messfit.utils import date_keys
from messfit.utils.http import ok, error, arg_str


def daily_summary_handler():
    date = arg_str("date") or date_keys.today()
    if not date_keys.is_valid_key(date):
        return error("VALIDATION_ERROR", "date must be a YYYY-MM-DD date", 400)
    return ok(daily_summary(get_user(request.user_id), date))


def range_summary_handler():
    range_name = (arg_str("range", "week") or "week").strip().lower()
    return ok(range_summary(get_user(request.user_id), range_name))


def streak_handler():
    return ok(get_user_streaks(request.user_id))
