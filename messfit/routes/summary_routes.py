from flask import Blueprint
from messfit.utils.auth import require_auth
from messfit.controllers.summary_controller import daily_summary_handler, range_summary_handler, streak_handler

summary_bp = Blueprint("summary", __name__, url_prefix="/api/summary")


@summary_bp.get("/daily")
@require_auth
def daily():
    return daily_summary_handler()


@summary_bp.get("/range")
@require_auth
def range_summary():
    return range_summary_handler()


@summary_bp.get("/streak")
@require_auth
def streak():
    return streak_handler()
