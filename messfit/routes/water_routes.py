from flask import Blueprint
from messfit.utils.auth import require_auth
from messfit.controllers.water_controller import get_water_handler, add_water_handler, set_water_handler

water_bp = Blueprint("water", __name__, url_prefix="/api/water-log")


@water_bp.get("")
@require_auth
def get_water():
    return get_water_handler()


@water_bp.post("")
@require_auth
def add_water():
    return add_water_handler()


@water_bp.put("")
@require_auth
def set_water():
    return set_water_handler()
