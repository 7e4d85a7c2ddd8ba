from flask import Blueprint
from messfit.utils.auth import require_auth
from messfit.controllers.export_controller import export_handler, export_water_handler

export_bp = Blueprint("export", __name__, url_prefix="/api/export")


@export_bp.get("")
@require_auth
def export():
    return export_handler()


@export_bp.get("/water")
@require_auth
def export_water():
    return export_water_handler()
