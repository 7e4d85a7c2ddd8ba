from flask import Blueprint
from messfit.utils.auth import require_auth
from messfit.controllers.meal_log_controller import (
    list_meal_log_handler,
    create_meal_log_handler,
    delete_meal_log_handler,
)

meal_log_bp = Blueprint("meal_log", __name__, url_prefix="/api/meal-log")


@meal_log_bp.get("")
@require_auth
def list_meal_log():
    return list_meal_log_handler()


@meal_log_bp.post("")
@require_auth
def create_meal_log():
    return create_meal_log_handler()


@meal_log_bp.delete("/<int:id>")
@require_auth
def delete_meal_log(id):
    return delete_meal_log_handler(id)
