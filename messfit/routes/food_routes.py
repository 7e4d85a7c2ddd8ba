from flask import Blueprint
from messfit.utils.auth import require_auth
from messfit.controllers.food_controller import (
    list_foods_handler,
    get_food_handler,
    submit_food_handler,
)

food_bp = Blueprint("food", __name__, url_prefix="/api/foods")


@food_bp.get("")
@require_auth
def list_foods():
    return list_foods_handler()


@food_bp.get("/<food_id>")
@require_auth
def get_food(food_id):
    return get_food_handler(food_id)


@food_bp.post("/submit")
@require_auth
def submit_food():
    return submit_food_handler()
