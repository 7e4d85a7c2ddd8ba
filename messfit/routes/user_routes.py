from flask import Blueprint
from messfit.utils.auth import require_auth
from messfit.controllers.user_controller import (
    get_profile_handler,
    onboarding_handler,
    update_profile_handler,
    update_goal_handler,
    update_settings_handler,
    targets_handler,
    toggle_favorite_handler,
    list_favorites_handler,
)

user_bp = Blueprint("user", __name__, url_prefix="/api/user")


@user_bp.get("/profile")
@require_auth
def get_profile():
    return get_profile_handler()


@user_bp.put("/profile")
@require_auth
def update_profile():
    return update_profile_handler()


@user_bp.put("/onboarding")
@require_auth
def onboarding():
    return onboarding_handler()


@user_bp.put("/goal")
@require_auth
def update_goal():
    return update_goal_handler()


@user_bp.put("/settings")
@require_auth
def update_settings():
    return update_settings_handler()


@user_bp.get("/targets")
@require_auth
def targets():
    return targets_handler()


@user_bp.get("/favorites")
@require_auth
def list_favorites():
    return list_favorites_handler()


@user_bp.post("/favorites/<int:food_id>")
@require_auth
def toggle_favorite(food_id):
    return toggle_favorite_handler(food_id)
