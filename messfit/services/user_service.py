"""
User Service

Profile, onboarding and settings updates. Any change to body metrics or goal
recomputes the RDA and resets the daily calorie target to it.
"""

from typing import Any, Dict

from messfit.extensions import db
from messfit.models.food import Food
from messfit.models.user import User
from messfit.services.nutrition_service import calculate_rda
from messfit.utils.http import ServiceError

PROFILE_FIELDS = ("name", "height_cm", "weight_kg", "age", "gender")
ONBOARDING_FIELDS = ("age", "gender", "height_cm", "weight_kg", "goal")
ONBOARDING_REQUIRED = ("gender", "height_cm", "weight_kg", "goal")

SETTINGS_COLUMNS = {
    "water_auto_calculate": "water_auto_calculate",
    "water_glass_size_ml": "water_glass_size_ml",
    "water_custom_target_ml": "water_custom_target_ml",
    "theme": "theme",
    "daily_calorie_target": "daily_calorie_target",
}


def get_user(user_id: int) -> User:
    user = db.session.get(User, user_id)
    if not user:
        raise ServiceError("NOT_FOUND", "User not found", 404)
    return user


def refresh_rda(user: User) -> None:
    rda = calculate_rda(user)
    if rda is not None:
        user.rda = rda
        user.daily_calorie_target = rda


def _apply(user: User, data: Dict[str, Any], fields) -> None:
    for field in fields:
        if field in data:
            setattr(user, field, data[field])


def save_onboarding_step(user: User, data: Dict[str, Any]) -> User:
    """Persist any onboarding answers; completes onboarding once all are known."""
    _apply(user, data, ONBOARDING_FIELDS)

    if all(getattr(user, field) for field in ONBOARDING_REQUIRED):
        refresh_rda(user)
        user.onboarding_completed = True

    db.session.commit()
    return user


def update_profile(user: User, data: Dict[str, Any]) -> User:
    _apply(user, data, PROFILE_FIELDS)
    refresh_rda(user)
    db.session.commit()
    return user


def update_goal(user: User, goal: str) -> User:
    user.goal = goal
    refresh_rda(user)
    db.session.commit()
    return user


def update_settings(user: User, data: Dict[str, Any]) -> User:
    for key, column in SETTINGS_COLUMNS.items():
        if key in data and data[key] is not None:
            setattr(user, column, data[key])
    db.session.commit()
    return user


def toggle_favorite(user: User, food_id: int) -> bool:
    """Add or remove a favourite; returns True when the food is now a favourite."""
    food = db.session.get(Food, food_id)
    if not food:
        raise ServiceError("NOT_FOUND", "Food not found", 404)

    if food in user.favorite_foods:
        user.favorite_foods.remove(food)
        is_favorite = False
    else:
        user.favorite_foods.append(food)
        is_favorite = True
    db.session.commit()
    return is_favorite
