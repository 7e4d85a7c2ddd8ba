from flask import request
from messfit.extensions import db
from messfit.schemas.user_schema import OnboardingSchema, ProfileUpdateSchema, GoalSchema, SettingsSchema
from messfit.services.nutrition_service import calculate_nutritional_targets, water_target_for, water_amount_ml
from messfit.services.user_service import (
    get_user,
    save_onboarding_step,
    update_profile,
    update_goal,
    update_settings,
    toggle_favorite,
)
from messfit.services.water_service import get_water_log
from messfit.utils import date_keys
from messfit.utils.http import ok, error, json_body, validate_schema, ServiceError


def get_profile_handler():
    user = get_user(request.user_id)
    data = user.to_dict()
    data["targets"] = calculate_nutritional_targets(user)
    return ok(data)


def _update(schema_cls, apply, message):
    data, errors = validate_schema(schema_cls, json_body())
    if errors:
        return error("VALIDATION_ERROR", message, 400, details=errors)

    user = get_user(request.user_id)
    try:
        apply(user, data)
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)

    result = user.to_dict()
    result["targets"] = calculate_nutritional_targets(user)
    return ok(result)


def onboarding_handler():
    return _update(OnboardingSchema, save_onboarding_step, "Invalid onboarding data")


def update_profile_handler():
    return _update(ProfileUpdateSchema, update_profile, "Invalid profile data")


def update_goal_handler():
    return _update(GoalSchema, lambda user, data: update_goal(user, data["goal"]), "Invalid goal")


def update_settings_handler():
    return _update(SettingsSchema, update_settings, "Invalid settings")


def targets_handler():
    user = get_user(request.user_id)
    today = date_keys.today()
    return ok({
        "date": today,
        "nutrition": calculate_nutritional_targets(user),
        "water": water_target_for(user, water_amount_ml(get_water_log(user.id, today))),
    })


def toggle_favorite_handler(food_id):
    user = get_user(request.user_id)
    try:
        is_favorite = toggle_favorite(user, food_id)
    except ServiceError as e:
        return error(e.code, e.message, e.status)
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)

    return ok({
        "food_id": food_id,
        "is_favorite": is_favorite,
        "favorite_foods": user.favorite_food_ids,
    })


def list_favorites_handler():
    user = get_user(request.user_id)
    foods = sorted(user.favorite_foods, key=lambda f: ((f.name or "").lower(), f.id))
    return ok([f.to_dict() for f in foods])
