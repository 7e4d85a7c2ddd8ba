from types import SimpleNamespace

import pytest

from messfit.services.nutrition_service import (
    calculate_bmi,
    calculate_bmr,
    calculate_calorie_target,
    calculate_macro_targets,
    calculate_nutritional_targets,
    calculate_rda,
    calculate_water_target,
    water_amount_ml,
)


def make_user(**overrides):
    data = dict(
        weight_kg=70, height_cm=175, age=25, gender="male", goal="maintain",
        rda=None, daily_calorie_target=None,
    )
    data.update(overrides)
    return SimpleNamespace(**data)


def test_bmr_mifflin_st_jeor():
    assert calculate_bmr(70, 175, 25, "male") == pytest.approx(1673.75)
    assert calculate_bmr(70, 175, 25, "female") == pytest.approx(1507.75)


def test_calorie_target_by_goal():
    assert calculate_calorie_target(70, 175, 25, "male", "maintain") == 2511
    assert calculate_calorie_target(70, 175, 25, "male", "lose") == 2011
    assert calculate_calorie_target(70, 175, 25, "male", "gain") == 3011


def test_calorie_target_female():
    assert calculate_calorie_target(70, 175, 25, "female", "maintain") == 2262


def test_missing_age_and_other_gender_use_defaults():
    assert calculate_calorie_target(70, 175, None, None, "maintain") == 2511
    assert calculate_calorie_target(70, 175, 25, "other", "maintain") == 2511


def test_unknown_goal_rejected():
    with pytest.raises(ValueError):
        calculate_calorie_target(70, 175, 25, "male", "bulk")


def test_macro_targets():
    macros = calculate_macro_targets(2000, 70)
    assert macros == {"protein_g": 140.0, "carbs_g": 250.0, "fat_g": 66.7}


def test_rda_requires_body_metrics():
    assert calculate_rda(make_user(weight_kg=None)) is None
    assert calculate_rda(make_user()) == 2511


def test_targets_fall_back_to_default_calories():
    targets = calculate_nutritional_targets(make_user(weight_kg=None, height_cm=None))
    assert targets["calories"] == 2000
    assert targets["protein_g"] == 0
    assert targets["bmi"] is None


def test_targets_prefer_daily_target_then_rda():
    assert calculate_nutritional_targets(make_user(rda=2511))["calories"] == 2511
    assert calculate_nutritional_targets(make_user(rda=2511, daily_calorie_target=1800))["calories"] == 1800


def test_reference_targets_by_gender():
    male = calculate_nutritional_targets(make_user())
    female = calculate_nutritional_targets(make_user(gender="female"))
    assert (male["fiber_g"], male["sugar_g"]) == (38, 36)
    assert (female["fiber_g"], female["sugar_g"]) == (25, 25)


def test_bmi():
    assert calculate_bmi(70, 175) == 22.9
    assert calculate_bmi(70, 0) is None


def test_water_target_auto():
    water = calculate_water_target(70, auto_calculate=True, glass_size_ml=250, current_ml=500)
    assert water["target_ml"] == 2450
    assert water["target_glasses"] == 10
    assert water["current_glasses"] == 2
    assert water["percentage"] == 20.4
    assert water["goal_reached"] is False


def test_water_target_defaults_weight():
    assert calculate_water_target(None)["target_ml"] == 2450


def test_water_target_custom_caps_percentage():
    water = calculate_water_target(70, auto_calculate=False, custom_target_ml=3000, current_ml=3500)
    assert water["target_ml"] == 3000
    assert water["percentage"] == 100
    assert water["goal_reached"] is True


def test_legacy_water_glasses():
    assert water_amount_ml(SimpleNamespace(amount_ml=None, glasses=4)) == 1000
    assert water_amount_ml(SimpleNamespace(amount_ml=600, glasses=4)) == 600
    assert water_amount_ml(None) == 0
