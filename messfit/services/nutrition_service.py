"""
Nutrition Service

Handles energy and nutrient targets based on a user's body metrics and goal.

The calorie target follows Mifflin-St Jeor scaled by a single moderate
activity multiplier. Macro targets use one policy everywhere: protein from
body weight, carbs and fat as a share of the calorie target.
"""

import math
from typing import Any, Dict, Optional

from messfit.services.food_constants import (
    ACTIVITY_MULTIPLIER,
    BMR_AGE_FACTOR,
    BMR_FEMALE_CONSTANT,
    BMR_HEIGHT_FACTOR,
    BMR_MALE_CONSTANT,
    BMR_WEIGHT_FACTOR,
    CALORIES_PER_GRAM_CARBS,
    CALORIES_PER_GRAM_FAT,
    DEFAULT_AGE,
    DEFAULT_CALORIE_TARGET,
    DEFAULT_CARBS_PERCENTAGE,
    DEFAULT_FAT_PERCENTAGE,
    DEFAULT_GLASS_SIZE_ML,
    DEFAULT_WATER_TARGET_ML,
    DEFAULT_WEIGHT_KG,
    FIBER_TARGET_G,
    GOAL_CALORIE_ADJUSTMENT,
    LEGACY_GLASS_ML,
    ML_PER_KG_BODY_WEIGHT,
    PROTEIN_G_PER_KG,
    SUGAR_TARGET_G,
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def sex_constant(gender: Optional[str]) -> float:
    # Only "female" uses the female constant; other/unspecified use the male one
    if (gender or "").lower() == "female":
        return BMR_FEMALE_CONSTANT
    return BMR_MALE_CONSTANT


def calculate_bmr(
    weight_kg: float,
    height_cm: float,
    age: Optional[int] = None,
    gender: Optional[str] = None,
) -> float:
    """
    Basal metabolic rate (kcal/day), Mifflin-St Jeor.

    Args:
        weight_kg: Body weight in kilograms
        height_cm: Height in centimetres
        age: Age in years; 25 is assumed when not captured yet
        gender: "male", "female" or "other"/None

    Returns:
        BMR in kcal, unrounded
    """
    age = DEFAULT_AGE if age is None else age
    return (
        BMR_WEIGHT_FACTOR * float(weight_kg)
        + BMR_HEIGHT_FACTOR * float(height_cm)
        - BMR_AGE_FACTOR * float(age)
        + sex_constant(gender)
    )


def calculate_maintenance(bmr: float) -> float:
    return bmr * ACTIVITY_MULTIPLIER


def calculate_calorie_target(
    weight_kg: float,
    height_cm: float,
    age: Optional[int] = None,
    gender: Optional[str] = None,
    goal: Optional[str] = "maintain",
) -> int:
    """Daily calorie target (the user's RDA) for a goal of lose, maintain or gain."""
    goal = (goal or "maintain").lower()
    if goal not in GOAL_CALORIE_ADJUSTMENT:
        raise ValueError(f"Unknown goal: {goal}")
    maintenance = round_half_up(calculate_maintenance(calculate_bmr(weight_kg, height_cm, age, gender)))
    return maintenance + GOAL_CALORIE_ADJUSTMENT[goal]


def calculate_macro_targets(calorie_target: float, weight_kg: Optional[float]) -> Dict[str, float]:
    weight = float(weight_kg or 0)
    return {
        "protein_g": round(weight * PROTEIN_G_PER_KG, 1),
        "carbs_g": round(DEFAULT_CARBS_PERCENTAGE * calorie_target / CALORIES_PER_GRAM_CARBS, 1),
        "fat_g": round(DEFAULT_FAT_PERCENTAGE * calorie_target / CALORIES_PER_GRAM_FAT, 1),
    }


def reference_targets(gender: Optional[str]) -> Dict[str, int]:
    key = "female" if (gender or "").lower() == "female" else "default"
    return {
        "fiber_g": FIBER_TARGET_G[key],
        "sugar_g": SUGAR_TARGET_G[key],
    }


def effective_calorie_target(user) -> int:
    return int(user.daily_calorie_target or user.rda or DEFAULT_CALORIE_TARGET)


def calculate_bmi(weight_kg: Optional[float], height_cm: Optional[float]) -> Optional[float]:
    height_m = float(height_cm or 0) / 100.0
    if height_m <= 0 or not weight_kg:
        return None
    return round(float(weight_kg) / (height_m * height_m), 1)


def has_body_metrics(user) -> bool:
    return bool(user.weight_kg and user.height_cm)


def calculate_rda(user) -> Optional[int]:
    """RDA for a user record, or None while weight/height are missing."""
    if not has_body_metrics(user):
        return None
    return calculate_calorie_target(user.weight_kg, user.height_cm, user.age, user.gender, user.goal)


def calculate_nutritional_targets(user) -> Dict[str, Any]:
    """
    Calculate daily nutritional targets for a user.

    Args:
        user: User model (or any object with the same attributes)

    Returns:
        Dictionary with calorie, macronutrient and reference targets
    """
    calorie_target = effective_calorie_target(user)
    targets: Dict[str, Any] = {"calories": calorie_target}
    targets.update(calculate_macro_targets(calorie_target, user.weight_kg))
    targets.update(reference_targets(user.gender))
    targets["bmi"] = calculate_bmi(user.weight_kg, user.height_cm)
    return targets


def water_amount_ml(log) -> int:
    """Millilitres held by a water log; legacy records store a glass count."""
    if log is None:
        return 0
    if log.amount_ml is not None:
        return int(log.amount_ml)
    return int(log.glasses or 0) * LEGACY_GLASS_ML


def calculate_water_target(
    weight_kg: Optional[float],
    auto_calculate: bool = True,
    custom_target_ml: Optional[int] = None,
    glass_size_ml: Optional[int] = None,
    current_ml: int = 0,
) -> Dict[str, Any]:
    glass = int(glass_size_ml or DEFAULT_GLASS_SIZE_ML)
    if auto_calculate:
        target_ml = round_half_up(float(weight_kg or DEFAULT_WEIGHT_KG) * ML_PER_KG_BODY_WEIGHT)
    else:
        target_ml = int(custom_target_ml or DEFAULT_WATER_TARGET_ML)

    percentage = min(current_ml / target_ml * 100, 100) if target_ml > 0 else 0
    return {
        "target_ml": target_ml,
        "current_ml": current_ml,
        "glass_size_ml": glass,
        "target_glasses": math.ceil(target_ml / glass),
        "current_glasses": current_ml // glass,
        "percentage": round(percentage, 1),
        "goal_reached": current_ml >= target_ml,
    }


def water_target_for(user, current_ml: int = 0) -> Dict[str, Any]:
    return calculate_water_target(
        user.weight_kg,
        auto_calculate=user.water_auto_calculate,
        custom_target_ml=user.water_custom_target_ml,
        glass_size_ml=user.water_glass_size_ml,
        current_ml=current_ml,
    )
