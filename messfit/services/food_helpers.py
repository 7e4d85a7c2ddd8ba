"""
Food Helper Functions

Contains utility functions for catalog foods including:
- Looking up a food with the built-in fallback list
- Scaling per-portion nutrition by a quantity
- Deleting catalog rows together with their references
"""

from typing import Any, Dict, Iterable, Optional

from messfit.extensions import db
from messfit.models.food import Food
from messfit.models.meal_log import MealLog
from messfit.models.user import user_favorite_foods


def _fallback(food_id, name, calories, protein, carbs, fat, fiber, unit, grams):
    return {
        "id": food_id,
        "name": name,
        "calories_per_portion": calories,
        "protein_g": protein,
        "carbs_g": carbs,
        "fat_g": fat,
        "fiber_g": fiber,
        "sugar_g": None,
        "unit": unit,
        "grams_per_unit": grams,
        "is_fallback": True,
    }


# Built-in foods, addressed by "builtin-<n>" so they never shadow catalog ids
FALLBACK_FOODS = {
    "builtin-1": _fallback("builtin-1", "Chapathi", 120, 4, 20, 3, 3, "piece", 40),
    "builtin-2": _fallback("builtin-2", "White Rice", 180, 4, 40, 1, 1, "bowl", 200),
    "builtin-3": _fallback("builtin-3", "Masala Dosa", 180, 4, 30, 5, 3, "piece", 120),
    "builtin-4": _fallback("builtin-4", "Idli", 40, 1.5, 8, 0.2, 0.5, "piece", 60),
    "builtin-5": _fallback("builtin-5", "Dal", 150, 9, 20, 3, 5, "bowl", 180),
    "builtin-6": _fallback("builtin-6", "Poha", 180, 4, 32, 4, 3, "bowl", 180),
    "builtin-7": _fallback("builtin-7", "Upma", 150, 4, 26, 4, 2, "bowl", 180),
    "builtin-8": _fallback("builtin-8", "Sambar", 120, 5, 18, 3, 4, "bowl", 180),
    "builtin-9": _fallback("builtin-9", "Samosa", 150, 3, 18, 8, 2, "piece", 50),
    "builtin-10": _fallback("builtin-10", "Vada", 100, 3, 12, 5, 1, "piece", 50),
    "builtin-11": _fallback("builtin-11", "Veg Biryani", 380, 8, 68, 10, 6, "bowl", 250),
    "builtin-12": _fallback("builtin-12", "Banana", 105, 1, 27, 0, 3, "piece", 120),
    "builtin-13": _fallback("builtin-13", "Paratha", 200, 5, 28, 8, 3, "piece", 80),
    "builtin-14": _fallback("builtin-14", "Naan", 260, 8, 45, 5, 2, "piece", 90),
    "builtin-15": _fallback("builtin-15", "Curd Rice", 200, 6, 35, 4, 1, "bowl", 200),
    "builtin-16": _fallback("builtin-16", "Tea", 50, 1, 8, 1, 0, "cup", 250),
}


def fallback_food(food_id) -> Dict[str, Any]:
    key = str(food_id)
    if key in FALLBACK_FOODS:
        return dict(FALLBACK_FOODS[key])
    return _fallback(key, "Unknown Food", 0, 0, 0, 0, 0, "piece", 100)


def resolve_food(food_id) -> Dict[str, Any]:
    """
    Catalog food as a dict for integer ids, built-in food for "builtin-<n>" ids.

    Anything else, including a deleted catalog id, resolves to "Unknown Food".
    """
    food = None
    try:
        food = db.session.get(Food, int(food_id))
    except (TypeError, ValueError):
        pass

    if food is None:
        return fallback_food(food_id)

    data = food.to_dict()
    data["is_fallback"] = False
    return data


def scale_nutrition(food: Dict[str, Any], quantity: float) -> Dict[str, float]:
    """
    Calculate meal totals for a quantity of portions.

    Args:
        food: Food dict with per-portion values
        quantity: Number of portions (multiplier)

    Returns:
        Dictionary with calories, protein, carbs, fats, fiber, sugars
    """
    q = float(quantity)
    return {
        "calories": float(food.get("calories_per_portion") or 0) * q,
        "protein": float(food.get("protein_g") or 0) * q,
        "carbs": float(food.get("carbs_g") or 0) * q,
        "fats": float(food.get("fat_g") or 0) * q,
        "fiber": float(food.get("fiber_g") or 0) * q,
        "sugars": float(food.get("sugar_g") or 0) * q,
    }


def delete_foods(food_ids: Iterable[int]) -> int:
    """Delete catalog foods, detaching favourites and meal log references. Caller commits."""
    ids = list(food_ids)
    if not ids:
        return 0

    db.session.execute(
        user_favorite_foods.delete().where(user_favorite_foods.c.food_id.in_(ids))
    )
    MealLog.query.filter(MealLog.food_id.in_(ids)).update(
        {"food_id": None}, synchronize_session=False
    )
    return Food.query.filter(Food.id.in_(ids)).delete(synchronize_session=False)


def search_foods(search: Optional[str] = None, only_ids: Optional[Iterable[int]] = None):
    query = Food.query
    if search:
        query = query.filter(Food.name.ilike(f"%{search}%"))
    if only_ids is not None:
        query = query.filter(Food.id.in_(list(only_ids) or [0]))
    return query.order_by(Food.name, Food.id)
