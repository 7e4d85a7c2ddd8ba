from messfit.models.user import User, user_favorite_foods
from messfit.models.food import Food
from messfit.models.pending_food import PendingFood
from messfit.models.meal_log import MealLog
from messfit.models.water_log import WaterLog
from messfit.models.meal_template import MealTemplate

__all__ = [
    "User",
    "user_favorite_foods",
    "Food",
    "PendingFood",
    "MealLog",
    "WaterLog",
    "MealTemplate",
]
