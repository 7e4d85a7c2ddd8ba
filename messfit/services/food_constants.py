"""
Food Service Constants

Contains all constants and configuration values used in nutrition services.
"""

# Catalog
VALID_UNITS = ["piece", "bowl", "cup", "ml", "bar", "can"]
DEFAULT_UNIT = "piece"
DEFAULT_GRAMS_PER_UNIT = 100.0

# Meal types, in the order the day is displayed
MEAL_TYPES = ["breakfast", "lunch", "snacks", "dinner"]

NUTRIENT_FIELDS = ("calories", "protein", "carbs", "fats", "fiber", "sugars")

# Nutrition calculation constants
CALORIES_PER_GRAM_CARBS = 4.0
CALORIES_PER_GRAM_FAT = 9.0

# Mifflin-St Jeor
BMR_WEIGHT_FACTOR = 10.0
BMR_HEIGHT_FACTOR = 6.25
BMR_AGE_FACTOR = 5.0
BMR_MALE_CONSTANT = 5.0
BMR_FEMALE_CONSTANT = -161.0
DEFAULT_AGE = 25

# "Moderate activity"
ACTIVITY_MULTIPLIER = 1.5
GOAL_CALORIE_ADJUSTMENT = {"lose": -500, "maintain": 0, "gain": 500}

# Default nutritional targets
DEFAULT_CALORIE_TARGET = 2000
PROTEIN_G_PER_KG = 2.0
DEFAULT_CARBS_PERCENTAGE = 0.5
DEFAULT_FAT_PERCENTAGE = 0.3

FIBER_TARGET_G = {"female": 25, "default": 38}
SUGAR_TARGET_G = {"female": 25, "default": 36}

# Water
ML_PER_KG_BODY_WEIGHT = 35
DEFAULT_WEIGHT_KG = 70
DEFAULT_GLASS_SIZE_ML = 250
DEFAULT_WATER_TARGET_ML = 2000
LEGACY_GLASS_ML = 250

# Summary windows (days); None means all-time
RANGE_DAYS = {
    "week": 7,
    "month": 30,
    "quarter": 90,
    "year": 365,
    "lifetime": None,
}
