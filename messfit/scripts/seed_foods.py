from messfit import create_app
from messfit.extensions import db
from messfit.models.food import Food
from messfit.services.food_helpers import FALLBACK_FOODS
from messfit.services.food_import_service import name_key

CATALOG_FIELDS = (
    "name", "calories_per_portion", "protein_g", "carbs_g", "fat_g",
    "fiber_g", "sugar_g", "unit", "grams_per_unit",
)


def seed_foods():
    """Add the built-in foods to the catalog, skipping names already present."""
    existing = {name_key(name) for (name,) in db.session.query(Food.name).all()}
    added = 0
    for food in FALLBACK_FOODS.values():
        if name_key(food["name"]) in existing:
            continue
        db.session.add(Food(**{field: food[field] for field in CATALOG_FIELDS}))
        added += 1
    db.session.commit()
    return added


if __name__ == "__main__":
    app = create_app()
    with app.app_context():
        # ensure tables exist (non-destructive: won't alter existing columns)
        db.create_all()
        print(f"Seeded {seed_foods()} foods")
