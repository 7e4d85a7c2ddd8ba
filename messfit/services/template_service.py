"""
Meal Template Service

Named bundles of foods a user logs together, with totals computed once at
creation.
"""

from typing import Any, Dict, List

from messfit.extensions import db
from messfit.models.meal_log import MealLog
from messfit.models.meal_template import MealTemplate
from messfit.services.food_helpers import resolve_food, scale_nutrition
from messfit.services.meal_log_service import create_meal_log


def build_template_items(entries: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    items = []
    for entry in entries:
        food = resolve_food(entry["food_id"])
        quantity = float(entry.get("quantity") or 1)
        totals = scale_nutrition(food, quantity)
        items.append({
            "food_id": food["id"],
            "food_name": food["name"],
            "quantity": quantity,
            "unit": food["unit"],
            "calories": totals["calories"],
            "protein": totals["protein"],
            "is_fallback": food["is_fallback"],
        })
    return items


def create_template(user_id: int, name: str, meal_type: str, entries: List[Dict[str, Any]]) -> MealTemplate:
    items = build_template_items(entries)
    template = MealTemplate(
        user_id=user_id,
        name=name,
        meal_type=meal_type,
        items=items,
        total_calories=sum(i["calories"] for i in items),
        total_protein=sum(i["protein"] for i in items),
    )
    db.session.add(template)
    db.session.commit()
    return template


def list_templates(user_id: int) -> List[MealTemplate]:
    return MealTemplate.query.filter_by(user_id=user_id).order_by(MealTemplate.created_at.desc(), MealTemplate.id.desc()).all()


def get_template(user_id: int, template_id: int):
    return MealTemplate.query.filter_by(id=template_id, user_id=user_id).first()


def delete_template(user_id: int, template_id: int) -> bool:
    template = get_template(user_id, template_id)
    if not template:
        return False
    db.session.delete(template)
    db.session.commit()
    return True


def apply_template(user_id: int, template: MealTemplate, date: str) -> List[MealLog]:
    """Log every item of the template for ``date`` in one transaction."""
    logs = [
        create_meal_log(user_id, item["food_id"], item["quantity"], template.meal_type, date=date, commit=False)
        for item in template.items or []
    ]
    db.session.commit()
    return logs
