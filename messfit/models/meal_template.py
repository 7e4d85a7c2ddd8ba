from datetime import datetime
from messfit.extensions import db


class MealTemplate(db.Model):
    __tablename__ = "meal_templates"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    name = db.Column(db.String(150), nullable=False)
    meal_type = db.Column(db.String(10), nullable=False)
    items = db.Column(db.JSON, nullable=False, default=list)  # [{food_id, food_name, quantity, unit, calories, protein}]
    total_calories = db.Column(db.Float, nullable=False, default=0)
    total_protein = db.Column(db.Float, nullable=False, default=0)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "meal_type": self.meal_type,
            "items": list(self.items or []),
            "total_calories": self.total_calories,
            "total_protein": self.total_protein,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
