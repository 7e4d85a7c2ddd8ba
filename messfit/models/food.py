from datetime import datetime
from messfit.extensions import db


class Food(db.Model):
    __tablename__ = "food_master"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False, index=True)
    calories_per_portion = db.Column(db.Float, nullable=False, default=0)
    protein_g = db.Column(db.Float, nullable=False, default=0)
    carbs_g = db.Column(db.Float, nullable=False, default=0)
    fat_g = db.Column(db.Float, nullable=False, default=0)
    fiber_g = db.Column(db.Float, nullable=False, default=0)
    sugar_g = db.Column(db.Float, nullable=True)
    unit = db.Column(db.String(10), nullable=False, default="piece")
    grams_per_unit = db.Column(db.Float, nullable=False, default=100)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "calories_per_portion": self.calories_per_portion,
            "protein_g": self.protein_g,
            "carbs_g": self.carbs_g,
            "fat_g": self.fat_g,
            "fiber_g": self.fiber_g,
            "sugar_g": self.sugar_g,
            "unit": self.unit,
            "grams_per_unit": self.grams_per_unit,
        }

    def __repr__(self):
        return f"<Food {self.id}: {self.name}>"
