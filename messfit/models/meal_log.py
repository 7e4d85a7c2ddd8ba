from datetime import datetime
from messfit.extensions import db


class MealLog(db.Model):
    __tablename__ = "meal_logs"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    # Nullable: built-in fallback foods have no catalog row
    food_id = db.Column(db.Integer, db.ForeignKey("food_master.id", ondelete="SET NULL"), nullable=True)
    food_name = db.Column(db.String(150), nullable=False)
    quantity = db.Column(db.Float, nullable=False, default=1)
    unit = db.Column(db.String(10), nullable=False, default="piece")
    calories = db.Column(db.Float, nullable=False, default=0)
    protein = db.Column(db.Float, nullable=False, default=0)
    carbs = db.Column(db.Float, nullable=False, default=0)
    fats = db.Column(db.Float, nullable=False, default=0)
    fiber = db.Column(db.Float, nullable=False, default=0)
    sugars = db.Column(db.Float, nullable=False, default=0)
    meal_type = db.Column(db.String(10), nullable=False)
    date = db.Column(db.String(10), nullable=False)
    timestamp = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        db.Index("ix_meal_logs_user_date", "user_id", "date"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "food_id": self.food_id,
            "food_name": self.food_name,
            "quantity": self.quantity,
            "unit": self.unit,
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fats": self.fats,
            "fiber": self.fiber,
            "sugars": self.sugars,
            "meal_type": self.meal_type,
            "date": self.date,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }
