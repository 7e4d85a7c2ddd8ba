from datetime import datetime
from messfit.extensions import db


class PendingFood(db.Model):
    __tablename__ = "pending_foods"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False)
    calories_per_portion = db.Column(db.Float, nullable=False, default=0)
    protein_g = db.Column(db.Float, nullable=False, default=0)
    carbs_g = db.Column(db.Float, nullable=False, default=0)
    fat_g = db.Column(db.Float, nullable=False, default=0)
    fiber_g = db.Column(db.Float, nullable=False, default=0)
    sugar_g = db.Column(db.Float, nullable=False, default=0)
    unit = db.Column(db.String(10), nullable=False, default="piece")
    grams_per_unit = db.Column(db.Float, nullable=False, default=100)

    submitted_by = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    submitted_by_name = db.Column(db.String(150))
    status = db.Column(db.String(10), nullable=False, default="pending", index=True)  # pending, approved, rejected
    submitted_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    reviewed_at = db.Column(db.DateTime, nullable=True)
    reviewed_by = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True)

    NUTRITION_FIELDS = (
        "name", "calories_per_portion", "protein_g", "carbs_g", "fat_g",
        "fiber_g", "sugar_g", "unit", "grams_per_unit",
    )

    def nutrition(self):
        return {field: getattr(self, field) for field in self.NUTRITION_FIELDS}

    def to_dict(self):
        data = self.nutrition()
        data.update({
            "id": self.id,
            "submitted_by": self.submitted_by,
            "submitted_by_name": self.submitted_by_name,
            "status": self.status,
            "submitted_at": self.submitted_at.isoformat() if self.submitted_at else None,
            "reviewed_at": self.reviewed_at.isoformat() if self.reviewed_at else None,
            "reviewed_by": self.reviewed_by,
        })
        return data
