from datetime import datetime
from messfit.extensions import db

user_favorite_foods = db.Table(
    "user_favorite_foods",
    db.Column("user_id", db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    db.Column("food_id", db.Integer, db.ForeignKey("food_master.id", ondelete="CASCADE"), primary_key=True),
)


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False, default="")
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password = db.Column(db.String(255), nullable=False)
    is_admin = db.Column(db.Boolean, nullable=False, default=False)

    # Anthropometrics, filled during onboarding
    height_cm = db.Column(db.Float)
    weight_kg = db.Column(db.Float)
    age = db.Column(db.Integer)
    gender = db.Column(db.String(10))
    goal = db.Column(db.String(10), nullable=False, default="maintain")

    rda = db.Column(db.Integer)
    daily_calorie_target = db.Column(db.Integer)
    onboarding_completed = db.Column(db.Boolean, nullable=False, default=False)

    water_auto_calculate = db.Column(db.Boolean, nullable=False, default=True)
    water_glass_size_ml = db.Column(db.Integer, nullable=False, default=250)
    water_custom_target_ml = db.Column(db.Integer, nullable=False, default=2000)
    theme = db.Column(db.String(10), nullable=False, default="system")

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    favorite_foods = db.relationship("Food", secondary=user_favorite_foods, lazy="select")

    @property
    def favorite_food_ids(self):
        return sorted(f.id for f in self.favorite_foods)

    def water_settings(self):
        return {
            "auto_calculate": bool(self.water_auto_calculate),
            "glass_size_ml": self.water_glass_size_ml,
            "custom_target_ml": self.water_custom_target_ml,
        }

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "is_admin": bool(self.is_admin),
            "height_cm": self.height_cm,
            "weight_kg": self.weight_kg,
            "age": self.age,
            "gender": self.gender,
            "goal": self.goal,
            "rda": self.rda,
            "daily_calorie_target": self.daily_calorie_target,
            "onboarding_completed": bool(self.onboarding_completed),
            "favorite_foods": self.favorite_food_ids,
            "water_settings": self.water_settings(),
            "theme": self.theme,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<User {self.id}: {self.email}>"
