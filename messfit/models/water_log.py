from datetime import datetime
from messfit.extensions import db


class WaterLog(db.Model):
    __tablename__ = "water_logs"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    date = db.Column(db.String(10), nullable=False)
    amount_ml = db.Column(db.Integer, nullable=True)
    glasses = db.Column(db.Integer, nullable=True)  # legacy records, 250 ml each
    timestamp = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        db.UniqueConstraint("user_id", "date", name="uq_water_log_user_date"),
    )

    def to_dict(self):
        from messfit.services.nutrition_service import water_amount_ml

        return {
            "id": self.id,
            "user_id": self.user_id,
            "date": self.date,
            "amount_ml": water_amount_ml(self),
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }
