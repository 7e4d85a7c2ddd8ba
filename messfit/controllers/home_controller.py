from flask import jsonify
from messfit.extensions import db


def home_index():
    return jsonify({
        "message": "MessFit API is running",
    })


def health_check():
    db_status = "healthy"
    try:
        db.session.execute(db.text("SELECT 1"))
    except Exception as e:
        db_status = f"unhealthy: {str(e)}"

    return jsonify({
        "status": "online",
        "database": db_status,
    })
