import logging

from messfit.extensions import db
from messfit.models.user import User
from messfit.schemas.user_schema import RegisterSchema
from messfit.utils.auth import create_token, check_password_hash, hash_password, role_for
from messfit.utils.http import ok, error, json_body, validate_schema

logger = logging.getLogger(__name__)


def _session_payload(user):
    role_name = role_for(user)
    return {
        "token": create_token(user.id, role_name),
        "user": {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "role": role_name,
            "onboarding_completed": bool(user.onboarding_completed),
        },
    }


def login_handler():
    data = json_body()
    email = (data.get("email") or "").strip().lower()
    password = data.get("password") or ""
    if not email or not password:
        return error("VALIDATION_ERROR", "email and password required", 400)

    user = User.query.filter_by(email=email).first()
    if not user or not check_password_hash(user.password, password):
        return error("INVALID_CREDENTIALS", "Email or password incorrect", 401)

    return ok(_session_payload(user))


def register_handler():
    body = json_body()
    if isinstance(body.get("email"), str):
        body["email"] = body["email"].strip().lower()
    data, errors = validate_schema(RegisterSchema, body)
    if errors:
        return error("VALIDATION_ERROR", "Invalid registration data", 400, details=errors)

    if User.query.filter_by(email=data["email"]).first():
        return error("EMAIL_IN_USE", "email already registered", 409)

    try:
        user = User(name=data["name"].strip(), email=data["email"], password=hash_password(data["password"]))
        db.session.add(user)
        db.session.commit()
        logger.info("Registered user %s", user.id)
        return ok(_session_payload(user), 201)
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)


def logout_handler():
    """
    Handle logout request.
    Tokens are stateless; the client discards its copy.
    """
    return ok({"message": "Logged out successfully"})
