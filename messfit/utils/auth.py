import datetime as dt
from functools import wraps
from flask import request, jsonify, current_app
import jwt
from werkzeug.security import check_password_hash, generate_password_hash

ADMIN_ROLE = "ADMIN"
USER_ROLE = "USER"


def hash_password(plain: str) -> str:
    return generate_password_hash(plain)


def role_for(user) -> str:
    return ADMIN_ROLE if user.is_admin else USER_ROLE


def create_token(user_id: int, role: str) -> str:
    now = dt.datetime.now(dt.timezone.utc)
    ttl = current_app.config.get("TOKEN_TTL_HOURS", 12)
    payload = {
        "sub": str(user_id),
        "role": role,
        "iat": int(now.timestamp()),
        "exp": int((now + dt.timedelta(hours=ttl)).timestamp()),
    }
    return jwt.encode(payload, current_app.config["SECRET_KEY"], algorithm="HS256")


def decode_token(token: str):
    return jwt.decode(token, current_app.config["SECRET_KEY"], algorithms=["HS256"])


def _authenticate():
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith("Bearer "):
        return jsonify({"error": {"code": "UNAUTHORIZED", "message": "Missing Bearer token"}}), 401
    token = auth_header.split(" ", 1)[1]
    try:
        payload = decode_token(token)
        request.user_id = int(payload["sub"])  # type: ignore
        request.user_role = payload.get("role")  # type: ignore
    except (jwt.PyJWTError, KeyError, ValueError):
        return jsonify({"error": {"code": "UNAUTHORIZED", "message": "Invalid token"}}), 401
    return None


def require_auth(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        failure = _authenticate()
        if failure:
            return failure
        return f(*args, **kwargs)
    return wrapper


def require_admin(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        failure = _authenticate()
        if failure:
            return failure
        if request.user_role != ADMIN_ROLE:  # type: ignore
            return jsonify({"error": {"code": "FORBIDDEN", "message": "Admin access required"}}), 403
        return f(*args, **kwargs)
    return wrapper


__all__ = ["hash_password", "create_token", "require_auth", "require_admin", "check_password_hash", "role_for"]
