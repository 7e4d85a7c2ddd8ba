from dotenv import load_dotenv
import os

load_dotenv()

_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///messfit.db")


def _engine_options(uri):
    if not uri.startswith("postgresql"):
        return {}

    # Pool settings for managed PostgreSQL to survive idle connection drops
    # (prevents SSL SYSCALL EOF errors)
    return {
        'pool_pre_ping': True,
        'pool_recycle': 300,
        'pool_size': 5,
        'max_overflow': 10,
        'pool_timeout': 30,
        'connect_args': {
            'sslmode': 'require',
            'connect_timeout': 10,
        }
    }


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = _DATABASE_URI
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options(_DATABASE_URI)

    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if o.strip()]
    TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", "12"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Bulk import: number of per-row error reasons returned to the admin
    IMPORT_ERROR_DETAIL_LIMIT = int(os.getenv("IMPORT_ERROR_DETAIL_LIMIT", "10"))

    ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@example.com")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "adminpass")


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    LOG_LEVEL = "WARNING"
