import logging

from flask import Flask
from flask_migrate import Migrate

from messfit.extensions import db, cors
from messfit.routes import register_routes
from messfit.utils.http import register_error_handlers

migrate = Migrate()


def create_app(config_object: str = "config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    migrate.init_app(app, db)

    # Models must be imported before create_all / migrations see the metadata
    from messfit import models  # noqa: F401

    # CORS Configuration
    cors.init_app(app,
                  origins=app.config.get("CORS_ORIGINS", []),
                  supports_credentials=True,
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
                  expose_headers=["Content-Type", "Authorization", "Content-Disposition"])

    register_routes(app)
    register_error_handlers(app)

    return app
