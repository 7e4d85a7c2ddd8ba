from .home_routes import home_bp
from .auth_routes import auth_bp
from .user_routes import user_bp
from .food_routes import food_bp
from .admin_routes import admin_bp
from .meal_log_routes import meal_log_bp
from .water_routes import water_bp
from .summary_routes import summary_bp
from .export_routes import export_bp
from .template_routes import template_bp


def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(user_bp)
    app.register_blueprint(food_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(meal_log_bp)
    app.register_blueprint(water_bp)
    app.register_blueprint(summary_bp)
    app.register_blueprint(export_bp)
    app.register_blueprint(template_bp)
