from flask import current_app
from messfit import create_app
from messfit.extensions import db
from messfit.models.user import User
from messfit.utils.auth import hash_password


def create_admin(email=None, password=None, name="Admin User"):
    """Create the admin account, or promote an existing user with that email."""
    email = (email or current_app.config["ADMIN_EMAIL"]).strip().lower()
    password = password or current_app.config["ADMIN_PASSWORD"]

    admin_user = User.query.filter_by(email=email).first()
    if admin_user:
        created = False
        admin_user.is_admin = True
    else:
        created = True
        admin_user = User(name=name, email=email, password=hash_password(password), is_admin=True)
        db.session.add(admin_user)
    db.session.commit()
    return admin_user, created


if __name__ == "__main__":
    app = create_app()
    with app.app_context():
        db.create_all()
        user, created = create_admin()
        print("Created admin user" if created else "Admin user already exists, ensured admin flag")
