"""
Pytest fixtures for MessFit tests.
"""
import pytest
from werkzeug.security import generate_password_hash

from messfit import create_app
from messfit.extensions import db
from messfit.models.food import Food
from messfit.models.user import User


@pytest.fixture()
def app():
    app = create_app("config.TestConfig")
    with app.app_context():
        db.create_all()

        db.session.add(User(name="Admin", email="admin@example.com", password=generate_password_hash("secret"), is_admin=True))
        db.session.add(User(name="User Demo", email="user@example.com", password=generate_password_hash("secret")))

        def add_food(name, cal, p, c, f, fiber=0, sugar=None, unit="piece", grams=100):
            db.session.add(Food(
                name=name, calories_per_portion=cal, protein_g=p, carbs_g=c, fat_g=f,
                fiber_g=fiber, sugar_g=sugar, unit=unit, grams_per_unit=grams,
            ))

        add_food("Oats", 150, 5, 27, 3, fiber=4, sugar=1, unit="bowl", grams=40)
        add_food("Boiled Egg", 78, 6, 0.6, 5)
        add_food("Apple", 95, 0.5, 25, 0.3, fiber=4, sugar=19)
        db.session.commit()

        yield app

        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def login(client, email, password="secret"):
    r = client.post("/api/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.data
    return {"Authorization": f"Bearer {r.get_json()['token']}"}


@pytest.fixture()
def user_headers(client):
    return login(client, "user@example.com")


@pytest.fixture()
def admin_headers(client):
    return login(client, "admin@example.com")


def food_id(name):
    return Food.query.filter_by(name=name).first().id
