import pytest

from app import create_app
from config import Config
from models import db


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-flask-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "test-jwt-secret-0123456789abcdefghij"
    BCRYPT_LOG_ROUNDS = 4


def make_app(**overrides):
    config = type("OverriddenConfig", (TestConfig,), overrides)
    return create_app(config)


@pytest.fixture
def app():
    app = make_app()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def sign_up(client, name="Ana", email="ana@example.com", password="s3cret"):
    return client.post(
        "/sign-up", json={"name": name, "email": email, "password": password}
    )


def sign_in(client, email="ana@example.com", password="s3cret"):
    return client.post("/sign-in", json={"email": email, "password": password})


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


def register_and_login(client, email="ana@example.com", password="s3cret"):
    assert sign_up(client, email=email, password=password).status_code == 201
    resp = sign_in(client, email=email, password=password)
    assert resp.status_code == 200
    return resp.get_json()["response"]


@pytest.fixture
def token(client):
    return register_and_login(client)
