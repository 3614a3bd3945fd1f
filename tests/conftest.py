"""Shared fixtures: an app on an in-memory SQLite database and a test client."""

import pytest

from core.config import Config
from core.extensions import db
from main import create_app
from models.userModel import User


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "test-secret-key-with-enough-length-for-hs256"
    BCRYPT_LOG_ROUNDS = 4
    LOG_LEVEL = "DEBUG"


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register(client):
    """Register an account through the API and return the response."""
    def _register(email, password, **fields):
        payload = {"email": email, "password": password, **fields}
        return client.post("/api/auth/register", json=payload)
    return _register


@pytest.fixture
def login(client):
    def _login(email, password):
        return client.post("/api/auth/login", json={"email": email, "password": password})
    return _login


@pytest.fixture
def get_user(app):
    """Load a fresh copy of the account with the given email, or None."""
    def _get_user(email):
        with app.app_context():
            user = User.query.filter_by(email=email).first()
            if user is None:
                return None
            return user.to_dict()
    return _get_user


def bearer(token):
    return {"Authorization": f"Bearer {token}"}
