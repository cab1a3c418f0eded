import os

# Set TESTING environment variable before any imports to prevent config issues
os.environ["TESTING"] = "true"

import jwt
import pytest

from app import create_app
from extensions import db as _db
from models import User

TEST_JWT_SECRET = "test-jwt-secret-0123456789abcdef0123456789"
TEST_PASSWORD = "secret1"


@pytest.fixture(scope="session")
def app():
    """
    Session-scoped test Flask application backed by in-memory SQLite.
    """
    flask_app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
            "JWT_SECRET": TEST_JWT_SECRET,
            "BCRYPT_ROUNDS": 4,
            "FRONTEND_URL": "http://localhost:5173",
        }
    )

    yield flask_app


@pytest.fixture()
def db(app):
    """
    Function-scoped test database with complete isolation.
    Each test gets its own fresh database state.
    """
    with app.app_context():
        _db.create_all()

        yield _db

        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def session(db):
    """Provides the database session for each test."""
    yield db.session


@pytest.fixture()
def client(app, db):
    """
    Function-scoped test client for making HTTP requests.
    """
    return app.test_client()


@pytest.fixture
def cli_runner(app, db):
    """
    Custom CLI runner for testing CLI commands.
    """
    return app.test_cli_runner()


@pytest.fixture
def make_user(session):
    """Factory fixture that stores a user with a hashed password."""

    def _make_user(username="alice", password=TEST_PASSWORD):
        user = User(username=username)
        user.set_password(password, rounds=4)
        session.add(user)
        session.commit()
        return user

    return _make_user


def make_token(user_id, secret=TEST_JWT_SECRET, **extra_claims):
    """Sign a bearer token the same way signin does."""
    return jwt.encode({"id": user_id, **extra_claims}, secret, algorithm="HS256")


@pytest.fixture
def auth_headers():
    """Factory fixture returning an Authorization header for a user."""

    def _auth_headers(user, bearer=True):
        token = make_token(user.id)
        return {"Authorization": f"Bearer {token}" if bearer else token}

    return _auth_headers


@pytest.fixture
def sign_token():
    """Expose make_token to tests that need hand-built tokens."""
    return make_token
