"""
Tests for configuration management.

This module tests the Config class and its handling of environment variables,
database configuration and validation logic.
"""

import os
from importlib import reload
from unittest.mock import patch

import pytest

import config


def reload_config_with_env(env_vars=None):
    """Helper to reload config with specific environment variables."""
    env_to_use = dict(env_vars or {})
    # Always include TESTING=true unless a test wants production validation
    env_to_use.setdefault("TESTING", "true")

    with patch.dict(os.environ, env_to_use, clear=True):
        reload(config)
        return config


@pytest.fixture(autouse=True)
def restore_config():
    yield
    with patch.dict(os.environ, {"TESTING": "true"}):
        reload(config)


class TestConfigDefaults:
    def test_defaults(self):
        cfg = reload_config_with_env().Config

        assert cfg.PORT == 3000
        assert cfg.FRONTEND_URL == "http://localhost:5173"
        assert cfg.BCRYPT_ROUNDS == 10
        assert cfg.JWT_ALGORITHM == "HS256"
        assert cfg.SQLALCHEMY_DATABASE_URI.startswith("sqlite:///")
        assert cfg.SQLALCHEMY_DATABASE_URI.endswith("brainlink.db")
        assert cfg.SQLALCHEMY_TRACK_MODIFICATIONS is False

    def test_environment_overrides(self):
        cfg = reload_config_with_env(
            {
                "PORT": "8080",
                "FRONTEND_URL": "https://brainlink.example",
                "BCRYPT_ROUNDS": "12",
                "JWT_SECRET": "from-env",
            }
        ).Config

        assert cfg.PORT == 8080
        assert cfg.FRONTEND_URL == "https://brainlink.example"
        assert cfg.BCRYPT_ROUNDS == 12
        assert cfg.JWT_SECRET == "from-env"


class TestDatabaseConfig:
    def test_heroku_postgres_prefix_is_rewritten(self):
        cfg = reload_config_with_env(
            {"DATABASE_URL": "postgres://user:pw@db.example:5432/brain"}
        ).Config

        assert cfg.SQLALCHEMY_DATABASE_URI == (
            "postgresql://user:pw@db.example:5432/brain"
        )

    def test_other_urls_pass_through(self):
        cfg = reload_config_with_env({"DATABASE_URL": "sqlite:///tmp/test.db"}).Config

        assert cfg.SQLALCHEMY_DATABASE_URI == "sqlite:///tmp/test.db"


class TestJwtSecret:
    def test_legacy_jwt_password_variable(self):
        cfg = reload_config_with_env({"JWT_PASSWORD": "legacy-secret"}).Config

        assert cfg.JWT_SECRET == "legacy-secret"

    def test_jwt_secret_takes_precedence(self):
        cfg = reload_config_with_env(
            {"JWT_SECRET": "primary", "JWT_PASSWORD": "legacy"}
        ).Config

        assert cfg.JWT_SECRET == "primary"

    def test_missing_secret_loads_as_none(self):
        # create_app refuses to start without it.
        cfg = reload_config_with_env({"TESTING": "false"}).Config

        assert cfg.JWT_SECRET is None

    def test_secret_present_outside_tests(self):
        cfg = reload_config_with_env(
            {"TESTING": "false", "JWT_SECRET": "production-secret"}
        ).Config

        assert cfg.TESTING is False
        assert cfg.JWT_SECRET == "production-secret"


class TestCreateAppConfig:
    def test_create_app_requires_secret(self):
        from app import create_app

        with pytest.raises(ValueError, match="JWT_SECRET is required"):
            create_app({"JWT_SECRET": None, "SQLALCHEMY_DATABASE_URI": "sqlite://"})
