import os
import logging

config_logger = logging.getLogger(__name__)


class Config:
    """Base configuration class."""

    # Flask configuration
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-key-please-change")

    # Server configuration
    PORT = int(os.environ.get("PORT", 3000))
    FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:5173")

    # Database configuration
    # Construct default SQLite path relative to this config file's directory
    _DEFAULT_SQLITE_PATH = os.path.join(
        os.path.abspath(os.path.dirname(__file__)), "brainlink.db"
    )
    _DEFAULT_SQLALCHEMY_DATABASE_URI = "sqlite:///" + _DEFAULT_SQLITE_PATH

    database_url_env = os.environ.get("DATABASE_URL")
    if database_url_env:
        if database_url_env.startswith("postgres://"):
            # Handle Heroku-style 'postgres://' prefix
            SQLALCHEMY_DATABASE_URI = database_url_env.replace(
                "postgres://", "postgresql://", 1
            )
        else:
            SQLALCHEMY_DATABASE_URI = database_url_env
    else:
        SQLALCHEMY_DATABASE_URI = _DEFAULT_SQLALCHEMY_DATABASE_URI

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Bearer token configuration
    JWT_SECRET = os.environ.get("JWT_SECRET", os.environ.get("JWT_PASSWORD"))
    JWT_ALGORITHM = "HS256"

    # Password hashing work factor
    BCRYPT_ROUNDS = int(os.environ.get("BCRYPT_ROUNDS", 10))

    TESTING = os.environ.get("TESTING", "false").lower() == "true"


if Config.FRONTEND_URL:
    config_logger.info(
        f"Configuration: cross-origin requests allowed from {Config.FRONTEND_URL}"
    )
