import logging
import sys

# Configure logging to output to STDOUT with a more detailed format
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

from flask import Flask

from extensions import db, migrate, cors
from cli import init_db, create_user
from config import Config
from helpers.errors import register_error_handlers

# Import models so their tables are registered with SQLAlchemy metadata
import models  # noqa: F401

# Import blueprints from views package
from views.main import bp as main_bp
from views.auth import bp as auth_bp
from views.api import bp as api_bp
from views.brain import bp as brain_bp


def create_app(test_config=None):
    """Create and configure the Flask application."""
    app = Flask(__name__)

    # Load configuration from config.py
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    # Log the database being used based on the loaded configuration.
    db_uri = app.config.get("SQLALCHEMY_DATABASE_URI", "")
    if not db_uri:
        app.logger.warning("SQLALCHEMY_DATABASE_URI is not configured.")
    elif "postgres" in db_uri:  # Covers postgresql and postgres
        # Avoid logging sensitive parts of the URI if present
        uri_to_log = db_uri.split("@")[-1] if "@" in db_uri else db_uri
        app.logger.info(f"Using PostgreSQL database: {uri_to_log}")
    elif "sqlite" in db_uri:
        app.logger.info(f"Using SQLite database: {db_uri}")
    else:
        # For other database types, log the scheme
        uri_scheme = db_uri.split(":")[0] if ":" in db_uri else "Unknown"
        app.logger.info(f"Using {uri_scheme} database.")

    if not app.config.get("JWT_SECRET"):
        raise ValueError("JWT_SECRET is required to sign bearer tokens")

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(
        app,
        resources={r"/*": {"origins": app.config["FRONTEND_URL"]}},
        supports_credentials=True,
    )
    app.logger.info(f"CORS enabled for origin: {app.config['FRONTEND_URL']}")

    register_error_handlers(app)

    # Register blueprints
    app.register_blueprint(main_bp)  # Health check
    app.register_blueprint(auth_bp)  # Signup and signin
    app.register_blueprint(api_bp)  # Content routes
    app.register_blueprint(brain_bp)  # Share routes

    # Register CLI commands
    app.cli.add_command(init_db)
    app.cli.add_command(create_user)

    return app


if __name__ == "__main__":
    app = create_app()
    with app.app_context():
        db.create_all()
    app.run(host="0.0.0.0", port=app.config["PORT"])
