from flask import Blueprint, current_app, jsonify
import logging

from extensions import db
from helpers.errors import ConflictError, InvalidCredentialsError
from services.auth_service import CredentialIssuer
from services.results import Outcome
from services.user_service import UserService
from views.schemas import SigninRequest, SignupRequest, parse_body

# Set up logging
logger = logging.getLogger(__name__)

bp = Blueprint("auth", __name__, url_prefix="/api/v1")


def get_user_service():
    return UserService(db.session, rounds=current_app.config["BCRYPT_ROUNDS"])


@bp.route("/signup", methods=["POST"])
def signup():
    """Register a new user."""
    payload = parse_body(SignupRequest)

    try:
        result = get_user_service().register(payload.username, payload.password)
    except Exception as e:
        logger.exception(f"Signup error for username {payload.username}: {e}")
        db.session.rollback()
        return jsonify({"message": "Internal server error"}), 500

    if result.outcome is Outcome.DUPLICATE:
        raise ConflictError("Username already exists")

    return jsonify({"message": "User signed up successfully"})


@bp.route("/signin", methods=["POST"])
def signin():
    """Exchange a username and password for a bearer token."""
    payload = parse_body(SigninRequest)
    issuer = CredentialIssuer(
        get_user_service(),
        current_app.config["JWT_SECRET"],
        algorithm=current_app.config.get("JWT_ALGORITHM", "HS256"),
    )

    try:
        token = issuer.issue(payload.username, payload.password)
    except InvalidCredentialsError:
        raise
    except Exception as e:
        logger.exception(f"Signin error for username {payload.username}: {e}")
        return jsonify({"message": "Internal server error"}), 500

    return jsonify({"token": token})
