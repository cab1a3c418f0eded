"""
API error types and the Flask handlers that turn them into JSON responses.
"""

import logging

from flask import jsonify
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class APIError(Exception):
    """An error that maps directly onto an HTTP response."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {"message": self.message}


class AuthenticationError(APIError):
    status_code = 401
    message = "Unauthorized"


class MissingCredentialError(AuthenticationError):
    message = "Authorization header is required"


class InvalidCredentialError(AuthenticationError):
    message = "Invalid or expired token"


class MalformedCredentialError(AuthenticationError):
    status_code = 403
    message = "Invalid token format"


class InvalidCredentialsError(APIError):
    """Unknown username or wrong password. Both read the same to the caller."""

    status_code = 403
    message = "Invalid credentials"


class BadRequestError(APIError):
    status_code = 400
    message = "Bad request"


class NotFoundError(APIError):
    status_code = 404
    message = "Not found"


class ConflictError(APIError):
    status_code = 409
    message = "Conflict"


def format_validation_errors(exc: ValidationError):
    """Flatten pydantic errors into JSON-safe field/message pairs."""
    errors = []
    for error in exc.errors(include_url=False):
        errors.append(
            {
                "field": ".".join(str(part) for part in error.get("loc", ())),
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type", "value_error"),
            }
        )
    return errors


def register_error_handlers(app):
    """Install JSON error handlers on the Flask app."""

    @app.errorhandler(APIError)
    def handle_api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        return (
            jsonify(
                {
                    "message": "Validation error",
                    "errors": format_validation_errors(error),
                }
            ),
            400,
        )

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({"message": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception(f"Unhandled error: {error}")
        return jsonify({"message": "Internal server error"}), 500
