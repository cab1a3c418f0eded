from flask import Blueprint, jsonify
import logging

from extensions import db
from helpers.auth import token_required
from helpers.errors import BadRequestError, InvalidCredentialError, NotFoundError
from helpers.identifiers import is_object_id
from services.content_service import ContentService
from services.results import Outcome
from views.schemas import ContentRequest, DeleteContentRequest, parse_body

logger = logging.getLogger(__name__)  # Initialize the logger for this module

# Create a blueprint for the content API
bp = Blueprint("api", __name__, url_prefix="/api/v1")


@bp.route("/content", methods=["POST"])
@token_required
def add_content(auth):
    """Save a link for the authenticated user."""
    payload = parse_body(ContentRequest)

    try:
        result = ContentService(db.session).create(
            owner_id=auth.user_id,
            link=payload.link,
            type=payload.type.value,
            title=payload.title,
        )
    except Exception as e:
        logger.exception(f"Error adding content for user ID {auth.user_id}: {e}")
        db.session.rollback()
        return jsonify({"message": "Failed to add content"}), 500

    if result.outcome is Outcome.NOT_FOUND:
        # The token is validly signed but its user is gone.
        raise InvalidCredentialError()

    return jsonify({"message": "Content added successfully"})


@bp.route("/content", methods=["GET"])
@token_required
def list_content(auth):
    """List every content item owned by the authenticated user."""
    try:
        items = ContentService(db.session).list_for_owner(auth.user_id)
        content = [item.to_dict(include_owner=True) for item in items]
    except Exception as e:
        logger.exception(f"Error fetching content for user ID {auth.user_id}: {e}")
        return jsonify({"message": "Failed to fetch content"}), 500

    return jsonify({"content": content})


def _delete_owned_content(auth, content_id):
    if not is_object_id(content_id):
        raise BadRequestError("Invalid content ID format")

    try:
        result = ContentService(db.session).delete_owned(content_id, auth.user_id)
    except Exception as e:
        logger.exception(f"Delete error for content {content_id}: {e}")
        db.session.rollback()
        return jsonify({"message": "Failed to delete content"}), 500

    if result.outcome is Outcome.NOT_FOUND:
        raise NotFoundError("Content not found or not authorized to delete")

    return jsonify({"message": "Content deleted successfully"})


@bp.route("/content/<content_id>", methods=["DELETE"])
@token_required
def delete_content(auth, content_id):
    """Delete a content item identified in the path."""
    return _delete_owned_content(auth, content_id)


@bp.route("/content", methods=["DELETE"])
@token_required
def delete_content_from_body(auth):
    """Delete a content item identified by ``contentId`` in the body."""
    payload = parse_body(DeleteContentRequest)
    return _delete_owned_content(auth, payload.content_id)
