from flask import Blueprint, jsonify
import logging

from extensions import db
from helpers.auth import token_required
from helpers.errors import BadRequestError, InvalidCredentialError, NotFoundError
from helpers.identifiers import is_share_code
from services.results import Outcome
from services.share_service import ShareLinkService
from views.schemas import ShareRequest, parse_body

logger = logging.getLogger(__name__)

bp = Blueprint("brain", __name__, url_prefix="/api/v1/brain")


@bp.route("/share", methods=["POST"])
@token_required
def share(auth):
    """Turn public sharing of the user's collection on or off."""
    payload = parse_body(ShareRequest)
    service = ShareLinkService(db.session)

    try:
        if payload.share:
            result = service.enable(auth.user_id)
        else:
            service.disable(auth.user_id)
    except Exception as e:
        logger.exception(f"Error sharing/unsharing brain for user {auth.user_id}: {e}")
        db.session.rollback()
        return jsonify({"message": "Failed to process share request"}), 500

    if not payload.share:
        return jsonify({"message": "Removed link"})

    # The token is valid but names a user that no longer exists.
    if result.outcome is Outcome.NOT_FOUND:
        raise InvalidCredentialError()

    return jsonify({"hash": result.value})


@bp.route("/<share_link>", methods=["GET"])
def shared_brain(share_link):
    """Public, unauthenticated view of a shared collection."""
    if not is_share_code(share_link):
        raise BadRequestError("Invalid share link format")

    try:
        result = ShareLinkService(db.session).resolve(share_link)
        if result.ok:
            collection = result.value
            body = {
                "username": collection.username,
                "content": [item.to_dict() for item in collection.content],
            }
    except Exception as e:
        logger.exception(f"Error fetching shared brain {share_link}: {e}")
        return jsonify({"message": "Failed to fetch shared brain"}), 500

    if result.outcome is Outcome.NOT_FOUND:
        raise NotFoundError("Share link not found")

    return jsonify(body)
