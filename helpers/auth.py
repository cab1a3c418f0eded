"""
Bearer token verification for protected API routes.

Accepts ``Authorization: Bearer <token>`` or the raw token as the header
value. A verified token yields an immutable ``AuthContext`` which the
``token_required`` decorator hands to the view as its first argument.
"""

import json
import logging
from dataclasses import dataclass, field
from functools import wraps
from typing import Any, Mapping, Optional

import jwt
from flask import current_app, request

from helpers.errors import (
    InvalidCredentialError,
    MalformedCredentialError,
    MissingCredentialError,
)

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "
DEFAULT_ALGORITHMS = ("HS256",)


@dataclass(frozen=True)
class AuthContext:
    """Identity bound to the current request."""

    user_id: str
    claims: Mapping[str, Any] = field(default_factory=dict)


def extract_token(header: Optional[str]) -> str:
    """Return the token from an Authorization header value."""
    if not header:
        raise MissingCredentialError()
    if header.startswith(BEARER_PREFIX):
        return header[len(BEARER_PREFIX) :]
    return header


class IdentityVerifier:
    """Verifies HS256 bearer tokens signed with the shared secret."""

    def __init__(self, secret: str, algorithms=DEFAULT_ALGORITHMS):
        self._secret = secret
        self._algorithms = list(algorithms)
        self._jws = jwt.PyJWS()

    def verify(self, header: Optional[str]) -> AuthContext:
        """
        Verify the Authorization header and return the bound identity.

        Raises:
            MissingCredentialError: no header was sent (401).
            InvalidCredentialError: bad signature, garbage or expired token (401).
            MalformedCredentialError: signed payload is not an identity claim (403).
        """
        token = extract_token(header)

        # Signature first, so nothing about an unsigned payload is trusted.
        try:
            raw_payload = self._jws.decode(
                token, self._secret, algorithms=self._algorithms
            )
        except jwt.InvalidTokenError as e:
            logger.warning(f"Bearer token rejected: {type(e).__name__}: {e}")
            raise InvalidCredentialError()

        try:
            payload = json.loads(raw_payload)
        except ValueError:
            payload = None
        if not isinstance(payload, dict):
            logger.warning("Bearer token payload is not a claim object")
            raise MalformedCredentialError()

        # Registered claims such as exp are checked by the full decode.
        try:
            claims = jwt.decode(token, self._secret, algorithms=self._algorithms)
        except jwt.InvalidTokenError as e:
            logger.warning(f"Bearer token claims rejected: {type(e).__name__}: {e}")
            raise InvalidCredentialError()

        user_id = claims.get("id")
        if not isinstance(user_id, str) or not user_id:
            logger.warning("Bearer token has no usable id claim")
            raise MalformedCredentialError()

        return AuthContext(user_id=user_id, claims=dict(claims))


def get_identity_verifier() -> IdentityVerifier:
    config = current_app.config
    return IdentityVerifier(
        config["JWT_SECRET"], algorithms=(config.get("JWT_ALGORITHM", "HS256"),)
    )


def token_required(view):
    """Require a valid bearer token and pass its AuthContext to the view."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        auth = get_identity_verifier().verify(request.headers.get("Authorization"))
        return view(auth, *args, **kwargs)

    return wrapper
