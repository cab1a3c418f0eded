import logging
from functools import lru_cache
from typing import Optional

import bcrypt
import jwt
from helpers.errors import InvalidCredentialsError
from models.user import DEFAULT_BCRYPT_ROUNDS, password_bytes

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def dummy_password_hash(rounds: int = DEFAULT_BCRYPT_ROUNDS) -> bytes:
    """Hash checked for unknown usernames, at the same cost as real hashes."""
    return bcrypt.hashpw(b"brainlink-dummy-password", bcrypt.gensalt(rounds=rounds))


class CredentialIssuer:
    """Exchanges a username and password for a signed bearer token."""

    def __init__(
        self,
        users,
        secret: str,
        algorithm: str = "HS256",
        rounds: Optional[int] = None,
    ):
        self.users = users
        self.secret = secret
        self.algorithm = algorithm
        if rounds is None:
            rounds = getattr(users, "rounds", DEFAULT_BCRYPT_ROUNDS)
        self.rounds = rounds

    def issue(self, username: str, password: str) -> str:
        """
        Verify the credentials and return a token carrying ``{"id": user.id}``.

        The token has no expiry; it stays valid until the secret changes.

        Raises:
            InvalidCredentialsError: unknown username or wrong password.
        """
        user = self.users.find_by_username(username)
        if user is None:
            # Both failure paths cost one bcrypt verify.
            bcrypt.checkpw(password_bytes(password), dummy_password_hash(self.rounds))
            logger.info(f"Signin failed for username: {username}")
            raise InvalidCredentialsError()

        if not user.check_password(password):
            logger.info(f"Signin failed for username: {username}")
            raise InvalidCredentialsError()

        token = jwt.encode({"id": user.id}, self.secret, algorithm=self.algorithm)
        logger.info(f"Issued bearer token for user ID: {user.id}")
        return token
