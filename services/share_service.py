"""
Share link management: publish, resolve and revoke a read-only view of a
user's whole content collection.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from sqlalchemy.exc import IntegrityError

from helpers.identifiers import random_code
from models.content import Content
from models.share_link import ShareLink
from models.user import User
from services.results import StoreResult

logger = logging.getLogger(__name__)

MAX_CODE_ATTEMPTS = 5


class ShareCodeExhaustedError(RuntimeError):
    """Every generated share code collided with an existing one."""


@dataclass(frozen=True)
class SharedCollection:
    username: str
    content: List[Content] = field(default_factory=list)


class ShareLinkService:
    def __init__(self, session, code_factory=random_code):
        self.session = session
        self.code_factory = code_factory

    def get_for_user(self, user_id: str):
        return self.session.query(ShareLink).filter_by(user_id=user_id).first()

    def enable(self, user_id: str) -> StoreResult:
        """
        Return the user's share code, creating one if they have none.

        Calling this again returns the same code. The unique constraint on
        ``share_links.user_id`` makes the insert an insert-if-absent: if a
        concurrent request created the link first, the insert fails and that
        request's code is returned instead.

        Returns:
            StoreResult.success(code), or StoreResult.not_found() when the
            user does not exist.
        """
        if self.session.get(User, user_id) is None:
            logger.info(f"Share enable for unknown user ID: {user_id}")
            return StoreResult.not_found()

        existing = self.get_for_user(user_id)
        if existing is not None:
            return StoreResult.success(existing.hash)

        for attempt in range(1, MAX_CODE_ATTEMPTS + 1):
            code = self.code_factory()
            self.session.add(ShareLink(hash=code, user_id=user_id))
            try:
                self.session.commit()
            except IntegrityError:
                self.session.rollback()
                existing = self.get_for_user(user_id)
                if existing is not None:
                    logger.info(
                        f"Share link for user ID {user_id} was created concurrently"
                    )
                    return StoreResult.success(existing.hash)
                logger.warning(
                    f"Share code collision on attempt {attempt} for user ID {user_id}"
                )
                continue

            logger.info(f"Share link enabled for user ID: {user_id}")
            return StoreResult.success(code)

        raise ShareCodeExhaustedError(
            f"Could not allocate a unique share code after {MAX_CODE_ATTEMPTS} attempts"
        )

    def disable(self, user_id: str) -> int:
        """Remove the user's share link(s). Succeeds when there is none."""
        deleted = (
            self.session.query(ShareLink)
            .filter(ShareLink.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        logger.info(f"Share link disabled for user ID {user_id} ({deleted} removed)")
        return deleted

    def resolve(self, code: str) -> StoreResult:
        """
        Look up the collection published under ``code``.

        Returns:
            StoreResult.success(SharedCollection), or StoreResult.not_found()
            when the code is unknown or its owner is gone.
        """
        link = self.session.query(ShareLink).filter_by(hash=code).first()
        if link is None:
            return StoreResult.not_found()

        user = self.session.get(User, link.user_id)
        if user is None:
            return StoreResult.not_found()

        content = (
            self.session.query(Content)
            .filter(Content.user_id == link.user_id)
            .order_by(Content.created_at, Content.id)
            .all()
        )
        return StoreResult.success(SharedCollection(user.username, content))
