import logging
from models.content import Content
from models.user import User
from services.results import StoreResult

logger = logging.getLogger(__name__)


class ContentService:
    """Ownership-scoped access to a user's saved content."""

    def __init__(self, session):
        self.session = session

    def create(self, owner_id: str, link: str, type: str, title: str) -> StoreResult:
        """
        Save a content item for ``owner_id`` with no tags.

        Returns:
            StoreResult.success(content), or StoreResult.not_found() when the
            owner no longer exists.
        """
        if self.session.get(User, owner_id) is None:
            logger.warning(f"Content create for unknown user ID: {owner_id}")
            return StoreResult.not_found()

        content = Content(link=link, type=type, title=title, user_id=owner_id)
        self.session.add(content)
        self.session.commit()
        logger.info(f"Content {content.id} ({type}) created for user ID: {owner_id}")
        return StoreResult.success(content)

    def list_for_owner(self, owner_id: str):
        return (
            self.session.query(Content)
            .filter(Content.user_id == owner_id)
            .order_by(Content.created_at, Content.id)
            .all()
        )

    def delete_owned(self, content_id: str, owner_id: str) -> StoreResult:
        """
        Delete one content item, but only if ``owner_id`` owns it.

        The owner is part of the delete filter itself, so there is no window
        between checking ownership and deleting. A missing item and someone
        else's item both come back as not found.
        """
        deleted = (
            self.session.query(Content)
            .filter(Content.id == content_id.lower(), Content.user_id == owner_id)
            .delete(synchronize_session=False)
        )
        self.session.commit()

        if deleted == 0:
            logger.info(
                f"Delete of content {content_id} by user ID {owner_id} matched nothing"
            )
            return StoreResult.not_found()

        logger.info(f"Content {content_id} deleted by user ID: {owner_id}")
        return StoreResult.success(deleted)
