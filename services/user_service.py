import logging
from sqlalchemy.exc import IntegrityError
from models.user import User, DEFAULT_BCRYPT_ROUNDS
from services.results import StoreResult

logger = logging.getLogger(__name__)


class UserService:
    """Create and look up users through an explicit database session."""

    def __init__(self, session, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.session = session
        self.rounds = rounds

    def register(self, username: str, password: str) -> StoreResult:
        """
        Create a user with a bcrypt-hashed password.

        Returns:
            StoreResult.success(user), or StoreResult.duplicate() when the
            username is already taken.
        """
        user = User(username=username)
        user.set_password(password, rounds=self.rounds)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            logger.info(f"Signup rejected, username already exists: {username}")
            return StoreResult.duplicate()

        logger.info(f"User created with ID: {user.id} ({username})")
        return StoreResult.success(user)

    def find_by_username(self, username: str):
        return self.session.query(User).filter_by(username=username).first()

    def get(self, user_id: str):
        return self.session.get(User, user_id)
