"""
User model for authentication.
"""

import bcrypt
from extensions import db
from helpers.identifiers import new_object_id

# bcrypt only reads the first 72 bytes of a password.
BCRYPT_MAX_PASSWORD_BYTES = 72
DEFAULT_BCRYPT_ROUNDS = 10


def password_bytes(password):
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.String(24), primary_key=True, default=new_object_id)
    username = db.Column(db.String(50), unique=True, nullable=False)
    password_hash = db.Column(db.Text, nullable=False)

    def set_password(self, password, rounds=DEFAULT_BCRYPT_ROUNDS):
        """Hash password with bcrypt using the given work factor."""
        salt = bcrypt.gensalt(rounds=rounds)
        self.password_hash = bcrypt.hashpw(password_bytes(password), salt).decode(
            "utf-8"
        )

    def check_password(self, password):
        """Check if provided password matches the hash."""
        if not self.password_hash:
            return False
        return bcrypt.checkpw(
            password_bytes(password), self.password_hash.encode("utf-8")
        )

    def to_dict(self):
        return {"id": self.id, "username": self.username}

    def __repr__(self):
        return f"<User {self.username}>"
