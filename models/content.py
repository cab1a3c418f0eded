"""
Content model for saved links (videos, social posts, blog articles, AI chats).
"""

import enum
from datetime import datetime, timezone
from extensions import db
from helpers.identifiers import new_object_id
from models.tag import content_tags


class ContentType(str, enum.Enum):
    """Kinds of content a user can save."""

    YOUTUBE = "youtube"  # video
    TWITTER = "twitter"  # social post
    BLOG = "blog"  # article
    AICHAT = "aichat"  # chat transcript


class Content(db.Model):
    __tablename__ = "content"

    id = db.Column(db.String(24), primary_key=True, default=new_object_id)
    link = db.Column(db.Text, nullable=False)
    type = db.Column(db.String(20), nullable=False)
    title = db.Column(db.String(200), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    user_id = db.Column(
        db.String(24),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user = db.relationship(
        "User", backref=db.backref("content", lazy="dynamic", cascade="all")
    )
    tags = db.relationship("Tag", secondary=content_tags, lazy="selectin")

    def to_dict(self, include_owner=False):
        """Serialize for the API. include_owner expands userId with the username."""
        created_at_iso = None
        if self.created_at:
            created_at_iso = self.created_at.replace(tzinfo=timezone.utc).isoformat()

        return {
            "id": self.id,
            "link": self.link,
            "type": self.type,
            "title": self.title,
            "userId": (
                self.user.to_dict() if include_owner and self.user else self.user_id
            ),
            "tags": [tag.id for tag in self.tags],
            "createdAt": created_at_iso,
        }

    def __repr__(self):
        return f"<Content {self.id}: {self.type} {self.link}>"
