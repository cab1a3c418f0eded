from datetime import datetime
from extensions import db
from helpers.identifiers import new_object_id, SHARE_CODE_LENGTH


class ShareLink(db.Model):
    """Public read-only link to one user's whole content collection."""

    __tablename__ = "share_links"

    id = db.Column(db.String(24), primary_key=True, default=new_object_id)
    hash = db.Column(db.String(SHARE_CODE_LENGTH), unique=True, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    # One link per user; enable relies on this constraint under concurrency.
    user_id = db.Column(
        db.String(24),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )

    user = db.relationship("User")

    def __repr__(self):
        return f"<ShareLink {self.hash} for user {self.user_id}>"
