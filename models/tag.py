from extensions import db
from helpers.identifiers import new_object_id

# Association between content items and tags.
content_tags = db.Table(
    "content_tags",
    db.Column(
        "content_id",
        db.String(24),
        db.ForeignKey("content.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    db.Column(
        "tag_id",
        db.String(24),
        db.ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Tag(db.Model):
    """A label that can be attached to content items.

    Nothing in the API creates tags yet; the table exists so content rows
    can carry them once tag management is added.
    """

    __tablename__ = "tags"

    id = db.Column(db.String(24), primary_key=True, default=new_object_id)
    title = db.Column(db.Text, unique=True, nullable=False)

    def __repr__(self):
        return f"<Tag {self.title}>"
