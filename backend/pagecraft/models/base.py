import uuid
from datetime import datetime, timezone

from pagecraft.extensions import db


def utc_now():
    """Evaluated per row; updated_at doubles as the optimistic-lock version."""
    return datetime.now(timezone.utc)


def new_id():
    return str(uuid.uuid4())


class BaseModel(db.Model):
    __abstract__ = True

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utc_now, index=True)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    def __init__(self, **kwargs):
        # explicit keyword constructor so type checkers accept column kwargs
        super().__init__(**kwargs)
