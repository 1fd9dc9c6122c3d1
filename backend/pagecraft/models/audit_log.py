from sqlalchemy import event

from pagecraft.extensions import db
from .base import BaseModel


class AuditLog(BaseModel):
    """Append-only record of every applied page or section mutation."""

    __tablename__ = "audit_logs"

    __table_args__ = (
        db.Index("ix_audit_entity_history", "entity_type", "entity_id", "created_at"),
        db.Index("ix_audit_page_history", "page_id", "created_at"),
    )

    actor_id = db.Column(db.String(36), nullable=True, index=True)
    action = db.Column(db.String(50), nullable=False, index=True)

    entity_type = db.Column(db.String(20), nullable=False)  # page, section
    entity_id = db.Column(db.String(36), nullable=False)
    page_id = db.Column(db.String(36), nullable=True)

    # comment, explanation, template ids, warnings...
    payload = db.Column(db.JSON, nullable=False, default=dict)

    @classmethod
    def history_for(cls, entity_type, entity_id):
        return (
            cls.query
            .filter_by(entity_type=entity_type, entity_id=entity_id)
            .order_by(cls.created_at.asc(), cls.id.asc())
            .all()
        )


@event.listens_for(AuditLog, "before_update")
@event.listens_for(AuditLog, "before_delete")
def refuse_audit_mutation(mapper, connection, target):
    raise RuntimeError(f"Audit entry {target.id} is append-only")
