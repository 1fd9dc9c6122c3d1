import logging
from typing import Any, Dict, Optional

from pagecraft.extensions import db
from pagecraft.models.audit_log import AuditLog

log = logging.getLogger(__name__)


def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: str,
    page_id: Optional[str] = None,
    payload: Optional[Dict[str, Any]] = None,
    actor_id: Optional[str] = None,
) -> AuditLog:
    """Adds an audit entry to the current transaction; the caller commits."""
    entry = AuditLog(
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        page_id=page_id if page_id is not None else (entity_id if entity_type == "page" else None),
        payload=dict(payload or {}),
        actor_id=actor_id,
    )
    db.session.add(entry)

    log.debug("[audit] %s %s=%s", action, entity_type, entity_id)
    return entry
