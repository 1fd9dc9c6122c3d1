from typing import Any, Dict


def normalize_history_entry(entry) -> Dict[str, Any]:
    """One audit row as a history item; payload shape depends on the action."""
    return {
        "id": entry.id,
        "action": entry.action,
        "actor_id": entry.actor_id,
        "entity_type": entry.entity_type,
        "entity_id": entry.entity_id,
        "page_id": entry.page_id,
        "details": dict(entry.payload or {}),
        "at": entry.created_at.isoformat() if entry.created_at else None,
    }
