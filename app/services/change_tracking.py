from enum import Enum
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel

from app.models.schemas import ActivityAction


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def current_value(record: BaseModel, field: str) -> Any:
    if field == "assignee_id":
        assignee = getattr(record, "assignee", None)
        return assignee.id if assignee else None
    return _plain(getattr(record, field, None))


def diff(record: BaseModel, updates: Dict[str, Any]) -> Tuple[List[str], List[str]]:
    """Compare requested updates with a record.

    Returns human-readable change lines (``field: "old" → "new"``) and the names
    of the fields whose value actually changes.
    """
    changes: List[str] = []
    changed_fields: List[str] = []
    for field, new in updates.items():
        old, new = current_value(record, field), _plain(new)
        if old != new:
            changes.append(f'{field}: "{old}" → "{new}"')
            changed_fields.append(field)
    return changes, changed_fields


def update_action(changed_fields: List[str], default: ActivityAction) -> ActivityAction:
    if changed_fields == ["status"]:
        return ActivityAction.STATUS_CHANGED
    if changed_fields == ["assignee_id"]:
        return ActivityAction.ASSIGNED_TASK
    return default
