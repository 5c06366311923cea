import uuid
from typing import Any, Optional


def parse_uuid(value: Any) -> Optional[uuid.UUID]:
    """Return `value` as a UUID, or None if it is not one."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (ValueError, AttributeError, TypeError):
        return None
