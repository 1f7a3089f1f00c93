"""
Payload validation and ownership checks.

These helpers run before any write.  They either return normally or
raise, so an operation that passes all of them can write without
leaving partial state behind.
"""

import logging
from typing import Any, Mapping, Optional

from ..core.errors import UnauthorizedError, ValidationError
from ..core.identity import Principal

logger = logging.getLogger(__name__)


def require_text(field: str, value: Optional[str]) -> str:
    """Reject missing, empty or whitespace-only text fields."""
    if value is None or not value.strip():
        raise ValidationError(f"Field '{field}' must not be empty")
    return value


def require_positive(field: str, value: Optional[int]) -> int:
    if value is None or value <= 0:
        raise ValidationError(f"Field '{field}' must be a positive integer")
    return value


def validate_changes(changes: Mapping[str, Any], positive_fields: frozenset = frozenset()) -> None:
    """Validate only the fields present in a partial update.

    Text fields must be non-empty; names listed in ``positive_fields``
    must be positive integers.
    """
    for field, value in changes.items():
        if field in positive_fields:
            require_positive(field, value)
        else:
            require_text(field, value)


def authorize_owner(owner: Principal, caller: Principal, action: str) -> None:
    """Allow the action only when ``caller`` is the stored owner."""
    if owner != caller:
        logger.warning("Principal %s refused: not authorized to %s", caller, action)
        raise UnauthorizedError(f"You are not authorized to {action}.")
