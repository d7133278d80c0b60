"""Record identifiers — parse path text into a store UserId."""

from uuid import UUID

from calculator_service.core.domain_types import UserId
from calculator_service.core.errors import InvalidRecordIdError


def parse_user_id(raw_id: str) -> UserId:
    """Parse a UUID string or raise InvalidRecordIdError."""
    try:
        return UserId(UUID(raw_id))
    except (ValueError, AttributeError, TypeError):
        raise InvalidRecordIdError(raw_id)
