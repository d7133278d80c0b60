"""User Routes — create/read/update/delete against the store.

Invariants:
    - Routes only translate counts/None into ResourceNotFoundError; no try/except
    - Malformed ids are rejected before the store is called (400)
    - Store faults surface as StoreError → 500 via the global handler

Design Decisions:
    - Repository injected with Depends(get_user_repository): tests override get_db only
"""

import logging

from fastapi import APIRouter, Depends

from calculator_service.core.errors import ResourceNotFoundError
from calculator_service.core.record_ids import parse_user_id
from calculator_service.core.repository_protocols import UserRepository
from calculator_service.infrastructure.user_store import get_user_repository
from calculator_service.schemas.user import (
    UserCreated, UserMessage, UserPayload, UserRecord,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserCreated)
async def create_user(
    body: UserPayload,
    repo: UserRepository = Depends(get_user_repository),
):
    user_id = await repo.insert(body.model_dump())
    logger.info("User created", extra={"user_id": str(user_id)})
    return UserCreated(r=f"User inserted with id: {user_id}")


@router.get("/{user_id}", response_model=UserRecord)
async def get_user(
    user_id: str, repo: UserRepository = Depends(get_user_repository),
):
    record = await repo.find_by_id(parse_user_id(user_id))
    if record is None:
        raise ResourceNotFoundError("User", user_id)
    return record


@router.put("/{user_id}", response_model=UserMessage)
async def update_user(
    user_id: str,
    body: UserPayload,
    repo: UserRepository = Depends(get_user_repository),
):
    # 0 also when the values are unchanged; reported as not found
    modified = await repo.update_by_id(parse_user_id(user_id), body.model_dump())
    if modified == 0:
        raise ResourceNotFoundError("User", user_id)
    return UserMessage(message="User updated successfully")


@router.delete("/{user_id}", response_model=UserMessage)
async def delete_user(
    user_id: str, repo: UserRepository = Depends(get_user_repository),
):
    deleted = await repo.delete_by_id(parse_user_id(user_id))
    if deleted == 0:
        raise ResourceNotFoundError("User", user_id)
    return UserMessage(message="User deleted successfully")
