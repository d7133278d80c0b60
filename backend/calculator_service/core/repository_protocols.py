"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Store access goes through the UserRepository Protocol
    - Counts mirror the store's own modified/deleted counts (0 or 1)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO
"""

from typing import Protocol

from calculator_service.core.domain_types import UserId


class UserRepository(Protocol):
    """Contract for user record persistence — implemented by shell."""
    async def insert(self, record: dict) -> UserId: ...
    async def find_by_id(self, user_id: UserId) -> dict | None: ...
    async def update_by_id(self, user_id: UserId, fields: dict) -> int: ...
    async def delete_by_id(self, user_id: UserId) -> int: ...
