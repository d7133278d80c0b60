"""User ORM — the single persisted record kind.

Invariants:
    - id is a UUID primary key assigned on insert (never by the client)
    - name/email/age are stored as given; the service validates nothing beyond column types

Design Decisions:
    - Generic Uuid type: native UUID on PostgreSQL, CHAR(32) on SQLite test DBs
    - All value columns nullable: full-replace updates may clear a field
"""

import uuid

from sqlalchemy import Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from calculator_service.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    email: Mapped[str | None] = mapped_column(Text, nullable=True)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def to_record(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "email": self.email,
            "age": self.age,
        }
