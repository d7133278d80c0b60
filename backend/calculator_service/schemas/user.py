"""User Schemas — Pydantic models for the /api/users boundary.

Invariants:
    - UserPayload carries exactly name/email/age; unknown keys are ignored
    - No value rules beyond types: empty strings and negative ages pass through
    - JSON number/bool name or email is stored as its text ("123", "true"); objects and
      arrays still fail with 400 because the store column is text
    - Responses keep the wire shape existing clients read ({"r": ...}, {"message": ...})

Design Decisions:
    - All fields optional: a body missing a field stores null, like a full replace
    - field_validator(mode="before") for the coercion, keeps the model free of Any
"""

import json

from pydantic import BaseModel, field_validator


class UserPayload(BaseModel):
    """Create/replace body."""
    name: str | None = None
    email: str | None = None
    age: int | None = None

    @field_validator("name", "email", mode="before")
    @classmethod
    def scalar_to_text(cls, v):
        if isinstance(v, bool):
            return json.dumps(v)
        if isinstance(v, (int, float)):
            return str(v)
        return v


class UserRecord(BaseModel):
    """Stored user as returned by GET /api/users/{id}."""
    id: str
    name: str | None = None
    email: str | None = None
    age: int | None = None


class UserCreated(BaseModel):
    r: str


class UserMessage(BaseModel):
    message: str
