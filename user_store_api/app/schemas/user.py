"""
Pydantic models for user data.

A user is nothing more than an integer id and a name.  The name is
stored exactly as the client sent it: no type coercion, trimming or
length checks are applied, and an omitted name is kept as ``None``.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Payload for ``POST /users``.  Unknown fields are ignored."""

    name: Optional[Any] = Field(None, example="Mehmet")


class UserUpdate(BaseModel):
    """Payload for ``PUT /users/{id}``.

    ``name`` is not optional in the "partial update" sense: leaving it
    out overwrites the stored name with ``None``.
    """

    name: Optional[Any] = Field(None, example="Veli")


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    name: Optional[Any] = None

    model_config = {
        "from_attributes": True,
    }


class Message(BaseModel):
    """Plain message body used for error responses."""

    message: str
