"""
Pydantic schemas for board messages.

``MessageCreate`` is the request body accepted by ``POST /api/messages``;
``Message`` is the stored record returned by both message endpoints.
Messages are immutable once created.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class MessageCreate(BaseModel):
    """Schema for posting a new message.

    Both fields must be present, non-null, non-empty strings.  The
    check is made on the raw value; surrounding whitespace is only
    stripped when the message is stored.
    """

    author: StrictStr = Field(..., description="Display name of the poster")
    content: StrictStr = Field(..., description="Message text")

    @field_validator("author", "content")
    @classmethod
    def require_value(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v


class Message(BaseModel):
    """Schema for reading a stored message."""

    model_config = ConfigDict(frozen=True)

    id: str
    author: str
    content: str
    timestamp: str = Field(..., description="Creation time, ISO-8601 in UTC")
