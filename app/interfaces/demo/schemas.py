"""
Pydantic schemas for demo API request/response validation.

These schemas enforce input validation and define the API contract.
No business logic belongs here.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

FIELD2_MAX_LEN = 255

# Bounds of the signed 32-bit INT columns behind ``id`` and ``field1``.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

MAX_PAGE_SIZE = 1000


class DemoCreateRequest(BaseModel):
    """Request schema for creating a demo record.

    Attributes:
        field1: Integer attribute, must be unique.
        field2: Free text attribute (max 255 chars).
    """

    field1: int = Field(ge=INT_MIN, le=INT_MAX)
    field2: str = Field(default="", max_length=FIELD2_MAX_LEN)


class DemoUpdateRequest(BaseModel):
    """Request schema for a partial update. Omitted fields stay unchanged."""

    field1: Optional[int] = Field(default=None, ge=INT_MIN, le=INT_MAX)
    field2: Optional[str] = Field(default=None, max_length=FIELD2_MAX_LEN)


class DemoItem(BaseModel):
    """A single demo record in a response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    field1: int
    field2: str


class DemoCreatedResponse(BaseModel):
    """Data returned after a create."""

    id: int
