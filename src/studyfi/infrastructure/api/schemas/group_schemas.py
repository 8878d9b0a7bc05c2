"""Pydantic schemas for Group operations."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class GroupRequest(BaseModel):
    """Schema for creating a group or replacing its name and description."""

    name: str = Field(..., min_length=1, max_length=100, description="Group name")
    description: str | None = Field(None, max_length=500, description="Group description")


class MemberSummary(BaseModel):
    """An account as listed on a group."""

    id: str
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class GroupResponse(BaseModel):
    """Schema for group response."""

    id: str = Field(..., description="Group ID")
    name: str
    description: str | None = None
    members: list[MemberSummary] = Field(default_factory=list, description="Accounts in the group")
    member_count: int = Field(0, description="Number of accounts in the group")
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
