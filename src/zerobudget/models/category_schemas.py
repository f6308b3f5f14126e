"""Pydantic schemas for Category API and default category seeding."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from zerobudget.models.enums import CategoryType

HEX_COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"


class CategoryTemplate(BaseModel):
    """One entry of the default category catalog."""

    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    color: str = Field(..., pattern=HEX_COLOR_PATTERN)
    icon: str = Field(..., min_length=1, max_length=50)
    type: CategoryType
    is_default: bool = True

    model_config = ConfigDict(frozen=True)


class CategoryCreate(BaseModel):
    """Schema for creating a user category."""

    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    color: str = Field(..., pattern=HEX_COLOR_PATTERN)
    icon: str = Field(..., min_length=1, max_length=50)
    type: CategoryType
    parent_id: Optional[UUID] = None


class CategoryParentUpdate(BaseModel):
    """Move a category under another one (or to the top level with null)."""

    parent_id: Optional[UUID] = None


class CategoryRead(BaseModel):
    """Schema for reading a category."""

    id: UUID
    name: str
    description: Optional[str]
    color: str
    icon: str
    type: CategoryType
    parent_id: Optional[UUID]
    is_default: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CategorySummary(BaseModel):
    """Short category listing used by the seeding status check."""

    id: UUID
    name: str
    type: CategoryType
    is_default: bool = Field(..., alias="isDefault")

    model_config = ConfigDict(populate_by_name=True)


class SessionUser(BaseModel):
    """Identity of the caller as echoed back by the seeding endpoints."""

    id: UUID
    name: str


class SeedResult(BaseModel):
    """Outcome of one seeding pass for one user."""

    success: bool
    skipped: bool = False
    count: int = 0
    message: Optional[str] = None
    error: Optional[str] = None


class SeedResponse(BaseModel):
    """Response of POST /api/seed-categories."""

    success: bool
    message: Optional[str]
    skipped: bool
    user: SessionUser


class SeedStatusResponse(BaseModel):
    """Response of GET /api/seed-categories."""

    has_categories: bool = Field(..., alias="hasCategories")
    category_count: int = Field(..., alias="categoryCount")
    categories: list[CategorySummary]
    user: SessionUser

    model_config = ConfigDict(populate_by_name=True)
