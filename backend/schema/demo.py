"""
Schemas used by the demo endpoints.
"""

from typing import Optional

from pydantic import Field, field_validator

from core.enums import GenderEnum, StatusEnum
from .base import BaseSchema, PageQuery


class UserForm(BaseSchema):
    """Request body for creating a demo user."""
    name: str = Field(..., description="Display name")
    age: int = Field(..., description="Age in years")
    gender: int = Field(GenderEnum.MALE.value, description="Gender value")

    @field_validator('name')
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('name required')
        return v.strip()

    @field_validator('age')
    def validate_age(cls, v):
        if v <= 0:
            raise ValueError('age must be positive')
        return v

    @field_validator('gender')
    def validate_gender(cls, v):
        if GenderEnum.get_label_by_value(v) is None:
            raise ValueError('gender is invalid')
        return v


class UserView(BaseSchema):
    """User as returned to clients."""
    id: int
    name: str
    age: int
    gender_label: Optional[str] = None


class UserQuery(PageQuery):
    """Paged user listing filtered by status."""
    status: int = Field(StatusEnum.ENABLE.value, ge=0, le=1, description="Status value")


class EnumItem(BaseSchema):
    """A value/label pair."""
    value: int
    label: str
