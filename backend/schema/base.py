"""
Base schema classes.

This module provides:
- Base model configuration
- Paged query and paged result holders
- Health check response
"""

from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        validate_assignment=True,
        extra="forbid"
    )


T = TypeVar('T')


class PageQuery(BaseSchema):
    """Paged query parameters (1-based page number)."""
    page_num: int = Field(1, ge=1, description="Page number (1-based)")
    page_size: int = Field(10, ge=1, le=100, description="Items per page")

    @property
    def offset(self) -> int:
        """Calculate offset for database queries."""
        return (self.page_num - 1) * self.page_size


class PageResult(BaseSchema, Generic[T]):
    """One page of results."""
    list: List[T] = Field(default_factory=list, description="Items on this page")
    total: int = Field(0, ge=0, description="Total number of items")


class HealthCheckResponse(BaseSchema):
    """Health check response schema."""
    status: str = Field("healthy", description="Service status")
    version: str = Field("", description="Application version")
    environment: str = Field("", description="Environment name")
    result_codes: int = Field(0, description="Number of registered result codes")
