"""
Schema module.

Usage:
    from schema import Result, PageQuery
    from schema.demo import UserForm
"""

from .result import Result

from .base import (
    BaseSchema,
    PageQuery,
    PageResult,
    HealthCheckResponse
)

__all__ = [
    "Result",
    "BaseSchema",
    "PageQuery",
    "PageResult",
    "HealthCheckResponse"
]
