"""
Health and status router.
"""
from fastapi import APIRouter
from core.result_code import ResultCode
from schema import HealthCheckResponse, Result
from .base import BaseRouter


class HealthRouter(BaseRouter):
    """Router for health and status endpoints."""

    def get_router(self) -> APIRouter:
        """Get health router."""
        router = APIRouter(prefix="/health", tags=["health"])

        @router.get("/")
        async def health_check() -> Result[HealthCheckResponse]:
            """Health check endpoint."""
            return Result.ok(HealthCheckResponse(
                status="healthy",
                version=self.settings.app_version if self.settings else "",
                environment=self.settings.environment.value if self.settings else "",
                result_codes=len(ResultCode)
            ))

        return router
