"""
Root router for basic system information.
"""
from fastapi import APIRouter
from schema import Result
from .base import BaseRouter


class RootRouter(BaseRouter):
    """Router for root endpoints."""

    def get_router(self) -> APIRouter:
        """Get root router."""
        router = APIRouter(tags=["root"])

        @router.get("/")
        async def root() -> Result[dict]:
            """Root endpoint with system information."""
            return Result.ok({
                "message": "Unified Result API is running",
                "version": self.settings.app_version if self.settings else "1.0.0",
                "envelope": ["success", "code", "message", "data"]
            })

        return router
