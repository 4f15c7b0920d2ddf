"""
Base router with common dependencies and utilities.
"""
from fastapi import APIRouter
from typing import Optional
from config import Settings


class BaseRouter:
    """Base router class with common dependencies."""

    def __init__(self):
        self.settings: Optional[Settings] = None

    def set_settings(self, settings: Settings):
        """Set application settings."""
        self.settings = settings

    def get_router(self) -> APIRouter:
        """Get the router instance. Override in subclasses."""
        raise NotImplementedError("Subclasses must implement get_router")
