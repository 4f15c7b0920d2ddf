"""
Main application entry point.

This module is responsible solely for starting the FastAPI server.
"""
import uvicorn
from app_factory import create_app
from config import get_settings

app = create_app()

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
