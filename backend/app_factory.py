"""
Application factory for FastAPI app creation and error boundary wiring.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
from dotenv import load_dotenv

from core.classifier import ErrorClassifier
from core.container import get_container
from core.middleware import ExceptionHandlingMiddleware, register_exception_handlers
from config import Settings, setup_logging, get_settings
from config.logging_config import get_factory_logger

from routers.root import RootRouter
from routers.health import HealthRouter
from routers.demo import DemoRouter


class AppFactory:
    """Factory for creating and configuring the FastAPI application."""

    def __init__(self, settings: Optional[Settings] = None):
        self.container = None
        self.settings = settings
        self.classifier: Optional[ErrorClassifier] = None
        self.routers = []
        self.logger = None

    def initialize_logging(self):
        """Initialize logging system."""
        self.settings = self.settings or get_settings()
        setup_logging(self.settings.log_level.value, self.settings.log_file)
        self.logger = get_factory_logger()

    def initialize_container(self):
        """Initialize dependency injection container."""
        self.logger.info("🔧 Initializing dependency injection container...")
        self.container = get_container()
        self.classifier = self.container.get(ErrorClassifier)

        services = self.container.get_all_services()
        self.logger.info(f"✅ Container initialized with {len(services)} services")
        for service_name, service_type in services.items():
            self.logger.debug(f"  - {service_name}: {service_type}")

    def initialize_routers(self):
        """Initialize all routers."""
        self.logger.info("🛠️ Initializing routers...")

        self.routers = [
            RootRouter(),
            HealthRouter(),
            DemoRouter()
        ]
        for router in self.routers:
            router.set_settings(self.settings)

        self.logger.info(f"✅ {len(self.routers)} routers initialized")

    def create_middleware(self, app: FastAPI):
        """Add middleware and exception handlers to the FastAPI application."""
        self.logger.info("🔧 Setting up middleware...")
        error_settings = self.settings.error_handling

        register_exception_handlers(app, self.classifier, error_settings)
        self.logger.info("✅ Exception handlers registered")

        app.add_middleware(
            ExceptionHandlingMiddleware,
            classifier=self.classifier,
            settings=error_settings
        )
        self.logger.info(
            f"✅ Exception handling middleware added (fallback: {error_settings.fallback_enabled})"
        )

        app.add_middleware(
            CORSMiddleware,
            allow_origins=self.settings.security.allow_origins,
            allow_credentials=self.settings.security.allow_credentials,
            allow_methods=self.settings.security.allow_methods,
            allow_headers=self.settings.security.allow_headers,
        )
        self.logger.info("✅ CORS middleware added")

    def register_routes(self, app: FastAPI):
        """Register all routes with the FastAPI application."""
        self.logger.info("🛣️ Registering routes...")

        for router in self.routers:
            app.include_router(router.get_router())
            self.logger.info(f"✅ {router.__class__.__name__} routes registered")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    logger = get_factory_logger()
    logger.info("🚀 Application startup completed!")

    yield

    logger.info("🛑 Application shutdown initiated...")
    app_factory = getattr(app.state, "app_factory", None)
    if app_factory and app_factory.container:
        app_factory.container.clear_singletons()
        logger.info("✅ Container cleaned up")
    logger.info("👋 Application shutdown completed!")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the cached environment settings

    Returns:
        Configured FastAPI application
    """
    load_dotenv()

    app_factory = AppFactory(settings)
    app_factory.initialize_logging()
    settings = app_factory.settings

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Request-serving backend with a unified result envelope",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        debug=settings.debug
    )

    app_factory.initialize_container()
    app_factory.initialize_routers()
    app_factory.create_middleware(app)
    app_factory.register_routes(app)

    app.state.app_factory = app_factory

    app_factory.logger.info("🎉 FastAPI application created successfully!")
    app_factory.logger.info(f"  - Environment: {settings.environment.value}")
    app_factory.logger.info(f"  - Debug: {settings.debug}")
    app_factory.logger.info(f"  - Routers: {len(app_factory.routers)}")

    return app
