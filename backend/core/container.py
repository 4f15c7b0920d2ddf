"""
Service container for the error boundary.

The application resolves its classifier (and the extractor it depends on)
from here, so tests and deployments can swap either by registering an
instance before the app is created.
"""

from typing import Any, Callable, Dict, Optional, Type, TypeVar
import logging

from config import get_settings, Settings
from .classifier import ErrorClassifier
from .message_extractor import MessageExtractor

logger = logging.getLogger('container')

T = TypeVar('T')


class ServiceContainer:
    """Lazily built singletons keyed by service name."""

    def __init__(self):
        self._factories: Dict[str, Callable[[], Any]] = {}
        self._instances: Dict[str, Any] = {}
        self._initialized = False

    def register_singleton(self, service_type: Type[T], factory: Callable[[], T], name: Optional[str] = None):
        """
        Register a factory; it runs once, on first lookup.

        Args:
            service_type: Service class type
            factory: Zero-argument callable building the service
            name: Optional service name (defaults to class name)
        """
        service_name = name or service_type.__name__
        self._factories[service_name] = factory
        self._instances.pop(service_name, None)
        logger.debug(f"Registered singleton service: {service_name}")

    def register_instance(self, service_type: Type[T], instance: T, name: Optional[str] = None):
        """Register a ready-made instance, replacing any factory of that name."""
        service_name = name or service_type.__name__
        self._factories.pop(service_name, None)
        self._instances[service_name] = instance
        logger.debug(f"Registered service instance: {service_name}")

    def get(self, service_type: Type[T], name: Optional[str] = None) -> T:
        """
        Resolve a service.

        Raises:
            ValueError: If nothing is registered under that name
        """
        service_name = name or service_type.__name__

        if service_name not in self._instances:
            if service_name not in self._factories:
                raise ValueError(f"Service {service_name} is not registered")
            self._instances[service_name] = self._factories[service_name]()
            logger.debug(f"Created singleton service: {service_name}")

        return self._instances[service_name]

    def get_all_services(self) -> Dict[str, str]:
        """Describe every registered service and whether it has been built."""
        services = {name: "singleton (factory)" for name in self._factories}
        for name in self._instances:
            services[name] = "singleton (instantiated)"
        return services

    def clear_singletons(self):
        """Drop built instances; factories stay registered."""
        for name in list(self._instances):
            if name in self._factories:
                del self._instances[name]
        logger.debug("Cleared singleton instances")


_container = ServiceContainer()


def get_container() -> ServiceContainer:
    """Get the global service container, registering defaults on first use."""
    if not _container._initialized:
        setup_default_services(_container)
        _container._initialized = True
    return _container


def setup_default_services(container: ServiceContainer):
    """Register settings, the message extractor and the classifier."""
    logger.info("Setting up default services in container...")

    container.register_singleton(Settings, get_settings)
    container.register_singleton(MessageExtractor, MessageExtractor)
    container.register_singleton(
        ErrorClassifier,
        lambda: ErrorClassifier(container.get(MessageExtractor))
    )

    logger.info("Default services registered successfully")
