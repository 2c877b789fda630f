"""Singleton: one configuration service for the application's lifetime."""
from .configuration_service import ConfigurationService
from .contracts import ConfigurationProvider
from .scenario import SingletonScenario

__all__ = ["ConfigurationProvider", "ConfigurationService", "SingletonScenario"]
