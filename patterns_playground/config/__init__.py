"""Configuration package for the patterns playground."""
from .settings import get_settings, Settings

__all__ = ["Settings", "get_settings"]
