"""Configuration module for application settings."""

from .settings import Settings, SchemaUpdateMode, get_settings
from .logger import setup_logger, get_logger

__all__ = ["Settings", "SchemaUpdateMode", "get_settings", "setup_logger", "get_logger"]
