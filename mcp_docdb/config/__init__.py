"""Configuration management."""

from .settings import Settings
from .logging import setup_logging

__all__ = ["Settings", "setup_logging"]
