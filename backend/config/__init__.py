"""Configuration du service."""

from backend.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
