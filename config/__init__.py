"""Configuration module for the intake flow."""
from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
