"""Configuration module for creditcfg tooling."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
