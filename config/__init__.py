"""Configuration: settings and logging."""

from .quote import QuoteSettings
from .settings import Settings, get_settings

__all__ = ["QuoteSettings", "Settings", "get_settings"]
