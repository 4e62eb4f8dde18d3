"""Configuration module."""
from .logging_cfg import configure_logging
from .settings import AppConfig, ConfigurationError, DashboardError, StoreSettings

__all__ = ["AppConfig", "StoreSettings", "DashboardError", "ConfigurationError", "configure_logging"]
