"""
Utilities package for Raven-IQ.

This package provides configuration management.
"""

from .config_loader import ConfigLoader, get_config, reload_config

__all__ = ["ConfigLoader", "get_config", "reload_config"]
