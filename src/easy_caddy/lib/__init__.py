"""
Core library for easy-caddy
"""

from .config import Config, ConfigError

# Import utils module, not individual functions
import easy_caddy.lib.utils as utils

__all__ = [
    "Config",
    "ConfigError",
    "utils"
]
