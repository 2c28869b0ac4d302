"""
AlmantZod Core Module
=====================

Configuration shared by the validators and the logger.
"""

from almantzod.core.config import Config, get_config, reset_config

__all__ = [
    "Config",
    "get_config",
    "reset_config",
]
