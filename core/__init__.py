"""
Core module containing configuration, logging, errors and the Redis connection.
"""

from .config import Settings, get_settings
from .exceptions import StoreError
from .logger import logger

__all__ = [
    "Settings",
    "get_settings",
    "logger",
    "StoreError",
]
