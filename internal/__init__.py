"""
Internal package.
Contains the HTTP API: application factory, routes, schemas and dependencies.
"""

from . import api

__all__ = [
    "api",
]
