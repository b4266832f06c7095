"""
API Module.
Contains the application factory, routes, schemas, and API-related utilities.
"""

from . import routes
from . import schemas

__all__ = [
    "routes",
    "schemas",
]
