"""
Common API schemas shared across different endpoints.
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    service: str
    version: str
    store: str

    class Config:
        json_schema_extra = {
            "examples": [
                {
                    "status": "healthy",
                    "service": "Task Manager",
                    "version": "1.0.0",
                    "store": "connected",
                }
            ]
        }
