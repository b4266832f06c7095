"""
Health Check API Routes.
"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from internal.api.schemas import HealthResponse


def create_health_routes() -> APIRouter:
    """
    Factory function to create health routes.

    Returns:
        APIRouter: Configured router with health endpoints
    """
    router = APIRouter(tags=["Health"])

    @router.get(
        "/ping",
        response_class=PlainTextResponse,
        summary="Ping",
        description="Liveness probe; always answers pong",
        operation_id="ping",
    )
    async def ping():
        return "pong"

    @router.get(
        "/health",
        response_model=HealthResponse,
        summary="Health Check",
        description="Check service health and store connectivity",
        operation_id="health_check",
    )
    async def health_check(request: Request) -> HealthResponse:
        """
        Health check endpoint.

        **Returns:**
        Health status object indicating:
        - Overall health status (healthy)
        - Service name and version
        - Whether the store answers a ping
        """
        settings = request.app.state.settings
        store_healthy = await request.app.state.store.ping()

        return HealthResponse(
            status="healthy",
            service=settings.app_name,
            version=settings.app_version,
            store="connected" if store_healthy else "disconnected",
        )

    return router
