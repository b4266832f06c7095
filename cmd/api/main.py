"""
FastAPI Service - Main entry point for the Task Manager API.

Run with: python cmd/api/main.py
(listens on TASK_MANAGER_HOST, default ":8080")
"""

import os
import sys

# cmd/ shadows the stdlib module of the same name, so this file is run as a
# script and the project root is put on the path explicitly
project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import uvicorn

from core.config import get_settings
from core.logger import logger
from internal.api.app import create_app


# Create application instance
try:
    logger.info("Initializing Task Manager API...")
    app = create_app()
    logger.info("Application instance created successfully")
except Exception as e:
    logger.error(f"Failed to create application instance: {e}")
    logger.exception("Startup error details:")
    raise


if __name__ == "__main__":
    try:
        settings = get_settings()
        host, port = settings.listen_address

        logger.info("========== Starting Uvicorn Server ==========")
        logger.info(f"Host: {host}")
        logger.info(f"Port: {port}")
        logger.info(f"Reload: {settings.api_reload}")

        if settings.api_reload:
            # For reload, uvicorn needs an import string; make the project
            # root importable for the reloader subprocess
            current_pythonpath = os.environ.get("PYTHONPATH", "")
            if project_root not in current_pythonpath:
                os.environ["PYTHONPATH"] = (
                    f"{project_root}:{current_pythonpath}" if current_pythonpath else project_root
                )
            uvicorn.run(
                "internal.api.app:create_app",
                factory=True,
                host=host,
                port=port,
                reload=True,
                log_level="info" if settings.debug else "warning",
            )
        else:
            uvicorn.run(
                app,
                host=host,
                port=port,
                reload=False,
                log_level="info" if settings.debug else "warning",
            )

    except Exception as e:
        logger.error(f"Failed to start Uvicorn server: {e}")
        logger.exception("Uvicorn startup error details:")
        raise
