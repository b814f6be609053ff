"""Entry point for running the Task API server.

Starts the FastAPI application with Uvicorn on the host and port from
the settings (``HOST``/``PORT`` environment variables, default
``0.0.0.0:8080``).  The database file and schema are created on
startup if missing.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from task_api.app.core.config import settings
from task_api.app.main import app


ENDPOINTS = [
    ("GET", "/tasks", "Get all tasks"),
    ("POST", "/tasks", "Create a new task"),
    ("GET", "/tasks/{id}", "Get specific task"),
    ("PUT", "/tasks/{id}", "Update a task"),
    ("DELETE", "/tasks/{id}", "Delete a task"),
]


async def main() -> None:
    """Serve the API until interrupted."""
    logger = logging.getLogger("task_api.run")
    logger.info("Server running on http://%s:%s", settings.host, settings.port)
    for method, path, summary in ENDPOINTS:
        logger.info("  %-6s %-12s - %s", method, path, summary)
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
