"""Entry point for the Todo Planner API.

Starts the FastAPI application with Uvicorn on the address configured
through the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``3333``).  Intended to be executed from the project
root::

    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from todo_planner_api.app.core.config import settings
from todo_planner_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving %s on %s:%d", settings.project_name, settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
