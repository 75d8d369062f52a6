"""Entry point for the employee directory API.

Starts the FastAPI application with Uvicorn.  Host, port, database
path and the other settings are read from environment variables (see
``employee_directory_api.app.core.config``), so the script can be run
as-is under Docker or a process manager that only takes a single
Python file.

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from employee_directory_api.app.core.config import settings
from employee_directory_api.app.main import app


def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Starting API on %s:%s", settings.host, settings.port)
    server.run()


if __name__ == "__main__":
    main()
