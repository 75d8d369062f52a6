"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, database, logging, errors),
``schemas`` (pydantic payloads), ``services`` (validation and the
record store) and ``api`` (FastAPI routers).
"""

from .main import app  # noqa: F401
