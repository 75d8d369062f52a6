"""
Top-level API router.

Aggregates the domain routers under a unified prefix; ``main`` mounts
it at ``settings.api_prefix``.
"""

from fastapi import APIRouter

from .endpoints import employees

router = APIRouter()

router.include_router(employees.router, prefix="/employees", tags=["employees"])
