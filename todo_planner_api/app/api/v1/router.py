"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers (users, todos, info)
under a unified prefix.  When new endpoints are added, update this
file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import info, todos, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(todos.router, prefix="/todos", tags=["todos"])
router.include_router(info.router, prefix="/info", tags=["info"])
