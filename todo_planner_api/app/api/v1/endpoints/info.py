"""
Information endpoint for API v1.

Returns the name and version of the running service so that clients
and deployment checks can tell which build is answering.  No
authentication is required.
"""

from typing import Dict

from fastapi import APIRouter

from todo_planner_api.app.core.config import settings

router = APIRouter()


@router.get("", response_model=Dict[str, str])
async def get_info() -> Dict[str, str]:
    return {"name": settings.project_name, "version": settings.api_version}
