"""
Top-level package for the Todo Planner API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``todo_planner_api.app.main:app``.
"""

__all__ = []
