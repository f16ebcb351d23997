"""
Todo endpoints for API v1.

All routes identify the caller by the ``username`` request header.
The guards declared as dependencies run in parameter order and stop
at the first failure:

* ``get_current_user`` resolves the header to a user (404).
* ``require_todo_quota`` rejects free‑plan users who already hold the
  maximum number of todos (403).
* ``get_user_todo`` resolves the user (404), validates the todo id
  format (400) and finds the todo in the user's list (404).
"""

from typing import List, Optional, Tuple

from fastapi import APIRouter, Depends, status

from todo_planner_api.app.core.security import get_current_user, get_user_todo, require_todo_quota
from todo_planner_api.app.core.store import TodoRecord, UserRecord
from todo_planner_api.app.schemas.todo import TodoCreate, TodoRead, TodoUpdate
from todo_planner_api.app.services.todo_service import TodoService


router = APIRouter()


@router.get("", response_model=List[TodoRead])
async def list_todos(user: UserRecord = Depends(get_current_user)) -> List[TodoRead]:
    """Return the caller's todos in the order they were created."""
    return await TodoService.list_todos(user)


@router.post("", response_model=TodoRead, status_code=status.HTTP_201_CREATED)
async def create_todo(
    todo: TodoCreate,
    user: UserRecord = Depends(require_todo_quota),
) -> TodoRead:
    """Create a todo for the caller.

    Free‑plan users are limited to ten todos; the eleventh responds
    with 403 until the user upgrades to pro.
    """
    return await TodoService.create_todo(user, todo)


@router.put("/{todo_id}", response_model=TodoRead)
async def update_todo(
    updates: Optional[TodoUpdate] = None,
    resolved: Tuple[UserRecord, TodoRecord] = Depends(get_user_todo),
) -> TodoRead:
    """Update the title and/or deadline of a todo.

    Fields that are missing or empty keep their current value.  A
    request without a body leaves the todo unchanged.
    """
    _, todo = resolved
    return await TodoService.update_todo(todo, updates or TodoUpdate())


@router.patch("/{todo_id}/done", response_model=TodoRead)
async def complete_todo(
    resolved: Tuple[UserRecord, TodoRecord] = Depends(get_user_todo),
) -> TodoRead:
    """Mark a todo as done."""
    _, todo = resolved
    return await TodoService.complete_todo(todo)


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(
    user: UserRecord = Depends(get_current_user),
    resolved: Tuple[UserRecord, TodoRecord] = Depends(get_user_todo),
) -> None:
    """Delete a todo.  Responds with 204 and an empty body."""
    _, todo = resolved
    await TodoService.delete_todo(user, todo)
