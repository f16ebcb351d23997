"""
User endpoints for API v1.

Provide registration, lookup by id and the upgrade to the pro plan.
Routes that take a ``user_id`` resolve it through the
``get_user_from_path`` guard, which answers 404 for unknown ids before
the handler runs.
"""

from fastapi import APIRouter, Depends, status

from todo_planner_api.app.core.security import get_user_from_path
from todo_planner_api.app.core.store import TodoStore, UserRecord, get_store
from todo_planner_api.app.schemas.user import UserCreate, UserRead
from todo_planner_api.app.services.user_service import UserService


router = APIRouter()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(
    user: UserCreate,
    store: TodoStore = Depends(get_store),
) -> UserRead:
    """Register a new user on the free plan.

    Responds with 400 if the username is already taken.
    """
    return await UserService.create_user(store, user)


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user: UserRecord = Depends(get_user_from_path)) -> UserRead:
    """Retrieve a single user, including their todos."""
    return await UserService.get_user(user)


@router.patch("/{user_id}/pro", response_model=UserRead)
async def upgrade_user_to_pro(user: UserRecord = Depends(get_user_from_path)) -> UserRead:
    """Activate the pro plan for a user.

    The pro plan lifts the limit on the number of todos.  Upgrading a
    user who already has it responds with 400.
    """
    return await UserService.upgrade_to_pro(user)
