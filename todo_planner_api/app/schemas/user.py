"""
Pydantic models for user data.

Users register with a display name and a unique username.  The
username is what clients later send in the ``username`` header of the
todo routes.  ``UserRead`` embeds the user's todos in insertion order.
"""

from typing import List

from pydantic import BaseModel, Field

from .todo import TodoRead


class UserBase(BaseModel):
    name: str = Field(..., examples=["Ana Silva"])
    username: str = Field(..., examples=["ana"])


class UserCreate(UserBase):
    """Schema for registering a user."""
    pass


class UserRead(UserBase):
    """Schema for reading a user from the API.

    ``pro`` is ``False`` for the free plan and becomes ``True`` after an
    upgrade; it cannot be turned back.
    """

    id: str
    pro: bool = Field(False, examples=[False])
    todos: List[TodoRead] = Field(default_factory=list)

    model_config = {
        "from_attributes": True,
    }
