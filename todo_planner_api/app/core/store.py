"""
In‑memory storage for users and their todos.

This module replaces a database: ``TodoStore`` owns the list of user
records for the lifetime of the process and provides the lookups the
services need.  A store is created by ``create_app`` and attached to
``app.state``; routes obtain it through the ``get_store`` dependency,
so each application instance (and each test) works on its own data.

Records are plain dataclasses.  They are mutated in place by the
services and converted to pydantic schemas only at the API boundary.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import Request


def new_id() -> str:
    """Return a fresh random (version 4) UUID string."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class TodoRecord:
    title: str
    deadline: datetime
    id: str = field(default_factory=new_id)
    done: bool = False
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class UserRecord:
    name: str
    username: str
    id: str = field(default_factory=new_id)
    pro: bool = False
    todos: List[TodoRecord] = field(default_factory=list)

    def find_todo(self, todo_id: str) -> Optional[TodoRecord]:
        for todo in self.todos:
            if todo.id == todo_id:
                return todo
        return None


class TodoStore:
    """Process‑lifetime collection of users.

    Users are kept in registration order and are never removed.  All
    lookups are linear scans; the collections involved are small.
    """

    def __init__(self) -> None:
        self.users: List[UserRecord] = []

    def add_user(self, user: UserRecord) -> UserRecord:
        self.users.append(user)
        return user

    def get_user_by_id(self, user_id: str) -> Optional[UserRecord]:
        for user in self.users:
            if user.id == user_id:
                return user
        return None

    def get_user_by_username(self, username: Optional[str]) -> Optional[UserRecord]:
        """Exact, case‑sensitive match on ``username``."""
        if username is None:
            return None
        for user in self.users:
            if user.username == username:
                return user
        return None

    def username_exists(self, username: str) -> bool:
        return self.get_user_by_username(username) is not None


async def get_store(request: Request) -> TodoStore:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.store
