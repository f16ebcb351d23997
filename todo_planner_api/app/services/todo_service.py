"""
Business logic for todos.

Every method works on records that the guards in ``core.security``
have already resolved: the owning user for listing and creation, the
todo (and its owner) for edits, completion and deletion.  The quota
is enforced by the route guard and again inside ``create_todo``.

A todo starts with ``done`` set to ``False``.  Completion only ever
sets it to ``True``, and edits remain allowed after completion.
"""

import logging
from typing import List

from ..core.errors import NotFoundError
from ..core.security import check_todo_quota
from ..core.store import TodoRecord, UserRecord
from ..schemas.todo import TodoCreate, TodoRead, TodoUpdate


logger = logging.getLogger(__name__)


class TodoService:
    """CRUD operations on a user's todo list."""

    @classmethod
    async def list_todos(cls, user: UserRecord) -> List[TodoRead]:
        """Return all of the user's todos in insertion order."""
        return [TodoRead.model_validate(todo) for todo in user.todos]

    @classmethod
    async def create_todo(cls, user: UserRecord, data: TodoCreate) -> TodoRead:
        """Append a new todo to the user's list.

        The quota is checked again right before the append so the limit
        holds even when the caller skipped the route guard.
        """
        check_todo_quota(user)
        todo = TodoRecord(title=data.title, deadline=data.deadline)
        user.todos.append(todo)
        logger.info("User %s created todo %s", user.username, todo.id)
        return TodoRead.model_validate(todo)

    @classmethod
    async def update_todo(cls, todo: TodoRecord, data: TodoUpdate) -> TodoRead:
        """Apply a partial update.

        Only fields that are present and non‑empty replace the stored
        values; a missing deadline keeps the previous one.
        """
        if data.title:
            todo.title = data.title
        if data.deadline is not None:
            todo.deadline = data.deadline
        logger.info("Updated todo %s", todo.id)
        return TodoRead.model_validate(todo)

    @classmethod
    async def complete_todo(cls, todo: TodoRecord) -> TodoRead:
        todo.done = True
        logger.info("Completed todo %s", todo.id)
        return TodoRead.model_validate(todo)

    @classmethod
    async def delete_todo(cls, user: UserRecord, todo: TodoRecord) -> None:
        """Remove ``todo`` from the user's list.

        The todo is matched by identity.  Raises ``NotFoundError`` if it
        is no longer in the list.
        """
        for index, item in enumerate(user.todos):
            if item is todo:
                del user.todos[index]
                logger.info("User %s deleted todo %s", user.username, todo.id)
                return
        raise NotFoundError("Todo not found")
