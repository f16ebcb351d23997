"""
Request guards: user lookup, todo quota and todo resolution.

"Authentication" in this service is a lookup of the ``username``
request header against the registered users; there are no passwords
or tokens.  Each guard is a plain function that either returns the
resolved record(s) or raises a ``ServiceError`` subclass.  The
``Depends``‑style wrappers at the bottom of the module compose those
functions for FastAPI routes, which run them before the endpoint body
and stop at the first failure.
"""

import logging
import uuid
from typing import Optional, Tuple

from fastapi import Depends, Header

from .config import FREE_PLAN_TODO_LIMIT
from .errors import BadRequestError, ForbiddenError, NotFoundError
from .store import TodoRecord, TodoStore, UserRecord, get_store


logger = logging.getLogger(__name__)

MAX_UUID_INT = (1 << 128) - 1


def is_valid_uuid(value: str) -> bool:
    """Return True if ``value`` is a well‑formed UUID string.

    The value must be in canonical hyphenated form, carry the RFC 4122
    variant and a version between 1 and 8.  The nil and max UUIDs are
    the only exceptions.  ``uuid.UUID`` also accepts braces,
    ``urn:uuid:`` prefixes and unhyphenated hex, so the parsed value is
    compared back against the input to reject those spellings.
    """
    try:
        parsed = uuid.UUID(value)
    except (TypeError, ValueError, AttributeError):
        return False
    if str(parsed) != value.lower():
        return False
    if parsed.int in (0, MAX_UUID_INT):
        return True
    return parsed.variant == uuid.RFC_4122 and 1 <= parsed.version <= 8


def resolve_user_by_id(store: TodoStore, user_id: str) -> UserRecord:
    user = store.get_user_by_id(user_id)
    if user is None:
        logger.debug("No user with id %s", user_id)
        raise NotFoundError("User doesn't exists")
    return user


def authenticate_username(store: TodoStore, username: Optional[str]) -> UserRecord:
    """Resolve the user named by the ``username`` header."""
    user = store.get_user_by_username(username)
    if user is None:
        logger.debug("No user with username %r", username)
        raise NotFoundError("User doesn't exists")
    return user


def check_todo_quota(user: UserRecord) -> UserRecord:
    """Allow pro users always, free users below ``FREE_PLAN_TODO_LIMIT`` todos.

    The count is read from the live list at call time.
    """
    if not user.pro and len(user.todos) >= FREE_PLAN_TODO_LIMIT:
        logger.debug("User %s reached the free plan limit", user.username)
        raise ForbiddenError("Limit reached, signing the Pro Plan")
    return user


def resolve_todo(
    store: TodoStore, username: Optional[str], todo_id: str
) -> Tuple[UserRecord, TodoRecord]:
    """Resolve ``(user, todo)`` for a todo route.

    Checks run in a fixed order, each with its own error: the user
    must exist (404), the id must be a well‑formed UUID (400) and the
    todo must belong to that user (404).
    """
    user = store.get_user_by_username(username)
    if user is None:
        logger.debug("No user with username %r", username)
        raise NotFoundError("User not found")

    if not is_valid_uuid(todo_id):
        logger.debug("Malformed todo id %r", todo_id)
        raise BadRequestError("Id not validated")

    todo = user.find_todo(todo_id)
    if todo is None:
        logger.debug("Todo %s not found for user %s", todo_id, user.username)
        raise NotFoundError("Todo not found")
    return user, todo


# ---------------------------------------------------------------------------
# FastAPI dependencies
# ---------------------------------------------------------------------------

# Declared ``async`` so FastAPI runs them on the event loop instead of the
# threadpool: no other request can run between a guard and the endpoint.

async def get_user_from_path(user_id: str, store: TodoStore = Depends(get_store)) -> UserRecord:
    return resolve_user_by_id(store, user_id)


async def get_current_user(
    username: Optional[str] = Header(None),
    store: TodoStore = Depends(get_store),
) -> UserRecord:
    return authenticate_username(store, username)


async def require_todo_quota(user: UserRecord = Depends(get_current_user)) -> UserRecord:
    return check_todo_quota(user)


async def get_user_todo(
    todo_id: str,
    username: Optional[str] = Header(None),
    store: TodoStore = Depends(get_store),
) -> Tuple[UserRecord, TodoRecord]:
    return resolve_todo(store, username, todo_id)
