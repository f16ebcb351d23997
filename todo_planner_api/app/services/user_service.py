"""
Business logic for users.

``UserService`` registers users in the ``TodoStore`` and manages the
plan flag.  Lookups by id or username are done by the guards in
``core.security``; the methods here receive already resolved records
where a user is required.
"""

import logging

from ..core.errors import BadRequestError, ConflictError
from ..core.store import TodoStore, UserRecord
from ..schemas.user import UserCreate, UserRead


logger = logging.getLogger(__name__)


class UserService:
    """Registration and plan management for users."""

    @classmethod
    async def create_user(cls, store: TodoStore, data: UserCreate) -> UserRead:
        """Register a new free‑plan user with an empty todo list.

        Raises ``ConflictError`` if the username is already taken.  The
        comparison is exact and case‑sensitive.
        """
        if store.username_exists(data.username):
            raise ConflictError("Username already exists")
        user = store.add_user(UserRecord(name=data.name, username=data.username))
        logger.info("Registered user %s (%s)", user.username, user.id)
        return UserRead.model_validate(user)

    @classmethod
    async def get_user(cls, user: UserRecord) -> UserRead:
        return UserRead.model_validate(user)

    @classmethod
    async def upgrade_to_pro(cls, user: UserRecord) -> UserRead:
        """Switch the user to the pro plan.

        The upgrade is not idempotent: upgrading a user that is already
        on the pro plan raises ``BadRequestError``.
        """
        if user.pro:
            raise BadRequestError("Pro plan is already activated.")
        user.pro = True
        logger.info("User %s upgraded to the pro plan", user.username)
        return UserRead.model_validate(user)
