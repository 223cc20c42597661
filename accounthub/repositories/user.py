import logging
import uuid
from collections.abc import Sequence
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from accounthub.db.utils import apply_dict_updates
from accounthub.models.definitions import User, UserStatus

logger = logging.getLogger(__name__)


class UserRepository:
    """
    Data access for the users table. Flushes but never commits; the caller
    owns the transaction boundary.
    """

    # Keys assigned by the database or fixed at creation
    _IMMUTABLE_FIELDS = {"serial", "id"}

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_serial(self, serial: int) -> User | None:
        """Retrieves a User by the internal primary key."""
        return await self.session.get(User, serial)

    async def get_by_id(self, user_id: uuid.UUID) -> User | None:
        """Retrieves a User by their public identifier."""
        stmt = select(User).where(User.id == user_id)
        return (await self.session.scalars(stmt)).one_or_none()

    async def list_users(self, status: UserStatus | None = None, limit: int = 50) -> Sequence[User]:
        stmt = select(User).order_by(User.serial).limit(limit)
        if status is not None:
            stmt = stmt.where(User.status == status)
        return (await self.session.scalars(stmt)).all()

    async def create(self, create_data: dict[str, Any]) -> User:
        """
        Creates a new User record and flushes it, so 'serial', 'id' and 'status'
        carry their generated values on return. A None 'id' or 'status' is
        treated as omitted.
        """
        data = {k: v for k, v in create_data.items() if not (k in {"id", "status"} and v is None)}
        user = User()
        apply_dict_updates(user, data, {"serial"})
        self.session.add(user)
        await self.session.flush()
        logger.debug("Created user %s (serial=%s)", user.id, user.serial)
        return user

    async def update(self, user_id: uuid.UUID, update_data: dict[str, Any]) -> User | None:
        """
        Updates mutable fields of the user with the given public id.
        'serial' and 'id' are never written.
        """
        user_to_update = await self.get_by_id(user_id)
        if not user_to_update:
            return None

        applied = apply_dict_updates(
            entity=user_to_update, update_data=update_data, excluded_attrs=self._IMMUTABLE_FIELDS
        )
        logger.debug("Updated user %s fields: %s", user_id, ", ".join(applied) or "none")

        await self.session.flush()
        await self.session.refresh(user_to_update)

        return user_to_update
