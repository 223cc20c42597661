import logging
import uuid
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from accounthub.exceptions.domain import NotFoundError, ValidationError
from accounthub.models.definitions import User, UserRole, UserStatus, UserSubscription
from accounthub.repositories import UserRepository
from accounthub.schemas import UserRequest, UserResponse, UserUpdateRequest

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, session: AsyncSession, user_repo: UserRepository):
        self._session = session
        self._user_repo = user_repo

    # --- 1. USER REGISTRATION ---

    async def register_user(self, data: UserRequest) -> UserResponse:
        """
        Creates a user row. 'id' is generated unless the caller supplies one,
        in which case it must not already be taken.
        """
        if data.id is not None and await self._user_repo.get_by_id(data.id):
            raise ValidationError(f"User with id {data.id} already exists.")

        try:
            created_user: User = await self._user_repo.create(data.model_dump())
            await self._session.commit()
        except IntegrityError:
            # e.g. a concurrent insert took the same id after the check above
            await self._session.rollback()
            raise

        logger.info("Registered user %s", created_user.id)
        return UserResponse.model_validate(created_user)

    # --- 2. RETRIEVAL ---

    async def get_user(self, user_id: uuid.UUID) -> UserResponse | None:
        user_orm = await self._user_repo.get_by_id(user_id)
        return UserResponse.model_validate(user_orm) if user_orm else None

    async def list_users(self, status: UserStatus | None = None, limit: int = 50) -> list[UserResponse]:
        users = await self._user_repo.list_users(status=status, limit=limit)
        return [UserResponse.model_validate(u) for u in users]

    # --- 3. LIFECYCLE UPDATES ---

    async def update_user(self, user_id: uuid.UUID, data: UserUpdateRequest) -> UserResponse | None:
        """
        Applies only the fields the caller explicitly set; an explicit None clears
        the column.
        """
        update_data = data.model_dump(exclude_unset=True)
        if not update_data:
            return await self.get_user(user_id)  # Nothing to change

        try:
            updated_user_orm = await self._user_repo.update(user_id, update_data)
            if not updated_user_orm:
                return None
            await self._session.commit()
        except IntegrityError:
            await self._session.rollback()
            raise

        return UserResponse.model_validate(updated_user_orm)

    async def change_role(self, user_id: uuid.UUID, role: UserRole) -> UserResponse:
        return await self._change(user_id, role=UserRole(role))

    async def change_subscription(self, user_id: uuid.UUID, subscription: UserSubscription) -> UserResponse:
        return await self._change(user_id, subscription=UserSubscription(subscription))

    async def change_status(self, user_id: uuid.UUID, status: UserStatus) -> UserResponse:
        return await self._change(user_id, status=UserStatus(status))

    async def _change(self, user_id: uuid.UUID, **fields: Any) -> UserResponse:
        try:
            updated_user_orm = await self._user_repo.update(user_id, fields)
            if not updated_user_orm:
                raise NotFoundError(f"User {user_id} not found.")
            await self._session.commit()
        except IntegrityError:
            await self._session.rollback()
            raise

        logger.info("Updated user %s: %s", user_id, ", ".join(f"{k}={v.value}" for k, v in fields.items()))
        return UserResponse.model_validate(updated_user_orm)
