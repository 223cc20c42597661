import uuid
from enum import Enum as PyEnum

from sqlalchemy import Enum, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base

# --- CLOSED VOCABULARIES ---


class UserAuthMethod(str, PyEnum):
    EMAIL = "email"
    GOOGLE = "google"


class UserRole(str, PyEnum):
    USER = "user"
    ADMIN = "admin"


class UserSubscription(str, PyEnum):
    FREE = "free"
    PRO = "pro"


class UserStatus(str, PyEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    BANNED = "banned"


def _vocabulary(enum_cls: type[PyEnum], name: str) -> Enum:
    """
    Builds the column type for a closed-vocabulary field.

    Stores the lower-case member *values*. Renders as a native enum type on
    PostgreSQL and as VARCHAR + CHECK constraint elsewhere, so an out-of-set
    value is rejected by the database itself. The error class depends on the
    backend: PostgreSQL reports an invalid enum input (DBAPIError), CHECK
    constraint backends report an IntegrityError.
    """
    return Enum(
        enum_cls,
        name=name,
        values_callable=lambda members: [m.value for m in members],
        create_constraint=True,
        validate_strings=False,
    )


# --- CORE IDENTITY ENTITY ---


class User(Base):
    """
    The User Definition Table (T_User).

    CRITICAL DESIGN CHOICE: 'serial' is the internal primary key and never leaves
    the storage layer. 'id' is the random, public-facing identifier.
    """

    __tablename__ = "users"

    serial: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True, comment="Internal auto-incrementing key."
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        nullable=False,
        unique=True,
        default=uuid.uuid4,
        comment="Public identifier, generated at creation and immutable afterwards.",
    )

    auth_method: Mapped[UserAuthMethod | None] = mapped_column(
        _vocabulary(UserAuthMethod, "user_auth_method"), nullable=True, comment="How the user signs in."
    )

    role: Mapped[UserRole | None] = mapped_column(_vocabulary(UserRole, "user_role"), nullable=True)

    subscription: Mapped[UserSubscription | None] = mapped_column(
        _vocabulary(UserSubscription, "user_subscription"), nullable=True, comment="Billing tier."
    )

    status: Mapped[UserStatus | None] = mapped_column(
        _vocabulary(UserStatus, "user_status"),
        default=UserStatus.ACTIVE,
        server_default=UserStatus.ACTIVE.value,
        comment="Account state; 'active' unless set otherwise.",
    )

    def __repr__(self) -> str:
        return f"<User(serial={self.serial}, id={self.id}, role={self.role}, status={self.status})>"
