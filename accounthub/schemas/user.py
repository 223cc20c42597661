"""
Pydantic schemas defining the contract for user records across the
Presentation (API) and Service Layers.

The closed vocabularies are the same enums the ORM columns use, so an
out-of-set value is rejected here before it ever reaches the database.
"""

import uuid

from pydantic import BaseModel, Field

from accounthub.models.definitions import UserAuthMethod, UserRole, UserStatus, UserSubscription

# --- Input Schemas (Requests / Commands) ---


class UserRequest(BaseModel):
    """
    Schema for user creation requests. Every field is optional: registration may
    leave auth method, role and subscription unset.
    """

    id: uuid.UUID | None = Field(default=None, description="Public identifier; generated when omitted")
    auth_method: UserAuthMethod | None = Field(default=None, description="How the user signs in")
    role: UserRole | None = Field(default=None, description="Authorization role")
    subscription: UserSubscription | None = Field(default=None, description="Billing tier")
    status: UserStatus = Field(default=UserStatus.ACTIVE, description="Account state")


class UserUpdateRequest(BaseModel):
    """
    Schema for partial updates. Only fields explicitly set by the caller are applied.
    """

    auth_method: UserAuthMethod | None = None
    role: UserRole | None = None
    subscription: UserSubscription | None = None
    status: UserStatus | None = None


# --- Output Schema (Response / Domain Object) ---


class UserResponse(BaseModel):
    """
    Response schema for user information. The internal 'serial' key is never
    exposed.
    """

    # Configuration allows mapping from SQLAlchemy ORM objects
    model_config = {"from_attributes": True}

    id: uuid.UUID = Field(..., description="Public identifier")
    auth_method: UserAuthMethod | None = None
    role: UserRole | None = None
    subscription: UserSubscription | None = None
    status: UserStatus | None = None
