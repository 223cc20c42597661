from .base import Base
from .definitions import User, UserAuthMethod, UserRole, UserStatus, UserSubscription

__all__ = ["Base", "User", "UserAuthMethod", "UserRole", "UserStatus", "UserSubscription"]
