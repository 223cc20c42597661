from .user import UserRequest, UserResponse, UserUpdateRequest

__all__ = ["UserRequest", "UserResponse", "UserUpdateRequest"]
