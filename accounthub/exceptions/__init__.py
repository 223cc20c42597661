from .domain import AppError, NotFoundError, ValidationError

__all__ = ["AppError", "NotFoundError", "ValidationError"]
