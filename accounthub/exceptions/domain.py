class AppError(Exception):
    """Base class for errors raised by the service layer."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """The request is well-formed but conflicts with existing data."""


class NotFoundError(AppError):
    """The referenced user does not exist."""
