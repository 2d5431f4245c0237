from .base import (
    BadRequestError,
    ConfigurationError,
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    TooManyRequestsError,
    UnauthorizedError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "NotFoundError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "ConflictError",
    "TooManyRequestsError",
    "ConfigurationError",
    "ValidationError",
]
