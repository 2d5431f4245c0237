"""Presentation layer exceptions"""

from .api_errors import (
    ErrorResponse,
    APIError,
    domain_error_to_api_error,
)

__all__ = [
    "ErrorResponse",
    "APIError",
    "domain_error_to_api_error",
]
