"""
Service exceptions.

Services raise these; a single handler registered in main.py turns them into
JSON error responses with the status code carried by the exception.
"""

from fastapi import status


class ServiceError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Malformed or missing input. Fix the request before retrying."""

    status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(ServiceError):
    """No shared-secret token on an internal request."""

    status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(ServiceError):
    """Shared-secret token present but not issued by this service."""

    status_code = status.HTTP_403_FORBIDDEN


class ConstraintViolation(ServiceError):
    """Uniqueness or foreign-key conflict reported by the database."""

    status_code = status.HTTP_409_CONFLICT


class TransientStoreFailure(ServiceError):
    """Connectivity or transaction failure. The whole call is safe to retry."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
