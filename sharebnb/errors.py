"""Errors raised by the user layer and translated to HTTP responses in main.py."""

from fastapi import status


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(AppError):
    """Client sent invalid or conflicting data (e.g. duplicate username)."""
    status_code = status.HTTP_400_BAD_REQUEST


class ValidationError(BadRequestError):
    """Update payload is empty or names a field that cannot be updated."""


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
