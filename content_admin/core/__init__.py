"""Core module - configuration and utilities."""

from content_admin.core.config import settings
from content_admin.core.exceptions import AppException, EntityNotFound, InvalidPayload

__all__ = [
    "settings",
    "AppException",
    "EntityNotFound",
    "InvalidPayload",
]
