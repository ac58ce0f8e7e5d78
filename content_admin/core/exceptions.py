"""Custom exceptions for the application."""

from typing import Any


class AppException(Exception):
    """Base exception for application errors."""

    status_code: int = 400

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class InvalidPayload(AppException):
    """Raised when a request body cannot be turned into an entity or patch."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(
            message,
            code="INVALID_PAYLOAD",
            details={"errors": errors} if errors else {},
        )


class EntityNotFound(AppException):
    """Raised when a category, post or news article does not exist."""

    status_code = 404

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(
            f"{entity.replace('_', ' ').capitalize()} not found: {entity_id}",
            code="ENTITY_NOT_FOUND",
            details={"entity": entity, "id": entity_id},
        )
