"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the member service."""

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    DUPLICATE_NICKNAME = "DUPLICATE_NICKNAME"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    MEMBER_ALREADY_LEFT = "MEMBER_ALREADY_LEFT"

    # Not found errors (404)
    NOT_FOUND = "NOT_FOUND"
    MEMBER_NOT_FOUND = "MEMBER_NOT_FOUND"

    # Conflict errors (409)
    STORAGE_CONSTRAINT = "STORAGE_CONSTRAINT"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """A business rule was violated before reaching storage."""

    def __init__(
        self,
        message: str = "Bad request",
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Any | None = None,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=400,
            details=details,
        )


class NotFoundError(AppException):
    """A referenced record does not exist."""

    def __init__(
        self,
        message: str = "Not found",
        error_code: ErrorCode = ErrorCode.NOT_FOUND,
        details: Any | None = None,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=404,
            details=details,
        )


class StorageConstraintError(AppException):
    """A uniqueness or integrity constraint was rejected by storage."""

    def __init__(self, field: str | None = None, message: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.STORAGE_CONSTRAINT,
            message=message or (
                f"Storage constraint violated on {field}" if field else "Storage constraint violated"
            ),
            status_code=409,
            details={"field": field} if field else None,
        )
        self.field = field


class DuplicateNicknameError(ValidationError):
    """Nickname is already used by another profile."""

    def __init__(self, nickname: str) -> None:
        super().__init__(
            message="Nickname must be unique",
            error_code=ErrorCode.DUPLICATE_NICKNAME,
            details={"nickname": nickname},
        )


class InvalidCredentialsError(ValidationError):
    """Supplied password does not match the stored one."""

    def __init__(self) -> None:
        super().__init__(
            message="Incorrect credentials",
            error_code=ErrorCode.INVALID_CREDENTIALS,
        )


class MemberAlreadyLeftError(ValidationError):
    """Member has already left and cannot transition again."""

    def __init__(self, member_id: str) -> None:
        super().__init__(
            message="Member has already left",
            error_code=ErrorCode.MEMBER_ALREADY_LEFT,
            details={"member_id": member_id},
        )


class MemberNotFoundError(NotFoundError):
    """Member not found."""

    def __init__(self, email: str) -> None:
        super().__init__(
            message="Member not found",
            error_code=ErrorCode.MEMBER_NOT_FOUND,
            details={"email": email},
        )

