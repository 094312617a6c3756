"""Domain error codes for the events hub."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    AUTH_FAILED = "AUTH_FAILED"
    PERSIST_FAILED = "PERSIST_FAILED"
    NOT_AUTHORIZED = "NOT_AUTHORIZED"
    OPERATION_IN_FLIGHT = "OPERATION_IN_FLIGHT"
    INVALID_SESSION_STATE = "INVALID_SESSION_STATE"
    INVALID_DRAFT_FIELD = "INVALID_DRAFT_FIELD"
    COMPONENT_CLOSED = "COMPONENT_CLOSED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


@dataclass(frozen=True)
class ValidationError(DomainError):
    """Raised when a draft is missing a required field or has a bad date.

    ``fields`` maps each offending draft field to its reasons.
    """

    code: ErrorCode = ErrorCode.VALIDATION_FAILED
    message: str = "Please fill in all fields."
    fields: tuple[tuple[str, tuple[str, ...]], ...] = ()

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.fields)


class AuthError(DomainError):
    """Raised by an authentication provider when sign-in or sign-out fails."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(code=ErrorCode.AUTH_FAILED, message=message)


class PersistError(DomainError):
    """Raised by a persistence provider when an event cannot be stored."""

    def __init__(self, message: str = "Event could not be saved") -> None:
        super().__init__(code=ErrorCode.PERSIST_FAILED, message=message)


class AuthorizationError(DomainError):
    """Raised when a mutating action is attempted without admin role and mode."""

    def __init__(self, action: str) -> None:
        super().__init__(
            code=ErrorCode.NOT_AUTHORIZED,
            message=f"Not allowed to {action}",
        )


class OperationInFlightError(DomainError):
    """Raised when a latent operation is requested while another is running."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.OPERATION_IN_FLIGHT,
            message=f"Cannot {operation} while another operation is in progress",
        )


class InvalidSessionStateError(DomainError):
    """Raised when login or logout does not fit the current session."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_SESSION_STATE, message=message)


class InvalidDraftFieldError(DomainError):
    """Raised when a draft update names a field drafts do not have."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DRAFT_FIELD,
            message=f"Unknown draft field: {field}",
        )


class ComponentClosedError(DomainError):
    """Raised when a command reaches a component after it was closed."""

    def __init__(self, component: str) -> None:
        super().__init__(
            code=ErrorCode.COMPONENT_CLOSED,
            message=f"{component} has been closed",
        )
