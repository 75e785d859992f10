"""Domain errors raised by FutCerto services.

Every error carries a stable code, a short title and a user-facing message.
The HTTP layer maps them to responses in ``futcerto.core.error_handlers``;
services never build responses themselves.
"""

from enum import Enum


class ErrorCode(Enum):
    AUTH_REQUIRED = "AUTH_REQUIRED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    EMAIL_ALREADY_REGISTERED = "EMAIL_ALREADY_REGISTERED"
    INCOMPLETE_SELECTION = "INCOMPLETE_SELECTION"
    INVALID_SELECTION = "INVALID_SELECTION"
    SLOT_CONFLICT = "SLOT_CONFLICT"
    BOOKING_IN_PROGRESS = "BOOKING_IN_PROGRESS"
    SUBMISSION_FAILED = "SUBMISSION_FAILED"
    ACCESS_DENIED = "ACCESS_DENIED"
    NOT_FOUND = "NOT_FOUND"


BOOKING_ERROR_TITLE = "Erro na reserva"


class ConfigurationError(RuntimeError):
    """Raised at startup when required configuration is missing or invalid."""


class FutCertoError(Exception):
    """Base domain error with code, title and user-safe message."""

    code: ErrorCode
    title: str = "Erro"
    status_code: int = 400

    def __init__(self, message: str, *, title: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if title is not None:
            self.title = title

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class AuthRequired(FutCertoError):
    code = ErrorCode.AUTH_REQUIRED
    title = "Login necessário"
    status_code = 401

    def __init__(self, message: str = "Entre ou cadastre-se para continuar.") -> None:
        super().__init__(message)


class InvalidCredentials(FutCertoError):
    code = ErrorCode.INVALID_CREDENTIALS
    title = "Erro no login"
    status_code = 401

    def __init__(self) -> None:
        super().__init__("E-mail ou senha inválidos.")


class EmailAlreadyRegistered(FutCertoError):
    code = ErrorCode.EMAIL_ALREADY_REGISTERED
    title = "Erro no cadastro"
    status_code = 409

    def __init__(self) -> None:
        super().__init__("Este e-mail já está cadastrado.")


class IncompleteSelection(FutCertoError):
    code = ErrorCode.INCOMPLETE_SELECTION
    title = BOOKING_ERROR_TITLE
    status_code = 400

    def __init__(self, message: str = "Por favor selecione data e horário") -> None:
        super().__init__(message)


class InvalidSelection(FutCertoError):
    """A selection that is present but outside what can be booked or queried."""

    code = ErrorCode.INVALID_SELECTION
    title = BOOKING_ERROR_TITLE
    status_code = 400


class SlotConflict(FutCertoError):
    code = ErrorCode.SLOT_CONFLICT
    title = BOOKING_ERROR_TITLE
    status_code = 409

    def __init__(
        self, message: str = "Este horário já está reservado. Escolha outro horário."
    ) -> None:
        super().__init__(message)


class BookingInProgress(FutCertoError):
    code = ErrorCode.BOOKING_IN_PROGRESS
    title = BOOKING_ERROR_TITLE
    status_code = 409

    def __init__(self) -> None:
        super().__init__("Uma reserva já está sendo enviada.")


class SubmissionFailed(FutCertoError):
    """Generic store or network failure; the store's message is kept verbatim."""

    code = ErrorCode.SUBMISSION_FAILED
    title = BOOKING_ERROR_TITLE
    status_code = 502


class AccessDenied(FutCertoError):
    code = ErrorCode.ACCESS_DENIED
    title = "Acesso Negado"
    status_code = 403


class NotFound(FutCertoError):
    code = ErrorCode.NOT_FOUND
    title = "Não encontrado"
    status_code = 404


__all__ = [
    "ErrorCode",
    "ConfigurationError",
    "FutCertoError",
    "AuthRequired",
    "InvalidCredentials",
    "EmailAlreadyRegistered",
    "IncompleteSelection",
    "InvalidSelection",
    "SlotConflict",
    "BookingInProgress",
    "SubmissionFailed",
    "AccessDenied",
    "NotFound",
]
