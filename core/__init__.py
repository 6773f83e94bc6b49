"""Gateway Core Package: Konstanten, Exceptions und Error Handling."""

from .constants import (
    ErrorCode,
    HTTPStatus,
    LoggingConfig,
    PermissionDenialReason,
    SeverityLevel,
)
from .error_handler import (
    ErrorContext,
    ExceptionClassifier,
    GlobalErrorHandler,
    ResponseBuilder,
    register_exception_handlers,
)
from .exceptions import (
    BadRequestError,
    CoreApiError,
    DependencyError,
    ForbiddenError,
    GatewayErrorPayload,
    GatewayException,
    NotFoundError,
)

__all__ = [
    "BadRequestError",
    "CoreApiError",
    "DependencyError",
    "ErrorCode",
    "ErrorContext",
    "ExceptionClassifier",
    "ForbiddenError",
    "GatewayErrorPayload",
    "GatewayException",
    "GlobalErrorHandler",
    "HTTPStatus",
    "LoggingConfig",
    "NotFoundError",
    "PermissionDenialReason",
    "ResponseBuilder",
    "SeverityLevel",
    "register_exception_handlers",
]
