"""
Error taxonomy for the handler lifecycle.

Every failure raised by business logic or a mediator is an instance of one of
these classes. The HTTP error classifier maps them to responses, the Cognito
handler logs and re-raises them unchanged.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


class ErrorSeverity(str, Enum):
    """Error severity levels for classification."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    VALIDATION = "VALIDATION"
    BUSINESS_LOGIC = "BUSINESS_LOGIC"
    EXTERNAL_SERVICE = "EXTERNAL_SERVICE"
    INFRASTRUCTURE = "INFRASTRUCTURE"
    SECURITY = "SECURITY"


class BaseServiceError(Exception):
    """Base exception class for service errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.BUSINESS_LOGIC,
        user_message: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.severity = severity
        self.category = category
        self.user_message = user_message or "An error occurred while processing your request."
        self.error_id = str(uuid.uuid4())

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_id": self.error_id,
            "error_code": self.error_code,
            "message": self.message,
            "user_message": self.user_message,
            "severity": self.severity.value,
            "category": self.category.value,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }


class ValidationError(BaseServiceError):
    """Raised when the request does not match the handler schema."""

    def __init__(
        self,
        message: str,
        field_errors: Optional[List[Dict[str, str]]] = None,
    ):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
            user_message="Invalid input provided. Please check your request and try again.",
        )
        self.field_errors = field_errors or []


class ParseError(BaseServiceError):
    """Raised when the request body cannot be parsed as a JSON object."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="INVALID_REQUEST_BODY",
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
            user_message="Request body must be a valid JSON object.",
        )


class AuthorizationError(BaseServiceError):
    """Raised when the caller holds none of the required roles."""

    def __init__(
        self,
        message: str,
        required_roles: Optional[List[str]] = None,
        error_code: str = "FORBIDDEN",
        user_message: str = "You do not have permission to perform this action.",
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            severity=ErrorSeverity.MEDIUM,
            category=ErrorCategory.SECURITY,
            user_message=user_message,
        )
        self.required_roles = required_roles or []


class AuthenticationError(AuthorizationError):
    """Raised when the request carries no usable identity, so it holds no role."""

    def __init__(self, message: str = "Missing authorizer claims", required_roles: Optional[List[str]] = None):
        super().__init__(
            message=message,
            required_roles=required_roles,
            error_code="UNAUTHENTICATED",
            user_message="Authentication is required to access this resource.",
        )


class BusinessLogicError(BaseServiceError):
    """Raised by business logic for domain rule violations."""

    def __init__(
        self,
        message: str,
        error_code: str = "BUSINESS_LOGIC_ERROR",
        user_message: Optional[str] = None,
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            severity=ErrorSeverity.MEDIUM,
            category=ErrorCategory.BUSINESS_LOGIC,
            user_message=user_message,
        )


class ResourceNotFoundError(BaseServiceError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str):
        message = f"{resource_type} with ID '{resource_id}' not found"
        super().__init__(
            message=message,
            error_code="RESOURCE_NOT_FOUND",
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.BUSINESS_LOGIC,
            user_message=f"The requested {resource_type.lower()} was not found.",
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ExternalServiceError(BaseServiceError):
    """Raised when a call to an AWS service fails."""

    def __init__(self, message: str, service_name: str):
        super().__init__(
            message=message,
            error_code="EXTERNAL_SERVICE_ERROR",
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.EXTERNAL_SERVICE,
            user_message="A required service is temporarily unavailable. Please try again later.",
        )
        self.service_name = service_name


class ConfigurationError(BaseServiceError):
    """Raised when the function is deployed without required settings."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.INFRASTRUCTURE,
            user_message="The service is not configured correctly.",
        )


class UnknownError(Exception):
    """Stands in for a raised value that is not an ``Exception``."""

    def __init__(self, message: str = UNKNOWN_ERROR_MESSAGE):
        super().__init__(message)
        self.message = message
