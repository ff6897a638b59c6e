"""
Error types shared by every service client.

Client-side failures (missing or malformed parameters, endpoint resolution,
credentials, transport) and server-side failures marshalled from HTTP
responses all derive from AWSClientError.
"""
from enum import Enum
from typing import Optional, Dict, Any


class CoreErrors(Enum):
    """Errors common to all AWS services."""

    INCOMPLETE_SIGNATURE = "IncompleteSignature"
    INTERNAL_FAILURE = "InternalFailure"
    INVALID_ACTION = "InvalidAction"
    INVALID_CLIENT_TOKEN_ID = "InvalidClientTokenId"
    INVALID_PARAMETER_COMBINATION = "InvalidParameterCombination"
    INVALID_QUERY_PARAMETER = "InvalidQueryParameter"
    INVALID_PARAMETER_VALUE = "InvalidParameterValue"
    MISSING_ACTION = "MissingAction"
    MISSING_AUTHENTICATION_TOKEN = "MissingAuthenticationToken"
    MISSING_PARAMETER = "MissingParameter"
    OPT_IN_REQUIRED = "OptInRequired"
    REQUEST_EXPIRED = "RequestExpired"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"
    THROTTLING = "ThrottlingException"
    VALIDATION = "ValidationException"
    ACCESS_DENIED = "AccessDeniedException"
    RESOURCE_NOT_FOUND = "ResourceNotFoundException"
    UNRECOGNIZED_CLIENT = "UnrecognizedClientException"
    MALFORMED_QUERY_STRING = "MalformedQueryString"
    SLOW_DOWN = "SlowDown"
    REQUEST_TIME_TOO_SKEWED = "RequestTimeTooSkewed"
    INVALID_SIGNATURE = "InvalidSignatureException"
    SIGNATURE_DOES_NOT_MATCH = "SignatureDoesNotMatch"
    INVALID_ACCESS_KEY_ID = "InvalidAccessKeyId"
    REQUEST_TIMEOUT = "RequestTimeout"
    NETWORK_CONNECTION = "NetworkConnection"
    ENDPOINT_RESOLUTION_FAILURE = "EndpointResolutionFailure"
    UNKNOWN = "Unknown"


# Alternate spellings some services use for the same core error.
CORE_ERROR_ALIASES = {
    "Throttling": CoreErrors.THROTTLING,
    "ThrottledException": CoreErrors.THROTTLING,
    "TooManyRequestsException": CoreErrors.THROTTLING,
    "ValidationError": CoreErrors.VALIDATION,
    "AccessDenied": CoreErrors.ACCESS_DENIED,
    "InternalServerError": CoreErrors.INTERNAL_FAILURE,
    "ServiceUnavailableException": CoreErrors.SERVICE_UNAVAILABLE,
    "RequestTimeoutException": CoreErrors.REQUEST_TIMEOUT,
    "ExpiredTokenException": CoreErrors.REQUEST_EXPIRED,
}

RETRYABLE_CORE_ERRORS = frozenset({
    CoreErrors.INTERNAL_FAILURE,
    CoreErrors.SERVICE_UNAVAILABLE,
    CoreErrors.THROTTLING,
    CoreErrors.SLOW_DOWN,
    CoreErrors.REQUEST_TIMEOUT,
    CoreErrors.NETWORK_CONNECTION,
    CoreErrors.REQUEST_TIME_TOO_SKEWED,
})


class AWSClientError(Exception):
    """Base class for every error raised by a service client."""

    def __init__(
        self,
        message: str,
        error_type: Enum = CoreErrors.UNKNOWN,
        code: Optional[str] = None,
        retryable: bool = False,
        operation: Optional[str] = None
    ):
        """
        Initialize client error.

        Args:
            message: Error message
            error_type: Core or service error enum member
            code: Error code string as reported to the caller
            retryable: Whether repeating the call may succeed
            operation: Operation name if available
        """
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.code = code or error_type.name
        self.retryable = retryable
        self.operation = operation

    def __str__(self) -> str:
        if self.operation:
            return f"{self.operation}: {self.code}: {self.message}"
        return f"{self.code}: {self.message}"


class MissingParameterError(AWSClientError):
    """Raised before any network call when a required member is not set."""

    def __init__(self, field: str, operation: Optional[str] = None):
        super().__init__(
            f"Missing required field [{field}]",
            error_type=CoreErrors.MISSING_PARAMETER,
            code="MISSING_PARAMETER",
            operation=operation,
        )
        self.field = field


class InvalidParameterError(AWSClientError):
    """Raised before any network call when a member has an invalid format."""

    def __init__(
        self,
        field: str,
        value: Any = None,
        operation: Optional[str] = None
    ):
        super().__init__(
            f"{field} is invalid",
            error_type=CoreErrors.INVALID_PARAMETER_VALUE,
            code="INVALID_PARAMETER",
            operation=operation,
        )
        self.field = field
        self.value = value


class EndpointResolutionError(AWSClientError):
    """Raised when no endpoint can be built from the client configuration."""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(
            message,
            error_type=CoreErrors.ENDPOINT_RESOLUTION_FAILURE,
            operation=operation,
        )


class NoCredentialsError(AWSClientError):
    """Raised when the credentials provider chain yields nothing."""

    def __init__(self, operation: Optional[str] = None):
        super().__init__(
            "Unable to locate credentials",
            error_type=CoreErrors.MISSING_AUTHENTICATION_TOKEN,
            operation=operation,
        )


class NetworkError(AWSClientError):
    """Raised when the HTTP transport fails before a response arrives."""

    def __init__(
        self,
        message: str,
        error_type: Enum = CoreErrors.NETWORK_CONNECTION,
        operation: Optional[str] = None
    ):
        super().__init__(
            message,
            error_type=error_type,
            retryable=True,
            operation=operation,
        )


class ResponseParseError(AWSClientError):
    """Raised when a successful response carries an unreadable payload."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        operation: Optional[str] = None
    ):
        super().__init__(message, operation=operation)
        self.status_code = status_code


class ServiceError(AWSClientError):
    """Error returned by the service and marshalled from the HTTP response."""

    def __init__(
        self,
        message: str,
        error_type: Enum,
        code: str,
        status_code: int,
        request_id: Optional[str] = None,
        retryable: bool = False,
        response_data: Optional[Dict[str, Any]] = None,
        operation: Optional[str] = None
    ):
        """
        Initialize service error.

        Args:
            message: Error message from the response body
            error_type: Service or core error enum member
            code: Error code as sent by the service
            status_code: HTTP status code
            request_id: AWS request id if available
            retryable: Whether repeating the call may succeed
            response_data: Decoded error body if available
            operation: Operation name if available
        """
        super().__init__(
            message,
            error_type=error_type,
            code=code,
            retryable=retryable,
            operation=operation,
        )
        self.status_code = status_code
        self.request_id = request_id
        self.response_data = response_data or {}
