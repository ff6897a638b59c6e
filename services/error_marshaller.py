"""
Mapping of HTTP error responses to typed service errors.
"""
import json
from enum import Enum
from typing import Any, Dict, Optional, Type

from logger_config import get_logger
from utils.exceptions import (
    CORE_ERROR_ALIASES,
    RETRYABLE_CORE_ERRORS,
    CoreErrors,
    ServiceError,
)

logger = get_logger(__name__)

CORE_ERRORS_BY_CODE = {member.value: member for member in CoreErrors}
CORE_ERRORS_BY_CODE.update(CORE_ERROR_ALIASES)


def normalize_error_code(raw_code: Optional[str]) -> str:
    """
    Strip the namespace and detail parts from an error code.

    'com.amazonaws.gamelift#NotFoundException' and
    'NotFoundException:http://internal.amazon.com/' both become
    'NotFoundException'.
    """
    if not raw_code:
        return ''
    code = raw_code.split(':', 1)[0]
    return code.rsplit('#', 1)[-1].strip()


class JsonErrorMarshaller:
    """Error marshaller for JSON based protocols."""

    def __init__(
        self,
        service_errors: Optional[Type[Enum]] = None,
        retryable_errors: frozenset = frozenset()
    ) -> None:
        """
        Initialize error marshaller.

        Args:
            service_errors: Enum whose values are the service's error codes
            retryable_errors: Service error members that may succeed on retry
        """
        self.service_errors = service_errors
        self.retryable_errors = retryable_errors
        self._by_code: Dict[str, Enum] = (
            {member.value: member for member in service_errors}
            if service_errors else {}
        )

    def find_error_type(self, code: str) -> Enum:
        """Return the service or core error member for an error code."""
        if code in self._by_code:
            return self._by_code[code]
        return CORE_ERRORS_BY_CODE.get(code, CoreErrors.UNKNOWN)

    def marshall(self, response: Any, operation_name: Optional[str] = None) -> ServiceError:
        """
        Build a ServiceError from a non-2xx response.

        Args:
            response: requests.Response
            operation_name: Operation name if available

        Returns:
            ServiceError
        """
        body = self._decode_body(response.content)
        headers = {key.lower(): value for key, value in response.headers.items()}

        raw_code = (
            headers.get('x-amzn-errortype')
            or body.get('__type')
            or body.get('code')
            or body.get('Code')
        )
        code = normalize_error_code(raw_code)
        if not code:
            code = 'Unknown' if response.status_code < 500 else 'InternalFailure'

        message = (
            body.get('message')
            or body.get('Message')
            or body.get('errorMessage')
            or response.reason
            or ''
        )

        error_type = self.find_error_type(code)
        retryable = (
            error_type in RETRYABLE_CORE_ERRORS
            or error_type in self.retryable_errors
            or response.status_code >= 500
            or response.status_code == 429
        )

        request_id = headers.get('x-amzn-requestid') or headers.get('x-amz-request-id')
        logger.warning(
            f'{operation_name or "request"} failed with HTTP {response.status_code}: '
            f'{code}: {message} (request id: {request_id})'
        )
        return ServiceError(
            message,
            error_type=error_type,
            code=code,
            status_code=response.status_code,
            request_id=request_id,
            retryable=retryable,
            response_data=body,
            operation=operation_name,
        )

    @staticmethod
    def _decode_body(content: Optional[bytes]) -> Dict[str, Any]:
        if not content:
            return {}
        try:
            body = json.loads(content)
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}
