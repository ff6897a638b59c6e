"""
Decorators for client operations: logging, timing and transport error handling.
"""
import functools
import time
import uuid
from typing import Any, Callable, Dict

import requests

from logger_config import get_logger
from utils.exceptions import AWSClientError, CoreErrors, NetworkError

logger = get_logger(__name__)


def client_operation(
    func: Callable[..., Dict[str, Any]]
) -> Callable[..., Dict[str, Any]]:
    """
    Decorator for the method that performs one API call.

    The wrapped method is called as func(self, operation, params).

    Provides:
    - An invocation id attached to every log line of the call
    - Call duration logging
    - Conversion of requests transport failures into NetworkError

    Args:
        func: The method to decorate

    Returns:
        Decorated method
    """
    @functools.wraps(func)
    def wrapper(self, operation, params: Dict[str, Any]) -> Dict[str, Any]:
        invocation_id = str(uuid.uuid4())
        call_name = f'{self.SERVICE_NAME}.{operation.name}'
        extra = {"invocation_id": invocation_id, "operation": call_name}

        logger.debug(f'{call_name} invoked', extra=extra)
        started = time.perf_counter()

        try:
            result = func(self, operation, params)

        except AWSClientError as e:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f'{call_name} failed after {elapsed_ms:.1f} ms: {e.code}',
                extra=extra
            )
            raise

        except requests.Timeout as e:
            logger.error(f'{call_name} timed out: {str(e)}', extra=extra)
            raise NetworkError(
                f'Request timed out: {str(e)}',
                error_type=CoreErrors.REQUEST_TIMEOUT,
                operation=operation.name,
            ) from e

        except requests.RequestException as e:
            logger.error(f'{call_name} transport failure: {str(e)}', extra=extra)
            raise NetworkError(
                f'Unable to reach endpoint: {str(e)}',
                operation=operation.name,
            ) from e

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f'{call_name} completed in {elapsed_ms:.1f} ms', extra=extra)
        return result

    return wrapper
