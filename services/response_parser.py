"""
Parsing of successful responses into result dictionaries.
"""
import datetime as dt
import json
from typing import Any, Dict, FrozenSet

from botocore.response import StreamingBody
from dateutil import parser as date_parser
from dateutil.tz import tzutc

from utils.exceptions import ResponseParseError


def parse_timestamp(value: Any) -> Any:
    """
    Convert an ISO-8601 string or epoch number into an aware datetime.

    Values that are neither are returned unchanged.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return dt.datetime.fromtimestamp(value, tz=tzutc())
    if isinstance(value, str):
        try:
            parsed = date_parser.isoparse(value)
        except ValueError:
            try:
                parsed = date_parser.parse(value)
            except (ValueError, OverflowError):
                return value
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=tzutc())
        return parsed
    return value


class ResponseParser:
    """Turns HTTP responses into result dictionaries."""

    def __init__(self, timestamp_members: FrozenSet[str] = frozenset()) -> None:
        """
        Initialize response parser.

        Args:
            timestamp_members: Member names whose values are timestamps
        """
        self.timestamp_members = timestamp_members

    def parse(self, response: Any, operation_name: str, streaming: bool = False) -> Dict[str, Any]:
        """
        Parse a successful response.

        Args:
            response: requests.Response with a 2xx status
            operation_name: Operation name for error messages
            streaming: Return the body as a stream under 'payload'

        Returns:
            Result dictionary including ResponseMetadata

        Raises:
            ResponseParseError: If the body is not valid JSON
        """
        if streaming:
            length = response.headers.get('Content-Length')
            result = {
                'payload': StreamingBody(response.raw, int(length) if length else None),
            }
        else:
            result = self._parse_json(response, operation_name)
            result = self._convert_timestamps(result)

        result['ResponseMetadata'] = self.response_metadata(response)
        return result

    @staticmethod
    def response_metadata(response: Any) -> Dict[str, Any]:
        headers = {key.lower(): value for key, value in response.headers.items()}
        request_id = headers.get('x-amzn-requestid') or headers.get('x-amz-request-id')
        return {
            'RequestId': request_id,
            'HTTPStatusCode': response.status_code,
            'HTTPHeaders': headers,
        }

    @staticmethod
    def _parse_json(response: Any, operation_name: str) -> Dict[str, Any]:
        body = response.content
        if not body or not body.strip():
            return {}
        try:
            parsed = json.loads(body)
        except ValueError as e:
            raise ResponseParseError(
                f'Unable to parse response body: {str(e)}',
                status_code=response.status_code,
                operation=operation_name,
            ) from e
        if not isinstance(parsed, dict):
            raise ResponseParseError(
                f'Expected a JSON object, got {type(parsed).__name__}',
                status_code=response.status_code,
                operation=operation_name,
            )
        return parsed

    def _convert_timestamps(self, value: Any) -> Any:
        if not self.timestamp_members:
            return value
        if isinstance(value, dict):
            return {
                key: parse_timestamp(item)
                if key in self.timestamp_members and not isinstance(item, (dict, list))
                else self._convert_timestamps(item)
                for key, item in value.items()
            }
        if isinstance(value, list):
            return [self._convert_timestamps(item) for item in value]
        return value
