"""
Request serializers for the REST-JSON and JSON 1.1 protocols.

A serializer turns an Operation plus the caller's parameters into the
method, path, query string, headers and body of an HTTP request. Signing
and sending happen afterwards in the client base.
"""
import base64
import datetime as dt
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from botocore.utils import percent_encode, percent_encode_sequence

from services.operation_model import Operation, URI_PLACEHOLDER
from utils.exceptions import MissingParameterError


@dataclass
class SerializedRequest:
    """HTTP request ready to be signed."""

    method: str
    path: str
    query: str = ''
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = b''

    def url(self, base_url: str) -> str:
        url = base_url.rstrip('/') + self.path
        if self.query:
            url = f'{url}?{self.query}'
        return url


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, dt.datetime):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_query_value(item) for item in value]
    return str(value)


def _header_value(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, dt.datetime):
        return value.strftime('%a, %d %b %Y %H:%M:%S GMT')
    return str(value)


class RestJsonSerializer:
    """Serializer for services using the REST-JSON protocol."""

    CONTENT_TYPE = 'application/json'

    def serialize(self, operation: Operation, params: Dict[str, Any]) -> SerializedRequest:
        """
        Build the request for a REST-JSON operation.

        Args:
            operation: Operation being called
            params: Caller supplied members; None values count as unset

        Returns:
            SerializedRequest

        Raises:
            MissingParameterError: If a URI member is not set
        """
        params = {key: value for key, value in params.items() if value is not None}
        request = SerializedRequest(
            method=operation.http_method,
            path=self._render_uri(operation, params),
        )

        query_pairs = self._literal_query_pairs(operation.query_literal)
        for member, wire_name in operation.query.items():
            if member in params:
                query_pairs.append((wire_name, _query_value(params[member])))

        for member, header_name in operation.headers.items():
            if member in params:
                request.headers[header_name] = _header_value(params[member])

        remaining = {
            key: value for key, value in params.items()
            if key not in operation.bound_members
        }

        if operation.payload:
            body = params.get(operation.payload, b'')
            request.body = body.encode('utf-8') if isinstance(body, str) else body
            request.headers.setdefault('Content-Type', 'application/octet-stream')
        elif operation.has_body:
            request.body = json.dumps(remaining, default=self._json_default).encode('utf-8')
            request.headers['Content-Type'] = self.CONTENT_TYPE
        else:
            # GET and DELETE carry leftover members in the query string
            for key, value in remaining.items():
                query_pairs.append((key, _query_value(value)))

        request.query = self._encode_query(query_pairs)
        return request

    @staticmethod
    def _render_uri(operation: Operation, params: Dict[str, Any]) -> str:
        def substitute(match):
            member = match.group(1)
            if member not in params:
                raise MissingParameterError(member, operation=operation.name)
            value = params[member]
            if isinstance(value, bool):
                value = 'true' if value else 'false'
            return percent_encode(str(value), safe='-_.~')

        return URI_PLACEHOLDER.sub(substitute, operation.request_uri)

    @staticmethod
    def _literal_query_pairs(query_literal: str) -> List[Tuple[str, Any]]:
        pairs = []
        for item in query_literal.lstrip('?').split('&'):
            if not item:
                continue
            key, _, value = item.partition('=')
            pairs.append((key, value))
        return pairs

    @staticmethod
    def _encode_query(pairs: List[Tuple[str, Any]]) -> str:
        if not pairs:
            return ''
        return percent_encode_sequence(pairs)

    @staticmethod
    def _json_default(value: Any) -> Any:
        if isinstance(value, dt.datetime):
            return value.isoformat()
        if isinstance(value, (bytes, bytearray)):
            return base64.b64encode(value).decode('ascii')
        raise TypeError(f'Object of type {type(value).__name__} is not JSON serializable')


class JsonRpcSerializer:
    """Serializer for services using the JSON 1.0/1.1 protocol."""

    def __init__(self, target_prefix: str, json_version: str = '1.1') -> None:
        self.target_prefix = target_prefix
        self.content_type = f'application/x-amz-json-{json_version}'

    def serialize(self, operation: Operation, params: Dict[str, Any]) -> SerializedRequest:
        body = {key: value for key, value in params.items() if value is not None}
        return SerializedRequest(
            method='POST',
            path='/',
            headers={
                'X-Amz-Target': f'{self.target_prefix}.{operation.name}',
                'Content-Type': self.content_type,
            },
            body=json.dumps(body, default=self._json_default).encode('utf-8'),
        )

    @staticmethod
    def _json_default(value: Any) -> Any:
        if isinstance(value, dt.datetime):
            return value.timestamp()
        if isinstance(value, (bytes, bytearray)):
            return base64.b64encode(value).decode('ascii')
        raise TypeError(f'Object of type {type(value).__name__} is not JSON serializable')
