"""
Static description of a single API operation.

Each service module declares a table of Operation entries; the client base
turns every entry into a bound method and uses it to validate, route and
serialize calls.
"""
import re
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from botocore import xform_name

URI_PLACEHOLDER = re.compile(r'\{([A-Za-z0-9_]+)\}')


@dataclass(frozen=True)
class Operation:
    """One API operation of a service."""

    name: str
    http_method: str = 'POST'
    request_uri: str = '/'
    # Literal query that is always sent, e.g. '?operation=batch-create'
    query_literal: str = ''
    host_prefix: str = ''
    required: Tuple[str, ...] = ()
    # Member that must hold a 12 digit AWS account id
    account_id_member: Optional[str] = None
    # member name -> query parameter name
    query: Dict[str, str] = field(default_factory=dict)
    # member name -> header name
    headers: Dict[str, str] = field(default_factory=dict)
    # member sent as the raw request body
    payload: Optional[str] = None
    streaming_output: bool = False
    # (input token member, output token member) for pageable operations
    paginator: Optional[Tuple[str, str]] = None

    @property
    def python_name(self) -> str:
        """Method name exposed on the client, e.g. 'get_account'."""
        return xform_name(self.name)

    @property
    def uri_members(self) -> Tuple[str, ...]:
        return tuple(URI_PLACEHOLDER.findall(self.request_uri))

    @property
    def bound_members(self) -> frozenset:
        """Members that are not serialized into the request body."""
        bound = set(self.uri_members) | set(self.query) | set(self.headers)
        if self.payload:
            bound.add(self.payload)
        return frozenset(bound)

    @property
    def has_body(self) -> bool:
        return self.http_method in ('POST', 'PUT', 'PATCH')
