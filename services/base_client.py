"""
Shared core of every service client.

A service client subclasses AWSServiceClient and declares its OPERATIONS
table. One method per operation is attached to the subclass when it is
defined; every method runs the same pipeline: validate required members,
resolve the endpoint, serialize, sign with SigV4, send and parse.
"""
import sys
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple, Type, Union

import boto3
import requests
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from config import ClientConfig, get_config
from logger_config import get_logger, set_log_level
from services.endpoints import EndpointProvider, ResolvedEndpoint
from services.error_marshaller import JsonErrorMarshaller
from services.operation_model import Operation
from services.response_parser import ResponseParser
from services.serializer import JsonRpcSerializer, RestJsonSerializer, SerializedRequest
from utils.decorators import client_operation
from utils.exceptions import InvalidParameterError, MissingParameterError, NoCredentialsError

logger = get_logger(__name__)

__version__ = '1.0.0'

USER_AGENT = (
    f'aws-service-clients/{__version__} '
    f'python/{sys.version_info.major}.{sys.version_info.minor} '
    f'requests/{requests.__version__}'
)

RETRY_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


def is_valid_account_id(value: Any) -> bool:
    """An AWS account id is exactly twelve decimal digits."""
    value = str(value)
    return len(value) == 12 and all(char in '0123456789' for char in value)


def _create_api_method(operation: Operation):
    def _api_call(self, **kwargs):
        return self._make_api_call(operation, kwargs)

    _api_call.__name__ = operation.python_name
    required = ', '.join(operation.required) or 'none'
    _api_call.__doc__ = (
        f'Call the {operation.name} API '
        f'({operation.http_method} {operation.request_uri}).\n\n'
        f'Required members: {required}.'
    )
    return _api_call


class AWSServiceClient:
    """Base class of the generated service clients."""

    SERVICE_NAME: str = ''
    # Suffix of the AWS_ENDPOINT_URL_<SERVICE> override variable
    SERVICE_ENV_ID: str = ''
    SIGNING_NAME: str = ''
    ENDPOINT_PREFIX: str = ''
    GLOBAL_ENDPOINT: Optional[Tuple[str, str]] = None
    PROTOCOL: str = 'rest-json'
    TARGET_PREFIX: str = ''
    JSON_VERSION: str = '1.1'
    OPERATIONS: Tuple[Operation, ...] = ()
    ERRORS: Optional[Type[Enum]] = None
    RETRYABLE_ERRORS: frozenset = frozenset()
    TIMESTAMP_MEMBERS: frozenset = frozenset()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._operations_by_method = {}
        for operation in cls.OPERATIONS:
            cls._operations_by_method[operation.python_name] = operation
            setattr(cls, operation.python_name, _create_api_method(operation))

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        credentials: Optional[Union[Credentials, Tuple[str, ...]]] = None,
        endpoint_provider: Optional[EndpointProvider] = None,
        http_session: Optional[requests.Session] = None
    ) -> None:
        """
        Initialize service client.

        Args:
            config: Client configuration (defaults to the environment)
            credentials: botocore Credentials or (access key, secret key[, token]);
                the default boto3 credential chain is used when omitted
            endpoint_provider: Custom endpoint provider
            http_session: Preconfigured requests session
        """
        self.config = config or get_config()
        if self.config.log_level:
            set_log_level(self.config.log_level)

        if isinstance(credentials, tuple):
            credentials = Credentials(*credentials)
        self._credentials = credentials
        self.endpoint_provider = endpoint_provider or EndpointProvider(
            self.ENDPOINT_PREFIX, global_endpoint=self.GLOBAL_ENDPOINT
        )
        self.error_marshaller = JsonErrorMarshaller(self.ERRORS, self.RETRYABLE_ERRORS)
        self.response_parser = ResponseParser(self.TIMESTAMP_MEMBERS)
        if self.PROTOCOL == 'json':
            self.serializer = JsonRpcSerializer(self.TARGET_PREFIX, self.JSON_VERSION)
        else:
            self.serializer = RestJsonSerializer()
        self._http = http_session
        self._executor: Optional[ThreadPoolExecutor] = None
        self._lock = threading.Lock()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __repr__(self) -> str:
        return f'{type(self).__name__}(region={self.config.region!r})'

    @property
    def credentials(self) -> Credentials:
        """Lazy resolution of credentials through the boto3 provider chain."""
        if self._credentials is None:
            session = boto3.Session(profile_name=self.config.profile_name)
            self._credentials = session.get_credentials()
        if self._credentials is None:
            raise NoCredentialsError()
        return self._credentials

    @property
    def http(self) -> requests.Session:
        """Lazy initialization of the pooled HTTP session."""
        if self._http is None:
            with self._lock:
                if self._http is None:
                    self._http = self._build_http_session()
        return self._http

    def _build_http_session(self) -> requests.Session:
        session = requests.Session()
        retry = Retry(
            total=max(self.config.max_attempts - 1, 0),
            backoff_factor=0.5,
            status_forcelist=RETRY_STATUS_CODES,
            allowed_methods=None,
            raise_on_status=False,
            respect_retry_after_header=True,
        )
        adapter = HTTPAdapter(max_retries=retry)
        session.mount('https://', adapter)
        session.mount('http://', adapter)
        session.headers['User-Agent'] = USER_AGENT
        return session

    @property
    def executor(self) -> ThreadPoolExecutor:
        """Lazy initialization of the thread pool used by submit."""
        if self._executor is None:
            with self._lock:
                if self._executor is None:
                    self._executor = ThreadPoolExecutor(
                        max_workers=self.config.max_workers,
                        thread_name_prefix=self.SERVICE_NAME,
                    )
        return self._executor

    @classmethod
    def operation_model(cls, method_name: str) -> Operation:
        """
        Look up an operation by method name ('get_account') or API name ('GetAccount').

        Raises:
            ValueError: If the client has no such operation
        """
        if method_name in cls._operations_by_method:
            return cls._operations_by_method[method_name]
        for operation in cls.OPERATIONS:
            if operation.name == method_name:
                return operation
        raise ValueError(f'{cls.SERVICE_NAME} has no operation {method_name!r}')

    def override_endpoint(self, url: Optional[str]) -> None:
        """Send every subsequent call to url instead of the resolved endpoint."""
        self.endpoint_provider.override_endpoint(url)

    def resolve_endpoint(self) -> ResolvedEndpoint:
        return self.endpoint_provider.resolve(
            self.config.region,
            use_fips=self.config.use_fips,
            use_dualstack=self.config.use_dualstack,
            endpoint_url=self.config.endpoint_url_for(self.SERVICE_ENV_ID),
        )

    def validate(self, operation: Operation, params: Dict[str, Any]) -> None:
        """
        Check required and format-constrained members.

        Raises:
            MissingParameterError: If a required member is unset
            InvalidParameterError: If the account id member is malformed
        """
        for member in operation.required:
            if params.get(member) is None:
                logger.error(f'{operation.name}: Required field: {member}, is not set')
                raise MissingParameterError(member, operation=operation.name)

        member = operation.account_id_member
        if member and params.get(member) is not None:
            if not is_valid_account_id(params[member]):
                logger.error(f'{operation.name}: Required field: {member} has invalid value')
                raise InvalidParameterError(member, params[member], operation=operation.name)

    @client_operation
    def _make_api_call(self, operation: Operation, params: Dict[str, Any]) -> Dict[str, Any]:
        self.validate(operation, params)

        endpoint = self.resolve_endpoint()
        if operation.host_prefix and self.config.inject_host_prefix:
            endpoint = endpoint.add_prefix_if_missing(operation.host_prefix)

        request = self.serializer.serialize(operation, params)
        response = self._send(request, endpoint, streaming=operation.streaming_output)

        if not 200 <= response.status_code < 300:
            raise self.error_marshaller.marshall(response, operation.name)

        return self.response_parser.parse(
            response, operation.name, streaming=operation.streaming_output
        )

    def _send(
        self,
        request: SerializedRequest,
        endpoint: ResolvedEndpoint,
        streaming: bool = False
    ) -> requests.Response:
        url = request.url(endpoint.url)
        aws_request = AWSRequest(
            method=request.method,
            url=url,
            data=request.body,
            headers=request.headers,
        )
        credentials = self.credentials
        if hasattr(credentials, 'get_frozen_credentials'):
            credentials = credentials.get_frozen_credentials()
        SigV4Auth(credentials, self.SIGNING_NAME, endpoint.signing_region).add_auth(aws_request)
        prepared = aws_request.prepare()

        logger.debug(f'{request.method} {prepared.url}')
        return self.http.request(
            request.method,
            prepared.url,
            headers=dict(prepared.headers.items()),
            data=prepared.body,
            timeout=(self.config.connect_timeout, self.config.read_timeout),
            verify=self.config.verify if self.config.verify else True,
            stream=streaming,
        )

    def can_paginate(self, method_name: str) -> bool:
        return self.operation_model(method_name).paginator is not None

    def paginate(self, method_name: str, **params) -> Iterator[Dict[str, Any]]:
        """
        Call a pageable operation repeatedly, yielding every page.

        Args:
            method_name: Method name such as 'list_accounts'
            **params: Operation members for the first call

        Raises:
            ValueError: If the operation is not pageable
        """
        operation = self.operation_model(method_name)
        if operation.paginator is None:
            raise ValueError(f'{operation.name} cannot be paginated')
        input_token, output_token = operation.paginator

        params = dict(params)
        seen = set()
        while True:
            page = self._make_api_call(operation, params)
            yield page
            token = page.get(output_token)
            if not token or token in seen:
                return
            seen.add(token)
            params[input_token] = token

    def submit(self, method_name: str, **params) -> Future:
        """Run an operation on the client's thread pool."""
        operation = self.operation_model(method_name)
        return self.executor.submit(self._make_api_call, operation, params)

    def close(self) -> None:
        """Release pooled connections and worker threads."""
        # Workers may still need the lock to reach self.http, so wait outside it
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)
        with self._lock:
            session, self._http = self._http, None
        if session is not None:
            session.close()
