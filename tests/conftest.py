"""
Shared fixtures for client tests.

HTTP is faked by handing the client a Mock in place of requests.Session, so
every test can inspect exactly what would have been sent.
"""
import io
import json

import pytest
from unittest.mock import Mock
from requests.structures import CaseInsensitiveDict

import config
from config import ClientConfig

TEST_CREDENTIALS = ('AKIDEXAMPLE', 'wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY')


def make_response(status_code=200, body=None, headers=None, reason='OK', raw=None):
    """Build a stand-in for requests.Response."""
    if body is None:
        content = b''
    elif isinstance(body, bytes):
        content = body
    else:
        content = json.dumps(body).encode('utf-8')

    response = Mock()
    response.status_code = status_code
    response.content = content
    response.reason = reason
    response.headers = CaseInsensitiveDict(headers or {})
    response.raw = raw if raw is not None else io.BytesIO(content)
    return response


def sent_request(http_session):
    """Return (method, url, kwargs) of the last request sent."""
    args, kwargs = http_session.request.call_args
    return args[0], args[1], kwargs


@pytest.fixture(autouse=True)
def reset_config():
    """Drop the cached configuration between tests."""
    config._config = None
    yield
    config._config = None


@pytest.fixture
def client_config():
    return ClientConfig(region='us-east-1', log_level='DEBUG')


@pytest.fixture
def http_session():
    session = Mock()
    session.request.return_value = make_response(body={})
    return session


@pytest.fixture
def make_client(client_config, http_session):
    """Factory building any service client against the fake session."""
    def _make(client_class, **kwargs):
        kwargs.setdefault('config', client_config)
        kwargs.setdefault('credentials', TEST_CREDENTIALS)
        kwargs.setdefault('http_session', http_session)
        return client_class(**kwargs)

    return _make
