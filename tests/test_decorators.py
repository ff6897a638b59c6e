"""
Unit tests for the client_operation decorator.
"""
import pytest
import requests
from unittest.mock import Mock
from services.operation_model import Operation
from utils.decorators import client_operation
from utils.exceptions import CoreErrors, MissingParameterError, NetworkError


class FakeClient:
    SERVICE_NAME = 'Fake'

    def __init__(self, side_effect=None, result=None):
        self.call = Mock(side_effect=side_effect, return_value=result)

    @client_operation
    def make_call(self, operation, params):
        return self.call(operation, params)


OPERATION = Operation('GetThing', 'GET', '/things/{Id}')


class TestClientOperation:
    """Tests for client_operation decorator."""

    def test_success_returns_result(self):
        client = FakeClient(result={'Thing': {}})
        result = client.make_call(OPERATION, {'Id': '1'})
        assert result == {'Thing': {}}
        client.call.assert_called_once_with(OPERATION, {'Id': '1'})

    def test_wraps_metadata(self):
        assert FakeClient.make_call.__name__ == 'make_call'

    def test_client_errors_propagate_unchanged(self):
        error = MissingParameterError('Id', operation='GetThing')
        client = FakeClient(side_effect=error)
        with pytest.raises(MissingParameterError) as exc_info:
            client.make_call(OPERATION, {})
        assert exc_info.value is error

    def test_timeout_becomes_network_error(self):
        client = FakeClient(side_effect=requests.ReadTimeout('read timed out'))
        with pytest.raises(NetworkError) as exc_info:
            client.make_call(OPERATION, {'Id': '1'})
        assert exc_info.value.error_type == CoreErrors.REQUEST_TIMEOUT
        assert exc_info.value.retryable is True
        assert exc_info.value.operation == 'GetThing'

    def test_connection_error_becomes_network_error(self):
        client = FakeClient(side_effect=requests.ConnectionError('refused'))
        with pytest.raises(NetworkError) as exc_info:
            client.make_call(OPERATION, {'Id': '1'})
        assert exc_info.value.error_type == CoreErrors.NETWORK_CONNECTION
        assert 'refused' in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    def test_other_exceptions_propagate(self):
        client = FakeClient(side_effect=KeyError('boom'))
        with pytest.raises(KeyError):
            client.make_call(OPERATION, {'Id': '1'})
