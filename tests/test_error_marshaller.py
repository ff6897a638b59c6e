"""
Unit tests for error marshalling.
"""
import pytest
from services.chime_client import ChimeErrors
from services.error_marshaller import JsonErrorMarshaller, normalize_error_code
from utils.exceptions import CoreErrors, ServiceError

from conftest import make_response


@pytest.mark.parametrize('raw,expected', [
    ('NotFoundException', 'NotFoundException'),
    ('com.amazonaws.gamelift#NotFoundException', 'NotFoundException'),
    ('NotFoundException:http://internal.amazon.com/coral/', 'NotFoundException'),
    ('aws.protocoltests#ValidationException:detail', 'ValidationException'),
    ('', ''),
    (None, ''),
])
def test_normalize_error_code(raw, expected):
    assert normalize_error_code(raw) == expected


class TestJsonErrorMarshaller:
    """Tests for JsonErrorMarshaller."""

    def setup_method(self):
        self.marshaller = JsonErrorMarshaller(
            ChimeErrors, frozenset({ChimeErrors.SERVICE_FAILURE})
        )

    def test_code_from_header(self):
        response = make_response(
            status_code=404,
            body={'Code': 'Ignored', 'Message': 'Account not found'},
            headers={'x-amzn-ErrorType': 'NotFoundException:http://internal/',
                     'x-amzn-RequestId': 'req-9'},
            reason='Not Found',
        )
        error = self.marshaller.marshall(response, 'GetAccount')
        assert isinstance(error, ServiceError)
        assert error.error_type == ChimeErrors.NOT_FOUND
        assert error.code == 'NotFoundException'
        assert error.message == 'Account not found'
        assert error.status_code == 404
        assert error.request_id == 'req-9'
        assert error.operation == 'GetAccount'
        assert error.retryable is False

    def test_code_from_body_type(self):
        response = make_response(
            status_code=400,
            body={'__type': 'com.amazonaws.chime#BadRequestException', 'message': 'bad'},
        )
        error = self.marshaller.marshall(response, 'CreateRoom')
        assert error.error_type == ChimeErrors.BAD_REQUEST
        assert error.message == 'bad'
        assert error.response_data['message'] == 'bad'

    def test_core_error_fallback(self):
        response = make_response(
            status_code=400,
            body={'__type': 'ThrottlingException', 'message': 'Rate exceeded'},
        )
        error = self.marshaller.marshall(response, 'ListAccounts')
        assert error.error_type == CoreErrors.THROTTLING
        assert error.retryable is True

    def test_core_error_alias(self):
        response = make_response(status_code=429, body={'code': 'TooManyRequestsException'})
        error = self.marshaller.marshall(response)
        assert error.error_type == CoreErrors.THROTTLING
        assert error.retryable is True

    def test_unknown_code(self):
        response = make_response(status_code=418, body={'__type': 'TeapotException'})
        error = self.marshaller.marshall(response, 'GetBot')
        assert error.error_type == CoreErrors.UNKNOWN
        assert error.code == 'TeapotException'
        assert error.retryable is False

    def test_service_retryable(self):
        response = make_response(status_code=400, body={'Code': 'ServiceFailureException'})
        error = self.marshaller.marshall(response)
        assert error.error_type == ChimeErrors.SERVICE_FAILURE
        assert error.retryable is True

    def test_server_error_without_body(self):
        response = make_response(status_code=503, reason='Service Unavailable')
        error = self.marshaller.marshall(response, 'GetRoom')
        assert error.code == 'InternalFailure'
        assert error.error_type == CoreErrors.INTERNAL_FAILURE
        assert error.message == 'Service Unavailable'
        assert error.retryable is True

    def test_client_error_with_html_body(self):
        response = make_response(status_code=403, body=b'<html>denied</html>', reason='Forbidden')
        error = self.marshaller.marshall(response)
        assert error.code == 'Unknown'
        assert error.error_type == CoreErrors.UNKNOWN
        assert error.response_data == {}

    def test_without_service_errors(self):
        marshaller = JsonErrorMarshaller()
        response = make_response(status_code=400, body={'__type': 'ValidationException'})
        assert marshaller.marshall(response).error_type == CoreErrors.VALIDATION

    def test_str(self):
        response = make_response(
            status_code=409, body={'Code': 'ConflictException', 'Message': 'exists'}
        )
        error = self.marshaller.marshall(response, 'CreateAccount')
        assert str(error) == 'CreateAccount: ConflictException: exists'
