"""
Unit tests for request serializers.
"""
import datetime as dt
import json

import pytest
from dateutil.tz import tzutc
from services.operation_model import Operation
from services.serializer import JsonRpcSerializer, RestJsonSerializer, SerializedRequest
from utils.exceptions import MissingParameterError


class TestOperation:
    """Tests for the Operation model."""

    def test_python_name(self):
        assert Operation('GetAccount').python_name == 'get_account'
        assert Operation('DescribeEC2InstanceLimits').python_name == 'describe_ec2_instance_limits'

    def test_bound_members(self):
        operation = Operation(
            'GetReference', 'GET', '/referencestore/{referenceStoreId}/reference/{id}',
            query={'file': 'file'}, headers={'range': 'Range'},
        )
        assert operation.uri_members == ('referenceStoreId', 'id')
        assert operation.bound_members == frozenset({'referenceStoreId', 'id', 'file', 'range'})
        assert operation.has_body is False


class TestSerializedRequest:
    """Tests for SerializedRequest."""

    def test_url_with_query(self):
        request = SerializedRequest('GET', '/accounts', query='max-results=5')
        assert request.url('https://chime.us-east-1.amazonaws.com/') == \
            'https://chime.us-east-1.amazonaws.com/accounts?max-results=5'

    def test_url_without_query(self):
        request = SerializedRequest('GET', '/settings')
        assert request.url('https://chime.us-east-1.amazonaws.com') == \
            'https://chime.us-east-1.amazonaws.com/settings'


class TestRestJsonSerializer:
    """Tests for RestJsonSerializer."""

    def setup_method(self):
        self.serializer = RestJsonSerializer()

    def test_uri_members_are_encoded(self):
        operation = Operation('GetUser', 'GET', '/accounts/{AccountId}/users/{UserId}')
        request = self.serializer.serialize(
            operation, {'AccountId': '123456789012', 'UserId': 'a b/c'}
        )
        assert request.method == 'GET'
        assert request.path == '/accounts/123456789012/users/a%20b%2Fc'
        assert request.query == ''

    def test_missing_uri_member(self):
        operation = Operation('GetUser', 'GET', '/accounts/{AccountId}/users/{UserId}')
        with pytest.raises(MissingParameterError) as exc_info:
            self.serializer.serialize(operation, {'AccountId': '123456789012', 'UserId': None})
        assert exc_info.value.field == 'UserId'

    def test_literal_query_comes_first(self):
        operation = Operation(
            'SearchAvailablePhoneNumbers', 'GET', '/search',
            query_literal='?type=phone-numbers',
            query={'AreaCode': 'area-code', 'MaxResults': 'max-results'},
        )
        request = self.serializer.serialize(operation, {'AreaCode': '206', 'MaxResults': 10})
        assert request.query == 'type=phone-numbers&area-code=206&max-results=10'

    def test_query_bool_and_list(self):
        operation = Operation(
            'UntagResource', 'DELETE', '/tags/{resourceArn}',
            query={'tagKeys': 'tagKeys', 'force': 'force'},
        )
        request = self.serializer.serialize(operation, {
            'resourceArn': 'arn:aws:omics:us-east-1:123456789012:runGroup/1',
            'tagKeys': ['a', 'b'],
            'force': True,
        })
        assert request.path == '/tags/arn%3Aaws%3Aomics%3Aus-east-1%3A123456789012%3ArunGroup%2F1'
        assert request.query == 'tagKeys=a&tagKeys=b&force=true'

    def test_headers(self):
        operation = Operation(
            'GetReference', 'GET', '/reference/{id}', headers={'range': 'Range'},
        )
        request = self.serializer.serialize(operation, {'id': '1', 'range': 'bytes=0-99'})
        assert request.headers == {'Range': 'bytes=0-99'}

    def test_json_body(self):
        """Test unbound members go to the JSON body of a POST."""
        operation = Operation('CreateRoom', 'POST', '/accounts/{AccountId}/rooms')
        request = self.serializer.serialize(operation, {
            'AccountId': '123456789012',
            'Name': 'standup',
            'ClientRequestToken': None,
            'When': dt.datetime(2023, 1, 2, 3, 4, 5, tzinfo=tzutc()),
            'Blob': b'\x00\x01',
        })
        assert request.headers['Content-Type'] == 'application/json'
        assert json.loads(request.body) == {
            'Name': 'standup',
            'When': '2023-01-02T03:04:05+00:00',
            'Blob': 'AAE=',
        }

    def test_empty_post_body(self):
        operation = Operation('StartAssessment', 'POST', '/start-assessment')
        request = self.serializer.serialize(operation, {})
        assert request.body == b'{}'

    def test_get_leftovers_go_to_query(self):
        operation = Operation('DescribeDomainAutoTunes', 'GET', '/domain/{DomainName}/autoTunes')
        request = self.serializer.serialize(operation, {'DomainName': 'logs', 'Extra': 'x'})
        assert request.body == b''
        assert request.query == 'Extra=x'

    def test_raw_payload(self):
        operation = Operation(
            'UploadReadSetPart', 'PUT', '/upload/{uploadId}/part',
            query={'partNumber': 'partNumber'}, payload='payload',
        )
        request = self.serializer.serialize(
            operation, {'uploadId': 'u1', 'partNumber': 2, 'payload': b'ACGT'}
        )
        assert request.body == b'ACGT'
        assert request.headers['Content-Type'] == 'application/octet-stream'
        assert request.query == 'partNumber=2'


class TestJsonRpcSerializer:
    """Tests for JsonRpcSerializer."""

    def test_serialize(self):
        serializer = JsonRpcSerializer('GameLift', '1.1')
        request = serializer.serialize(
            Operation('DescribeFleetAttributes'),
            {'FleetIds': ['fleet-1'], 'Limit': 5, 'NextToken': None},
        )
        assert request.method == 'POST'
        assert request.path == '/'
        assert request.headers['X-Amz-Target'] == 'GameLift.DescribeFleetAttributes'
        assert request.headers['Content-Type'] == 'application/x-amz-json-1.1'
        assert json.loads(request.body) == {'FleetIds': ['fleet-1'], 'Limit': 5}

    def test_timestamps_as_epoch_seconds(self):
        serializer = JsonRpcSerializer('GameLift')
        request = serializer.serialize(
            Operation('DescribeFleetEvents'),
            {'StartTime': dt.datetime(2023, 1, 1, tzinfo=tzutc())},
        )
        assert json.loads(request.body) == {'StartTime': 1672531200.0}
