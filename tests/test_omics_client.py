"""
Unit tests for OmicsClient.
"""
import io
import json

import pytest
from botocore.response import StreamingBody
from services.omics_client import OPERATIONS, OmicsClient, OmicsErrors
from utils.exceptions import MissingParameterError, ServiceError

from conftest import make_response, sent_request

WITH_REQUIRED = [op for op in OPERATIONS if op.required]


class TestOmicsOperationTable:
    """Tests for the Omics operation table."""

    def test_operation_count(self):
        assert len(OPERATIONS) == 72
        assert len({op.name for op in OPERATIONS}) == 72

    def test_every_operation_has_host_prefix(self):
        prefixes = {'analytics-', 'control-storage-', 'storage-', 'tags-', 'workflows-'}
        for operation in OPERATIONS:
            assert operation.host_prefix in prefixes, operation.name

    def test_uri_members_are_required(self):
        for operation in OPERATIONS:
            for member in operation.uri_members:
                assert member in operation.required, operation.name


class TestOmicsValidation:
    """Tests for client side validation of every operation."""

    @pytest.mark.parametrize('operation', WITH_REQUIRED, ids=lambda op: op.name)
    def test_missing_required_fields(self, operation, make_client, http_session):
        client = make_client(OmicsClient)
        with pytest.raises(MissingParameterError) as exc_info:
            getattr(client, operation.python_name)()
        assert exc_info.value.code == 'MISSING_PARAMETER'
        assert exc_info.value.field == operation.required[0]
        assert exc_info.value.operation == operation.name
        http_session.request.assert_not_called()


class TestOmicsRequests:
    """Tests for request construction."""

    @pytest.mark.parametrize('method_name,params,expected_url', [
        ('get_annotation_store', {'name': 'store'},
         'https://analytics-omics.us-east-1.amazonaws.com/annotationStore/store'),
        ('get_sequence_store', {'id': '1234567890'},
         'https://control-storage-omics.us-east-1.amazonaws.com/sequencestore/1234567890'),
        ('list_tags_for_resource', {'resourceArn': 'arn:aws:omics:us-east-1:123456789012:run/1'},
         'https://tags-omics.us-east-1.amazonaws.com/tags/'
         'arn%3Aaws%3Aomics%3Aus-east-1%3A123456789012%3Arun%2F1'),
        ('get_run', {'id': '42', 'export': ['DEFINITION']},
         'https://workflows-omics.us-east-1.amazonaws.com/run/42?export=DEFINITION'),
    ])
    def test_host_prefix_per_plane(self, method_name, params, expected_url, make_client, http_session):
        getattr(make_client(OmicsClient), method_name)(**params)
        _, url, kwargs = sent_request(http_session)
        assert url == expected_url
        assert '/us-east-1/omics/aws4_request' in kwargs['headers']['Authorization']

    def test_post_list_with_query_paging(self, make_client, http_session):
        make_client(OmicsClient).list_read_sets(
            sequenceStoreId='1234567890', maxResults=5, filter={'status': 'ACTIVE'}
        )
        method, url, kwargs = sent_request(http_session)
        assert method == 'POST'
        assert url == (
            'https://control-storage-omics.us-east-1.amazonaws.com'
            '/sequencestore/1234567890/readsets?maxResults=5'
        )
        assert json.loads(kwargs['data']) == {'filter': {'status': 'ACTIVE'}}

    def test_get_read_set_streams(self, make_client, http_session):
        http_session.request.return_value = make_response(
            headers={'Content-Length': '8', 'Content-Type': 'application/octet-stream'},
            raw=io.BytesIO(b'ACGTACGT'),
        )
        result = make_client(OmicsClient).get_read_set(
            sequenceStoreId='1234567890', id='0987654321', partNumber=1
        )
        _, url, kwargs = sent_request(http_session)
        assert url == (
            'https://storage-omics.us-east-1.amazonaws.com'
            '/sequencestore/1234567890/readset/0987654321?partNumber=1'
        )
        assert kwargs['stream'] is True
        assert isinstance(result['payload'], StreamingBody)
        assert result['payload'].read() == b'ACGTACGT'

    def test_get_read_set_requires_part_number(self, make_client, http_session):
        with pytest.raises(MissingParameterError) as exc_info:
            make_client(OmicsClient).get_read_set(sequenceStoreId='1234567890', id='0987654321')
        assert exc_info.value.field == 'partNumber'
        http_session.request.assert_not_called()

    def test_get_reference_range_header(self, make_client, http_session):
        http_session.request.return_value = make_response(
            headers={'Content-Length': '2'}, raw=io.BytesIO(b'AC'),
        )
        make_client(OmicsClient).get_reference(
            referenceStoreId='1234567890', id='111', partNumber=1, range='bytes=0-1'
        )
        _, _, kwargs = sent_request(http_session)
        assert kwargs['headers']['Range'] == 'bytes=0-1'

    def test_upload_read_set_part(self, make_client, http_session):
        make_client(OmicsClient).upload_read_set_part(
            sequenceStoreId='1234567890', uploadId='up-1',
            partSource='SOURCE1', partNumber=3, payload=b'@read1\nACGT\n',
        )
        method, url, kwargs = sent_request(http_session)
        assert method == 'PUT'
        assert url == (
            'https://storage-omics.us-east-1.amazonaws.com'
            '/sequencestore/1234567890/upload/up-1/part?partSource=SOURCE1&partNumber=3'
        )
        assert kwargs['data'] == b'@read1\nACGT\n'
        assert kwargs['headers']['Content-Type'] == 'application/octet-stream'

    def test_untag_resource_list_query(self, make_client, http_session):
        make_client(OmicsClient).untag_resource(
            resourceArn='arn:aws:omics:us-east-1:123456789012:workflow/1',
            tagKeys=['team', 'env'],
        )
        method, url, _ = sent_request(http_session)
        assert method == 'DELETE'
        assert url.endswith('?tagKeys=team&tagKeys=env')

    def test_paginate_with_starting_token(self, make_client, http_session):
        http_session.request.side_effect = [
            make_response(body={'items': [{'id': '1'}], 'nextToken': 'abc'}),
            make_response(body={'items': [{'id': '2'}]}),
        ]
        pages = list(make_client(OmicsClient).paginate('list_runs', maxResults=1))
        assert len(pages) == 2
        second_url = http_session.request.call_args_list[1].args[1]
        assert second_url.endswith('/run?maxResults=1&startingToken=abc')

    def test_timestamps_parsed(self, make_client, http_session):
        http_session.request.return_value = make_response(body={
            'id': '1', 'creationTime': '2023-05-01T08:00:00.123Z',
        })
        result = make_client(OmicsClient).get_run_group(id='1')
        assert result['creationTime'].microsecond == 123000

    def test_service_error(self, make_client, http_session):
        http_session.request.return_value = make_response(
            status_code=404,
            body={'message': 'no such store'},
            headers={'x-amzn-ErrorType': 'ResourceNotFoundException'},
        )
        with pytest.raises(ServiceError) as exc_info:
            make_client(OmicsClient).get_variant_store(name='missing')
        assert exc_info.value.error_type == OmicsErrors.RESOURCE_NOT_FOUND
        assert exc_info.value.message == 'no such store'
