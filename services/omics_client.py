"""
AWS HealthOmics client.

Omics operations are spread over several API planes that share one regional
endpoint name; each operation prepends its plane to the hostname
(control-storage-omics.us-east-1.amazonaws.com, analytics-omics..., and so
on). Read set and reference downloads return a raw byte stream instead of
JSON, and read set part uploads send a raw body.
"""
from enum import Enum

from services.base_client import AWSServiceClient
from services.operation_model import Operation

ANALYTICS = 'analytics-'
CONTROL_STORAGE = 'control-storage-'
STORAGE = 'storage-'
TAGS = 'tags-'
WORKFLOWS = 'workflows-'

PAGE_QUERY = {'maxResults': 'maxResults', 'nextToken': 'nextToken'}
PAGINATOR = ('nextToken', 'nextToken')
# Workflow plane list calls take the token back as startingToken
STARTING_TOKEN_QUERY = {'maxResults': 'maxResults', 'startingToken': 'startingToken'}
STARTING_TOKEN_PAGINATOR = ('startingToken', 'nextToken')


class OmicsErrors(Enum):
    """Error codes specific to AWS HealthOmics."""

    ACCESS_DENIED = 'AccessDeniedException'
    CONFLICT = 'ConflictException'
    INTERNAL_SERVER = 'InternalServerException'
    NOT_SUPPORTED_OPERATION = 'NotSupportedOperationException'
    RANGE_NOT_SATISFIABLE = 'RangeNotSatisfiableException'
    REQUEST_TIMEOUT = 'RequestTimeoutException'
    RESOURCE_NOT_FOUND = 'ResourceNotFoundException'
    SERVICE_QUOTA_EXCEEDED = 'ServiceQuotaExceededException'
    THROTTLING = 'ThrottlingException'
    VALIDATION = 'ValidationException'


OPERATIONS = (
    Operation('AbortMultipartReadSetUpload', 'DELETE', '/sequencestore/{sequenceStoreId}/upload/{uploadId}/abort',
              host_prefix=CONTROL_STORAGE, required=('sequenceStoreId', 'uploadId')),
    Operation('BatchDeleteReadSet', 'POST', '/sequencestore/{sequenceStoreId}/readset/batch/delete',
              host_prefix=CONTROL_STORAGE, required=('sequenceStoreId',)),
    Operation('CancelAnnotationImportJob', 'DELETE', '/import/annotation/{jobId}',
              host_prefix=ANALYTICS, required=('jobId',)),
    Operation('CancelRun', 'POST', '/run/{id}/cancel',
              host_prefix=WORKFLOWS, required=('id',)),
    Operation('CancelVariantImportJob', 'DELETE', '/import/variant/{jobId}',
              host_prefix=ANALYTICS, required=('jobId',)),
    Operation('CompleteMultipartReadSetUpload', 'POST', '/sequencestore/{sequenceStoreId}/upload/{uploadId}/complete',
              host_prefix=STORAGE, required=('sequenceStoreId', 'uploadId')),
    Operation('CreateAnnotationStore', 'POST', '/annotationStore',
              host_prefix=ANALYTICS),
    Operation('CreateMultipartReadSetUpload', 'POST', '/sequencestore/{sequenceStoreId}/upload',
              host_prefix=CONTROL_STORAGE, required=('sequenceStoreId',)),
    Operation('CreateReferenceStore', 'POST', '/referencestore',
              host_prefix=CONTROL_STORAGE),
    Operation('CreateRunGroup', 'POST', '/runGroup',
              host_prefix=WORKFLOWS),
    Operation('CreateSequenceStore', 'POST', '/sequencestore',
              host_prefix=CONTROL_STORAGE),
    Operation('CreateVariantStore', 'POST', '/variantStore',
              host_prefix=ANALYTICS),
    Operation('CreateWorkflow', 'POST', '/workflow',
              host_prefix=WORKFLOWS),
    Operation('DeleteAnnotationStore', 'DELETE', '/annotationStore/{name}',
              host_prefix=ANALYTICS, required=('name',),
              query={'force': 'force'}),
    Operation('DeleteReference', 'DELETE', '/referencestore/{referenceStoreId}/reference/{id}',
              host_prefix=CONTROL_STORAGE, required=('id', 'referenceStoreId')),
    Operation('DeleteReferenceStore', 'DELETE', '/referencestore/{id}',
              host_prefix=CONTROL_STORAGE, required=('id',)),
    Operation('DeleteRun', 'DELETE', '/run/{id}',
              host_prefix=WORKFLOWS, required=('id',)),
    Operation('DeleteRunGroup', 'DELETE', '/runGroup/{id}',
              host_prefix=WORKFLOWS, required=('id',)),
    Operation('DeleteSequenceStore', 'DELETE', '/sequencestore/{id}',
              host_prefix=CONTROL_STORAGE, required=('id',)),
    Operation('DeleteVariantStore', 'DELETE', '/variantStore/{name}',
              host_prefix=ANALYTICS, required=('name',),
              query={'force': 'force'}),
    Operation('DeleteWorkflow', 'DELETE', '/workflow/{id}',
              host_prefix=WORKFLOWS, required=('id',)),
    Operation('GetAnnotationImportJob', 'GET', '/import/annotation/{jobId}',
              host_prefix=ANALYTICS, required=('jobId',)),
    Operation('GetAnnotationStore', 'GET', '/annotationStore/{name}',
              host_prefix=ANALYTICS, required=('name',)),
    Operation('GetReadSet', 'GET', '/sequencestore/{sequenceStoreId}/readset/{id}',
              host_prefix=STORAGE, required=('id', 'sequenceStoreId', 'partNumber'),
              query={'file': 'file', 'partNumber': 'partNumber'},
              streaming_output=True),
    Operation('GetReadSetActivationJob', 'GET', '/sequencestore/{sequenceStoreId}/activationjob/{id}',
              host_prefix=CONTROL_STORAGE, required=('id', 'sequenceStoreId')),
    Operation('GetReadSetExportJob', 'GET', '/sequencestore/{sequenceStoreId}/exportjob/{id}',
              host_prefix=CONTROL_STORAGE, required=('sequenceStoreId', 'id')),
    Operation('GetReadSetImportJob', 'GET', '/sequencestore/{sequenceStoreId}/importjob/{id}',
              host_prefix=CONTROL_STORAGE, required=('id', 'sequenceStoreId')),
    Operation('GetReadSetMetadata', 'GET', '/sequencestore/{sequenceStoreId}/readset/{id}/metadata',
              host_prefix=CONTROL_STORAGE, required=('id', 'sequenceStoreId')),
    Operation('GetReference', 'GET', '/referencestore/{referenceStoreId}/reference/{id}',
              host_prefix=STORAGE, required=('id', 'referenceStoreId', 'partNumber'),
              query={'file': 'file', 'partNumber': 'partNumber'},
              headers={'range': 'Range'},
              streaming_output=True),
    Operation('GetReferenceImportJob', 'GET', '/referencestore/{referenceStoreId}/importjob/{id}',
              host_prefix=CONTROL_STORAGE, required=('id', 'referenceStoreId')),
    Operation('GetReferenceMetadata', 'GET', '/referencestore/{referenceStoreId}/reference/{id}/metadata',
              host_prefix=CONTROL_STORAGE, required=('id', 'referenceStoreId')),
    Operation('GetReferenceStore', 'GET', '/referencestore/{id}',
              host_prefix=CONTROL_STORAGE, required=('id',)),
    Operation('GetRun', 'GET', '/run/{id}',
              host_prefix=WORKFLOWS, required=('id',),
              query={'export': 'export'}),
    Operation('GetRunGroup', 'GET', '/runGroup/{id}',
              host_prefix=WORKFLOWS, required=('id',)),
    Operation('GetRunTask', 'GET', '/run/{id}/task/{taskId}',
              host_prefix=WORKFLOWS, required=('id', 'taskId')),
    Operation('GetSequenceStore', 'GET', '/sequencestore/{id}',
              host_prefix=CONTROL_STORAGE, required=('id',)),
    Operation('GetVariantImportJob', 'GET', '/import/variant/{jobId}',
              host_prefix=ANALYTICS, required=('jobId',)),
    Operation('GetVariantStore', 'GET', '/variantStore/{name}',
              host_prefix=ANALYTICS, required=('name',)),
    Operation('GetWorkflow', 'GET', '/workflow/{id}',
              host_prefix=WORKFLOWS, required=('id',),
              query={'type': 'type', 'export': 'export'}),
    Operation('ListAnnotationImportJobs', 'POST', '/import/annotations',
              host_prefix=ANALYTICS,
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListAnnotationStores', 'POST', '/annotationStores',
              host_prefix=ANALYTICS,
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListMultipartReadSetUploads', 'POST', '/sequencestore/{sequenceStoreId}/uploads',
              host_prefix=CONTROL_STORAGE, required=('sequenceStoreId',),
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListReadSetActivationJobs', 'POST', '/sequencestore/{sequenceStoreId}/activationjobs',
              host_prefix=CONTROL_STORAGE, required=('sequenceStoreId',),
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListReadSetExportJobs', 'POST', '/sequencestore/{sequenceStoreId}/exportjobs',
              host_prefix=CONTROL_STORAGE, required=('sequenceStoreId',),
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListReadSetImportJobs', 'POST', '/sequencestore/{sequenceStoreId}/importjobs',
              host_prefix=CONTROL_STORAGE, required=('sequenceStoreId',),
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListReadSetUploadParts', 'POST', '/sequencestore/{sequenceStoreId}/upload/{uploadId}/parts',
              host_prefix=CONTROL_STORAGE, required=('sequenceStoreId', 'uploadId'),
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListReadSets', 'POST', '/sequencestore/{sequenceStoreId}/readsets',
              host_prefix=CONTROL_STORAGE, required=('sequenceStoreId',),
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListReferenceImportJobs', 'POST', '/referencestore/{referenceStoreId}/importjobs',
              host_prefix=CONTROL_STORAGE, required=('referenceStoreId',),
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListReferenceStores', 'POST', '/referencestores',
              host_prefix=CONTROL_STORAGE,
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListReferences', 'POST', '/referencestore/{referenceStoreId}/references',
              host_prefix=CONTROL_STORAGE, required=('referenceStoreId',),
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListRunGroups', 'GET', '/runGroup',
              host_prefix=WORKFLOWS,
              query={'name': 'name', **STARTING_TOKEN_QUERY},
              paginator=STARTING_TOKEN_PAGINATOR),
    Operation('ListRunTasks', 'GET', '/run/{id}/task',
              host_prefix=WORKFLOWS, required=('id',),
              query={'status': 'status', **STARTING_TOKEN_QUERY},
              paginator=STARTING_TOKEN_PAGINATOR),
    Operation('ListRuns', 'GET', '/run',
              host_prefix=WORKFLOWS,
              query={'name': 'name', 'runGroupId': 'runGroupId', 'status': 'status',
                     **STARTING_TOKEN_QUERY},
              paginator=STARTING_TOKEN_PAGINATOR),
    Operation('ListSequenceStores', 'POST', '/sequencestores',
              host_prefix=CONTROL_STORAGE,
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListTagsForResource', 'GET', '/tags/{resourceArn}',
              host_prefix=TAGS, required=('resourceArn',)),
    Operation('ListVariantImportJobs', 'POST', '/import/variants',
              host_prefix=ANALYTICS,
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListVariantStores', 'POST', '/variantStores',
              host_prefix=ANALYTICS,
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListWorkflows', 'GET', '/workflow',
              host_prefix=WORKFLOWS,
              query={'type': 'type', 'name': 'name', **STARTING_TOKEN_QUERY},
              paginator=STARTING_TOKEN_PAGINATOR),
    Operation('StartAnnotationImportJob', 'POST', '/import/annotation',
              host_prefix=ANALYTICS),
    Operation('StartReadSetActivationJob', 'POST', '/sequencestore/{sequenceStoreId}/activationjob',
              host_prefix=CONTROL_STORAGE, required=('sequenceStoreId',)),
    Operation('StartReadSetExportJob', 'POST', '/sequencestore/{sequenceStoreId}/exportjob',
              host_prefix=CONTROL_STORAGE, required=('sequenceStoreId',)),
    Operation('StartReadSetImportJob', 'POST', '/sequencestore/{sequenceStoreId}/importjob',
              host_prefix=CONTROL_STORAGE, required=('sequenceStoreId',)),
    Operation('StartReferenceImportJob', 'POST', '/referencestore/{referenceStoreId}/importjob',
              host_prefix=CONTROL_STORAGE, required=('referenceStoreId',)),
    Operation('StartRun', 'POST', '/run',
              host_prefix=WORKFLOWS),
    Operation('StartVariantImportJob', 'POST', '/import/variant',
              host_prefix=ANALYTICS),
    Operation('TagResource', 'POST', '/tags/{resourceArn}',
              host_prefix=TAGS, required=('resourceArn',)),
    Operation('UntagResource', 'DELETE', '/tags/{resourceArn}',
              host_prefix=TAGS, required=('resourceArn', 'tagKeys'),
              query={'tagKeys': 'tagKeys'}),
    Operation('UpdateAnnotationStore', 'POST', '/annotationStore/{name}',
              host_prefix=ANALYTICS, required=('name',)),
    Operation('UpdateRunGroup', 'POST', '/runGroup/{id}',
              host_prefix=WORKFLOWS, required=('id',)),
    Operation('UpdateVariantStore', 'POST', '/variantStore/{name}',
              host_prefix=ANALYTICS, required=('name',)),
    Operation('UpdateWorkflow', 'POST', '/workflow/{id}',
              host_prefix=WORKFLOWS, required=('id',)),
    Operation('UploadReadSetPart', 'PUT', '/sequencestore/{sequenceStoreId}/upload/{uploadId}/part',
              host_prefix=STORAGE, required=('sequenceStoreId', 'uploadId', 'partSource', 'partNumber'),
              query={'partSource': 'partSource', 'partNumber': 'partNumber'},
              payload='payload'),
)


class OmicsClient(AWSServiceClient):
    """Client for the AWS HealthOmics API."""

    SERVICE_NAME = 'Omics'
    SERVICE_ENV_ID = 'OMICS'
    SIGNING_NAME = 'omics'
    ENDPOINT_PREFIX = 'omics'
    OPERATIONS = OPERATIONS
    ERRORS = OmicsErrors
    RETRYABLE_ERRORS = frozenset({
        OmicsErrors.INTERNAL_SERVER,
        OmicsErrors.REQUEST_TIMEOUT,
        OmicsErrors.THROTTLING,
    })
    TIMESTAMP_MEMBERS = frozenset({
        'creationTime',
        'updateTime',
        'startTime',
        'stopTime',
        'completionTime',
        'startedTime',
        'completedTime',
        'lastUpdatedTime',
        'deletionTime',
    })
