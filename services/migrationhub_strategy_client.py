"""
AWS Migration Hub Strategy Recommendations client.

A small REST-JSON API: lookups are GET requests keyed by a path member and
everything that takes a structured document (filters, preferences, server
configuration) is a POST with a JSON body.
"""
from enum import Enum

from services.base_client import AWSServiceClient
from services.operation_model import Operation

PAGE_QUERY = {'maxResults': 'maxResults', 'nextToken': 'nextToken'}
PAGINATOR = ('nextToken', 'nextToken')


class MigrationHubStrategyErrors(Enum):
    """Error codes specific to Migration Hub Strategy Recommendations."""

    ACCESS_DENIED = 'AccessDeniedException'
    CONFLICT = 'ConflictException'
    DEPENDENCY = 'DependencyException'
    INTERNAL_SERVER = 'InternalServerException'
    RESOURCE_NOT_FOUND = 'ResourceNotFoundException'
    SERVICE_LINKED_ROLE_LOCK_CLIENT = 'ServiceLinkedRoleLockClientException'
    SERVICE_QUOTA_EXCEEDED = 'ServiceQuotaExceededException'
    THROTTLING = 'ThrottlingException'
    VALIDATION = 'ValidationException'


OPERATIONS = (
    Operation('GetApplicationComponentDetails', 'GET',
              '/get-applicationcomponent-details/{applicationComponentId}',
              required=('applicationComponentId',)),
    Operation('GetApplicationComponentStrategies', 'GET',
              '/get-applicationcomponent-strategies/{applicationComponentId}',
              required=('applicationComponentId',)),
    Operation('GetAssessment', 'GET', '/get-assessment/{id}',
              required=('id',)),
    Operation('GetImportFileTask', 'GET', '/get-import-file-task/{id}',
              required=('id',)),
    Operation('GetLatestAssessmentId', 'GET', '/get-latest-assessment-id'),
    Operation('GetPortfolioPreferences', 'GET', '/get-portfolio-preferences'),
    Operation('GetPortfolioSummary', 'GET', '/get-portfolio-summary'),
    Operation('GetRecommendationReportDetails', 'GET', '/get-recommendation-report-details/{id}',
              required=('id',)),
    Operation('GetServerDetails', 'GET', '/get-server-details/{serverId}',
              required=('serverId',),
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('GetServerStrategies', 'GET', '/get-server-strategies/{serverId}',
              required=('serverId',)),
    Operation('ListApplicationComponents', 'POST', '/list-applicationcomponents',
              paginator=PAGINATOR),
    Operation('ListCollectors', 'GET', '/list-collectors',
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListImportFileTask', 'GET', '/list-import-file-task',
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListServers', 'POST', '/list-servers',
              paginator=PAGINATOR),
    Operation('PutPortfolioPreferences', 'POST', '/put-portfolio-preferences'),
    Operation('StartAssessment', 'POST', '/start-assessment'),
    Operation('StartImportFileTask', 'POST', '/start-import-file-task'),
    Operation('StartRecommendationReportGeneration', 'POST', '/start-recommendation-report-generation'),
    Operation('StopAssessment', 'POST', '/stop-assessment'),
    Operation('UpdateApplicationComponentConfig', 'POST', '/update-applicationcomponent-config/'),
    Operation('UpdateServerConfig', 'POST', '/update-server-config/'),
)


class MigrationHubStrategyRecommendationsClient(AWSServiceClient):
    """Client for the Migration Hub Strategy Recommendations API."""

    SERVICE_NAME = 'MigrationHubStrategy'
    SERVICE_ENV_ID = 'MIGRATIONHUBSTRATEGY'
    SIGNING_NAME = 'migrationhub-strategy'
    ENDPOINT_PREFIX = 'migrationhub-strategy'
    OPERATIONS = OPERATIONS
    ERRORS = MigrationHubStrategyErrors
    RETRYABLE_ERRORS = frozenset({
        MigrationHubStrategyErrors.INTERNAL_SERVER,
        MigrationHubStrategyErrors.THROTTLING,
    })
    TIMESTAMP_MEMBERS = frozenset({
        'lastAnalyzedTimestamp',
        'lastActivityTimeStamp',
        'startTime',
        'completionTime',
        'importCompletionTime',
        'lastUpdatedTime',
        'registeredTimeStamp',
        'recommendationReportTimeStamp',
    })
