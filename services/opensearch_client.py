"""
Amazon OpenSearch Service client (2021-01-01 configuration API).

Requests are signed with the legacy 'es' signing name and sent to the
es.<region> endpoint. Domain-scoped calls carry the DomainName in the path.
"""
from enum import Enum

from services.base_client import AWSServiceClient
from services.operation_model import Operation

API = '/2021-01-01'
DOMAIN = API + '/opensearch/domain/{DomainName}'

PAGE_QUERY = {'MaxResults': 'maxResults', 'NextToken': 'nextToken'}
PAGINATOR = ('NextToken', 'NextToken')


class OpenSearchErrors(Enum):
    """Error codes specific to Amazon OpenSearch Service."""

    ACCESS_DENIED = 'AccessDeniedException'
    BASE = 'BaseException'
    CONFLICT = 'ConflictException'
    DEPENDENCY_FAILURE = 'DependencyFailureException'
    DISABLED_OPERATION = 'DisabledOperationException'
    INTERNAL = 'InternalException'
    INVALID_PAGINATION_TOKEN = 'InvalidPaginationTokenException'
    INVALID_TYPE = 'InvalidTypeException'
    LIMIT_EXCEEDED = 'LimitExceededException'
    RESOURCE_ALREADY_EXISTS = 'ResourceAlreadyExistsException'
    RESOURCE_NOT_FOUND = 'ResourceNotFoundException'
    SLOT_NOT_AVAILABLE = 'SlotNotAvailableException'
    VALIDATION = 'ValidationException'


OPERATIONS = (
    Operation('AcceptInboundConnection', 'PUT', API + '/opensearch/cc/inboundConnection/{ConnectionId}/accept',
              required=('ConnectionId',)),
    Operation('AddDataSource', 'POST', DOMAIN + '/dataSource',
              required=('DomainName',)),
    Operation('AddTags', 'POST', API + '/tags'),
    Operation('AssociatePackage', 'POST', API + '/packages/associate/{PackageID}/{DomainName}',
              required=('PackageID', 'DomainName')),
    Operation('AuthorizeVpcEndpointAccess', 'POST', DOMAIN + '/authorizeVpcEndpointAccess',
              required=('DomainName',)),
    Operation('CancelServiceSoftwareUpdate', 'POST', API + '/opensearch/serviceSoftwareUpdate/cancel'),
    Operation('CreateDomain', 'POST', API + '/opensearch/domain'),
    Operation('CreateOutboundConnection', 'POST', API + '/opensearch/cc/outboundConnection'),
    Operation('CreatePackage', 'POST', API + '/packages'),
    Operation('CreateVpcEndpoint', 'POST', API + '/opensearch/vpcEndpoints'),
    Operation('DeleteDataSource', 'DELETE', DOMAIN + '/dataSource/{Name}',
              required=('DomainName', 'Name')),
    Operation('DeleteDomain', 'DELETE', DOMAIN,
              required=('DomainName',)),
    Operation('DeleteInboundConnection', 'DELETE', API + '/opensearch/cc/inboundConnection/{ConnectionId}',
              required=('ConnectionId',)),
    Operation('DeleteOutboundConnection', 'DELETE', API + '/opensearch/cc/outboundConnection/{ConnectionId}',
              required=('ConnectionId',)),
    Operation('DeletePackage', 'DELETE', API + '/packages/{PackageID}',
              required=('PackageID',)),
    Operation('DeleteVpcEndpoint', 'DELETE', API + '/opensearch/vpcEndpoints/{VpcEndpointId}',
              required=('VpcEndpointId',)),
    Operation('DescribeDomain', 'GET', DOMAIN,
              required=('DomainName',)),
    Operation('DescribeDomainAutoTunes', 'GET', DOMAIN + '/autoTunes',
              required=('DomainName',),
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('DescribeDomainChangeProgress', 'GET', DOMAIN + '/progress',
              required=('DomainName',),
              query={'ChangeId': 'changeid'}),
    Operation('DescribeDomainConfig', 'GET', DOMAIN + '/config',
              required=('DomainName',)),
    Operation('DescribeDomainHealth', 'GET', DOMAIN + '/health',
              required=('DomainName',)),
    Operation('DescribeDomainNodes', 'GET', DOMAIN + '/nodes',
              required=('DomainName',)),
    Operation('DescribeDomains', 'POST', API + '/opensearch/domain-info'),
    Operation('DescribeDryRunProgress', 'GET', DOMAIN + '/dryRun',
              required=('DomainName',),
              query={'DryRunId': 'dryRunId', 'LoadDryRunConfig': 'loadDryRunConfig'}),
    Operation('DescribeInboundConnections', 'POST', API + '/opensearch/cc/inboundConnection/search',
              paginator=PAGINATOR),
    Operation('DescribeInstanceTypeLimits', 'GET',
              API + '/opensearch/instanceTypeLimits/{EngineVersion}/{InstanceType}',
              required=('InstanceType', 'EngineVersion'),
              query={'DomainName': 'domainName'}),
    Operation('DescribeOutboundConnections', 'POST', API + '/opensearch/cc/outboundConnection/search',
              paginator=PAGINATOR),
    Operation('DescribePackages', 'POST', API + '/packages/describe',
              paginator=PAGINATOR),
    Operation('DescribeReservedInstanceOfferings', 'GET', API + '/opensearch/reservedInstanceOfferings',
              query={'ReservedInstanceOfferingId': 'offeringId', **PAGE_QUERY},
              paginator=PAGINATOR),
    Operation('DescribeReservedInstances', 'GET', API + '/opensearch/reservedInstances',
              query={'ReservedInstanceId': 'reservationId', **PAGE_QUERY},
              paginator=PAGINATOR),
    Operation('DescribeVpcEndpoints', 'POST', API + '/opensearch/vpcEndpoints/describe'),
    Operation('DissociatePackage', 'POST', API + '/packages/dissociate/{PackageID}/{DomainName}',
              required=('PackageID', 'DomainName')),
    Operation('GetCompatibleVersions', 'GET', API + '/opensearch/compatibleVersions',
              query={'DomainName': 'domainName'}),
    Operation('GetDataSource', 'GET', DOMAIN + '/dataSource/{Name}',
              required=('DomainName', 'Name')),
    Operation('GetDomainMaintenanceStatus', 'GET', DOMAIN + '/domainMaintenance',
              required=('DomainName', 'MaintenanceId'),
              query={'MaintenanceId': 'maintenanceId'}),
    Operation('GetPackageVersionHistory', 'GET', API + '/packages/{PackageID}/history',
              required=('PackageID',),
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('GetUpgradeHistory', 'GET', API + '/opensearch/upgradeDomain/{DomainName}/history',
              required=('DomainName',),
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('GetUpgradeStatus', 'GET', API + '/opensearch/upgradeDomain/{DomainName}/status',
              required=('DomainName',)),
    Operation('ListDataSources', 'GET', DOMAIN + '/dataSource',
              required=('DomainName',)),
    Operation('ListDomainMaintenances', 'GET', DOMAIN + '/domainMaintenances',
              required=('DomainName',),
              query={'Action': 'action', 'Status': 'status', **PAGE_QUERY},
              paginator=PAGINATOR),
    Operation('ListDomainNames', 'GET', API + '/domain',
              query={'EngineType': 'engineType'}),
    Operation('ListDomainsForPackage', 'GET', API + '/packages/{PackageID}/domains',
              required=('PackageID',),
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListInstanceTypeDetails', 'GET', API + '/opensearch/instanceTypeDetails/{EngineVersion}',
              required=('EngineVersion',),
              query={'DomainName': 'domainName', 'RetrieveAZs': 'retrieveAZs',
                     'InstanceType': 'instanceType', **PAGE_QUERY},
              paginator=PAGINATOR),
    Operation('ListPackagesForDomain', 'GET', API + '/domain/{DomainName}/packages',
              required=('DomainName',),
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListScheduledActions', 'GET', DOMAIN + '/scheduledActions',
              required=('DomainName',),
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListTags', 'GET', API + '/tags/',
              required=('ARN',),
              query={'ARN': 'arn'}),
    Operation('ListVersions', 'GET', API + '/opensearch/versions',
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListVpcEndpointAccess', 'GET', DOMAIN + '/listVpcEndpointAccess',
              required=('DomainName',),
              query={'NextToken': 'nextToken'}, paginator=PAGINATOR),
    Operation('ListVpcEndpoints', 'GET', API + '/opensearch/vpcEndpoints',
              query={'NextToken': 'nextToken'}, paginator=PAGINATOR),
    Operation('ListVpcEndpointsForDomain', 'GET', DOMAIN + '/vpcEndpoints',
              required=('DomainName',),
              query={'NextToken': 'nextToken'}, paginator=PAGINATOR),
    Operation('PurchaseReservedInstanceOffering', 'POST', API + '/opensearch/purchaseReservedInstanceOffering'),
    Operation('RejectInboundConnection', 'PUT', API + '/opensearch/cc/inboundConnection/{ConnectionId}/reject',
              required=('ConnectionId',)),
    Operation('RemoveTags', 'POST', API + '/tags-removal'),
    Operation('RevokeVpcEndpointAccess', 'POST', DOMAIN + '/revokeVpcEndpointAccess',
              required=('DomainName',)),
    Operation('StartDomainMaintenance', 'POST', DOMAIN + '/domainMaintenance',
              required=('DomainName',)),
    Operation('StartServiceSoftwareUpdate', 'POST', API + '/opensearch/serviceSoftwareUpdate/start'),
    Operation('UpdateDataSource', 'PUT', DOMAIN + '/dataSource/{Name}',
              required=('DomainName', 'Name')),
    Operation('UpdateDomainConfig', 'POST', DOMAIN + '/config',
              required=('DomainName',)),
    Operation('UpdatePackage', 'POST', API + '/packages/update'),
    Operation('UpdateScheduledAction', 'PUT', DOMAIN + '/scheduledAction/update',
              required=('DomainName',)),
    Operation('UpdateVpcEndpoint', 'POST', API + '/opensearch/vpcEndpoints/update'),
    Operation('UpgradeDomain', 'POST', API + '/opensearch/upgradeDomain'),
)


class OpenSearchClient(AWSServiceClient):
    """Client for the Amazon OpenSearch Service configuration API."""

    SERVICE_NAME = 'OpenSearch'
    SERVICE_ENV_ID = 'OPENSEARCH'
    SIGNING_NAME = 'es'
    ENDPOINT_PREFIX = 'es'
    OPERATIONS = OPERATIONS
    ERRORS = OpenSearchErrors
    RETRYABLE_ERRORS = frozenset({OpenSearchErrors.INTERNAL})
    TIMESTAMP_MEMBERS = frozenset({
        'StartTime',
        'LastUpdatedTime',
        'CreationDate',
        'UpdateDate',
        'CreatedAt',
        'LastUpdatedAt',
        'LastUpdated',
        'StartTimestamp',
    })
