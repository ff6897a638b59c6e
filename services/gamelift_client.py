"""
Amazon GameLift client.

GameLift uses the JSON 1.1 protocol: every operation is a POST to '/' with
the operation named in the X-Amz-Target header and the whole input as the
JSON body. The service performs all input validation server side.
"""
from enum import Enum

from services.base_client import AWSServiceClient
from services.operation_model import Operation


class GameLiftErrors(Enum):
    """Error codes specific to Amazon GameLift."""

    CONFLICT = 'ConflictException'
    FLEET_CAPACITY_EXCEEDED = 'FleetCapacityExceededException'
    GAME_SESSION_FULL = 'GameSessionFullException'
    IDEMPOTENT_PARAMETER_MISMATCH = 'IdempotentParameterMismatchException'
    INTERNAL_SERVICE = 'InternalServiceException'
    INVALID_FLEET_STATUS = 'InvalidFleetStatusException'
    INVALID_GAME_SESSION_STATUS = 'InvalidGameSessionStatusException'
    INVALID_REQUEST = 'InvalidRequestException'
    LIMIT_EXCEEDED = 'LimitExceededException'
    NOT_FOUND = 'NotFoundException'
    NOT_READY = 'NotReadyException'
    OUT_OF_CAPACITY = 'OutOfCapacityException'
    TAGGING_FAILED = 'TaggingFailedException'
    TERMINAL_ROUTING_STRATEGY = 'TerminalRoutingStrategyException'
    UNAUTHORIZED = 'UnauthorizedException'
    UNSUPPORTED_REGION = 'UnsupportedRegionException'


OPERATION_NAMES = (
    'AcceptMatch',
    'ClaimGameServer',
    'CreateAlias',
    'CreateBuild',
    'CreateFleet',
    'CreateFleetLocations',
    'CreateGameServerGroup',
    'CreateGameSession',
    'CreateGameSessionQueue',
    'CreateLocation',
    'CreateMatchmakingConfiguration',
    'CreateMatchmakingRuleSet',
    'CreatePlayerSession',
    'CreatePlayerSessions',
    'CreateScript',
    'CreateVpcPeeringAuthorization',
    'CreateVpcPeeringConnection',
    'DeleteAlias',
    'DeleteBuild',
    'DeleteFleet',
    'DeleteFleetLocations',
    'DeleteGameServerGroup',
    'DeleteGameSessionQueue',
    'DeleteLocation',
    'DeleteMatchmakingConfiguration',
    'DeleteMatchmakingRuleSet',
    'DeleteScalingPolicy',
    'DeleteScript',
    'DeleteVpcPeeringAuthorization',
    'DeleteVpcPeeringConnection',
    'DeregisterCompute',
    'DeregisterGameServer',
    'DescribeAlias',
    'DescribeBuild',
    'DescribeCompute',
    'DescribeEC2InstanceLimits',
    'DescribeFleetAttributes',
    'DescribeFleetCapacity',
    'DescribeFleetEvents',
    'DescribeFleetLocationAttributes',
    'DescribeFleetLocationCapacity',
    'DescribeFleetLocationUtilization',
    'DescribeFleetPortSettings',
    'DescribeFleetUtilization',
    'DescribeGameServer',
    'DescribeGameServerGroup',
    'DescribeGameServerInstances',
    'DescribeGameSessionDetails',
    'DescribeGameSessionPlacement',
    'DescribeGameSessionQueues',
    'DescribeGameSessions',
    'DescribeInstances',
    'DescribeMatchmaking',
    'DescribeMatchmakingConfigurations',
    'DescribeMatchmakingRuleSets',
    'DescribePlayerSessions',
    'DescribeRuntimeConfiguration',
    'DescribeScalingPolicies',
    'DescribeScript',
    'DescribeVpcPeeringAuthorizations',
    'DescribeVpcPeeringConnections',
    'GetComputeAccess',
    'GetComputeAuthToken',
    'GetGameSessionLogUrl',
    'GetInstanceAccess',
    'ListAliases',
    'ListBuilds',
    'ListCompute',
    'ListFleets',
    'ListGameServerGroups',
    'ListGameServers',
    'ListLocations',
    'ListScripts',
    'ListTagsForResource',
    'PutScalingPolicy',
    'RegisterCompute',
    'RegisterGameServer',
    'RequestUploadCredentials',
    'ResolveAlias',
    'ResumeGameServerGroup',
    'SearchGameSessions',
    'StartFleetActions',
    'StartGameSessionPlacement',
    'StartMatchBackfill',
    'StartMatchmaking',
    'StopFleetActions',
    'StopGameSessionPlacement',
    'StopMatchmaking',
    'SuspendGameServerGroup',
    'TagResource',
    'UntagResource',
    'UpdateAlias',
    'UpdateBuild',
    'UpdateFleetAttributes',
    'UpdateFleetCapacity',
    'UpdateFleetPortSettings',
    'UpdateGameServer',
    'UpdateGameServerGroup',
    'UpdateGameSession',
    'UpdateGameSessionQueue',
    'UpdateMatchmakingConfiguration',
    'UpdateRuntimeConfiguration',
    'UpdateScript',
    'ValidateMatchmakingRuleSet',
)

PAGEABLE = frozenset({
    'DescribeFleetAttributes',
    'DescribeFleetCapacity',
    'DescribeFleetEvents',
    'DescribeFleetLocationAttributes',
    'DescribeFleetUtilization',
    'DescribeGameServerInstances',
    'DescribeGameSessionDetails',
    'DescribeGameSessionQueues',
    'DescribeGameSessions',
    'DescribeInstances',
    'DescribeMatchmakingConfigurations',
    'DescribeMatchmakingRuleSets',
    'DescribePlayerSessions',
    'DescribeScalingPolicies',
    'ListAliases',
    'ListBuilds',
    'ListCompute',
    'ListFleets',
    'ListGameServerGroups',
    'ListGameServers',
    'ListLocations',
    'ListScripts',
    'SearchGameSessions',
})

OPERATIONS = tuple(
    Operation(name, paginator=('NextToken', 'NextToken') if name in PAGEABLE else None)
    for name in OPERATION_NAMES
)


class GameLiftClient(AWSServiceClient):
    """Client for the Amazon GameLift API."""

    SERVICE_NAME = 'GameLift'
    SERVICE_ENV_ID = 'GAMELIFT'
    SIGNING_NAME = 'gamelift'
    ENDPOINT_PREFIX = 'gamelift'
    PROTOCOL = 'json'
    TARGET_PREFIX = 'GameLift'
    JSON_VERSION = '1.1'
    OPERATIONS = OPERATIONS
    ERRORS = GameLiftErrors
    RETRYABLE_ERRORS = frozenset({GameLiftErrors.INTERNAL_SERVICE})
    TIMESTAMP_MEMBERS = frozenset({
        'CreationTime',
        'TerminationTime',
        'LastUpdatedTime',
        'StartTime',
        'EndTime',
        'EventTime',
        'ExpirationTime',
        'LastClaimTime',
        'LastHealthCheckTime',
        'RegistrationTime',
    })
