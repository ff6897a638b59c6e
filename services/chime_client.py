"""
Amazon Chime client.

Chime is served from a single global endpoint and uses the REST-JSON
protocol. Most operations are scoped to an account and validate that the
AccountId member is a 12 digit AWS account id before sending anything.
"""
from enum import Enum

from services.base_client import AWSServiceClient
from services.operation_model import Operation

PAGE_QUERY = {'MaxResults': 'max-results', 'NextToken': 'next-token'}
PAGINATOR = ('NextToken', 'NextToken')


class ChimeErrors(Enum):
    """Error codes specific to Amazon Chime."""

    BAD_REQUEST = 'BadRequestException'
    CONFLICT = 'ConflictException'
    FORBIDDEN = 'ForbiddenException'
    NOT_FOUND = 'NotFoundException'
    RESOURCE_LIMIT_EXCEEDED = 'ResourceLimitExceededException'
    SERVICE_FAILURE = 'ServiceFailureException'
    SERVICE_UNAVAILABLE = 'ServiceUnavailableException'
    THROTTLED_CLIENT = 'ThrottledClientException'
    UNAUTHORIZED_CLIENT = 'UnauthorizedClientException'
    UNPROCESSABLE_ENTITY = 'UnprocessableEntityException'


OPERATIONS = (
    Operation('AssociatePhoneNumberWithUser', 'POST', '/accounts/{AccountId}/users/{UserId}', query_literal='?operation=associate-phone-number',
              required=('AccountId', 'UserId'), account_id_member='AccountId'),
    Operation('AssociateSigninDelegateGroupsWithAccount', 'POST', '/accounts/{AccountId}', query_literal='?operation=associate-signin-delegate-groups',
              required=('AccountId',), account_id_member='AccountId'),
    Operation('BatchCreateRoomMembership', 'POST', '/accounts/{AccountId}/rooms/{RoomId}/memberships', query_literal='?operation=batch-create',
              required=('AccountId', 'RoomId'), account_id_member='AccountId'),
    Operation('BatchDeletePhoneNumber', 'POST', '/phone-numbers', query_literal='?operation=batch-delete'),
    Operation('BatchSuspendUser', 'POST', '/accounts/{AccountId}/users', query_literal='?operation=suspend',
              required=('AccountId',), account_id_member='AccountId'),
    Operation('BatchUnsuspendUser', 'POST', '/accounts/{AccountId}/users', query_literal='?operation=unsuspend',
              required=('AccountId',), account_id_member='AccountId'),
    Operation('BatchUpdatePhoneNumber', 'POST', '/phone-numbers', query_literal='?operation=batch-update'),
    Operation('BatchUpdateUser', 'POST', '/accounts/{AccountId}/users',
              required=('AccountId',), account_id_member='AccountId'),
    Operation('CreateAccount', 'POST', '/accounts'),
    Operation('CreateBot', 'POST', '/accounts/{AccountId}/bots',
              required=('AccountId',), account_id_member='AccountId'),
    Operation('CreateMeetingDialOut', 'POST', '/meetings/{MeetingId}/dial-outs',
              required=('MeetingId',)),
    Operation('CreatePhoneNumberOrder', 'POST', '/phone-number-orders'),
    Operation('CreateRoom', 'POST', '/accounts/{AccountId}/rooms',
              required=('AccountId',), account_id_member='AccountId'),
    Operation('CreateRoomMembership', 'POST', '/accounts/{AccountId}/rooms/{RoomId}/memberships',
              required=('AccountId', 'RoomId'), account_id_member='AccountId'),
    Operation('CreateUser', 'POST', '/accounts/{AccountId}/users', query_literal='?operation=create',
              required=('AccountId',), account_id_member='AccountId'),
    Operation('DeleteAccount', 'DELETE', '/accounts/{AccountId}',
              required=('AccountId',), account_id_member='AccountId'),
    Operation('DeleteEventsConfiguration', 'DELETE', '/accounts/{AccountId}/bots/{BotId}/events-configuration',
              required=('AccountId', 'BotId'), account_id_member='AccountId'),
    Operation('DeletePhoneNumber', 'DELETE', '/phone-numbers/{PhoneNumberId}',
              required=('PhoneNumberId',)),
    Operation('DeleteRoom', 'DELETE', '/accounts/{AccountId}/rooms/{RoomId}',
              required=('AccountId', 'RoomId'), account_id_member='AccountId'),
    Operation('DeleteRoomMembership', 'DELETE', '/accounts/{AccountId}/rooms/{RoomId}/memberships/{MemberId}',
              required=('AccountId', 'RoomId', 'MemberId'), account_id_member='AccountId'),
    Operation('DisassociatePhoneNumberFromUser', 'POST', '/accounts/{AccountId}/users/{UserId}', query_literal='?operation=disassociate-phone-number',
              required=('AccountId', 'UserId'), account_id_member='AccountId'),
    Operation('DisassociateSigninDelegateGroupsFromAccount', 'POST', '/accounts/{AccountId}', query_literal='?operation=disassociate-signin-delegate-groups',
              required=('AccountId',), account_id_member='AccountId'),
    Operation('GetAccount', 'GET', '/accounts/{AccountId}',
              required=('AccountId',), account_id_member='AccountId'),
    Operation('GetAccountSettings', 'GET', '/accounts/{AccountId}/settings',
              required=('AccountId',), account_id_member='AccountId'),
    Operation('GetBot', 'GET', '/accounts/{AccountId}/bots/{BotId}',
              required=('AccountId', 'BotId'), account_id_member='AccountId'),
    Operation('GetEventsConfiguration', 'GET', '/accounts/{AccountId}/bots/{BotId}/events-configuration',
              required=('AccountId', 'BotId'), account_id_member='AccountId'),
    Operation('GetGlobalSettings', 'GET', '/settings'),
    Operation('GetPhoneNumber', 'GET', '/phone-numbers/{PhoneNumberId}',
              required=('PhoneNumberId',)),
    Operation('GetPhoneNumberOrder', 'GET', '/phone-number-orders/{PhoneNumberOrderId}',
              required=('PhoneNumberOrderId',)),
    Operation('GetPhoneNumberSettings', 'GET', '/settings/phone-number'),
    Operation('GetRetentionSettings', 'GET', '/accounts/{AccountId}/retention-settings',
              required=('AccountId',), account_id_member='AccountId'),
    Operation('GetRoom', 'GET', '/accounts/{AccountId}/rooms/{RoomId}',
              required=('AccountId', 'RoomId'), account_id_member='AccountId'),
    Operation('GetUser', 'GET', '/accounts/{AccountId}/users/{UserId}',
              required=('AccountId', 'UserId'), account_id_member='AccountId'),
    Operation('GetUserSettings', 'GET', '/accounts/{AccountId}/users/{UserId}/settings',
              required=('AccountId', 'UserId'), account_id_member='AccountId'),
    Operation('InviteUsers', 'POST', '/accounts/{AccountId}/users', query_literal='?operation=add',
              required=('AccountId',), account_id_member='AccountId'),
    Operation('ListAccounts', 'GET', '/accounts',
              query={'Name': 'name', 'UserEmail': 'user-email', **PAGE_QUERY},
              paginator=PAGINATOR),
    Operation('ListBots', 'GET', '/accounts/{AccountId}/bots',
              required=('AccountId',), account_id_member='AccountId',
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListPhoneNumberOrders', 'GET', '/phone-number-orders',
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListPhoneNumbers', 'GET', '/phone-numbers',
              query={'Status': 'status', 'ProductType': 'product-type',
                     'FilterName': 'filter-name', 'FilterValue': 'filter-value', **PAGE_QUERY},
              paginator=PAGINATOR),
    Operation('ListRoomMemberships', 'GET', '/accounts/{AccountId}/rooms/{RoomId}/memberships',
              required=('AccountId', 'RoomId'), account_id_member='AccountId',
              query=PAGE_QUERY, paginator=PAGINATOR),
    Operation('ListRooms', 'GET', '/accounts/{AccountId}/rooms',
              required=('AccountId',), account_id_member='AccountId',
              query={'MemberId': 'member-id', **PAGE_QUERY}, paginator=PAGINATOR),
    Operation('ListSupportedPhoneNumberCountries', 'GET', '/phone-number-countries',
              required=('ProductType',), query={'ProductType': 'product-type'}),
    Operation('ListUsers', 'GET', '/accounts/{AccountId}/users',
              required=('AccountId',), account_id_member='AccountId',
              query={'UserEmail': 'user-email', 'UserType': 'user-type', **PAGE_QUERY},
              paginator=PAGINATOR),
    Operation('LogoutUser', 'POST', '/accounts/{AccountId}/users/{UserId}', query_literal='?operation=logout',
              required=('AccountId', 'UserId'), account_id_member='AccountId'),
    Operation('PutEventsConfiguration', 'PUT', '/accounts/{AccountId}/bots/{BotId}/events-configuration',
              required=('AccountId', 'BotId'), account_id_member='AccountId'),
    Operation('PutRetentionSettings', 'PUT', '/accounts/{AccountId}/retention-settings',
              required=('AccountId',), account_id_member='AccountId'),
    Operation('RedactConversationMessage', 'POST', '/accounts/{AccountId}/conversations/{ConversationId}/messages/{MessageId}', query_literal='?operation=redact',
              required=('AccountId', 'ConversationId', 'MessageId'), account_id_member='AccountId'),
    Operation('RedactRoomMessage', 'POST', '/accounts/{AccountId}/rooms/{RoomId}/messages/{MessageId}', query_literal='?operation=redact',
              required=('AccountId', 'RoomId', 'MessageId'), account_id_member='AccountId'),
    Operation('RegenerateSecurityToken', 'POST', '/accounts/{AccountId}/bots/{BotId}', query_literal='?operation=regenerate-security-token',
              required=('AccountId', 'BotId'), account_id_member='AccountId'),
    Operation('ResetPersonalPIN', 'POST', '/accounts/{AccountId}/users/{UserId}', query_literal='?operation=reset-personal-pin',
              required=('AccountId', 'UserId'), account_id_member='AccountId'),
    Operation('RestorePhoneNumber', 'POST', '/phone-numbers/{PhoneNumberId}', query_literal='?operation=restore',
              required=('PhoneNumberId',)),
    Operation('SearchAvailablePhoneNumbers', 'GET', '/search', query_literal='?type=phone-numbers',
              query={'AreaCode': 'area-code', 'City': 'city', 'Country': 'country',
                     'State': 'state', 'TollFreePrefix': 'toll-free-prefix',
                     'PhoneNumberType': 'phone-number-type', **PAGE_QUERY}),
    Operation('UpdateAccount', 'POST', '/accounts/{AccountId}',
              required=('AccountId',), account_id_member='AccountId'),
    Operation('UpdateAccountSettings', 'PUT', '/accounts/{AccountId}/settings',
              required=('AccountId',), account_id_member='AccountId'),
    Operation('UpdateBot', 'POST', '/accounts/{AccountId}/bots/{BotId}',
              required=('AccountId', 'BotId'), account_id_member='AccountId'),
    Operation('UpdateGlobalSettings', 'PUT', '/settings'),
    Operation('UpdatePhoneNumber', 'POST', '/phone-numbers/{PhoneNumberId}',
              required=('PhoneNumberId',)),
    Operation('UpdatePhoneNumberSettings', 'PUT', '/settings/phone-number'),
    Operation('UpdateRoom', 'POST', '/accounts/{AccountId}/rooms/{RoomId}',
              required=('AccountId', 'RoomId'), account_id_member='AccountId'),
    Operation('UpdateRoomMembership', 'POST', '/accounts/{AccountId}/rooms/{RoomId}/memberships/{MemberId}',
              required=('AccountId', 'RoomId', 'MemberId'), account_id_member='AccountId'),
    Operation('UpdateUser', 'POST', '/accounts/{AccountId}/users/{UserId}',
              required=('AccountId', 'UserId'), account_id_member='AccountId'),
    Operation('UpdateUserSettings', 'PUT', '/accounts/{AccountId}/users/{UserId}/settings',
              required=('AccountId', 'UserId'), account_id_member='AccountId'),
)


class ChimeClient(AWSServiceClient):
    """Client for the Amazon Chime API."""

    SERVICE_NAME = 'Chime'
    SERVICE_ENV_ID = 'CHIME'
    SIGNING_NAME = 'chime'
    ENDPOINT_PREFIX = 'chime'
    GLOBAL_ENDPOINT = ('chime.us-east-1.amazonaws.com', 'us-east-1')
    OPERATIONS = OPERATIONS
    ERRORS = ChimeErrors
    RETRYABLE_ERRORS = frozenset({
        ChimeErrors.SERVICE_FAILURE,
        ChimeErrors.SERVICE_UNAVAILABLE,
        ChimeErrors.THROTTLED_CLIENT,
    })
    TIMESTAMP_MEMBERS = frozenset({
        'CreatedTimestamp',
        'UpdatedTimestamp',
        'InvitedOn',
        'CreatedOn',
        'UpdatedOn',
        'RegisteredOn',
        'DeletionTimestamp',
        'UserInvitationStatusTimestamp',
    })
