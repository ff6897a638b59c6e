"""
Service clients for AWS APIs.

Each client exposes one snake_case method per API operation; the shared
request pipeline lives in services.base_client.
"""
from services.base_client import AWSServiceClient
from services.chime_client import ChimeClient
from services.gamelift_client import GameLiftClient
from services.migrationhub_strategy_client import MigrationHubStrategyRecommendationsClient
from services.omics_client import OmicsClient
from services.opensearch_client import OpenSearchClient

__all__ = [
    'AWSServiceClient',
    'ChimeClient',
    'GameLiftClient',
    'MigrationHubStrategyRecommendationsClient',
    'OmicsClient',
    'OpenSearchClient',
]
