"""
Endpoint resolution for the service clients.

Turns a region plus FIPS/dual-stack flags (or an explicit override URL) into
the base URL of a service and the region used to sign requests for it.
"""
import re
from dataclasses import dataclass, replace
from typing import Optional, Tuple
from urllib.parse import urlsplit, urlunsplit

from botocore.exceptions import InvalidRegionError
from botocore.utils import is_valid_endpoint_url, is_valid_ipv6_endpoint_url, validate_region_name

from logger_config import get_logger
from utils.exceptions import EndpointResolutionError

logger = get_logger(__name__)

HOST_LABEL = re.compile(r'^[a-zA-Z0-9]$|^[a-zA-Z0-9][a-zA-Z0-9-]{0,61}[a-zA-Z0-9]$')


@dataclass(frozen=True)
class Partition:
    name: str
    region_prefixes: Tuple[str, ...]
    dns_suffix: str
    dualstack_dns_suffix: Optional[str]
    supports_fips: bool = True


PARTITIONS = (
    Partition('aws-cn', ('cn-',), 'amazonaws.com.cn', 'api.amazonwebservices.com.cn'),
    Partition('aws-us-gov', ('us-gov-',), 'amazonaws.com', 'api.aws'),
    Partition('aws-iso-b', ('us-isob-',), 'sc2s.sgov.gov', None),
    Partition('aws-iso', ('us-iso-',), 'c2s.ic.gov', None),
    Partition('aws', ('',), 'amazonaws.com', 'api.aws'),
)


def partition_for_region(region: str) -> Partition:
    for partition in PARTITIONS:
        if any(region.startswith(prefix) for prefix in partition.region_prefixes):
            return partition
    return PARTITIONS[-1]


@dataclass(frozen=True)
class ResolvedEndpoint:
    """Base URL of a service plus the region requests are signed for."""

    url: str
    signing_region: str

    @property
    def host(self) -> str:
        return urlsplit(self.url).hostname or ''

    def add_prefix_if_missing(self, prefix: str) -> 'ResolvedEndpoint':
        """
        Prepend a host prefix such as 'control-storage-' to the hostname.

        Args:
            prefix: Host prefix of the operation

        Returns:
            New endpoint with the prefixed host; unchanged if already prefixed

        Raises:
            EndpointResolutionError: If the prefixed host label is not valid
        """
        parts = urlsplit(self.url)
        netloc = parts.netloc
        if netloc.startswith(prefix):
            return self
        label = (prefix + netloc).split('.', 1)[0].split(':', 1)[0]
        if not HOST_LABEL.match(label):
            raise EndpointResolutionError(
                f'Host prefix {prefix!r} produces an invalid host label {label!r}'
            )
        return replace(self, url=urlunsplit(parts._replace(netloc=prefix + netloc)))


class EndpointProvider:
    """Resolves the endpoint of one service."""

    def __init__(
        self,
        endpoint_prefix: str,
        global_endpoint: Optional[Tuple[str, str]] = None
    ) -> None:
        """
        Initialize endpoint provider.

        Args:
            endpoint_prefix: First DNS label of the service, e.g. 'omics'
            global_endpoint: (hostname, signing region) of a partition-wide
                endpoint for services that are not regionalized
        """
        self.endpoint_prefix = endpoint_prefix
        self.global_endpoint = global_endpoint
        self._override: Optional[str] = None

    def override_endpoint(self, url: Optional[str]) -> None:
        """Pin resolution to a fixed URL; None restores normal resolution."""
        self._override = url.rstrip('/') if url else None

    def resolve(
        self,
        region: Optional[str],
        use_fips: bool = False,
        use_dualstack: bool = False,
        endpoint_url: Optional[str] = None
    ) -> ResolvedEndpoint:
        """
        Resolve the endpoint for the given parameters.

        Args:
            region: AWS region name
            use_fips: Use the FIPS variant of the endpoint
            use_dualstack: Use the dual-stack (IPv4 and IPv6) variant
            endpoint_url: Override URL from configuration

        Returns:
            ResolvedEndpoint

        Raises:
            EndpointResolutionError: If no endpoint can be built
        """
        override = self._override or endpoint_url
        if override:
            if not (is_valid_endpoint_url(override) or is_valid_ipv6_endpoint_url(override)):
                raise EndpointResolutionError(f'Invalid endpoint URL: {override}')
            return ResolvedEndpoint(
                url=override.rstrip('/'),
                signing_region=region or 'us-east-1',
            )

        if not region:
            raise EndpointResolutionError(
                'A region must be configured when no endpoint URL is set'
            )

        if region.startswith('fips-') or region.endswith('-fips'):
            region = region.replace('fips-', '').replace('-fips', '')
            use_fips = True

        try:
            validate_region_name(region)
        except InvalidRegionError:
            raise EndpointResolutionError(f'Invalid region name: {region}') from None

        partition = partition_for_region(region)

        if use_dualstack and partition.dualstack_dns_suffix is None:
            raise EndpointResolutionError(
                f'DualStack is enabled but partition {partition.name} does not support it'
            )
        if use_fips and not partition.supports_fips:
            raise EndpointResolutionError(
                f'FIPS is enabled but partition {partition.name} does not support it'
            )

        if self.global_endpoint and partition.name == 'aws':
            if use_fips or use_dualstack:
                raise EndpointResolutionError(
                    f'{self.endpoint_prefix} has no FIPS or DualStack endpoint'
                )
            hostname, signing_region = self.global_endpoint
            return ResolvedEndpoint(url=f'https://{hostname}', signing_region=signing_region)

        suffix = partition.dualstack_dns_suffix if use_dualstack else partition.dns_suffix
        label = f'{self.endpoint_prefix}-fips' if use_fips else self.endpoint_prefix
        url = f'https://{label}.{region}.{suffix}'
        logger.debug(f'Resolved endpoint {url} for region {region}')
        return ResolvedEndpoint(url=url, signing_region=region)
