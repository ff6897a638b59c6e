"""
Configuration module for client settings and environment variable validation.

This module reads the standard AWS environment variables and provides a
type-safe configuration object shared by every service client.
"""
import os
from dataclasses import dataclass
from typing import Optional


TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean value, got: {raw}")


def _env_number(name: str, default: float, cast=float, minimum: float = 0):
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got: {raw}") from None
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got: {raw}")
    return value


@dataclass
class ClientConfig:
    """Type-safe client configuration."""

    region: Optional[str] = None
    profile_name: Optional[str] = None
    endpoint_url: Optional[str] = None
    use_fips: bool = False
    use_dualstack: bool = False
    inject_host_prefix: bool = True
    connect_timeout: float = 60.0
    read_timeout: float = 60.0
    max_attempts: int = 3
    verify: Optional[str] = None
    max_workers: int = 4
    log_level: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Create ClientConfig instance from environment variables.

        Raises:
            ValueError: If an environment variable has an invalid value.
        """
        region = (
            os.environ.get("AWS_REGION")
            or os.environ.get("AWS_DEFAULT_REGION")
            or None
        )
        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()

        # Validate log level
        if log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {VALID_LOG_LEVELS}, got: {log_level}"
            )

        return cls(
            region=region,
            profile_name=os.environ.get("AWS_PROFILE") or None,
            endpoint_url=os.environ.get("AWS_ENDPOINT_URL") or None,
            use_fips=_env_bool("AWS_USE_FIPS_ENDPOINT"),
            use_dualstack=_env_bool("AWS_USE_DUALSTACK_ENDPOINT"),
            connect_timeout=_env_number("AWS_CONNECT_TIMEOUT", 60.0),
            read_timeout=_env_number("AWS_READ_TIMEOUT", 60.0),
            max_attempts=_env_number("AWS_MAX_ATTEMPTS", 3, cast=int, minimum=1),
            verify=os.environ.get("AWS_CA_BUNDLE") or None,
            max_workers=_env_number("AWS_CLIENT_MAX_WORKERS", 4, cast=int, minimum=1),
            log_level=log_level,
        )

    def endpoint_url_for(self, service_env_id: str) -> Optional[str]:
        """
        Return the endpoint override for a service.

        A service specific AWS_ENDPOINT_URL_<SERVICE> variable wins over the
        global endpoint_url.

        Args:
            service_env_id: Upper-case service id, e.g. 'CHIME' or 'OPENSEARCH'
        """
        specific = os.environ.get(f"AWS_ENDPOINT_URL_{service_env_id}")
        return specific or self.endpoint_url


_config: Optional[ClientConfig] = None


def get_config() -> ClientConfig:
    """
    Get the global configuration instance.

    Returns:
        ClientConfig: The validated configuration object

    Raises:
        ValueError: If environment variables are invalid.
    """
    global _config
    if _config is None:
        _config = ClientConfig.from_env()
    return _config
