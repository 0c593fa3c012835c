"""
Client configuration: target environment, credentials and service versions.

Configuration is an explicit, immutable value handed to
:class:`~auropay_sdk.core.client.GatewayClient`; nothing is stored globally.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from .constants import (
    DEFAULT_API_VERSION,
    DEFAULT_API_VERSIONS,
    PRODUCTION_URL,
    SANDBOX_URL,
    UAT_URL,
)
from .environment import build_environment
from .errors import ConfigError

__all__ = [
    "ClientConfig",
    "ConfigError",
    "GatewayEnvironment",
    "load_client_config",
]

_PARAMETER_TO_ENV_KEY = {
    "environment": "AUROPAY_ENVIRONMENT",
    "access_key": "AUROPAY_ACCESS_KEY",
    "secret_key": "AUROPAY_SECRET_KEY",
    "timeout_seconds": "AUROPAY_TIMEOUT_SECONDS",
}

_INVALID_ENVIRONMENT = (
    "Invalid or missing value for environment. It should be 'DEV', 'UAT', or 'PROD'."
)


class GatewayEnvironment(str, Enum):
    DEV = "DEV"
    UAT = "UAT"
    PROD = "PROD"

    @classmethod
    def parse(cls, value: Any) -> "GatewayEnvironment":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(_INVALID_ENVIRONMENT)
        try:
            return cls(value.strip().upper())
        except ValueError as exc:
            raise ConfigError(_INVALID_ENVIRONMENT) from exc

    @property
    def base_url(self) -> str:
        if self is GatewayEnvironment.PROD:
            return PRODUCTION_URL
        if self is GatewayEnvironment.UAT:
            return UAT_URL
        return SANDBOX_URL


def _optional_str(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class ClientConfig:
    environment: GatewayEnvironment
    access_key: Optional[str] = None
    secret_key: Optional[str] = None
    api_versions: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_API_VERSIONS)
    )
    timeout_seconds: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "environment", GatewayEnvironment.parse(self.environment))
        object.__setattr__(self, "access_key", _optional_str(self.access_key))
        object.__setattr__(self, "secret_key", _optional_str(self.secret_key))
        object.__setattr__(self, "api_versions", MappingProxyType(dict(self.api_versions)))
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ConfigError("timeout_seconds must be greater than zero")

    @property
    def base_url(self) -> str:
        return self.environment.base_url

    def api_version_for(self, service: str) -> str:
        """
        Return the ``x-version`` for ``service``; unknown services get "1.0".
        """
        return self.api_versions.get(service, DEFAULT_API_VERSION)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Optional[str]]) -> "ClientConfig":
        timeout_raw = values.get("AUROPAY_TIMEOUT_SECONDS")
        timeout_seconds: Optional[float] = None
        if timeout_raw:
            try:
                timeout_seconds = float(timeout_raw)
            except ValueError as exc:
                raise ConfigError(
                    f"AUROPAY_TIMEOUT_SECONDS must be a number, got '{timeout_raw}'"
                ) from exc

        return cls(
            environment=GatewayEnvironment.parse(values.get("AUROPAY_ENVIRONMENT")),
            access_key=values.get("AUROPAY_ACCESS_KEY"),
            secret_key=values.get("AUROPAY_SECRET_KEY"),
            timeout_seconds=timeout_seconds,
        )


def load_client_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    environment: Optional[Union[GatewayEnvironment, str]] = None,
    access_key: Optional[str] = None,
    secret_key: Optional[str] = None,
    timeout_seconds: Optional[Union[float, str]] = None,
) -> ClientConfig:
    """
    Build a :class:`ClientConfig` from the process environment, a ``.env``
    file, explicit overrides and keyword arguments (highest priority last).
    """
    explicit = {
        "environment": environment,
        "access_key": access_key,
        "secret_key": secret_key,
        "timeout_seconds": timeout_seconds,
    }
    merged_overrides: Dict[str, str] = dict(overrides or {})
    for name, value in explicit.items():
        if value is None:
            continue
        merged_overrides[_PARAMETER_TO_ENV_KEY[name]] = str(getattr(value, "value", value))

    resolved = build_environment(env_file=env_file, base=base, overrides=merged_overrides)
    return ClientConfig.from_mapping(
        {key: resolved.get(key) for key in _PARAMETER_TO_ENV_KEY.values()}
    )
