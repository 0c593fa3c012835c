"""
Public, high-level helpers for talking to the Auropay gateway.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

import requests

from .core.client import GatewayClient
from .core.config import ClientConfig, GatewayEnvironment, load_client_config
from .core.payloads import FlatRequest

__all__ = [
    "create_client",
    "create_payment_link",
    "create_payment_qr_code",
    "create_refund",
]


def create_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    environment: Optional[Union[GatewayEnvironment, str]] = None,
    access_key: Optional[str] = None,
    secret_key: Optional[str] = None,
    timeout_seconds: Optional[Union[float, str]] = None,
) -> GatewayClient:
    """
    Construct a :class:`GatewayClient`.

    Callers can either supply a ready-made :class:`ClientConfig` or let the
    helper assemble one from environment data.
    """
    if config is not None:
        extras = (
            overrides,
            base,
            environment,
            access_key,
            secret_key,
            timeout_seconds,
        )
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_client_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            environment=environment,
            access_key=access_key,
            secret_key=secret_key,
            timeout_seconds=timeout_seconds,
        )
    return GatewayClient(cfg, session=session)


def create_payment_link(
    request: FlatRequest,
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
) -> Dict[str, Any]:
    """
    One-shot helper: build a client and create a payment link.
    """
    client = create_client(config=config, session=session, env_file=env_file)
    return client.create_payment_link(request)


def create_payment_qr_code(
    request: FlatRequest,
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
) -> Dict[str, Any]:
    client = create_client(config=config, session=session, env_file=env_file)
    return client.create_payment_qr_code(request)


def create_refund(
    request: FlatRequest,
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
) -> Dict[str, Any]:
    client = create_client(config=config, session=session, env_file=env_file)
    return client.create_refund(request)
