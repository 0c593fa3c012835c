"""
Core primitives: validation, request builders, configuration and the client.
"""

from .builders import PaymentRequestBuilder, RefundRequestBuilder
from .client import ErrorResponse, GatewayClient, error_response, is_error_response
from .config import ClientConfig, GatewayEnvironment, load_client_config
from .environment import EnvironmentVariables, build_environment, load_env_file
from .errors import ConfigError, ErrorCode, ValidationError
from .models import CallbackParameters, Customer, Settings
from .payloads import (
    build_payment_link_payload,
    build_payment_qr_code_payload,
    build_refund_payload,
)

__all__ = [
    "CallbackParameters",
    "ClientConfig",
    "ConfigError",
    "Customer",
    "EnvironmentVariables",
    "ErrorCode",
    "ErrorResponse",
    "GatewayClient",
    "GatewayEnvironment",
    "PaymentRequestBuilder",
    "RefundRequestBuilder",
    "Settings",
    "ValidationError",
    "build_environment",
    "build_payment_link_payload",
    "build_payment_qr_code_payload",
    "build_refund_payload",
    "error_response",
    "is_error_response",
    "load_client_config",
    "load_env_file",
]
