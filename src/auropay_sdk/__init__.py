"""
Public facade for the Auropay gateway SDK.

The most useful pieces are re-exported so integrators can
``from auropay_sdk import ...`` without navigating the package.
"""

from .api import (
    create_client,
    create_payment_link,
    create_payment_qr_code,
    create_refund,
)
from .core import (
    CallbackParameters,
    ClientConfig,
    ConfigError,
    Customer,
    EnvironmentVariables,
    ErrorCode,
    ErrorResponse,
    GatewayClient,
    GatewayEnvironment,
    PaymentRequestBuilder,
    RefundRequestBuilder,
    Settings,
    ValidationError,
    build_environment,
    build_payment_link_payload,
    build_payment_qr_code_payload,
    build_refund_payload,
    is_error_response,
    load_client_config,
    load_env_file,
)

__all__ = (
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
    "create_client",
    "create_payment_link",
    "create_payment_qr_code",
    "create_refund",
    "is_error_response",
    "load_client_config",
    "load_env_file",
)
