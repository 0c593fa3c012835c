"""
HTTP client for the Auropay payment gateway.

Builders raise on bad input, but the transport boundary never raises: any
failed exchange comes back as ``{"error_code": ..., "message": ...}``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, Union
from urllib.parse import quote

import requests

from .config import ClientConfig, GatewayEnvironment
from .constants import (
    PAYMENT_BY_REFNO,
    PAYMENT_BY_TRANSACTION_ID,
    PAYMENTLINK_API,
    PAYMENTQRCODE_API,
    REFUND_API,
)
from .errors import ErrorCode, ValidationError
from .payloads import (
    FlatRequest,
    build_payment_link_payload,
    build_payment_qr_code_payload,
    build_refund_payload,
)

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "ErrorResponse",
    "GatewayClient",
    "error_response",
    "is_error_response",
]

DEFAULT_ERROR_MESSAGE = "Not Found"


class ErrorResponse(dict):
    """
    A failed exchange, shaped as ``{"error_code": ..., "message": ...}``.

    Compares equal to the plain dict; the type tells it apart from a
    gateway body that happens to use the same keys.
    """


def error_response(status: Optional[int], message: Optional[str] = None) -> ErrorResponse:
    return ErrorResponse(error_code=status, message=message or DEFAULT_ERROR_MESSAGE)


def is_error_response(response: Any) -> bool:
    return isinstance(response, ErrorResponse)


def _server_message(response: Optional[requests.Response]) -> Optional[str]:
    if response is None:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        return str(message) if message else None
    return None


def _path_identifier(value: Optional[str], error: ErrorCode) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(error)
    return quote(str(value).strip(), safe="")


class GatewayClient:
    """
    Thin wrapper around the gateway's REST endpoints.

    ``config`` may be a :class:`ClientConfig` or just an environment name;
    an invalid environment raises :class:`ConfigError` before the client exists.
    """

    def __init__(
        self,
        config: Union[ClientConfig, GatewayEnvironment, str],
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not isinstance(config, ClientConfig):
            config = ClientConfig(environment=config)
        self.config = config
        self.base_url = config.base_url
        self.session = session or requests.Session()

    def create_payment_link(self, request: FlatRequest) -> Dict[str, Any]:
        body = build_payment_link_payload(request)
        return self._send("paymentlink", "POST", PAYMENTLINK_API, body)

    def create_payment_qr_code(self, request: FlatRequest) -> Dict[str, Any]:
        body = build_payment_qr_code_payload(request)
        return self._send("paymentqrcodes", "POST", PAYMENTQRCODE_API, body)

    def create_refund(self, request: FlatRequest) -> Dict[str, Any]:
        body = build_refund_payload(request)
        return self._send("refunds", "POST", REFUND_API, body)

    def get_status_by_transaction_id(self, transaction_id: str) -> Dict[str, Any]:
        transaction_id = _path_identifier(transaction_id, ErrorCode.SE0008)
        return self._send(
            "statusbytransid",
            "GET",
            f"{PAYMENT_BY_TRANSACTION_ID}{transaction_id}",
        )

    def get_status_by_reference_id(self, reference_id: str) -> Dict[str, Any]:
        reference_id = _path_identifier(reference_id, ErrorCode.SE0015)
        return self._send(
            "statusbyrefid",
            "GET",
            f"{PAYMENT_BY_REFNO}{reference_id}",
        )

    def _headers(self, api_version: str) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "x-version": api_version,
        }
        if self.config.access_key:
            headers["x-access-key"] = self.config.access_key
        if self.config.secret_key:
            headers["x-secret-key"] = self.config.secret_key
        return headers

    def _send(
        self,
        service: str,
        method: str,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        url = f"{self.base_url}{endpoint}"
        options: Dict[str, Any] = {
            "headers": self._headers(self.config.api_version_for(service)),
            "timeout": self.config.timeout_seconds,
        }
        if method == "POST" and data:
            options["json"] = data
        elif method == "GET" and data:
            options["params"] = data

        logging.info("Sending %s request to %s", method, url)
        try:
            response = self.session.request(method, url, **options)
            response.raise_for_status()
        except requests.RequestException as exc:
            failed = exc.response
            status = failed.status_code if failed is not None else None
            logging.error(
                "Gateway request failed: %s %s status=%s error=%s request_data=%s response_body=%s",
                method,
                url,
                status,
                exc,
                json.dumps(data, default=str) if data is not None else None,
                failed.text if failed is not None else None,
            )
            return error_response(status, _server_message(failed))

        try:
            return response.json()
        except ValueError:
            logging.error(
                "Gateway returned non-JSON body for %s %s: %s",
                method,
                url,
                response.text,
            )
            return error_response(response.status_code, "Invalid JSON response from gateway")
