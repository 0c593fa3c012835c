"""
Helpers for turning request builders into the JSON bodies sent to the gateway.
"""

from __future__ import annotations

import copy
from decimal import Decimal
from typing import Any, Dict, Mapping, Protocol, Union

from .errors import ErrorCode, ValidationError

__all__ = [
    "FlatRequest",
    "build_payment_link_payload",
    "build_payment_qr_code_payload",
    "build_refund_payload",
]


class _Flattenable(Protocol):
    def to_flat_structure(self) -> Dict[str, Any]: ...


FlatRequest = Union[_Flattenable, Mapping[str, Any]]


def _wire_value(value: Any) -> Any:
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    if isinstance(value, Mapping):
        return {key: _wire_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_wire_value(item) for item in value]
    return value


def _flatten(request: FlatRequest) -> Dict[str, Any]:
    """
    Copy the request into a plain dict the json encoder can serialize.

    Builders keep ``Decimal`` amounts as given; on the wire they become
    JSON numbers.
    """
    if hasattr(request, "to_flat_structure"):
        flat = request.to_flat_structure()
    else:
        flat = copy.deepcopy(dict(request))
    return _wire_value(flat)


def _with_payment_defaults(body: Dict[str, Any]) -> Dict[str, Any]:
    body["ResponseType"] = 1
    body["enableProtection"] = False
    return body


def build_payment_link_payload(request: FlatRequest) -> Dict[str, Any]:
    if request is None:
        raise ValidationError(ErrorCode.SE0016)
    return _with_payment_defaults(_flatten(request))


def build_payment_qr_code_payload(request: FlatRequest) -> Dict[str, Any]:
    if request is None:
        raise ValidationError(ErrorCode.SE0017)
    return _with_payment_defaults(_flatten(request))


def build_refund_payload(request: FlatRequest) -> Dict[str, Any]:
    """
    Build a refund body. Payment-only defaults are never added here.
    """
    if request is None:
        raise ValidationError(ErrorCode.SE0029)
    body = _flatten(request)
    body["UserType"] = 1
    return body
