"""
Fluent builders for the gateway's payment and refund requests.

Every setter validates its input with the rules from
:mod:`auropay_sdk.core.validation` before anything is stored, raising the
first :class:`~auropay_sdk.core.errors.ValidationError` it encounters.
Fields that were never set stay ``None`` in the underlying record and are left
out of :meth:`to_flat_structure`, so "not provided" never reaches the wire as
``null``.

Builders are single-owner objects: one builder per request, mutated from one
thread. Sharing a builder across threads is the caller's responsibility.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, fields
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from .errors import ErrorCode, ValidationError
from .models import CallbackParameters, Customer, Settings
from .validation import (
    CALLBACK_API_URL_PATTERN,
    DATE_TIME_PATTERN,
    EMAIL_PATTERN,
    NAME_PATTERN,
    PHONE_PATTERN,
    SPECIAL_CHAR_PATTERN,
    forbid_pattern,
    max_length,
    require_non_empty,
    require_pattern,
    require_positive_amount,
)

__all__ = [
    "EXPIRE_ON_FORMAT",
    "PaymentRequestBuilder",
    "PaymentRequestFields",
    "RefundRequestBuilder",
    "RefundRequestFields",
]

Amount = Union[int, float, Decimal, str]
Clock = Callable[[], datetime]

EXPIRE_ON_FORMAT = "%d-%m-%Y %H:%M:%S"

TITLE_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 1000
EMAIL_MAX_LENGTH = 320
CALLBACK_URL_MAX_LENGTH = 2048
REFERENCE_NO_MAX_LENGTH = 50
REMARKS_MAX_LENGTH = 200


def _as_text(value: Any) -> Any:
    if value is None or isinstance(value, str):
        return value
    return str(value)


def _flatten(record: Any, wire_names: Mapping[str, str]) -> Dict[str, Any]:
    flat: Dict[str, Any] = {}
    for field in fields(record):
        value = getattr(record, field.name)
        if value is None:
            continue
        flat[wire_names[field.name]] = copy.deepcopy(value)
    return flat


@dataclass
class PaymentRequestFields:
    """
    Typed storage behind :class:`PaymentRequestBuilder`; ``None`` means unset.
    """

    title: Optional[str] = None
    amount: Optional[Amount] = None
    short_description: Optional[str] = None
    payment_description: Optional[str] = None
    enable_partial_payment: Optional[bool] = None
    enable_multiple_payment: Optional[bool] = None
    display_receipt: Optional[bool] = None
    expire_on: Optional[str] = None
    customers: Optional[List[Dict[str, Any]]] = None
    callback_parameters: Optional[Dict[str, Any]] = None
    settings: Optional[Dict[str, Any]] = None


_PAYMENT_WIRE_NAMES = {
    "title": "title",
    "amount": "amount",
    "short_description": "shortDescription",
    "payment_description": "paymentDescription",
    "enable_partial_payment": "enablePartialPayment",
    "enable_multiple_payment": "enableMultiplePayment",
    "display_receipt": "displayReceipt",
    "expire_on": "expireOn",
    "customers": "Customers",
    "callback_parameters": "CallbackParameters",
    "settings": "Settings",
}

_PAYMENT_SETTERS = {
    "title": "set_title",
    "amount": "set_amount",
    "shortDescription": "set_short_description",
    "paymentDescription": "set_payment_description",
    "enablePartialPayment": "set_enable_partial_payment",
    "enableMultiplePayment": "set_enable_multiple_payment",
    "displayReceipt": "set_display_receipt",
    "expireOn": "set_expire_on",
    "Customers": "set_customers",
    "CallbackParameters": "set_callback_parameters",
    "Settings": "set_settings",
}


def _validate_customer(customer: Mapping[str, Any]) -> None:
    first_name = customer.get("firstName")
    require_non_empty(first_name, ErrorCode.SE0010)
    require_pattern(first_name, NAME_PATTERN, ErrorCode.SE0034)

    last_name = customer.get("lastName")
    require_non_empty(last_name, ErrorCode.SE0011)
    require_pattern(last_name, NAME_PATTERN, ErrorCode.SE0035)

    phone = customer.get("phone")
    require_non_empty(phone, ErrorCode.SE0028)
    require_pattern(phone, PHONE_PATTERN, ErrorCode.SE0012)

    email = customer.get("email")
    require_non_empty(email, ErrorCode.SE0027)
    max_length(_as_text(email), EMAIL_MAX_LENGTH, ErrorCode.SE0026)
    require_pattern(email, EMAIL_PATTERN, ErrorCode.SE0013)


def _normalize_customer(customer: Any) -> Dict[str, Any]:
    if isinstance(customer, Customer):
        return customer.to_dict()
    if isinstance(customer, Mapping):
        normalized = dict(customer)
        for key, value in normalized.items():
            if isinstance(value, str):
                normalized[key] = value.strip()
        return normalized
    raise ValidationError(ErrorCode.SE0032)


class PaymentRequestBuilder:
    """
    Assemble the body of a payment link or payment QR code request.

    ``clock`` supplies "now" for the ``expireOn`` check and defaults to
    :meth:`datetime.now`; tests inject a fixed clock.
    """

    def __init__(self, *, clock: Optional[Clock] = None) -> None:
        self._fields = PaymentRequestFields()
        self._clock: Clock = clock or datetime.now

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        *,
        clock: Optional[Clock] = None,
    ) -> "PaymentRequestBuilder":
        """
        Run the setter for every known wire key in ``data``; others are ignored.
        """
        builder = cls(clock=clock)
        for key, value in data.items():
            setter = _PAYMENT_SETTERS.get(key)
            if setter is not None:
                getattr(builder, setter)(value)
        return builder

    def set_title(self, title: str) -> "PaymentRequestBuilder":
        title = _as_text(title)
        require_non_empty(title, ErrorCode.SE0003)
        forbid_pattern(title, SPECIAL_CHAR_PATTERN, ErrorCode.SE0020)
        max_length(title, TITLE_MAX_LENGTH, ErrorCode.SE0019)
        self._fields.title = title.strip()
        return self

    def get_title(self) -> str:
        return self._fields.title or ""

    def set_amount(self, amount: Amount) -> "PaymentRequestBuilder":
        require_positive_amount(amount, ErrorCode.SE0018, ErrorCode.SE0002)
        self._fields.amount = amount
        return self

    def get_amount(self) -> Optional[Amount]:
        return self._fields.amount

    def set_short_description(
        self, short_description: Optional[str]
    ) -> "PaymentRequestBuilder":
        short_description = _as_text(short_description)
        max_length(short_description, DESCRIPTION_MAX_LENGTH, ErrorCode.SE0021)
        forbid_pattern(short_description, SPECIAL_CHAR_PATTERN, ErrorCode.SE0022)
        self._fields.short_description = (
            short_description.strip() if short_description is not None else None
        )
        return self

    def get_short_description(self) -> str:
        return self._fields.short_description or ""

    def set_payment_description(
        self, payment_description: Optional[str]
    ) -> "PaymentRequestBuilder":
        payment_description = _as_text(payment_description)
        max_length(payment_description, DESCRIPTION_MAX_LENGTH, ErrorCode.SE0004)
        forbid_pattern(payment_description, SPECIAL_CHAR_PATTERN, ErrorCode.SE0023)
        self._fields.payment_description = (
            payment_description.strip() if payment_description is not None else None
        )
        return self

    def get_payment_description(self) -> str:
        return self._fields.payment_description or ""

    def set_enable_partial_payment(self, enabled: bool) -> "PaymentRequestBuilder":
        self._fields.enable_partial_payment = bool(enabled)
        return self

    def get_enable_partial_payment(self) -> bool:
        return bool(self._fields.enable_partial_payment)

    def set_enable_multiple_payment(self, enabled: bool) -> "PaymentRequestBuilder":
        self._fields.enable_multiple_payment = bool(enabled)
        return self

    def get_enable_multiple_payment(self) -> bool:
        return bool(self._fields.enable_multiple_payment)

    def set_display_receipt(self, display: bool) -> "PaymentRequestBuilder":
        self._fields.display_receipt = bool(display)
        return self

    def get_display_receipt(self) -> bool:
        return bool(self._fields.display_receipt)

    def set_expire_on(self, expire_on: str) -> "PaymentRequestBuilder":
        """
        Set the link expiry as ``DD-MM-YYYY HH:MM:SS``.

        The value must be a real calendar timestamp strictly after the
        builder's clock; the original string is what gets stored.
        """
        require_pattern(expire_on, DATE_TIME_PATTERN, ErrorCode.SE0001)
        try:
            expires_at = datetime.strptime(expire_on, EXPIRE_ON_FORMAT)
        except ValueError as exc:
            raise ValidationError(ErrorCode.SE0001) from exc

        if expires_at <= self._clock():
            raise ValidationError(ErrorCode.SE0024)

        self._fields.expire_on = expire_on
        return self

    def get_expire_on(self) -> str:
        return self._fields.expire_on or ""

    def set_customers(
        self,
        customers: Union[Customer, Mapping[str, Any], Sequence[Any]],
    ) -> "PaymentRequestBuilder":
        if isinstance(customers, (Customer, Mapping)):
            customers = [customers]
        if not isinstance(customers, (list, tuple)) or not customers:
            raise ValidationError(ErrorCode.SE0032)

        normalized = [_normalize_customer(customer) for customer in customers]
        for customer in normalized:
            _validate_customer(customer)

        self._fields.customers = normalized
        return self

    def get_customers(self) -> List[Dict[str, Any]]:
        return list(self._fields.customers or [])

    def set_callback_parameters(
        self,
        callback_parameters: Union[CallbackParameters, Mapping[str, Any]],
    ) -> "PaymentRequestBuilder":
        if isinstance(callback_parameters, CallbackParameters):
            normalized = callback_parameters.to_dict()
        elif isinstance(callback_parameters, Mapping) and callback_parameters:
            normalized = {
                key: value.strip() if isinstance(value, str) else value
                for key, value in callback_parameters.items()
            }
        else:
            raise ValidationError(ErrorCode.SE0005)

        url = normalized.get("CallbackApiUrl")
        require_non_empty(url, ErrorCode.SE0031)
        require_pattern(url, CALLBACK_API_URL_PATTERN, ErrorCode.SE0014)
        max_length(url, CALLBACK_URL_MAX_LENGTH, ErrorCode.SE0030)
        max_length(
            _as_text(normalized.get("ReferenceNo")),
            REFERENCE_NO_MAX_LENGTH,
            ErrorCode.SE0009,
        )

        self._fields.callback_parameters = normalized
        return self

    def get_callback_parameters(self) -> Dict[str, Any]:
        return dict(self._fields.callback_parameters or {})

    def set_settings(
        self,
        settings: Union[Settings, Mapping[str, Any]],
    ) -> "PaymentRequestBuilder":
        if isinstance(settings, Settings):
            normalized = settings.to_dict()
        elif isinstance(settings, Mapping) and settings:
            normalized = dict(settings)
        else:
            raise ValidationError(ErrorCode.SE0025)

        if not isinstance(normalized.get("displaySummary", False), bool):
            raise ValidationError(ErrorCode.SE0033)

        self._fields.settings = normalized
        return self

    def get_settings(self) -> Dict[str, Any]:
        return dict(self._fields.settings or {})

    def to_flat_structure(self) -> Dict[str, Any]:
        return _flatten(self._fields, _PAYMENT_WIRE_NAMES)


@dataclass
class RefundRequestFields:
    amount: Optional[Amount] = None
    remarks: Optional[str] = None
    order_id: Optional[str] = None


_REFUND_WIRE_NAMES = {
    "amount": "Amount",
    "remarks": "Remarks",
    "order_id": "OrderId",
}

_REFUND_SETTERS = {
    "Amount": "set_refund_amount",
    "Remarks": "set_refund_remarks",
    "OrderId": "set_order_id",
}


class RefundRequestBuilder:
    """
    Assemble the body of a refund request against an existing order.
    """

    def __init__(self) -> None:
        self._fields = RefundRequestFields()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RefundRequestBuilder":
        builder = cls()
        for key, value in data.items():
            setter = _REFUND_SETTERS.get(key)
            if setter is not None:
                getattr(builder, setter)(value)
        return builder

    def set_refund_amount(self, amount: Amount) -> "RefundRequestBuilder":
        """
        Amount to refund; it should not exceed the original transaction amount.
        """
        require_positive_amount(amount, ErrorCode.SE0018, ErrorCode.SE0002)
        self._fields.amount = amount
        return self

    def get_refund_amount(self) -> Optional[Amount]:
        return self._fields.amount

    def set_refund_remarks(self, remarks: Optional[str]) -> "RefundRequestBuilder":
        remarks = _as_text(remarks)
        max_length(remarks, REMARKS_MAX_LENGTH, ErrorCode.SE0007)
        self._fields.remarks = remarks.strip() if remarks is not None else None
        return self

    def get_refund_remarks(self) -> str:
        return self._fields.remarks or ""

    def set_order_id(self, order_id: str) -> "RefundRequestBuilder":
        order_id = _as_text(order_id)
        require_non_empty(order_id, ErrorCode.SE0006)
        self._fields.order_id = order_id.strip()
        return self

    def get_order_id(self) -> str:
        return self._fields.order_id or ""

    def to_flat_structure(self) -> Dict[str, Any]:
        return _flatten(self._fields, _REFUND_WIRE_NAMES)
