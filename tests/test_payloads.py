"""Tests for request assembly and the type-specific defaults."""

from __future__ import annotations

import json
from decimal import Decimal

import pytest

from auropay_sdk import (
    ErrorCode,
    PaymentRequestBuilder,
    RefundRequestBuilder,
    Settings,
    ValidationError,
    build_payment_link_payload,
    build_payment_qr_code_payload,
    build_refund_payload,
)


@pytest.fixture
def payment_request(customer, callback_parameters):
    return (
        PaymentRequestBuilder()
        .set_title("Invoice 1")
        .set_amount(100)
        .set_customers(customer)
        .set_callback_parameters(callback_parameters)
        .set_settings(Settings(display_summary=True))
    )


@pytest.mark.parametrize(
    "build", [build_payment_link_payload, build_payment_qr_code_payload]
)
def test_payment_payload_adds_transport_defaults(build, payment_request):
    body = build(payment_request)
    expected = payment_request.to_flat_structure()
    expected.update({"ResponseType": 1, "enableProtection": False})
    assert body == expected


def test_payment_payload_does_not_touch_builder(payment_request):
    build_payment_link_payload(payment_request)
    flat = payment_request.to_flat_structure()
    assert "ResponseType" not in flat
    assert "enableProtection" not in flat


def test_payment_payload_accepts_flat_mapping():
    flat = {"title": "Invoice 1", "amount": 10}
    body = build_payment_qr_code_payload(flat)
    assert body == {"title": "Invoice 1", "amount": 10, "ResponseType": 1, "enableProtection": False}
    assert flat == {"title": "Invoice 1", "amount": 10}


def test_refund_payload_never_has_payment_defaults():
    refund = RefundRequestBuilder().set_refund_amount(5).set_order_id("ORD-1")
    body = build_refund_payload(refund)
    assert "ResponseType" not in body
    assert "enableProtection" not in body
    assert body == {"Amount": 5, "OrderId": "ORD-1", "UserType": 1}


@pytest.mark.parametrize(
    "build, code",
    [
        (build_payment_link_payload, ErrorCode.SE0016),
        (build_payment_qr_code_payload, ErrorCode.SE0017),
        (build_refund_payload, ErrorCode.SE0029),
    ],
)
def test_missing_request(build, code):
    with pytest.raises(ValidationError) as excinfo:
        build(None)
    assert excinfo.value.code is code


def test_decimal_amounts_become_json_numbers():
    refund = RefundRequestBuilder().set_refund_amount(Decimal("12.34")).set_order_id("ORD-1")
    body = build_refund_payload(refund)
    assert body["Amount"] == 12.34
    assert isinstance(body["Amount"], float)
    assert refund.get_refund_amount() == Decimal("12.34")
    json.dumps(body)


def test_integral_decimal_becomes_int():
    body = build_payment_link_payload(PaymentRequestBuilder().set_amount(Decimal("100.00")))
    assert body["amount"] == 100
    assert isinstance(body["amount"], int)


def test_numeric_string_amount_is_sent_as_given():
    body = build_payment_qr_code_payload({"amount": "250", "nested": [{"fee": Decimal("0.5")}]})
    assert body["amount"] == "250"
    assert body["nested"] == [{"fee": 0.5}]
