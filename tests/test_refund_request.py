"""Tests for RefundRequestBuilder."""

from __future__ import annotations

import pytest

from auropay_sdk import ErrorCode, RefundRequestBuilder, ValidationError


def test_builds_refund_body():
    flat = (
        RefundRequestBuilder()
        .set_refund_amount(50)
        .set_refund_remarks("  Customer cancelled  ")
        .set_order_id(" ORD-1001 ")
        .to_flat_structure()
    )
    assert flat == {"Amount": 50, "Remarks": "Customer cancelled", "OrderId": "ORD-1001"}


def test_getter_defaults():
    builder = RefundRequestBuilder()
    assert builder.get_refund_amount() is None
    assert builder.get_refund_remarks() == ""
    assert builder.get_order_id() == ""
    assert builder.to_flat_structure() == {}


@pytest.mark.parametrize("amount", [0, -0.5, "zero", True])
def test_rejects_invalid_amount(amount):
    with pytest.raises(ValidationError) as excinfo:
        RefundRequestBuilder().set_refund_amount(amount)
    assert excinfo.value.code is ErrorCode.SE0002


def test_rejects_missing_amount():
    with pytest.raises(ValidationError) as excinfo:
        RefundRequestBuilder().set_refund_amount(None)
    assert excinfo.value.code is ErrorCode.SE0018


def test_remarks_boundary():
    builder = RefundRequestBuilder().set_refund_remarks("r" * 200)
    assert builder.get_refund_remarks() == "r" * 200
    with pytest.raises(ValidationError) as excinfo:
        builder.set_refund_remarks("r" * 201)
    assert excinfo.value.code is ErrorCode.SE0007


def test_remarks_are_optional():
    builder = RefundRequestBuilder().set_refund_remarks(None)
    assert "Remarks" not in builder.to_flat_structure()


@pytest.mark.parametrize("order_id", [None, "", "   "])
def test_order_id_is_required(order_id):
    with pytest.raises(ValidationError) as excinfo:
        RefundRequestBuilder().set_order_id(order_id)
    assert excinfo.value.code is ErrorCode.SE0006


def test_from_mapping():
    builder = RefundRequestBuilder.from_mapping(
        {"Amount": "10.50", "OrderId": "ORD-7", "UserType": 3}
    )
    assert builder.to_flat_structure() == {"Amount": "10.50", "OrderId": "ORD-7"}
