"""
Field-level validation rules used by the request builders.

Every rule is a plain check: it inspects the value, raises
:class:`~auropay_sdk.core.errors.ValidationError` for the supplied
:class:`~auropay_sdk.core.errors.ErrorCode` when the check fails, and returns
``None`` otherwise.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Pattern

from .errors import ErrorCode, ValidationError

__all__ = [
    "CALLBACK_API_URL_PATTERN",
    "DATE_TIME_PATTERN",
    "EMAIL_PATTERN",
    "NAME_PATTERN",
    "PHONE_PATTERN",
    "SPECIAL_CHAR_PATTERN",
    "forbid_pattern",
    "max_length",
    "require_non_empty",
    "require_pattern",
    "require_positive_amount",
]

SPECIAL_CHAR_PATTERN = re.compile(r"[^a-zA-Z0-9 ]")
NAME_PATTERN = re.compile(r"[a-zA-Z\s]{1,70}")
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_PATTERN = re.compile(r"[0-9]{10,15}")
DATE_TIME_PATTERN = re.compile(
    r"[0-9]{2}-[0-9]{2}-[0-9]{4} [0-9]{2}:[0-9]{2}:[0-9]{2}"
)
CALLBACK_API_URL_PATTERN = re.compile(
    r"(https?://)(www\.)?[a-zA-Z0-9@:%._+~#?&/=]{2,256}\.[a-z]{2,6}\b"
    r"[-a-zA-Z0-9@:%._+~#?&/=]*"
)


def require_non_empty(value: Any, error: ErrorCode) -> None:
    if value is None:
        raise ValidationError(error)
    if isinstance(value, str) and not value.strip():
        raise ValidationError(error)


def forbid_pattern(value: Any, pattern: Pattern[str], error: ErrorCode) -> None:
    if value is None:
        return
    if pattern.search(str(value)):
        raise ValidationError(error)


def require_pattern(value: Any, pattern: Pattern[str], error: ErrorCode) -> None:
    if not isinstance(value, str) or pattern.fullmatch(value) is None:
        raise ValidationError(error)


def max_length(value: Any, limit: int, error: ErrorCode) -> None:
    """
    Reject values longer than ``limit``; absent values are not length-checked.
    """
    if value is None:
        return
    if len(value) > limit:
        raise ValidationError(error)


def require_positive_amount(
    value: Any,
    required_error: ErrorCode,
    invalid_error: ErrorCode,
) -> None:
    """
    Accept ints, floats, decimals and numeric strings strictly above zero.
    """
    require_non_empty(value, required_error)
    if isinstance(value, bool):
        raise ValidationError(invalid_error)
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(invalid_error) from exc
    if not amount.is_finite() or amount <= 0:
        raise ValidationError(invalid_error)
