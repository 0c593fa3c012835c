"""
Value objects nested inside a payment request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

__all__ = [
    "CallbackParameters",
    "Customer",
    "Settings",
]


def _trimmed(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


@dataclass(frozen=True)
class Customer:
    first_name: str
    last_name: str
    phone: str
    email: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "firstName": _trimmed(self.first_name),
            "lastName": _trimmed(self.last_name),
            "phone": _trimmed(self.phone),
            "email": _trimmed(self.email),
        }


@dataclass(frozen=True)
class CallbackParameters:
    """
    Where the gateway posts payment updates, plus the merchant's reference.
    """

    callback_api_url: str
    reference_no: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "CallbackApiUrl": _trimmed(self.callback_api_url),
            "ReferenceNo": _trimmed(self.reference_no),
        }


@dataclass(frozen=True)
class Settings:
    display_summary: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"displaySummary": self.display_summary}
