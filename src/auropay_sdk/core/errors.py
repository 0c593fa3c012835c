"""
Error catalog shared by the request builders and the gateway client.

Input problems are reported with a fixed ``(error_code, message)`` pair taken
from :class:`ErrorCode`. The pair travels inside :class:`ValidationError`,
which builders raise the moment a bad value is set.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Union

__all__ = [
    "ConfigError",
    "ErrorCode",
    "ValidationError",
]

_MESSAGES: Dict[str, str] = {
    "SE0001": "Invalid expire on date format. Expected DD-MM-YYYY HH:MM:SS",
    "SE0002": "Amount must be a number greater than zero",
    "SE0003": "Title is required",
    "SE0004": "Payment description must not exceed 1000 characters",
    "SE0005": "Callback parameters are required",
    "SE0006": "Order id is required",
    "SE0007": "Refund remarks must not exceed 200 characters",
    "SE0008": "Transaction id is required",
    "SE0009": "Reference number must not exceed 50 characters",
    "SE0010": "Customer first name is required",
    "SE0011": "Customer last name is required",
    "SE0012": "Customer phone must contain 10 to 15 digits",
    "SE0013": "Customer email is invalid",
    "SE0014": "Callback API url is invalid",
    "SE0015": "Reference id is required",
    "SE0016": "Payment link request data is required",
    "SE0017": "Payment QR code request data is required",
    "SE0018": "Amount is required",
    "SE0019": "Title must not exceed 50 characters",
    "SE0020": "Title must not contain special characters",
    "SE0021": "Short description must not exceed 1000 characters",
    "SE0022": "Short description must not contain special characters",
    "SE0023": "Payment description must not contain special characters",
    "SE0024": "Expire on date must be later than the current date and time",
    "SE0025": "Settings are required",
    "SE0026": "Customer email must not exceed 320 characters",
    "SE0027": "Customer email is required",
    "SE0028": "Customer phone is required",
    "SE0029": "Refund request data is required",
    "SE0030": "Callback API url must not exceed 2048 characters",
    "SE0031": "Callback API url is required",
    "SE0032": "At least one customer is required",
    "SE0033": "Settings displaySummary must be a boolean",
    "SE0034": "Customer first name may only contain letters and spaces (max 70)",
    "SE0035": "Customer last name may only contain letters and spaces (max 70)",
}

_UNKNOWN_MESSAGE = "Unknown error"


class ErrorCode(str, Enum):
    SE0001 = "SE0001"
    SE0002 = "SE0002"
    SE0003 = "SE0003"
    SE0004 = "SE0004"
    SE0005 = "SE0005"
    SE0006 = "SE0006"
    SE0007 = "SE0007"
    SE0008 = "SE0008"
    SE0009 = "SE0009"
    SE0010 = "SE0010"
    SE0011 = "SE0011"
    SE0012 = "SE0012"
    SE0013 = "SE0013"
    SE0014 = "SE0014"
    SE0015 = "SE0015"
    SE0016 = "SE0016"
    SE0017 = "SE0017"
    SE0018 = "SE0018"
    SE0019 = "SE0019"
    SE0020 = "SE0020"
    SE0021 = "SE0021"
    SE0022 = "SE0022"
    SE0023 = "SE0023"
    SE0024 = "SE0024"
    SE0025 = "SE0025"
    SE0026 = "SE0026"
    SE0027 = "SE0027"
    SE0028 = "SE0028"
    SE0029 = "SE0029"
    SE0030 = "SE0030"
    SE0031 = "SE0031"
    SE0032 = "SE0032"
    SE0033 = "SE0033"
    SE0034 = "SE0034"
    SE0035 = "SE0035"

    @property
    def message(self) -> str:
        return _MESSAGES[self.value]

    def as_dict(self) -> Dict[str, str]:
        return {"error_code": self.value, "message": self.message}

    @classmethod
    def get_message(cls, code: Union["ErrorCode", str]) -> str:
        """
        Return the catalog message for ``code``, or a generic one if unknown.
        """
        return _MESSAGES.get(str(getattr(code, "value", code)), _UNKNOWN_MESSAGE)


class ValidationError(Exception):
    """Raised by the request builders when a field value is rejected."""

    def __init__(self, code: ErrorCode) -> None:
        self.code = ErrorCode(code)
        super().__init__(f"{self.code.value}: {self.code.message}")

    @property
    def error_code(self) -> str:
        return self.code.value

    @property
    def message(self) -> str:
        return self.code.message

    def as_dict(self) -> Dict[str, str]:
        return self.code.as_dict()


class ConfigError(Exception):
    """Raised when the client configuration is invalid."""

    error_code = "400"

    @property
    def message(self) -> str:
        return str(self)

    def as_dict(self) -> Dict[str, str]:
        return {"error_code": self.error_code, "message": self.message}
