"""
Static gateway endpoints and service versions.
"""

from __future__ import annotations

from typing import Dict

__all__ = [
    "SANDBOX_URL",
    "UAT_URL",
    "PRODUCTION_URL",
    "PAYMENTLINK_API",
    "PAYMENTQRCODE_API",
    "REFUND_API",
    "PAYMENT_BY_TRANSACTION_ID",
    "PAYMENT_BY_REFNO",
    "DEFAULT_API_VERSION",
    "DEFAULT_API_VERSIONS",
]

SANDBOX_URL = "https://cdgw048sli.execute-api.ap-south-1.amazonaws.com/dev/"
UAT_URL = "https://api.uat.auropay.net/"
PRODUCTION_URL = "https://secure-api.auropay.net/"

PAYMENTLINK_API = "api/paymentlinks"
PAYMENTQRCODE_API = "api/paymentqrcodes"
REFUND_API = "api/refunds"
PAYMENT_BY_TRANSACTION_ID = "api/payments/"
PAYMENT_BY_REFNO = "api/payments/refno/"

DEFAULT_API_VERSION = "1.0"

DEFAULT_API_VERSIONS: Dict[str, str] = {
    "paymentlink": "1.0",
    "paymentqrcodes": "1.0",
    "refunds": "1.0",
    "statusbyrefid": "1.0",
    "statusbytransid": "1.0",
}
