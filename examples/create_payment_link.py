"""
Minimal script that uses the public API to create a payment link.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from auropay_sdk import (
    CallbackParameters,
    ConfigError,
    Customer,
    PaymentRequestBuilder,
    Settings,
    ValidationError,
    create_client,
    is_error_response,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create an Auropay payment link using the SDK API")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing AUROPAY_* settings",
    )
    parser.add_argument(
        "--environment",
        help="Target gateway environment: DEV, UAT or PROD",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument("--title", default="Invoice 1")
    parser.add_argument("--amount", default="100")
    parser.add_argument(
        "--callback-url",
        default="https://merchant.example.com/auropay/callback",
    )
    parser.add_argument("--reference-no", default="INV0001")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        client = create_client(env_file=args.env_file, environment=args.environment)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    try:
        request = (
            PaymentRequestBuilder()
            .set_title(args.title)
            .set_amount(args.amount)
            .set_short_description("Monthly subscription")
            .set_customers(Customer("Asha", "Rao", "9876543210", "asha.rao@example.com"))
            .set_callback_parameters(CallbackParameters(args.callback_url, args.reference_no))
            .set_settings(Settings(display_summary=True))
        )
    except ValidationError as exc:
        logging.error("Invalid payment request: %s", exc)
        return 1

    logging.info("Creating payment link on %s", client.base_url)
    response = client.create_payment_link(request)
    if is_error_response(response):
        logging.error("Gateway rejected payment link: %s", response)
        return 1

    print(json.dumps(response, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
