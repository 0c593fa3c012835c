"""
Command-line interface for exercising the Auropay gateway APIs.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, Sequence, Tuple

from .api import create_client
from .core.builders import PaymentRequestBuilder, RefundRequestBuilder
from .core.client import is_error_response
from .core.config import load_client_config
from .core.errors import ConfigError, ValidationError


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="auropay",
        description="Call the Auropay payment gateway from the command line",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing AUROPAY_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    link = commands.add_parser("payment-link", help="Create a payment link from a JSON file")
    link.add_argument("request_file", help="JSON file with the payment request fields")

    qr_code = commands.add_parser("qr-code", help="Create a payment QR code from a JSON file")
    qr_code.add_argument("request_file", help="JSON file with the payment request fields")

    refund = commands.add_parser("refund", help="Refund an order")
    refund.add_argument("--order-id", required=True)
    refund.add_argument("--amount", required=True)
    refund.add_argument("--remarks", default=None)

    status = commands.add_parser("status", help="Look up a payment")
    lookup = status.add_mutually_exclusive_group(required=True)
    lookup.add_argument("--transaction-id")
    lookup.add_argument("--reference-id")
    return parser


def _read_request_file(path: str) -> Dict[str, Any]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return data


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    overrides = _collect_overrides(args.set or ())

    try:
        config = load_client_config(env_file=args.env_file, overrides=overrides)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_client(config=config)

    try:
        if args.command == "payment-link":
            request = PaymentRequestBuilder.from_mapping(_read_request_file(args.request_file))
            response = client.create_payment_link(request)
        elif args.command == "qr-code":
            request = PaymentRequestBuilder.from_mapping(_read_request_file(args.request_file))
            response = client.create_payment_qr_code(request)
        elif args.command == "refund":
            refund = (
                RefundRequestBuilder()
                .set_order_id(args.order_id)
                .set_refund_amount(args.amount)
            )
            if args.remarks is not None:
                refund.set_refund_remarks(args.remarks)
            response = client.create_refund(refund)
        elif args.transaction_id is not None:
            response = client.get_status_by_transaction_id(args.transaction_id)
        else:
            response = client.get_status_by_reference_id(args.reference_id)
    except ValidationError as exc:
        logging.error("Invalid request: %s", exc)
        return 1
    except (OSError, ValueError) as exc:
        logging.error("Could not read request file: %s", exc)
        return 1

    print(json.dumps(response, indent=2))
    if is_error_response(response):
        logging.error("Gateway returned an error: %s", response["message"])
        return 1
    return 0


def main() -> None:
    sys.exit(run_cli())
