"""Script to deliver a single incident SMS through the delivery API."""

import argparse
import json
import sys
import time

import httpx
from pydantic import ValidationError

from incident_sms import AuthError, DeliveryError, HttpClientError, create_client
from incident_sms.config import Settings, get_settings
from incident_sms.utils.logger import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(description="Deliver an incident SMS via the SMS delivery API")
    parser.add_argument("--phone", type=str, required=True, help="Recipient phone number (10 or 11 digits)")
    parser.add_argument("--incident-id", type=str, required=True, help="Incident identifier")
    parser.add_argument("--activity-code", type=str, required=True, help="Activity code")
    parser.add_argument(
        "--event-date",
        type=float,
        default=None,
        help="UNIX time the incident was logged (defaults to now)",
    )
    parser.add_argument("--base-uri", type=str, help="Override SMS_API_BASE_URI")
    parser.add_argument("--username", type=str, help="Override SMS_API_USERNAME")
    parser.add_argument("--password", type=str, help="Override SMS_API_PASSWORD")
    parser.add_argument("--retry-attempts", type=int, help="Override SMS_RETRY_ATTEMPTS")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Merge command-line overrides into the environment settings and validate them."""
    overrides = {
        "api_base_uri": args.base_uri,
        "api_username": args.username,
        "api_password": args.password,
        "retry_attempts": args.retry_attempts,
    }
    values = get_settings().model_dump()
    values.update({key: value for key, value in overrides.items() if value is not None})
    return Settings(_env_file=None, **values)


def main(argv: list[str] | None = None) -> int:
    """Main function."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        configure_logging("DEBUG")

    event_date = args.event_date if args.event_date is not None else time.time()

    try:
        settings = load_settings(args)
        client = create_client(settings)
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    with client:
        try:
            result = client.deliver(args.phone, args.incident_id, args.activity_code, event_date)
        except (AuthError, DeliveryError, HttpClientError, httpx.RequestError) as e:
            print(f"Delivery failed: {e}", file=sys.stderr)
            return 1

    if result is None:
        print(f"Skipped: {args.phone} is not a valid phone number")
        return 2

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
