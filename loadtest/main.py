"""
Command line runner for the subscription creation step.

Runs the step one or more times in sequence with a shared client and
prints the created ids and a summary of the checks.

Usage:
    python -m loadtest.main [--api-url URL] [--token TOKEN] [--application-id ID]
                            [--event-type TYPE ...] [--target-url URL]
                            [--iterations N] [--log-file PATH]

Examples:
    python -m loadtest.main
    python -m loadtest.main --event-type billing.invoice.paid --iterations 10
"""
import sys
import argparse
from typing import List, Optional

from loadtest import config
from loadtest.api_client import APIClient
from loadtest.logging_setup import setup_logging
from loadtest.subscriptions import create_subscription


def positive_int(value: str) -> int:
    """argparse type accepting integers of 1 or more."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Create webhook subscriptions against the API"
    )
    parser.add_argument("--api-url", default=config.API_BASE_URL, help="Base URL of the API")
    parser.add_argument("--token", default=config.AUTH_TOKEN, help="Authorization header value")
    parser.add_argument("--application-id", default=config.APPLICATION_ID)
    parser.add_argument(
        "--event-type",
        dest="event_types",
        action="append",
        help="Event type to subscribe to (repeatable, defaults to EVENT_TYPES)"
    )
    parser.add_argument("--target-url", default=config.TARGET_URL)
    parser.add_argument("--iterations", type=positive_int, default=1)
    parser.add_argument("--log-file", default=None)
    return parser


def run(args: argparse.Namespace, client: Optional[APIClient] = None) -> int:
    """
    Run the step args.iterations times.

    Returns:
        int: Exit code (0 all created, 1 some failed, 2 invalid configuration)
    """
    event_types: List[str] = args.event_types or config.EVENT_TYPES

    config.print_config(
        api_url=args.api_url,
        auth_token=args.token,
        application_id=args.application_id,
        event_types=event_types,
        target_url=args.target_url,
    )

    status = config.validate_config(
        auth_token=args.token or "",
        application_id=args.application_id or "",
        event_types=event_types,
        target_url=args.target_url or "",
    )
    for warning in status["warnings"]:
        print(f"⚠️  {warning}")
    if not status["valid"]:
        print("❌ Configuration errors found:")
        for error in status["errors"]:
            print(f"   - {error}")
        return 2

    owns_client = client is None
    if owns_client:
        client = APIClient(args.api_url, args.token)

    created = 0
    try:
        for i in range(1, args.iterations + 1):
            subscription_id = create_subscription(
                args.api_url,
                args.token,
                args.application_id,
                event_types,
                args.target_url,
                client=client,
            )
            if subscription_id is None:
                print(f"✗ Iteration {i:3d}: subscription not created")
            else:
                created += 1
                print(f"✓ Iteration {i:3d}: {subscription_id}")
        client.print_summary()
    finally:
        if owns_client:
            client.close()

    return 0 if created == args.iterations else 1


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(config.LOG_LEVEL, args.log_file)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
