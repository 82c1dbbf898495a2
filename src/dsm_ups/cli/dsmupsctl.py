#!/usr/bin/env python3
"""
dsmupsctl - DSM UPS notification CLI

A lightweight CLI for checking how notifications are classified:
- Classify messages (dsmupsctl classify)
- Version info (dsmupsctl version)
"""

import argparse
import logging
import sys
from typing import List, Optional

from dsm_ups import __version__
from dsm_ups.config import get_config
from dsm_ups.events import Severity
from dsm_ups.notifications import UpsNotification, UpsNotificationNormalizer


class Colors:
    """ANSI color codes for terminal output."""

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    RESET = "\033[0m"
    BOLD = "\033[1m"


SEVERITY_COLORS = {
    Severity.INFO: Colors.GREEN,
    Severity.MEDIUM: Colors.YELLOW,
    Severity.HIGH: Colors.YELLOW,
    Severity.CRITICAL: Colors.RED,
}


def colorize(text: str, color: str) -> str:
    """Colorize text if stdout is a TTY."""
    if sys.stdout.isatty():
        return f"{color}{text}{Colors.RESET}"
    return text


def format_notification(notification: UpsNotification) -> str:
    """Format a classified notification as a single line."""
    event = notification.event
    line = colorize(event.summary(), SEVERITY_COLORS[event.severity])
    if notification.sender:
        line += f" from {notification.sender}"
    return line


def cmd_classify(args) -> int:
    """
    Classify each message and print the result.

    Returns:
        Exit code (0 if every message was recognized, 1 otherwise)
    """
    messages: List[str] = args.messages or [sys.stdin.read()]
    normalizer = UpsNotificationNormalizer()

    all_ok = True
    for message in messages:
        notification = normalizer.normalize(message)
        if notification is None:
            all_ok = False
            print(colorize(f"✗ No match: {message!r}", Colors.RED))
        elif args.json:
            print(notification.model_dump_json())
        else:
            print(format_notification(notification))

    return 0 if all_ok else 1


def cmd_version(args) -> int:
    """
    Print version information.

    Returns:
        Exit code (always 0)
    """
    print(f"dsmupsctl version {__version__}")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for dsmupsctl."""
    parser = argparse.ArgumentParser(
        description="DSM UPS notification CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dsmupsctl classify "Test Message from NAS1."
  cat notification.txt | dsmupsctl classify --json
  dsmupsctl version

Environment variables:
  DSM_UPS_LOG_LEVEL                  # Logging level (default: INFO)
  DSM_UPS_PARSE_SENDER               # Read the 'From HOST' trailer (default: true)
  DSM_UPS_LOG_UNMATCHED              # Log unrecognized messages (default: true)
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # classify command
    classify_parser = subparsers.add_parser(
        "classify",
        help="Classify notification messages (reads stdin when none are given)"
    )
    classify_parser.add_argument(
        "messages",
        nargs="*",
        help="Notification messages to classify"
    )
    classify_parser.add_argument(
        "--json",
        action="store_true",
        help="Print each classified notification as JSON"
    )

    # version command
    subparsers.add_parser(
        "version",
        help="Show version information"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for dsmupsctl CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=get_config().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.command == "classify":
        return cmd_classify(args)
    elif args.command == "version":
        return cmd_version(args)
    else:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
