"""CLI entry point for notification lookups.

Examples:
    ```bash
    python -m zwnotify 0x05                  # describe notification type 5
    python -m zwnotify 0x05 0x02             # resolve value 2 of type 5
    python -m zwnotify --config-dir /etc/zwnotify 5 2
    python -m zwnotify --config config/zwnotify.yaml --log-level DEBUG 0x07 0x03
    ```
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from zwnotify.core import NotificationRegistry
from zwnotify.core.logger import Logger, StructuredFormatter
from zwnotify.core.yaml import load_yaml
from zwnotify.models import Notification


logger = Logger("cli")


def parse_code(text: str) -> int:
    """Parse a decimal or ``0x``-prefixed hexadecimal code."""
    try:
        code = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid code: {text!r}") from None
    if code < 0:
        raise argparse.ArgumentTypeError(f"code must be non-negative: {text!r}")
    return code


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for the lookup tool."""
    parser = argparse.ArgumentParser(
        prog="zwnotify",
        description="Resolve device notification codes",
    )

    parser.add_argument(
        "notification_type",
        type=parse_code,
        help="Notification type, decimal or 0x-prefixed hex",
    )

    parser.add_argument(
        "value",
        type=parse_code,
        nargs="?",
        help="Reported value to resolve (omit to describe the whole type)",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Registry YAML config path",
    )

    parser.add_argument(
        "--config-dir",
        type=Path,
        help="Directory containing the definition file (overrides --config)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Log level (default: WARNING)",
    )

    return parser.parse_args(argv)


def setup_logging(level: str) -> None:
    """Configure the root logger with structured formatting on stderr."""
    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level))


def describe_notification(notification: Notification) -> dict[str, Any]:
    """Render a notification definition as a JSON-compatible dict."""
    return {
        "id": notification.id,
        "name": notification.name,
        "variables": [
            {
                "name": variable.name,
                "idle": variable.idle,
                "states": {
                    f"0x{state.id:02x}": state.label for state in variable.states.values()
                },
            }
            for variable in notification.variables
        ],
        "events": {f"0x{event.id:02x}": event.label for event in notification.events.values()},
    }


def build_registry(args: argparse.Namespace) -> NotificationRegistry:
    """Create the registry from ``--config`` and ``--config-dir``."""
    config_dict: Any = load_yaml(str(args.config)) if args.config else {}
    if not isinstance(config_dict, dict):
        raise ValueError(f"config root must be a mapping, got {type(config_dict).__name__}")
    if args.config_dir is not None:
        config_dict["config_dir"] = args.config_dir
    return NotificationRegistry.from_dict(config_dict)


async def main(argv: list[str] | None = None) -> int:
    """Main entry point: parse args, build the registry, and print the lookup."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        registry = build_registry(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error("config_invalid", error=str(e))
        return 1

    if args.value is None:
        notification = await registry.lookup_notification(args.notification_type)
        if notification is None:
            logger.warning("notification_type_unknown", notification_type=args.notification_type)
            return 1
        print(json.dumps(describe_notification(notification), indent=2))
        return 0

    result = await registry.lookup_value(args.notification_type, args.value)
    if result is None:
        logger.warning(
            "notification_value_unknown",
            notification_type=args.notification_type,
            value=args.value,
        )
        return 1
    print(json.dumps(result.to_dict(), indent=2))
    return 0


def cli() -> None:
    """Synchronous entry point for console_scripts."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
