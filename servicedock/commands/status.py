"""status command: report a node's current readiness once."""

import argparse
import asyncio
import logging
import sys

from servicedock.config import kubectl_settings, load_config, target_from_config, validate_config
from servicedock.control.service import current_readiness
from servicedock.control.types import ReadinessState

logger = logging.getLogger(__name__)


def handle_status(args):
    """Handle the status command. Exits 0 when Ready, 1 otherwise."""
    state = asyncio.run(_handle_status(args))
    if state != ReadinessState.READY:
        sys.exit(1)


async def _handle_status(args):
    config = load_config(args.config) if args.config else {}
    try:
        validate_config(config)
    except ValueError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)
    target, settings = target_from_config(config, args.node)
    health_url = args.health_url or settings.get("health_url")
    state = await current_readiness(target, health_url=health_url, **kubectl_settings(config))
    logger.info(f"{target.node_name}: {state.value}")
    return state


def register_status_command(subparsers):
    """Register the status subcommand."""
    parser = subparsers.add_parser("status", help="Show a node's current readiness")
    parser.add_argument("--node", required=True, help="Node name")
    parser.add_argument("--health-url", default=None, help="Check this HTTP endpoint instead of the node Ready condition")
    parser.add_argument("--config", default=None, help="YAML config file with targets")
    # SUPPRESS: an unset subcommand flag must not clobber a top-level --verbose
    parser.add_argument("--verbose", action="store_true", default=argparse.SUPPRESS, help="Show debug output")
    parser.set_defaults(func=handle_status)
