"""service command: start/stop/restart a service on a remote node and wait for readiness."""

import argparse
import asyncio
import logging
import sys

from servicedock.config import (
    build_params,
    kubectl_settings,
    load_config,
    target_from_config,
    validate_config,
)
from servicedock.control.commands import check_service_name
from servicedock.control.errors import ControlError
from servicedock.control.service import apply_action
from servicedock.control.types import Action

logger = logging.getLogger(__name__)


def handle_service(args):
    """Handle the service command."""
    asyncio.run(_handle_service(args))


async def _handle_service(args):
    config = load_config(args.config) if args.config else {}
    overrides = {
        "ssh_key": args.ssh_key,
        "ssh_port": args.ssh_port,
        "timeout": args.timeout,
        "poll_interval": args.poll_interval,
        "validate_fallback": args.validate_fallback,
        "sudo": args.sudo,
        "dry_run": args.dry_run,
    }
    try:
        validate_config(config)
        params = build_params(config, overrides)
        action = Action.parse(args.action)
        service = check_service_name(args.service)
    except ValueError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    target, settings = target_from_config(config, args.node, address=args.address, ssh_user=args.ssh_user)
    health_url = args.health_url or settings.get("health_url")

    logger.info(f"Service: {service}")
    logger.info(f"Action: {action.value}")
    logger.info(f"Node: {target.label}")
    logger.info("")

    try:
        await apply_action(action, target, service, params, health_url=health_url, **kubectl_settings(config))
    except ControlError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    status = "dry-run (not applied)" if params.dry_run else "done"
    logger.info(f"\n{action.value} {service} on {target.node_name}: {status}")


def register_service_command(subparsers):
    """Register the service subcommand."""
    parser = subparsers.add_parser("service", help="Start, stop or restart a service on a remote node")
    parser.add_argument("action", choices=[a.value for a in Action], help="Lifecycle action")
    parser.add_argument("--node", required=True, help="Node name (used for readiness and address lookup)")
    parser.add_argument("--service", default="kubelet", help="Remote service name (default: kubelet)")
    parser.add_argument("--address", default=None, help="SSH host; skips the kubectl ExternalIP lookup")
    parser.add_argument("--ssh-user", default=None, help="SSH username")
    parser.add_argument("--ssh-key", default=None, help="SSH key path (default: ~/.ssh/id_ed25519)")
    parser.add_argument("--ssh-port", type=int, default=None, help="SSH port (default: 22)")
    parser.add_argument("--timeout", type=float, default=None, help="Readiness wait timeout in seconds (default: 60)")
    parser.add_argument("--poll-interval", type=float, default=None, help="Seconds between readiness polls (default: 2)")
    parser.add_argument("--health-url", default=None, help="Poll this HTTP endpoint instead of the node Ready condition")
    parser.add_argument("--validate-fallback", action="store_true", default=None,
                        help="Fail if the 'service' fallback command exits non-zero")
    parser.add_argument("--no-sudo", dest="sudo", action="store_false", default=None, help="Don't prefix commands with sudo")
    parser.add_argument("--config", default=None, help="YAML config file with defaults and targets")
    parser.add_argument("--dry-run", action="store_true", default=None, help="Print commands without executing")
    # SUPPRESS: an unset subcommand flag must not clobber a top-level --verbose
    parser.add_argument("--verbose", action="store_true", default=argparse.SUPPRESS, help="Show debug output")
    parser.set_defaults(func=handle_service)
