#!/usr/bin/env python3
"""Remote service control CLI entrypoint."""

import argparse

from servicedock.commands.service import register_service_command
from servicedock.commands.status import register_status_command
from servicedock.logging_setup import setup_cli_logging


def main():
    parser = argparse.ArgumentParser(description="Remote service control with readiness waits")
    parser.add_argument("--verbose", action="store_true", help="Show debug output (individual probe results)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    register_service_command(subparsers)
    register_status_command(subparsers)

    args = parser.parse_args()
    setup_cli_logging(verbose=args.verbose)
    args.func(args)


if __name__ == "__main__":
    main()
