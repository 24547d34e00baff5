"""SSH transport: run service-management commands on remote nodes."""

import asyncio
import logging
import os

from servicedock.control.errors import TransportError
from servicedock.control.types import CommandResult

logger = logging.getLogger(__name__)

# ssh reserves 255 for its own failures (connect, auth, host key); remote
# commands exit with their own status.
SSH_TRANSPORT_FAILURE = 255


def ssh_base_args(server, ssh_key, ssh_port):
    """Build base SSH arguments."""
    args = [
        "ssh",
        "-o", "StrictHostKeyChecking=no",
        "-o", "UserKnownHostsFile=/dev/null",
        "-o", "BatchMode=yes",
        "-o", "ConnectTimeout=10",
        "-o", "ServerAliveInterval=60",
        "-o", "ServerAliveCountMax=5",
    ]
    if ssh_key:
        args += ["-i", os.path.expanduser(ssh_key)]
    if ssh_port and ssh_port != 22:
        args += ["-p", str(ssh_port)]
    args.append(server)
    return args


def ssh_address(host, ssh_user=None):
    """SSH address string (user@host)."""
    return f"{ssh_user}@{host}" if ssh_user else host


def make_run_remote(ssh_key, ssh_port, ssh_user=None, dry_run=False, timeout=120):
    """Create a run_remote callable for SSH execution.

    Returns:
        async callable(command, host) -> CommandResult. Raises TransportError
        when the SSH channel cannot be established; a remote command that
        merely fails comes back as a CommandResult with its exit code.
    """

    async def run_remote(command, host):
        address = ssh_address(host, ssh_user)
        if dry_run:
            logger.info(f"[dry-run] ssh {address}: {command}")
            return CommandResult(command=command, host=host, code=0)

        ssh_args = ssh_base_args(address, ssh_key, ssh_port)
        ssh_args.append(command)

        try:
            proc = await asyncio.create_subprocess_exec(
                *ssh_args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise TransportError(host, command, "'ssh' not found. Is it installed and on PATH?") from e

        try:
            stdout_bytes, stderr_bytes = await asyncio.wait_for(proc.communicate(), timeout=timeout)
        except TimeoutError as e:
            proc.kill()
            await proc.wait()
            raise TransportError(host, command, f"timed out after {timeout}s") from e

        stdout = stdout_bytes.decode(errors="replace") if stdout_bytes else ""
        stderr = stderr_bytes.decode(errors="replace") if stderr_bytes else ""
        if proc.returncode == SSH_TRANSPORT_FAILURE:
            raise TransportError(host, command, stderr.strip() or f"ssh exited with {SSH_TRANSPORT_FAILURE}")
        return CommandResult(command=command, host=host, code=proc.returncode, stdout=stdout, stderr=stderr)

    return run_remote
