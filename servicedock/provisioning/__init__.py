"""Remote and local command execution: SSH transport and shell helpers."""

from servicedock.provisioning.shell import run_shell_cmd
from servicedock.provisioning.ssh_transport import (
    SSH_TRANSPORT_FAILURE,
    make_run_remote,
    ssh_address,
    ssh_base_args,
)

__all__ = [
    "run_shell_cmd",
    "SSH_TRANSPORT_FAILURE",
    "make_run_remote",
    "ssh_address",
    "ssh_base_args",
]
