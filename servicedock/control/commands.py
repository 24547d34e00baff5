"""Service-management command construction and the fallback heuristic."""

import shlex

from servicedock.control.types import Action

# stderr text emitted by the remote shell when the primary tool is absent.
# Matched case-sensitively; swap is_command_not_found() for anything sturdier.
COMMAND_NOT_FOUND = "command not found"


def check_service_name(service: str) -> str:
    """Return the stripped service name; raise ValueError if it is empty."""
    if not service or not service.strip():
        raise ValueError("Service name must be a non-empty string")
    return service.strip()


def _quoted(service: str) -> str:
    return shlex.quote(check_service_name(service))


def primary_command(action: Action, service: str, sudo: bool = True) -> str:
    """First-choice invocation: ``sudo systemctl <action> <service>``."""
    prefix = "sudo " if sudo else ""
    return f"{prefix}systemctl {action.value} {_quoted(service)}"


def secondary_command(action: Action, service: str, sudo: bool = True) -> str:
    """Fallback invocation for SysV-style hosts: ``sudo service <service> <action>``."""
    prefix = "sudo " if sudo else ""
    return f"{prefix}service {_quoted(service)} {action.value}"


def is_command_not_found(stderr: str) -> bool:
    """True when stderr says the primary mechanism's executable is missing."""
    return COMMAND_NOT_FOUND in (stderr or "")
