"""Error taxonomy for remote service control.

Every error is terminal for the call that raised it: nothing is retried and
no compensating action is taken for steps that already succeeded.
"""

from servicedock.control.types import CommandResult, ReadinessState
from servicedock.redact import redact_secrets


class ControlError(Exception):
    """Base class for all service control failures."""


class ResolutionError(ControlError):
    """No connectable address could be determined for the target."""

    def __init__(self, target, reason):
        self.target = target
        self.reason = reason
        super().__init__(f"Cannot resolve address for node {target}: {reason}")


class TransportError(ControlError):
    """The SSH channel itself could not be established."""

    def __init__(self, host, command, reason):
        self.host = host
        self.command = command
        self.reason = reason
        super().__init__(f"SSH to {host} failed running `{command}`: {reason}")


class CommandError(ControlError):
    """The remote command ran but exited non-zero."""

    def __init__(self, action, result: CommandResult):
        self.action = action
        self.result = result
        super().__init__(
            f"Failed to [{action}] via `{result.command}` on {result.host}: "
            f"exit code {result.code}, stdout={redact_secrets(result.stdout.strip())!r}, stderr={redact_secrets(result.stderr.strip())!r}"
        )


class ConvergenceError(ControlError):
    """Readiness did not reach the expected state within the timeout."""

    def __init__(self, target, expected: ReadinessState, timeout):
        self.target = target
        self.expected = expected
        self.timeout = timeout
        super().__init__(f"Node {target} failed to enter {expected.value} state within {timeout}s")
