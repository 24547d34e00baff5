"""RemoteServiceController: dispatch a lifecycle action with fallback, then wait for readiness."""

import logging

from servicedock.control.commands import (
    check_service_name,
    is_command_not_found,
    primary_command,
    secondary_command,
)
from servicedock.control.errors import CommandError, ConvergenceError
from servicedock.control.params import ControlParams
from servicedock.control.types import Action, CommandResult, ReadinessState, Target
from servicedock.redact import redact_secrets

logger = logging.getLogger(__name__)


def log_command_result(result: CommandResult):
    """Log a remote command's outcome; empty streams are omitted, secrets masked."""
    logger.info(f"ssh {result.host}: `{result.command}`")
    stdout = redact_secrets(result.stdout.strip())
    stderr = redact_secrets(result.stderr.strip())
    if stdout:
        logger.info(f"  stdout: {stdout}")
    if stderr:
        logger.info(f"  stderr: {stderr}")
    logger.info(f"  exit code: {result.code}")


class RemoteServiceController:
    """Apply start/stop/restart to a remote service and wait for the node to converge.

    Collaborators are async callables supplied by the caller:

    - ``resolve_address(target) -> str``, raises ResolutionError
    - ``run_remote(command, host) -> CommandResult``, raises TransportError
    - ``poll_readiness(target, expected, timeout) -> bool``
    """

    def __init__(self, resolve_address, run_remote, poll_readiness):
        self.resolve_address = resolve_address
        self.run_remote = run_remote
        self.poll_readiness = poll_readiness

    async def apply_action(self, action: Action, target: Target, service_name: str, params: ControlParams) -> None:
        """Run *action* on *service_name* at *target*, then wait for readiness.

        Dispatch tries ``systemctl`` first. If its stderr shows the command is
        missing, ``service`` is run once instead; that fallback's exit code is
        only checked when ``params.validate_fallback`` is set.

        Stop and restart wait for NotReady; start and restart wait for Ready.
        Restart waits for NotReady first so the Ready wait can't be satisfied
        by the pre-restart state.

        Raises:
            ValueError: empty service name, before anything is contacted.
            ResolutionError, TransportError, CommandError, ConvergenceError
        """
        service_name = check_service_name(service_name)
        host = await self.resolve_address(target)
        await self._dispatch(action, target, host, service_name, params)

        if action in (Action.STOP, Action.RESTART):
            await self._converge(target, ReadinessState.NOT_READY, params.timeout)
        if action in (Action.START, Action.RESTART):
            await self._converge(target, ReadinessState.READY, params.timeout)

    async def _dispatch(self, action, target, host, service_name, params):
        command = primary_command(action, service_name, sudo=params.sudo)
        logger.info(f"Attempting `{command}` on {target.label}")
        result = await self.run_remote(command, host)
        log_command_result(result)

        if is_command_not_found(result.stderr):
            fallback = secondary_command(action, service_name, sudo=params.sudo)
            logger.info(f"systemctl not available on {host}, attempting `{fallback}`")
            result = await self.run_remote(fallback, host)
            log_command_result(result)
            if not result.ok:
                if params.validate_fallback:
                    raise CommandError(action.value, result)
                logger.warning(f"Fallback `{fallback}` exited with {result.code}; not validated, continuing")
        elif not result.ok:
            raise CommandError(action.value, result)

    async def _converge(self, target, expected, timeout):
        if not await self.poll_readiness(target, expected, timeout):
            raise ConvergenceError(target.node_name, expected, timeout)
