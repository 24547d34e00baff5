"""Remote service control: actions, commands, errors and the controller."""

from servicedock.control.types import Action, CommandResult, ReadinessState, Target
from servicedock.control.errors import (
    CommandError,
    ControlError,
    ConvergenceError,
    ResolutionError,
    TransportError,
)
from servicedock.control.commands import (
    COMMAND_NOT_FOUND,
    check_service_name,
    is_command_not_found,
    primary_command,
    secondary_command,
)
from servicedock.control.params import ControlParams
from servicedock.control.controller import RemoteServiceController

__all__ = [
    "Action",
    "CommandResult",
    "ReadinessState",
    "Target",
    "CommandError",
    "ControlError",
    "ConvergenceError",
    "ResolutionError",
    "TransportError",
    "COMMAND_NOT_FOUND",
    "check_service_name",
    "is_command_not_found",
    "primary_command",
    "secondary_command",
    "ControlParams",
    "RemoteServiceController",
]
