"""Shared data types for remote service control."""

from dataclasses import dataclass
from enum import Enum


class Action(Enum):
    """Lifecycle action applied to a remote service."""

    START = "start"
    STOP = "stop"
    RESTART = "restart"

    @classmethod
    def parse(cls, value: str) -> "Action":
        """Parse a CLI string like ``"Restart"`` into an Action."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(a.value for a in cls)
            raise ValueError(f"Unknown action '{value}' (expected one of: {choices})") from None


class ReadinessState(Enum):
    """Externally observed readiness of a node."""

    READY = "Ready"
    NOT_READY = "NotReady"


@dataclass
class Target:
    """A remote node: logical name (for readiness) plus optional pre-resolved address."""

    node_name: str
    address: str | None = None
    ssh_user: str | None = None

    @property
    def label(self) -> str:
        if self.address:
            return f"{self.node_name} ({self.address})"
        return self.node_name


@dataclass
class CommandResult:
    """Captured output of a single remote command."""

    command: str
    host: str
    code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.code == 0
