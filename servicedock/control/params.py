"""Control parameters dataclass."""

from dataclasses import dataclass, fields

NODE_STATE_TIMEOUT = 60  # seconds


def _check_number(name, value, kinds=(int, float)):
    # bool is an int subclass; YAML "60" arrives as str
    if isinstance(value, bool) or not isinstance(value, kinds):
        raise ValueError(f"{name} must be a number, got {value!r}")


@dataclass
class ControlParams:
    """Per-call settings for a service action. Passed explicitly, never global."""

    ssh_key: str = "~/.ssh/id_ed25519"
    ssh_port: int = 22
    ssh_user: str | None = None
    timeout: float = NODE_STATE_TIMEOUT
    poll_interval: float = 2
    command_timeout: float = 120
    validate_fallback: bool = False
    sudo: bool = True
    dry_run: bool = False

    def __post_init__(self):
        for name in ("timeout", "poll_interval", "command_timeout"):
            _check_number(name, getattr(self, name))
        _check_number("ssh_port", self.ssh_port, kinds=(int,))
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if self.poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive, got {self.poll_interval}")
        if self.command_timeout <= 0:
            raise ValueError(f"command_timeout must be positive, got {self.command_timeout}")
        if not 1 <= self.ssh_port <= 65535:
            raise ValueError(f"ssh_port must be in 1..65535, got {self.ssh_port}")

    @classmethod
    def field_names(cls) -> set[str]:
        return {f.name for f in fields(cls)}
