"""Mask secret values in remote command output and log records."""

import logging
import os

# Env vars whose values must never reach the console
SECRET_ENV_VARS = ("SERVICEDOCK_HEALTH_TOKEN",)

_MIN_SECRET_LENGTH = 8  # skip short values to avoid false positives


def secret_values(env_vars=SECRET_ENV_VARS) -> list[str]:
    """Current values of *env_vars*, longest first, ignoring short ones."""
    values = {os.environ.get(var, "") for var in env_vars}
    return sorted((v for v in values if len(v) >= _MIN_SECRET_LENGTH), key=len, reverse=True)


def redact_secrets(text: str, secrets: list[str] | None = None) -> str:
    """Replace every secret value in *text* with '***'."""
    if secrets is None:
        secrets = secret_values()
    for value in secrets:
        text = text.replace(value, "***")
    return text


class SecretRedactingFilter(logging.Filter):
    """Handler filter that masks secrets in the fully formatted message.

    The record is rendered once (msg % args) so secrets passed as
    arguments are caught too.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        secrets = secret_values()
        if secrets:
            record.msg = redact_secrets(record.getMessage(), secrets)
            record.args = None
        return True
