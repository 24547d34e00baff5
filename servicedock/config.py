"""Configuration loading: YAML file defaults merged with CLI overrides."""

import logging
import sys

import yaml

from servicedock.control.params import ControlParams
from servicedock.control.types import Target

logger = logging.getLogger(__name__)

_TARGET_KEYS = {"address", "ssh_user", "health_url"}
_KUBECTL_KEYS = {"kubeconfig", "context"}


def load_config(config_path: str) -> dict:
    """Load configuration from YAML file. Exits on a missing or malformed file."""
    try:
        with open(config_path) as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        logger.error(f"Error: Config file '{config_path}' not found.")
        sys.exit(1)
    except yaml.YAMLError as e:
        logger.error(f"Error parsing YAML config: {e}")
        sys.exit(1)
    if config is None:
        return {}
    if not isinstance(config, dict):
        logger.error(f"Error: Config file '{config_path}' must contain a mapping.")
        sys.exit(1)
    return config


def validate_config(config: dict) -> None:
    """Reject unknown keys so typos don't silently fall back to defaults.

    Raises:
        ValueError: on an unknown key or a malformed section.
    """
    unknown = set(config) - {"defaults", "targets", "kubectl"}
    if unknown:
        raise ValueError(f"Unknown config section(s): {', '.join(sorted(unknown))}")

    bad = set(config.get("defaults") or {}) - ControlParams.field_names()
    if bad:
        raise ValueError(f"Unknown key(s) in 'defaults': {', '.join(sorted(bad))}")

    bad = set(config.get("kubectl") or {}) - _KUBECTL_KEYS
    if bad:
        raise ValueError(f"Unknown key(s) in 'kubectl': {', '.join(sorted(bad))}")

    targets = config.get("targets") or {}
    if not isinstance(targets, dict):
        raise ValueError("'targets' must be a mapping of node name to settings")
    for name, entry in targets.items():
        bad = set(entry or {}) - _TARGET_KEYS
        if bad:
            raise ValueError(f"Unknown key(s) in target '{name}': {', '.join(sorted(bad))}")


def build_params(config: dict, overrides: dict | None = None) -> ControlParams:
    """Build ControlParams: CLI overrides > config defaults > dataclass defaults.

    Override values of None mean "not given on the command line".
    """
    values = dict(config.get("defaults") or {})
    for key, value in (overrides or {}).items():
        if value is not None:
            values[key] = value
    unknown = set(values) - ControlParams.field_names()
    if unknown:
        raise ValueError(f"Unknown parameter(s): {', '.join(sorted(unknown))}")
    return ControlParams(**values)


def target_from_config(config: dict, node_name: str, address=None, ssh_user=None):
    """Build a Target for *node_name*, plus its remaining per-target settings.

    Returns:
        (Target, settings dict) where settings holds e.g. ``health_url``.
    """
    entry = dict((config.get("targets") or {}).get(node_name) or {})
    target = Target(
        node_name=node_name,
        address=address or entry.pop("address", None),
        ssh_user=ssh_user or entry.pop("ssh_user", None),
    )
    entry.pop("address", None)
    entry.pop("ssh_user", None)
    return target, entry


def kubectl_settings(config: dict) -> dict:
    """kubeconfig/context for kubectl calls, empty when not configured."""
    return dict(config.get("kubectl") or {})
