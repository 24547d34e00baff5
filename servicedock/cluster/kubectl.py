"""kubectl-backed collaborators: node address resolution and node readiness."""

import json
import logging
import os

from servicedock.control.errors import ResolutionError
from servicedock.control.types import ReadinessState
from servicedock.provisioning.shell import run_shell_cmd

logger = logging.getLogger(__name__)

DRY_RUN_ADDRESS = "dry-run-address"


def kubectl_args(kubeconfig=None, context=None):
    """Build base kubectl arguments."""
    args = ["kubectl"]
    if kubeconfig:
        args += ["--kubeconfig", os.path.expanduser(kubeconfig)]
    if context:
        args += ["--context", context]
    return args


async def get_node(node_name, kubeconfig=None, context=None, dry_run=False, timeout=30):
    """Fetch the node object as a dict via ``kubectl get node -o json``.

    Returns:
        Parsed node dict, or None in dry-run mode.

    Raises:
        RuntimeError: kubectl failed or printed something that is not JSON.
    """
    command = kubectl_args(kubeconfig, context) + ["get", "node", node_name, "-o", "json"]
    rc, stdout, stderr = await run_shell_cmd(command, dry_run=dry_run, timeout=timeout)
    if dry_run:
        return None
    if rc != 0:
        raise RuntimeError(stderr.strip() or f"kubectl exited with {rc}")
    try:
        return json.loads(stdout)
    except json.JSONDecodeError as e:
        raise RuntimeError(f"kubectl returned invalid JSON: {e}") from e


def external_address(node: dict) -> str | None:
    """First ExternalIP in the node's status.addresses, if any."""
    for addr in node.get("status", {}).get("addresses", []):
        if addr.get("type") == "ExternalIP" and addr.get("address"):
            return addr["address"]
    return None


def node_is_ready(node: dict) -> bool:
    """True when the node's Ready condition has status "True"."""
    for cond in node.get("status", {}).get("conditions", []):
        if cond.get("type") == "Ready":
            return cond.get("status") == "True"
    return False


def make_kubectl_resolver(kubeconfig=None, context=None, dry_run=False):
    """Create a resolve_address callable.

    A target with an explicit address is returned as-is; otherwise the
    node's ExternalIP is looked up through kubectl.
    """

    async def resolve_address(target):
        if target.address:
            return target.address
        try:
            node = await get_node(target.node_name, kubeconfig, context, dry_run=dry_run)
        except RuntimeError as e:
            raise ResolutionError(target.node_name, str(e)) from e
        if node is None:
            return DRY_RUN_ADDRESS
        address = external_address(node)
        if not address:
            raise ResolutionError(target.node_name, "node has no ExternalIP address")
        logger.info(f"Resolved node {target.node_name} -> {address}")
        return address

    return resolve_address


def make_node_readiness_probe(kubeconfig=None, context=None):
    """Create a probe reporting the node's Ready condition.

    A kubectl failure is reported as NOT_READY: the node is not observably ready.
    """

    async def probe(target):
        try:
            node = await get_node(target.node_name, kubeconfig, context)
        except RuntimeError as e:
            logger.debug(f"Couldn't get node {target.node_name}: {e}")
            return ReadinessState.NOT_READY
        return ReadinessState.READY if node_is_ready(node) else ReadinessState.NOT_READY

    return probe
