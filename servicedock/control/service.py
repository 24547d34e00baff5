"""Default wiring: SSH transport, kubectl resolver and a readiness probe around the controller."""

from servicedock.cluster.health import make_http_readiness_probe
from servicedock.cluster.kubectl import make_kubectl_resolver, make_node_readiness_probe
from servicedock.cluster.readiness import make_poll_readiness
from servicedock.control.controller import RemoteServiceController
from servicedock.control.params import ControlParams
from servicedock.control.types import Action, Target
from servicedock.provisioning.ssh_transport import make_run_remote


def make_probe(health_url=None, kubeconfig=None, context=None):
    """HTTP health probe when a URL is given, otherwise the kubectl node Ready condition."""
    if health_url:
        return make_http_readiness_probe(health_url)
    return make_node_readiness_probe(kubeconfig, context)


def make_controller(target: Target, params: ControlParams, health_url=None, kubeconfig=None, context=None):
    """Build a RemoteServiceController with the default collaborators."""
    run_remote = make_run_remote(
        params.ssh_key,
        params.ssh_port,
        ssh_user=target.ssh_user or params.ssh_user,
        dry_run=params.dry_run,
        timeout=params.command_timeout,
    )
    resolve_address = make_kubectl_resolver(kubeconfig, context, dry_run=params.dry_run)
    probe = make_probe(health_url, kubeconfig, context)
    poll_readiness = make_poll_readiness(probe, interval=params.poll_interval, dry_run=params.dry_run)
    return RemoteServiceController(resolve_address, run_remote, poll_readiness)


async def apply_action(action: Action, target: Target, service_name: str, params: ControlParams,
                       health_url=None, kubeconfig=None, context=None) -> None:
    """Apply *action* to *service_name* on *target*. Single entry point."""
    controller = make_controller(target, params, health_url, kubeconfig, context)
    await controller.apply_action(action, target, service_name, params)


async def current_readiness(target: Target, health_url=None, kubeconfig=None, context=None):
    """Observe the target's readiness once."""
    probe = make_probe(health_url, kubeconfig, context)
    return await probe(target)
