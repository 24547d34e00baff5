"""Cluster-side collaborators: address resolution, readiness probes, convergence wait."""

from servicedock.cluster.health import make_http_readiness_probe
from servicedock.cluster.kubectl import (
    external_address,
    get_node,
    make_kubectl_resolver,
    make_node_readiness_probe,
    node_is_ready,
)
from servicedock.cluster.readiness import make_poll_readiness, wait_for_readiness

__all__ = [
    "make_http_readiness_probe",
    "external_address",
    "get_node",
    "make_kubectl_resolver",
    "make_node_readiness_probe",
    "node_is_ready",
    "make_poll_readiness",
    "wait_for_readiness",
]
