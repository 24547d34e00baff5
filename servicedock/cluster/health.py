"""HTTP health-endpoint readiness probe."""

import logging
import os

import httpx

from servicedock.control.types import ReadinessState

logger = logging.getLogger(__name__)

HEALTH_TOKEN_ENV = "SERVICEDOCK_HEALTH_TOKEN"


def make_http_readiness_probe(url, timeout=5, token_env=HEALTH_TOKEN_ENV):
    """Create a probe that treats a 2xx from *url* as READY.

    Connection errors, timeouts and non-2xx responses are all NOT_READY.
    If *token_env* is set in the environment its value is sent as a bearer token.
    """

    async def probe(target):
        headers = {}
        token = os.environ.get(token_env, "") if token_env else ""
        if token:
            headers["Authorization"] = f"Bearer {token}"
        try:
            async with httpx.AsyncClient() as client:
                resp = await client.get(url, headers=headers, timeout=timeout)
        except httpx.HTTPError as e:
            logger.debug(f"Health check {url} for {target.node_name} failed: {e}")
            return ReadinessState.NOT_READY
        if resp.is_success:
            return ReadinessState.READY
        logger.debug(f"Health check {url} for {target.node_name} returned {resp.status_code}")
        return ReadinessState.NOT_READY

    return probe
