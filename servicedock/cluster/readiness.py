"""Convergence wait: poll a readiness probe until it reports the expected state."""

import asyncio
import logging

from servicedock.control.types import ReadinessState

logger = logging.getLogger(__name__)


async def wait_for_readiness(probe, target, expected: ReadinessState, timeout, interval=2, dry_run=False):
    """Poll *probe* until it reports *expected* or *timeout* seconds elapse.

    The state is fetched fresh on every poll; the first poll happens
    immediately. A poll still running at the deadline is abandoned, so the
    wait never outlasts *timeout*.

    Returns:
        True if the expected state was observed, False on timeout.
    """
    logger.info(f"Waiting up to {timeout}s for node {target.label} to be {expected.value}")
    if dry_run:
        logger.info(f"[dry-run] skip readiness wait for {target.node_name}")
        return True

    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while True:
        try:
            state = await asyncio.wait_for(probe(target), timeout=max(deadline - loop.time(), 0))
        except TimeoutError:
            break
        if state == expected:
            logger.info(f"Node {target.node_name} is {expected.value}")
            return True
        remaining = deadline - loop.time()
        if remaining <= 0:
            break
        await asyncio.sleep(min(interval, remaining))

    logger.error(f"Timeout after {timeout}s waiting for node {target.node_name} to be {expected.value}")
    return False


def make_poll_readiness(probe, interval=2, dry_run=False):
    """Create a poll_readiness(target, expected, timeout) -> bool callable."""

    async def poll_readiness(target, expected, timeout):
        return await wait_for_readiness(probe, target, expected, timeout, interval=interval, dry_run=dry_run)

    return poll_readiness
