"""Reachability check for the benchmark target."""

import asyncio
import logging

import aiohttp

from .errors import BenchmarkError

logger = logging.getLogger(__name__)


async def check_target(url: str, timeout_seconds: float = 10.0) -> int:
    """
    Send a single GET to ``url`` and return the response status.

    Raises:
        BenchmarkError: if the target cannot be reached
    """
    timeout = aiohttp.ClientTimeout(total=timeout_seconds)
    try:
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(url) as response:
                await response.read()
                return response.status
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise BenchmarkError(f"Target {url} is not reachable: {e}") from e


def preflight(url: str, timeout_seconds: float = 10.0) -> int:
    """Blocking wrapper around :func:`check_target`."""
    status = asyncio.run(check_target(url, timeout_seconds))
    if status >= 400:
        logger.warning(f"Target {url} answered HTTP {status}")
    else:
        logger.info(f"Target {url} answered HTTP {status}")
    return status
