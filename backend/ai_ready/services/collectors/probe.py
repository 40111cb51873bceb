"""
Probe primitives - timed fetches and "first valid candidate wins".

Both probe shapes (parallel llms.txt variants, sequential sitemap walk) go
through first_valid so timeout and error handling live in one place.
"""
import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence

import httpx

from ai_ready.config import settings
from ai_ready.logger import logger


class ProbeMode(Enum):
    """How candidates are tried."""
    CONCURRENT = "concurrent"  # fetch all, first valid in priority order wins
    SEQUENTIAL = "sequential"  # fetch one by one, stop at first valid


@dataclass
class ProbeHit:
    """Candidate that passed validation."""
    url: str
    body: str


async def fetch_text(
    client: httpx.AsyncClient,
    url: str,
    timeout: Optional[float] = None
) -> Optional[str]:
    """GET a URL under its own deadline.

    Returns:
        Body text for a 2xx response, None for anything else (non-2xx,
        network error, timeout).
    """
    timeout = settings.PROBE_TIMEOUT if timeout is None else timeout
    try:
        response = await asyncio.wait_for(client.get(url), timeout=timeout)
        if not response.is_success:
            logger.debug(f"Probe {url} returned {response.status_code}")
            return None
        return response.text
    except asyncio.TimeoutError:
        logger.debug(f"Probe {url} timed out after {timeout}s")
        return None
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug(f"Probe {url} failed: {e}")
        return None


async def first_valid(
    client: httpx.AsyncClient,
    candidates: Sequence[str],
    validator: Callable[[str], bool],
    mode: ProbeMode,
    timeout: Optional[float] = None
) -> Optional[ProbeHit]:
    """Return the first candidate (in list order) whose body passes the validator."""
    if mode is ProbeMode.SEQUENTIAL:
        for url in candidates:
            body = await fetch_text(client, url, timeout)
            if body is not None and validator(body):
                return ProbeHit(url=url, body=body)
        return None

    bodies = await asyncio.gather(*(fetch_text(client, url, timeout) for url in candidates))
    for url, body in zip(candidates, bodies):
        if body is not None and validator(body):
            return ProbeHit(url=url, body=body)
    return None
