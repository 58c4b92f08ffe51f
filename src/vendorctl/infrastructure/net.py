"""HTTP access to remote module sources.

One :class:`httpx.AsyncClient` is built per batch so that timeouts and
headers are uniform across every fetch of that batch.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from vendorctl.config.models import NetworkConfig

logger = logging.getLogger(__name__)


def build_async_client(
    network: NetworkConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` from the ``[network]`` settings.

    *transport* lets tests substitute ``httpx.MockTransport``.
    """
    headers = {
        "User-Agent": network.user_agent,
        "Accept": "application/typescript, application/javascript, text/plain, */*",
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(network.timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


async def fetch_source(client: httpx.AsyncClient, url: str) -> str:
    """GET *url* and return the body text. Raises ``httpx.HTTPError``."""
    logger.debug("Fetching %s", url)
    response = await client.get(url)
    response.raise_for_status()
    return response.text
