"""RIPE Stat looking-glass client."""

import asyncio
import logging
from typing import Any

import aiohttp

from bgp_peering_check import __version__
from bgp_peering_check.models.collector import RouteCollector
from bgp_peering_check.sources.base import (
    ApiStatusError,
    DataSource,
    TransportError,
    UnexpectedContentTypeError,
)

logger = logging.getLogger(__name__)


class RipeStatClient(DataSource):
    """Client for the RIPE Stat looking-glass data call.

    The looking glass returns, per RIS route collector (RRC), the AS paths
    its peers currently carry for a prefix.

    See: https://stat.ripe.net/docs/02.data-api/looking-glass.html
    """

    BASE_URL = "https://stat.ripe.net/data"

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: float = 15.0,
        proxy: str | None = None,
        verify_ssl: bool = True,
        source_app: str = "bgp-peering-check",
    ):
        """Initialize the client.

        Args:
            base_url: RIPE Stat data API base URL.
            timeout: Total request timeout in seconds.
            proxy: Optional HTTP(S) proxy URL.
            verify_ssl: Verify TLS certificates.
            source_app: Identifier sent as the ``sourceapp`` parameter.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.proxy = proxy
        self.verify_ssl = verify_ssl
        self.source_app = source_app
        self._session: aiohttp.ClientSession | None = None

    async def connect(self) -> None:
        """Create HTTP session."""
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers={"User-Agent": f"bgp-peering-check/{__version__}"},
            )

    async def disconnect(self) -> None:
        """Close HTTP session."""
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def _request(self, endpoint: str, params: dict[str, Any]) -> dict[str, Any]:
        """Make a request to the RIPE Stat API.

        Args:
            endpoint: API endpoint name (e.g., "looking-glass").
            params: Query parameters.

        Returns:
            Response data dictionary.

        Raises:
            TransportError: On network errors, HTTP errors and timeouts.
            UnexpectedContentTypeError: If the response is not JSON.
            ApiStatusError: If the API reports a non-ok status.
        """
        if self._session is None:
            raise RuntimeError("Client not connected. Use 'async with' or call connect().")

        url = f"{self.base_url}/{endpoint}/data.json"
        params = {**params, "sourceapp": self.source_app}
        logger.debug("GET %s params=%s", url, params)

        try:
            async with self._session.get(
                url,
                params=params,
                proxy=self.proxy,
                ssl=self.verify_ssl,
            ) as response:
                response.raise_for_status()
                if response.content_type != "application/json":
                    raise UnexpectedContentTypeError(response.content_type)
                data = await response.json()
        except asyncio.TimeoutError:
            raise TransportError(f"Timeout after {self.timeout:g}s fetching {url}") from None
        except aiohttp.ClientResponseError as e:
            raise TransportError(f"HTTP {e.status} fetching {url}: {e.message}") from e
        except aiohttp.ClientError as e:
            raise TransportError(f"Error fetching {url}: {e}") from e
        except ValueError as e:
            raise TransportError(f"Invalid JSON from {url}: {e}") from e

        status = data.get("status") if isinstance(data, dict) else None
        if status != "ok":
            raise ApiStatusError(status)

        return data.get("data") or {}

    async def get_looking_glass(self, prefix: str) -> tuple[RouteCollector, ...]:
        """Get the looking-glass view of a prefix.

        Args:
            prefix: IP prefix in CIDR notation.

        Returns:
            One RouteCollector per RRC that sees the prefix.
        """
        data = await self._request("looking-glass", {"resource": prefix})

        collectors = tuple(RouteCollector.from_dict(rrc) for rrc in data.get("rrcs", []))
        logger.debug(
            "Looking glass returned %d collectors, %d paths for %s",
            len(collectors),
            sum(len(c.observations) for c in collectors),
            prefix,
        )
        return collectors
