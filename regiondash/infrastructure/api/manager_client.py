"""HTTP client for the manager statistics API.

Implements the ManagerApi interface with httpx. Every failure (transport,
non-2xx status, malformed payload) is logged and raised as a ManagerApiError
subclass; callers only need to tell success from failure.
"""

import logging
from typing import Any, Callable, List, Optional, TypeVar

import httpx

# Domain Layer Imports
from regiondash.domain.errors import (
    ManagerApiConnectionError,
    ManagerApiDecodeError,
    ManagerApiStatusError,
    ManagerApiTimeoutError,
)
from regiondash.domain.interfaces.manager_api import ManagerApi
from regiondash.domain.models.common import ManagerId
from regiondash.domain.models.manager import (
    CustomerStats,
    Manager,
    ManagerDetails,
    RegionHierarchy,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:9191/api"
DEFAULT_TIMEOUT_SECONDS = 10.0

T = TypeVar("T")


class ManagerApiClient(ManagerApi):
    """ManagerApi implementation over HTTP."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initializes the client.

        Args:
            base_url: API root, e.g. 'http://localhost:9191/api'.
            timeout_seconds: Per-request timeout.
            transport: Optional httpx transport (tests pass an httpx.MockTransport).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport
        logger.info(f"ManagerApiClient initialized: base_url={self.base_url}, timeout={timeout_seconds}s")

    async def _get_json(self, path: str) -> Any:
        """Performs a GET and returns the decoded JSON body."""
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.error(f"API Error: timeout after {self.timeout_seconds}s for GET {url}")
            raise ManagerApiTimeoutError(f"Request timeout after {self.timeout_seconds}s", endpoint=path) from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"API Error: GET {url} returned {status}")
            raise ManagerApiStatusError(f"Unexpected status {status}", status_code=status, endpoint=path) from e
        except httpx.RequestError as e:
            logger.error(f"API Error: GET {url} failed: {e}")
            raise ManagerApiConnectionError(f"Request failed: {e}", endpoint=path) from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"API Error: GET {url} returned a non-JSON body")
            raise ManagerApiDecodeError("Response body is not valid JSON", endpoint=path) from e

    def _parse(self, path: str, payload: Any, parser: Callable[[Any], T]) -> T:
        try:
            return parser(payload)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"API Error: malformed payload from {path}: {e!r}")
            raise ManagerApiDecodeError(f"Malformed payload: {e!r}", endpoint=path) from e

    # --- ManagerApi Interface Implementation ---

    async def list_managers(self) -> List[Manager]:
        path = "/managers"
        payload = await self._get_json(path)
        if not isinstance(payload, list):
            logger.error(f"API Error: expected a list from {path}, got {type(payload).__name__}")
            raise ManagerApiDecodeError("Expected a list of managers", endpoint=path)
        return [self._parse(path, item, Manager.from_dict) for item in payload]

    async def get_manager_details(self, manager_id: ManagerId) -> ManagerDetails:
        path = f"/managers/{manager_id}/details"
        return self._parse(path, await self._get_json(path), ManagerDetails.from_dict)

    async def get_manager_stats(self, manager_id: ManagerId) -> CustomerStats:
        path = f"/managers/{manager_id}/stats"
        return self._parse(path, await self._get_json(path), CustomerStats.from_dict)

    async def get_manager_hierarchy(self, manager_id: ManagerId) -> RegionHierarchy:
        path = f"/managers/{manager_id}/hierarchy"
        return self._parse(path, await self._get_json(path), RegionHierarchy.from_dict)


