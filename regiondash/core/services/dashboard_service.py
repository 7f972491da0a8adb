"""
Core service orchestrating manager data fetches for the dashboard.

Decides for each logical resource (the manager list, and the composite
details/stats/hierarchy of the selected manager) whether to serve it from
the cache or from the API, and keeps the request state observed by the
presentation layer. Failures are absorbed here: they become FAILED states
with a fixed message and never reach the cache.
"""

import asyncio
import logging
from typing import List, Optional

# Domain Layer Imports
from regiondash.domain.interfaces.cache import CacheService
from regiondash.domain.interfaces.manager_api import ManagerApi
from regiondash.domain.models.common import (
    MANAGER_LIST_CACHE_KEY,
    ManagerId,
    manager_cache_key,
)
from regiondash.domain.models.manager import Manager, ManagerData
from regiondash.domain.models.state import RequestState

logger = logging.getLogger(__name__)

MANAGER_LIST_ERROR = "Failed to fetch managers"
MANAGER_DATA_ERROR = "Failed to fetch manager data"


def _error_category(error: BaseException) -> str:
    return getattr(error, "category", "unknown")


class DashboardService:
    """Get-or-fetch orchestration for the manager list and manager data.

    Attributes observed by the presentation layer:
        managers: Last successfully loaded manager list.
        list_state: RequestState of the manager list fetch.
        selected_manager_id: Current selection, None when nothing is selected.
        manager_data: Composite data of the selection, None when absent.
        data_state: RequestState of the composite fetch.
    """

    def __init__(self, manager_api: ManagerApi, cache_service: CacheService):
        """Initializes the DashboardService with its dependencies.

        The cache is owned by this service for its whole lifetime; nothing
        else writes to it.
        """
        self.manager_api = manager_api
        self.cache_service = cache_service

        self.managers: List[Manager] = []
        self.list_state = RequestState.idle()

        self.selected_manager_id: Optional[ManagerId] = None
        self.manager_data: Optional[ManagerData] = None
        self.data_state = RequestState.idle()

        # Bumped by every composite load and every cleared selection; only
        # responses carrying the latest value are applied.
        self._generation = 0
        logger.info(f"DashboardService initialized with API: {manager_api.__class__.__name__}")

    @property
    def is_loading(self) -> bool:
        return self.list_state.is_loading or self.data_state.is_loading

    @property
    def error(self) -> Optional[str]:
        """Message for the error banner, manager data failures first."""
        return self.data_state.error or self.list_state.error

    async def load_manager_list(self) -> List[Manager]:
        """Loads the manager list from the cache or the API."""
        cached = self.cache_service.get(MANAGER_LIST_CACHE_KEY)
        if cached is not None:
            logger.debug(f"Serving {len(cached)} managers from cache")
            self.managers = list(cached)
            self.list_state = RequestState.ready()
            return self.managers

        self.list_state = RequestState.loading()
        try:
            managers = await self.manager_api.list_managers()
        except Exception as e:
            logger.error(f"Error fetching managers: {e}", exc_info=True)
            self.list_state = RequestState.failed(MANAGER_LIST_ERROR, _error_category(e))
            return self.managers

        self.cache_service.set(MANAGER_LIST_CACHE_KEY, list(managers))
        self.managers = list(managers)
        self.list_state = RequestState.ready()
        logger.info(f"Loaded {len(self.managers)} managers")
        return self.managers

    def select_manager(self, manager_id: Optional[ManagerId]) -> "Optional[asyncio.Task[Optional[ManagerData]]]":
        """Changes the selection.

        Clearing the selection (None) takes effect immediately and touches
        neither the network nor the cache. Selecting a manager schedules
        `load_manager_data` on the running event loop and returns the task.

        Raises:
            RuntimeError: If a manager is selected while no event loop is running.
        """
        if manager_id is None:
            self._generation += 1
            self.selected_manager_id = None
            self.manager_data = None
            self.data_state = RequestState.idle()
            logger.debug("Selection cleared")
            return None

        loop = asyncio.get_running_loop()
        self.selected_manager_id = manager_id
        return loop.create_task(self.load_manager_data(manager_id))

    async def load_manager_data(self, manager_id: ManagerId) -> Optional[ManagerData]:
        """Loads details, stats and hierarchy of a manager as one unit.

        Returns the composite on success (from cache or API), None on failure.
        """
        self._generation += 1
        generation = self._generation
        self.selected_manager_id = manager_id
        cache_key = manager_cache_key(manager_id)

        cached = self.cache_service.get(cache_key)
        if cached is not None:
            logger.debug(f"Serving manager {manager_id} data from cache")
            self.manager_data = cached
            self.data_state = RequestState.ready()
            return cached

        self.data_state = RequestState.loading()
        try:
            details, stats, hierarchy = await asyncio.gather(
                self.manager_api.get_manager_details(manager_id),
                self.manager_api.get_manager_stats(manager_id),
                self.manager_api.get_manager_hierarchy(manager_id),
            )
        except Exception as e:
            if generation != self._generation:
                logger.info(f"Dropping failed response for superseded request of manager {manager_id}")
                return None
            logger.error(f"Error fetching manager data for {manager_id}: {e}", exc_info=True)
            self.manager_data = None
            self.data_state = RequestState.failed(MANAGER_DATA_ERROR, _error_category(e))
            return None

        data = ManagerData(details=details, stats=stats, hierarchy=hierarchy)
        # Complete data is valid for its own key even if the view moved on.
        self.cache_service.set(cache_key, data)

        if generation != self._generation:
            logger.info(f"Not applying superseded response for manager {manager_id}")
            return data

        self.manager_data = data
        self.data_state = RequestState.ready()
        logger.info(f"Loaded data for manager {manager_id}")
        return data

    def clear_cache(self) -> None:
        """Drops every cached list and composite entry."""
        self.cache_service.clear()
