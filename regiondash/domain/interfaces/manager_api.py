"""Interface for the remote manager statistics API.

Each capability either returns a parsed domain model or raises a
ManagerApiError; there is no partial success.
"""

import abc
from typing import List

from ..models.common import ManagerId
from ..models.manager import CustomerStats, Manager, ManagerDetails, RegionHierarchy

class ManagerApi(abc.ABC):
    """Abstract Base Class for the manager API capabilities."""

    @abc.abstractmethod
    async def list_managers(self) -> List[Manager]:
        """Fetches all managers."""
        pass

    @abc.abstractmethod
    async def get_manager_details(self, manager_id: ManagerId) -> ManagerDetails:
        """Fetches the region summary of one manager."""
        pass

    @abc.abstractmethod
    async def get_manager_stats(self, manager_id: ManagerId) -> CustomerStats:
        """Fetches customer counts per region level for one manager."""
        pass

    @abc.abstractmethod
    async def get_manager_hierarchy(self, manager_id: ManagerId) -> RegionHierarchy:
        """Fetches the country/province/city chain of one manager."""
        pass
