import pytest
from typer.testing import CliRunner
from unittest.mock import AsyncMock, MagicMock

from regiondash.core.services.dashboard_service import DashboardService
from regiondash.domain.interfaces.manager_api import ManagerApi
from regiondash.domain.interfaces.user_interface import UserInterface
from regiondash.domain.models.common import ManagerId
from regiondash.domain.models.manager import (
    CustomerStats,
    Manager,
    ManagerDetails,
    RegionHierarchy,
    RegionPath,
)
from regiondash.infrastructure.cache.caching_service import CachingServiceImpl
from regiondash.infrastructure.config import settings


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    """Cache with the default 5 minute TTL driven by the fake clock."""
    return CachingServiceImpl(ttl=300, clock=clock)


@pytest.fixture
def manager():
    return Manager(id=ManagerId(1), name="A", region_name="East Java", region_type="PROVINCE")


@pytest.fixture
def details():
    return ManagerDetails(
        manager_id=ManagerId(1),
        manager_name="A",
        region_level="PROVINCE",
        region_name="East Java",
        number_of_customers=42,
        number_of_cities=3,
    )


@pytest.fixture
def stats():
    return CustomerStats(total_customers=12, by_region_level={"CITY": 10, "PROVINCE": 2, "COUNTRY": 0})


@pytest.fixture
def hierarchy():
    return RegionHierarchy(
        hierarchy=RegionPath(country="Indonesia", province="East Java", city="Surabaya"),
        manager_id=ManagerId(1),
        manager_name="A",
    )


@pytest.fixture
def mock_manager_api(manager, details, stats, hierarchy):
    """ManagerApi mock whose four capabilities succeed by default."""
    mock = MagicMock(spec=ManagerApi)
    mock.list_managers = AsyncMock(return_value=[manager])
    mock.get_manager_details = AsyncMock(return_value=details)
    mock.get_manager_stats = AsyncMock(return_value=stats)
    mock.get_manager_hierarchy = AsyncMock(return_value=hierarchy)
    return mock


@pytest.fixture
def dashboard_service(mock_manager_api, cache):
    return DashboardService(manager_api=mock_manager_api, cache_service=cache)


@pytest.fixture
def mock_ui():
    return MagicMock(spec=UserInterface)


@pytest.fixture(scope="session")
def runner():
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_test_config():
    yield
    settings.clear_test_config()
