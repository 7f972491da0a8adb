"""Domain models for managers and their region statistics.

The remote API speaks camelCase JSON; these dataclasses hold the parsed
payloads with snake_case attributes. `from_dict` raises KeyError, TypeError or
ValueError on malformed payloads, which the API client reports as decode
failures.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from regiondash.domain.models.common import ManagerId

# Region levels reported in CustomerStats.byRegionLevel
REGION_LEVELS = ("CITY", "PROVINCE", "COUNTRY")


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"Expected a JSON object for {what}, got {type(data).__name__}")
    return data


def _require_str(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"Expected a string for '{key}', got {type(value).__name__}")
    return value


def _to_int(value: Any, what: str) -> int:
    # Integral floats such as 3.0 pass; bools do not
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected an integer for '{what}', got {type(value).__name__}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"Expected an integer for '{what}', got {value!r}")
    return int(value)


def _optional_int(value: Any, what: str) -> Optional[int]:
    if value is None:
        return None
    return _to_int(value, what)


@dataclass(frozen=True)
class Manager:
    """One entry of the manager list."""
    id: ManagerId
    name: str
    region_name: str
    region_type: str
    email: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Manager":
        data = _require_mapping(data, "manager")
        return cls(
            id=ManagerId(_to_int(data["id"], "id")),
            name=_require_str(data, "name"),
            region_name=_require_str(data, "regionName"),
            region_type=_require_str(data, "regionType"),
            email=data.get("email"),
        )


@dataclass(frozen=True)
class ManagerDetails:
    """Region summary for a manager (`/managers/{id}/details`)."""
    manager_id: ManagerId
    manager_name: Optional[str] = None
    region_level: Optional[str] = None
    region_name: Optional[str] = None
    number_of_customers: Optional[int] = None
    number_of_cities: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Any) -> "ManagerDetails":
        data = _require_mapping(data, "manager details")
        return cls(
            manager_id=ManagerId(_to_int(data["managerId"], "managerId")),
            manager_name=data.get("managerName"),
            region_level=data.get("regionLevel"),
            region_name=data.get("regionName"),
            number_of_customers=_optional_int(data.get("numberOfCustomers"), "numberOfCustomers"),
            number_of_cities=_optional_int(data.get("numberOfCities"), "numberOfCities"),
        )


@dataclass(frozen=True)
class CustomerStats:
    """Customer counts per region level (`/managers/{id}/stats`).

    `by_region_level` only contains the levels the API reported.
    """
    total_customers: Optional[int] = None
    by_region_level: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "CustomerStats":
        data = _require_mapping(data, "customer stats")
        raw_levels = data.get("byRegionLevel") or {}
        raw_levels = _require_mapping(raw_levels, "byRegionLevel")
        by_level = {
            level: _to_int(raw_levels[level], level)
            for level in REGION_LEVELS
            if raw_levels.get(level) is not None
        }
        return cls(
            total_customers=_optional_int(data.get("totalCustomers"), "totalCustomers"),
            by_region_level=by_level,
        )


@dataclass(frozen=True)
class RegionPath:
    """Country / province / city chain of a manager's region."""
    country: str
    province: str
    city: str


@dataclass(frozen=True)
class RegionHierarchy:
    """Region hierarchy for a manager (`/managers/{id}/hierarchy`)."""
    hierarchy: RegionPath
    manager_id: Optional[ManagerId] = None
    manager_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "RegionHierarchy":
        data = _require_mapping(data, "region hierarchy")
        path = _require_mapping(data["hierarchy"], "hierarchy")
        manager_id = data.get("managerId")
        return cls(
            hierarchy=RegionPath(
                country=_require_str(path, "country"),
                province=_require_str(path, "province"),
                city=_require_str(path, "city"),
            ),
            manager_id=ManagerId(_to_int(manager_id, "managerId")) if manager_id is not None else None,
            manager_name=data.get("managerName"),
        )


@dataclass(frozen=True)
class ManagerData:
    """Composite result for a selected manager.

    The three parts are fetched together and cached as one unit; a
    ManagerData is never built from a partial set of responses.
    """
    details: ManagerDetails
    stats: CustomerStats
    hierarchy: RegionHierarchy
