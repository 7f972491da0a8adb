"""Table projections of a manager's composite data for the presentation layer.

All three dashboard tables come from one `build_table` utility. A table is
described once as rows of cells; a cell is either a literal or a `Field`
path into the composite data with the value used when the data (or the
field) is missing. With no data every Field falls back to its default,
which yields the placeholder tables shown before a selection or after a
failed fetch.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence

from regiondash.domain.models.manager import ManagerData

Table = List[List[Any]]


@dataclass(frozen=True)
class Field:
    """Dotted attribute/key path into ManagerData, with a fallback value."""
    path: str
    default: Any = 0


def resolve(source: Any, path: str, default: Any = None) -> Any:
    """Follows a dotted path through attributes and mapping keys.

    Returns `default` when the source is None or any step is missing or None.
    """
    current = source
    for part in path.split("."):
        if current is None:
            return default
        if isinstance(current, Mapping):
            current = current.get(part)
        else:
            current = getattr(current, part, None)
    return default if current is None else current


def build_table(header: Sequence[Any], rows: Sequence[Sequence[Any]], source: Optional[Any]) -> Table:
    """Materialises a table layout against a data source (or None)."""
    table: Table = [list(header)]
    for row in rows:
        table.append([
            resolve(source, cell.path, cell.default) if isinstance(cell, Field) else cell
            for cell in row
        ])
    return table


REGION_OVERVIEW_HEADER = ("Metric", "Value")
REGION_OVERVIEW_ROWS = (
    ("Total Customers", Field("details.number_of_customers")),
    ("Cities Covered", Field("details.number_of_cities")),
)

DISTRIBUTION_HEADER = ("Region Level", "Customers")
DISTRIBUTION_ROWS = (
    ("City", Field("stats.by_region_level.CITY")),
    ("Province", Field("stats.by_region_level.PROVINCE")),
    ("Country", Field("stats.by_region_level.COUNTRY")),
)

# Placeholder locations are shown until a hierarchy is loaded.
HIERARCHY_HEADER = ("Location", "Parent", "Count")
HIERARCHY_ROWS = (
    (Field("hierarchy.hierarchy.country", "Indonesia"), None, 0),
    (Field("hierarchy.hierarchy.province", "East Java"), Field("hierarchy.hierarchy.country", "Indonesia"), 0),
    (Field("hierarchy.hierarchy.city", "Surabaya"), Field("hierarchy.hierarchy.province", "East Java"),
     Field("details.number_of_cities")),
)


def region_overview(data: Optional[ManagerData]) -> Table:
    return build_table(REGION_OVERVIEW_HEADER, REGION_OVERVIEW_ROWS, data)


def customer_distribution(data: Optional[ManagerData]) -> Table:
    return build_table(DISTRIBUTION_HEADER, DISTRIBUTION_ROWS, data)


def region_hierarchy(data: Optional[ManagerData]) -> Table:
    return build_table(HIERARCHY_HEADER, HIERARCHY_ROWS, data)
