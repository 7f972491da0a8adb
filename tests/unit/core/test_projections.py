import pytest

from regiondash.core.projections import (
    Field,
    build_table,
    customer_distribution,
    region_hierarchy,
    region_overview,
    resolve,
)
from regiondash.domain.models.common import ManagerId
from regiondash.domain.models.manager import CustomerStats, ManagerData, ManagerDetails


@pytest.fixture
def manager_data(details, stats, hierarchy):
    return ManagerData(details=details, stats=stats, hierarchy=hierarchy)


def test_region_overview_placeholder():
    assert region_overview(None) == [
        ["Metric", "Value"],
        ["Total Customers", 0],
        ["Cities Covered", 0],
    ]


def test_region_overview_from_details(manager_data):
    assert region_overview(manager_data) == [
        ["Metric", "Value"],
        ["Total Customers", 42],
        ["Cities Covered", 3],
    ]


def test_region_overview_missing_numbers_default_to_zero(stats, hierarchy):
    data = ManagerData(details=ManagerDetails(manager_id=ManagerId(1)), stats=stats, hierarchy=hierarchy)
    assert region_overview(data)[1:] == [["Total Customers", 0], ["Cities Covered", 0]]


def test_distribution_placeholder():
    assert customer_distribution(None) == [
        ["Region Level", "Customers"],
        ["City", 0],
        ["Province", 0],
        ["Country", 0],
    ]


def test_distribution_from_stats(manager_data):
    assert customer_distribution(manager_data) == [
        ["Region Level", "Customers"],
        ["City", 10],
        ["Province", 2],
        ["Country", 0],
    ]


def test_distribution_absent_levels_default_to_zero(details, hierarchy):
    data = ManagerData(details=details, stats=CustomerStats(by_region_level={"PROVINCE": 7}), hierarchy=hierarchy)
    assert customer_distribution(data)[1:] == [["City", 0], ["Province", 7], ["Country", 0]]


def test_hierarchy_placeholder():
    assert region_hierarchy(None) == [
        ["Location", "Parent", "Count"],
        ["Indonesia", None, 0],
        ["East Java", "Indonesia", 0],
        ["Surabaya", "East Java", 0],
    ]


def test_hierarchy_from_data(manager_data):
    assert region_hierarchy(manager_data) == [
        ["Location", "Parent", "Count"],
        ["Indonesia", None, 0],
        ["East Java", "Indonesia", 0],
        ["Surabaya", "East Java", 3],
    ]


def test_resolve_walks_attributes_and_mappings(manager_data):
    assert resolve(manager_data, "stats.by_region_level.CITY") == 10
    assert resolve(manager_data, "hierarchy.hierarchy.city") == "Surabaya"
    assert resolve(manager_data, "details.no_such_field", "x") == "x"
    assert resolve(None, "details.number_of_cities", 0) == 0


def test_build_table_mixes_literals_and_fields():
    source = {"a": {"b": 5}}
    table = build_table(("k", "v"), (("five", Field("a.b")), ("missing", Field("a.c", -1))), source)
    assert table == [["k", "v"], ["five", 5], ["missing", -1]]


def test_build_table_returns_fresh_lists():
    first = region_overview(None)
    first[1][1] = 99
    assert region_overview(None)[1][1] == 0
