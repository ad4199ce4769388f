"""Тесты агрегаций для графиков."""

import pytest

from core.aggregation import aggregate_by_category, aggregate_by_date, to_number
from data.cleaner import perform_eda
from data.models import AggregationMode, ColumnType, Granularity


def _pairs(points):
    return [(p.name, p.value) for p in points]


def _series(points):
    return [(p.date, p.value) for p in points]


class TestAggregateByCategory:

    @pytest.fixture
    def data(self, dataset_factory):
        return dataset_factory({
            "Region": (ColumnType.CATEGORY, ["East", "West", "East", "North"]),
            "Sales": (ColumnType.NUMBER, [1.0, 2.0, 3.0, 2.0]),
        })

    def test_sum_descending(self, data):
        assert _pairs(aggregate_by_category(data, "Region", "Sales")) == [
            ("East", 4.0), ("West", 2.0), ("North", 2.0),
        ]

    def test_count(self, data):
        points = aggregate_by_category(data, "Region", "Sales", AggregationMode.COUNT)
        assert _pairs(points) == [("East", 2), ("West", 1), ("North", 1)]

    def test_avg(self, data):
        points = aggregate_by_category(data, "Region", "Sales", AggregationMode.AVG)
        assert _pairs(points) == [("East", 2.0), ("West", 2.0), ("North", 2.0)]

    def test_mode_as_string(self, data):
        points = aggregate_by_category(data, "Region", "Sales", "count")
        assert points[0].name == "East"

    def test_after_cleaning(self, scenario_rows, dated_rows):
        data = perform_eda(scenario_rows)
        assert _pairs(aggregate_by_category(data, "Region", "Sales")) == [("East", 1200.0), ("West", 500.0)]

        data = perform_eda(dated_rows)
        assert _pairs(aggregate_by_category(data, "Region", "Sales")) == [("East", 1200.0), ("North", 300.0)]

    def test_non_numeric_values_count_as_zero(self, dataset_factory):
        data = dataset_factory({
            "Region": (ColumnType.CATEGORY, ["East", "West"]),
            "Sales": (ColumnType.TEXT, ["n/a", "5"]),
        })
        assert _pairs(aggregate_by_category(data, "Region", "Sales")) == [("West", 5.0), ("East", 0.0)]

    def test_empty(self, dataset_factory):
        data = dataset_factory({"Region": (ColumnType.CATEGORY, [])})
        assert aggregate_by_category(data, "Region", "Sales") == []


class TestAggregateByDate:

    def test_monthly(self, sales_dataset):
        points = aggregate_by_date(sales_dataset, "Order Date", "Sales")
        assert _series(points) == [
            ("Jan 2023", 3000.0),
            ("Feb 2023", 1250.0),
            ("Mar 2023", 1250.0),
            ("Jan 2024", 3000.0),
            ("Feb 2024", 1750.0),
        ]

    def test_yearly(self, sales_dataset):
        points = aggregate_by_date(sales_dataset, "Order Date", "Sales", Granularity.YEAR)
        assert _series(points) == [("2023", 5500.0), ("2024", 4750.0)]

    def test_chronological_not_alphabetical(self, dataset_factory):
        data = dataset_factory({
            "Date": (ColumnType.DATE, ["Apr 2024", "Jan 2024", "Dec 2023"]),
            "Sales": (ColumnType.NUMBER, [1.0, 2.0, 3.0]),
        })
        points = aggregate_by_date(data, "Date", "Sales")
        assert [p.date for p in points] == ["Dec 2023", "Jan 2024", "Apr 2024"]

    def test_iso_dates(self, dataset_factory):
        data = dataset_factory({
            "Date": (ColumnType.DATE, ["2024-02-15", "2024-02-01", "2023-12-31"]),
            "Sales": (ColumnType.NUMBER, [1.0, 2.0, 3.0]),
        })
        points = aggregate_by_date(data, "Date", "Sales")
        assert _series(points) == [("Dec 2023", 3.0), ("Feb 2024", 3.0)]

    def test_unrecognized_dates_skipped(self, dataset_factory):
        data = dataset_factory({
            "Date": (ColumnType.DATE, ["Jan 2024", None, "15/02/2024", "2024-13-01", "Foo 2024"]),
            "Sales": (ColumnType.NUMBER, [1.0, 2.0, 3.0, 4.0, 5.0]),
        })
        assert _series(aggregate_by_date(data, "Date", "Sales")) == [("Jan 2024", 1.0)]


class TestToNumber:

    @pytest.mark.parametrize("value, expected", [
        (None, 0.0),
        (True, 1.0),
        (12, 12.0),
        ("12.5", 12.5),
        ("abc", 0.0),
        ("", 0.0),
        (float("nan"), 0.0),
        ("1,200", 0.0),
    ])
    def test_values(self, value, expected):
        assert to_number(value) == expected
