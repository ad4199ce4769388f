"""Тесты расчёта KPI."""

from core.metrics import MAX_KPIS, ColumnRole, calculate_kpis, resolve_column
from data.models import Column, ColumnType, KPIIcon


def _ids(kpis):
    return [k.id for k in kpis]


class TestResolveColumn:

    def test_first_matching_column_wins(self):
        columns = [
            Column(name="Date", type=ColumnType.DATE),
            Column(name="Total Sales", type=ColumnType.NUMBER),
            Column(name="Revenue", type=ColumnType.NUMBER),
        ]
        assert resolve_column(columns, ColumnRole.SALES).name == "Total Sales"

    def test_case_insensitive(self):
        columns = [Column(name="REGION", type=ColumnType.CATEGORY)]
        assert resolve_column(columns, ColumnRole.REGION).name == "REGION"

    def test_no_match(self):
        columns = [
            Column(name="Date", type=ColumnType.DATE),
            Column(name="Region", type=ColumnType.CATEGORY),
        ]
        assert resolve_column(columns, ColumnRole.SALES) is None

    def test_type_must_fit_role(self):
        """Текстовая "Sales Rep" — не сумма продаж."""
        columns = [
            Column(name="Sales Rep", type=ColumnType.TEXT),
            Column(name="Amount", type=ColumnType.NUMBER),
        ]
        assert resolve_column(columns, ColumnRole.SALES).name == "Amount"
        assert resolve_column(columns[:1], ColumnRole.SALES) is None


class TestCalculateKpis:

    def test_full_set(self, sales_dataset):
        kpis = calculate_kpis(sales_dataset, "Clothing sales")

        assert _ids(kpis) == [
            "total-sales",
            "total-quantity",
            "avg-price",
            "top-region",
            "top-category",
            "total-records",
        ]

    def test_values(self, sales_dataset):
        kpis = {k.id: k for k in calculate_kpis(sales_dataset)}

        assert kpis["total-sales"].value == "$0.01M"
        assert kpis["total-sales"].icon == KPIIcon.DOLLAR_SIGN
        assert kpis["total-quantity"].value == "120"
        assert kpis["avg-price"].value == "$85.42"
        assert kpis["total-records"].value == "8"

    def test_top_groups(self, sales_dataset):
        kpis = {k.id: k for k in calculate_kpis(sales_dataset)}

        assert kpis["top-region"].label == "Best Region"
        assert kpis["top-region"].value == "East"
        assert kpis["top-category"].label == "Top Product Category"
        assert kpis["top-category"].value == "Pants"
        assert kpis["top-category"].subtitle == "$0.01M revenue"

    def test_sales_quantity_region(self, dataset_factory):
        data = dataset_factory({
            "Sales": (ColumnType.NUMBER, [100.0, 200.0]),
            "Qty": (ColumnType.NUMBER, [1.0, 4.0]),
            "Region": (ColumnType.CATEGORY, ["East", "West"]),
        })
        kpis = calculate_kpis(data)

        assert _ids(kpis) == ["total-sales", "total-quantity", "avg-price", "top-region", "total-records"]
        assert kpis[2].value == "$60.00"
        assert kpis[3].value == "West"

    def test_only_records_without_known_columns(self, dataset_factory):
        data = dataset_factory({"Name": (ColumnType.TEXT, ["a", "b", "c"])})
        kpis = calculate_kpis(data)

        assert _ids(kpis) == ["total-records"]
        assert kpis[0].value == "3"

    def test_zero_sales_skipped(self, dataset_factory):
        data = dataset_factory({
            "Sales": (ColumnType.NUMBER, [0.0, 0.0]),
            "Qty": (ColumnType.NUMBER, [0.0, 0.0]),
        })
        assert _ids(calculate_kpis(data)) == ["total-records"]

    def test_no_average_without_quantity_total(self, dataset_factory):
        data = dataset_factory({
            "Sales": (ColumnType.NUMBER, [10.0]),
            "Units": (ColumnType.NUMBER, [0.0]),
        })
        assert _ids(calculate_kpis(data)) == ["total-sales", "total-records"]

    def test_tie_keeps_first_seen_group(self, dataset_factory):
        data = dataset_factory({
            "Sales": (ColumnType.NUMBER, [50.0, 50.0]),
            "City": (ColumnType.CATEGORY, ["Pune", "Delhi"]),
        })
        kpis = {k.id: k for k in calculate_kpis(data)}
        assert kpis["top-region"].value == "Pune"

    def test_empty_rows(self, dataset_factory):
        data = dataset_factory({"Sales": (ColumnType.NUMBER, [])})
        kpis = calculate_kpis(data)

        assert _ids(kpis) == ["total-records"]
        assert kpis[0].value == "0"

    def test_never_more_than_max(self, sales_dataset):
        assert len(calculate_kpis(sales_dataset)) <= MAX_KPIS
