"""Pytest configuration and shared fixtures."""

import pytest

from data.cleaner import perform_eda
from data.models import CleanedDataset, Column, ColumnType


@pytest.fixture
def scenario_rows():
    """Два одинаковых заказа и одна строка с мусорной датой."""
    return [
        {"Date": "2023-01-15", "Sales": "1,200", "Region": "East"},
        {"Date": "2023-01-15", "Sales": "1,200", "Region": "East"},
        {"Date": "bad-date", "Sales": "500", "Region": "West"},
    ]


@pytest.fixture
def dated_rows(scenario_rows):
    """То же плюс ещё один нормальный заказ: дат в колонке 3 из 4."""
    return scenario_rows[:2] + [
        {"Date": "2023-02-01", "Sales": "300", "Region": "North"},
    ] + scenario_rows[2:]


@pytest.fixture
def sales_rows():
    """Небольшая выгрузка продаж: даты, суммы, количество, регион, категория."""
    regions = ["East", "West", "North", "East", "West", "East", "North", "East"]
    categories = ["Shirts", "Pants", "Shirts", "Hats", "Shirts", "Pants", "Hats", "Shirts"]
    dates = [
        "2023-01-15", "2023-01-20", "2023-02-03", "2023-02-14",
        "2023-03-01", "2024-01-10", "2024-02-11", "2024-02-12",
    ]
    sales = ["1,000", "$2,000", "500", "750", "1,250", "3000", "250", "1,500"]
    qty = ["10", "20", "5", "15", "25", "30", "5", "10"]

    return [
        {
            "Order Date": d,
            "Sales": s,
            "Qty": q,
            "Region": r,
            "Product Category": c,
        }
        for d, s, q, r, c in zip(dates, sales, qty, regions, categories)
    ]


@pytest.fixture
def sales_dataset(sales_rows) -> CleanedDataset:
    return perform_eda(sales_rows)


def make_dataset(columns: dict[str, tuple[ColumnType, list]]) -> CleanedDataset:
    """Датасет из уже нормализованных колонок (без вывода типов)."""
    built = [Column(name=name, type=t, values=values) for name, (t, values) in columns.items()]
    count = len(built[0].values) if built else 0
    rows = [{col.name: col.values[i] for col in built} for i in range(count)]
    return CleanedDataset(
        columns=built,
        rows=rows,
        original_row_count=count,
        cleaned_row_count=count,
        warnings=[],
    )


@pytest.fixture
def dataset_factory():
    return make_dataset
