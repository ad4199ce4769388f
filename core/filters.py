"""
Фильтры дашборда: по году и по значениям категорий.

Фильтр никогда не мутирует исходный датасет — возвращается новое
представление с отфильтрованными строками.
"""

import re
from typing import Optional
import logging

from pydantic import BaseModel, Field

from data.models import CleanedDataset, ColumnType
from data.normalizer import UNKNOWN

logger = logging.getLogger(__name__)


MAX_FILTER_VALUES = 50

_TRAILING_YEAR = re.compile(r'(\d{4})$')


class DashboardFilters(BaseModel):
    """
    Выбранные пользователем фильтры.

    Пустое значение (None / "") означает "все".
    """
    year: Optional[str] = None
    categories: dict[str, Optional[str]] = Field(default_factory=dict)

    @property
    def is_active(self) -> bool:
        return bool(self.year) or any(self.categories.values())


def available_years(data: CleanedDataset) -> list[str]:
    """Годы из первой date-колонки, от новых к старым."""
    date_columns = data.columns_of_type(ColumnType.DATE)
    if not date_columns:
        return []

    years = set()
    for value in date_columns[0].values:
        if isinstance(value, str):
            match = _TRAILING_YEAR.search(value)
            if match:
                years.add(match.group(1))

    return sorted(years, reverse=True)


def available_filters(data: CleanedDataset) -> dict[str, list[str]]:
    """
    Варианты для выпадающих списков по category-колонкам.

    "Unknown" и пустые значения не предлагаются; колонки, где
    вариантов 50 и больше, пропускаются.
    """
    options = {}

    for col in data.columns_of_type(ColumnType.CATEGORY):
        unique_values = {str(v) for v in col.values if v and v != UNKNOWN}
        if 0 < len(unique_values) < MAX_FILTER_VALUES:
            options[col.name] = sorted(unique_values)

    return options


def apply_filters(data: CleanedDataset, filters: Optional[DashboardFilters]) -> CleanedDataset:
    """
    Строит отфильтрованное представление датасета.

    - year: значение первой date-колонки заканчивается на год
    - categories: row[колонка] == значение для каждого выбранного фильтра

    Returns:
        Новый CleanedDataset (колонки и предупреждения — от исходного,
        rows и cleaned_row_count — отфильтрованные)
    """
    if filters is None or not filters.is_active:
        return data

    rows = data.rows
    date_columns = data.columns_of_type(ColumnType.DATE)

    if filters.year and date_columns:
        date_name = date_columns[0].name
        rows = [
            row for row in rows
            if row.get(date_name) and str(row[date_name]).endswith(filters.year)
        ]

    selected = {name: value for name, value in filters.categories.items() if value}
    if selected:
        rows = [
            row for row in rows
            if all(row.get(name) == value for name, value in selected.items())
        ]

    logger.debug(f"Фильтры {filters.model_dump()}: {len(rows)} из {data.cleaned_row_count} строк")

    return data.model_copy(update={"rows": rows, "cleaned_row_count": len(rows)})
