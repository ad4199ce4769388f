"""
Локальный расчёт KPI-карточек для дашборда.

Роли колонок (продажи, количество, регион, категория) определяются
по подстроке в названии: первая подходящая колонка в порядке файла.
"""

from enum import Enum
from typing import Optional
import logging

from core.aggregation import to_number
from core.formatters import format_count, format_millions
from data.models import CleanedDataset, Column, ColumnType, KPIIcon, KPIMetric

logger = logging.getLogger(__name__)


MAX_KPIS = 6


class ColumnRole(Enum):
    """
    Роль колонки: ключевые слова (в порядке приоритета) и допустимые типы.
    """
    SALES = (("sales", "revenue", "amount"), (ColumnType.NUMBER,))
    QUANTITY = (("quantity", "qty", "units"), (ColumnType.NUMBER,))
    REGION = (("region", "country", "city"), (ColumnType.CATEGORY, ColumnType.TEXT))
    CATEGORY = (("category", "product", "segment"), (ColumnType.CATEGORY, ColumnType.TEXT))

    @property
    def keywords(self) -> tuple[str, ...]:
        return self.value[0]

    @property
    def types(self) -> tuple[ColumnType, ...]:
        return self.value[1]


def resolve_column(columns: list[Column], role: ColumnRole) -> Optional[Column]:
    """
    Ищет колонку под роль.

    Примеры (SALES):
    - ["Date", "Total Sales", "Revenue"] -> "Total Sales"
    - ["Date", "Region"] -> None

    Returns:
        Первая колонка (в порядке файла) с подходящим типом, в названии
        которой есть одно из ключевых слов; None — если такой нет.
    """
    for col in columns:
        if col.type not in role.types:
            continue
        name_lower = col.name.lower()
        if any(keyword in name_lower for keyword in role.keywords):
            return col
    return None


def _column_total(data: CleanedDataset, column: Column) -> float:
    return sum(to_number(row.get(column.name)) for row in data.rows)


def _top_group(data: CleanedDataset, group_column: Column, value_column: Column) -> Optional[tuple[str, float]]:
    """Группа с максимальной суммой; при равенстве — первая встреченная."""
    totals: dict[str, float] = {}
    for row in data.rows:
        key = str(row.get(group_column.name))
        totals[key] = totals.get(key, 0.0) + to_number(row.get(value_column.name))

    if not totals:
        return None

    return max(totals.items(), key=lambda item: item[1])


def calculate_kpis(data: CleanedDataset, context: str = "") -> list[KPIMetric]:
    """
    Главная функция расчёта KPI.

    Порядок карточек фиксирован:
    Total Sales, Total Quantity, Average Price, Best <region>,
    Top <category>, Total Records. Каждая (кроме последней) появляется
    только если нашлись нужные колонки и значение имеет смысл.

    Args:
        data: датасет или отфильтрованное представление
        context: описание данных от пользователя (только для логов)

    Returns:
        Не больше MAX_KPIS карточек
    """
    logger.info(f"Расчёт KPI: {data.cleaned_row_count} строк ({context or 'без описания'})")

    sales_col = resolve_column(data.columns, ColumnRole.SALES)
    quantity_col = resolve_column(data.columns, ColumnRole.QUANTITY)
    region_col = resolve_column(data.columns, ColumnRole.REGION)
    category_col = resolve_column(data.columns, ColumnRole.CATEGORY)

    kpis = []

    total_sales = _column_total(data, sales_col) if sales_col else 0.0
    total_quantity = _column_total(data, quantity_col) if quantity_col else 0.0

    # === Продажи ===
    if sales_col and total_sales > 0:
        kpis.append(KPIMetric(
            id="total-sales",
            label="Total Sales",
            value=format_millions(total_sales),
            subtitle="Revenue generated",
            icon=KPIIcon.DOLLAR_SIGN,
        ))

    # === Количество ===
    if quantity_col and total_quantity > 0:
        kpis.append(KPIMetric(
            id="total-quantity",
            label="Total Quantity",
            value=format_count(total_quantity),
            subtitle="Units sold",
            icon=KPIIcon.PACKAGE,
        ))

    # === Средняя цена ===
    if sales_col and quantity_col:
        avg_price = total_sales / total_quantity if total_quantity > 0 else 0.0
        if avg_price > 0:
            kpis.append(KPIMetric(
                id="avg-price",
                label="Average Price",
                value=f"${avg_price:.2f}",
                subtitle="Per unit",
                icon=KPIIcon.TRENDING_UP,
            ))

    # === Лучший регион ===
    if region_col and sales_col:
        top = _top_group(data, region_col, sales_col)
        if top:
            kpis.append(KPIMetric(
                id="top-region",
                label=f"Best {region_col.name}",
                value=top[0],
                subtitle=format_millions(top[1]),
                icon=KPIIcon.MAP_PIN,
            ))

    # === Топ категория ===
    if category_col and sales_col:
        top = _top_group(data, category_col, sales_col)
        if top:
            kpis.append(KPIMetric(
                id="top-category",
                label=f"Top {category_col.name}",
                value=top[0],
                subtitle=f"{format_millions(top[1])} revenue",
                icon=KPIIcon.STAR,
            ))

    kpis.append(KPIMetric(
        id="total-records",
        label="Total Records",
        value=format_count(data.cleaned_row_count),
        subtitle="Data points analyzed",
        icon=KPIIcon.DATABASE,
    ))

    logger.debug(f"KPI: {[k.id for k in kpis]}")

    return kpis[:MAX_KPIS]
