"""
Сборка всех представлений дашборда из одного датасета.

Всё, что нужно слою отображения: KPI, тренд, разбивки по категориям,
варианты фильтров. Датасет не мутируется.
"""

from typing import Optional
import logging

from pydantic import BaseModel, Field

from config import settings
from core.aggregation import aggregate_by_category, aggregate_by_date
from core.filters import DashboardFilters, apply_filters, available_filters, available_years
from core.metrics import ColumnRole, calculate_kpis, resolve_column
from data.models import CategoryPoint, CleanedDataset, ColumnType, DatePoint, Granularity, KPIMetric

logger = logging.getLogger(__name__)


class CategoryBreakdown(BaseModel):
    """Одна разбивка продаж по category-колонке"""
    column: str
    points: list[CategoryPoint]


class DashboardView(BaseModel):
    """Готовые данные для экрана дашборда"""
    kpis: list[KPIMetric]
    trend_column: Optional[str] = None
    trend: list[DatePoint] = Field(default_factory=list)
    breakdowns: list[CategoryBreakdown] = Field(default_factory=list)
    available_years: list[str] = Field(default_factory=list)
    available_filters: dict[str, list[str]] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    row_count: int = 0


def build_dashboard(
    data: CleanedDataset,
    description: str = "",
    filters: Optional[DashboardFilters] = None,
    granularity: Granularity = Granularity.MONTH
) -> DashboardView:
    """
    Собирает представление дашборда.

    Фильтры влияют на KPI, тренд и разбивки; варианты фильтров
    и предупреждения берутся из исходного датасета.

    Разбивки — первые три category-колонки по колонке продаж,
    третья (круговая диаграмма) обрезается сильнее.
    """
    view = apply_filters(data, filters)

    kpis = calculate_kpis(view, description)

    sales_col = resolve_column(data.columns, ColumnRole.SALES)
    date_columns = data.columns_of_type(ColumnType.DATE)
    category_columns = data.columns_of_type(ColumnType.CATEGORY)

    trend = []
    trend_column = None
    if sales_col and date_columns:
        trend_column = date_columns[0].name
        trend = aggregate_by_date(view, trend_column, sales_col.name, granularity)

    breakdowns = []
    if sales_col:
        limits = [settings.chart_top_n, settings.chart_top_n, settings.chart_top_n_small]
        for col, limit in zip(category_columns, limits):
            points = aggregate_by_category(view, col.name, sales_col.name)
            breakdowns.append(CategoryBreakdown(column=col.name, points=points[:limit]))

    logger.info(
        f"Дашборд: {len(kpis)} KPI, {len(trend)} точек тренда, "
        f"{len(breakdowns)} разбивок, {view.cleaned_row_count} строк"
    )

    return DashboardView(
        kpis=kpis,
        trend_column=trend_column,
        trend=trend,
        breakdowns=breakdowns,
        available_years=available_years(data),
        available_filters=available_filters(data),
        warnings=list(data.warnings),
        row_count=view.cleaned_row_count,
    )
