"""
Core module — агрегации, KPI, фильтры, экспорт и оркестрация загрузки.
"""

from core.aggregation import aggregate_by_category, aggregate_by_date
from core.metrics import calculate_kpis, resolve_column, ColumnRole
from core.filters import DashboardFilters, apply_filters, available_filters, available_years
from core.export import export_csv, export_filename, save_export
from core.analyzer import load_dataset, check_dataset_size, LoadResult, SizeAdvisory
from core.dashboard import build_dashboard, DashboardView, CategoryBreakdown

__all__ = [
    # Aggregation
    "aggregate_by_category",
    "aggregate_by_date",
    # KPI
    "calculate_kpis",
    "resolve_column",
    "ColumnRole",
    # Filters
    "DashboardFilters",
    "apply_filters",
    "available_filters",
    "available_years",
    # Export
    "export_csv",
    "export_filename",
    "save_export",
    # Orchestration
    "load_dataset",
    "check_dataset_size",
    "LoadResult",
    "SizeAdvisory",
    "build_dashboard",
    "DashboardView",
    "CategoryBreakdown",
]
