"""
Gradio UI компоненты для AutoDash.

Интерфейс:
1. Загрузка файла (CSV/Excel) + описание данных
2. Фильтры: год и до трёх category-колонок
3. KPI-карточки, тренд, разбивки по категориям
4. Отчёт о качестве данных, превью, экспорт CSV
"""

import logging

import gradio as gr

from config import settings
from core.analyzer import load_dataset
from core.dashboard import DashboardView, build_dashboard
from core.export import save_export
from core.filters import DashboardFilters, apply_filters
from data.errors import DatasetError
from data.models import CleanedDataset
from ui.render import (
    category_frame,
    render_column_summary,
    render_kpi_cards,
    render_preview,
    render_warnings,
    trend_frame,
)

logger = logging.getLogger(__name__)


MAX_CATEGORY_FILTERS = 3
ALL = "All"


def _filters_from_inputs(filter_columns: list[str], year: str, values: tuple) -> DashboardFilters:
    """Значения выпадающих списков -> DashboardFilters ("All" = без фильтра)."""
    categories = {
        name: (value if value and value != ALL else None)
        for name, value in zip(filter_columns, values)
    }
    return DashboardFilters(
        year=year if year and year != ALL else None,
        categories=categories,
    )


def _plot_updates(view: DashboardView) -> list:
    """Обновления для линейного графика и трёх столбчатых."""
    updates = [gr.update(
        value=trend_frame(view.trend),
        visible=bool(view.trend),
        title=f"Sales Trend by {view.trend_column}" if view.trend_column else None,
    )]

    for i in range(MAX_CATEGORY_FILTERS):
        if i < len(view.breakdowns):
            breakdown = view.breakdowns[i]
            updates.append(gr.update(
                value=category_frame(breakdown.points),
                visible=True,
                title=f"Sales by {breakdown.column}",
            ))
        else:
            updates.append(gr.update(visible=False))

    return updates


def create_app() -> gr.Blocks:
    """
    Создание Gradio приложения.

    Returns:
        gr.Blocks: готовое приложение
    """
    with gr.Blocks(title=f"{settings.app_name} — Instant dashboards") as app:

        dataset_state = gr.State(None)
        filter_columns_state = gr.State([])

        # === Header ===
        gr.Markdown(f"""
        # 📊 {settings.app_name}
        ### Drop a CSV or Excel file, get a dashboard
        """)

        # === Форма ввода ===
        with gr.Row():
            with gr.Column(scale=2):
                file_input = gr.File(
                    label="📁 Upload CSV / XLSX / XLS",
                    file_types=[".csv", ".xlsx", ".xls"],
                    type="filepath",
                    elem_classes=["file-upload"]
                )
                description_input = gr.Textbox(
                    label="💬 Describe your data",
                    placeholder="e.g., Sales of textiles in global markets",
                    lines=1,
                )
                load_btn = gr.Button(
                    "🔍 Build dashboard",
                    variant="primary",
                    size="lg",
                    elem_classes=["primary-btn"]
                )

        # === Результаты (скрыты до загрузки) ===
        with gr.Column(visible=False, elem_classes=["results-section"]) as results_section:

            warnings_output = gr.Markdown(visible=False, elem_classes=["warnings-box"])

            with gr.Row():
                year_filter = gr.Dropdown(label="Year", choices=[ALL], value=ALL)
                category_filters = [
                    gr.Dropdown(label=f"Filter {i + 1}", choices=[ALL], value=ALL, visible=False)
                    for i in range(MAX_CATEGORY_FILTERS)
                ]

            kpi_output = gr.HTML()

            trend_plot = gr.LinePlot(x="date", y="value", tooltip=["date", "label"], visible=False)
            with gr.Row():
                breakdown_plots = [
                    gr.BarPlot(x="name", y="value", tooltip=["name", "label"], visible=False)
                    for _ in range(MAX_CATEGORY_FILTERS)
                ]

            with gr.Accordion("Columns and preview", open=False):
                columns_output = gr.Markdown()
                preview_output = gr.Markdown()

            with gr.Row():
                export_btn = gr.Button("⬇️ Export filtered CSV")
                export_file = gr.File(label="Export", visible=False)

        plot_outputs = [trend_plot] + breakdown_plots

        # === Обработчики ===
        def on_load(file_path: str, description: str):
            """Загрузка файла и первичная сборка дашборда."""
            # Ничего не меняем, кроме скрытия результатов
            failed = [None, [], gr.update(visible=False)] + \
                [gr.update()] * (5 + MAX_CATEGORY_FILTERS) + \
                [gr.update(visible=False)] * (MAX_CATEGORY_FILTERS + 1)

            if not file_path:
                gr.Warning("Please upload a file")
                return failed

            try:
                result = load_dataset(file_path)
            except DatasetError as e:
                logger.warning(f"Ошибка загрузки: {e}")
                gr.Warning(str(e))
                return failed
            except Exception as e:
                logger.error(f"Ошибка обработки файла: {e}", exc_info=True)
                gr.Warning(f"❌ Error: {e}")
                return failed

            dataset = result.dataset
            view = build_dashboard(dataset, description)

            filter_columns = list(view.available_filters)[:MAX_CATEGORY_FILTERS]
            filter_updates = []
            for i in range(MAX_CATEGORY_FILTERS):
                if i < len(filter_columns):
                    name = filter_columns[i]
                    filter_updates.append(gr.update(
                        label=name,
                        choices=[ALL] + view.available_filters[name],
                        value=ALL,
                        visible=True,
                    ))
                else:
                    filter_updates.append(gr.update(visible=False, value=ALL))

            warnings_md = render_warnings(view.warnings, result.advisory)

            logger.info("Дашборд построен")

            return [
                dataset,
                filter_columns,
                gr.update(visible=True),
                gr.update(visible=bool(warnings_md), value=warnings_md),
                gr.update(choices=[ALL] + view.available_years, value=ALL),
                render_kpi_cards(view.kpis),
                render_column_summary(dataset),
                render_preview(dataset, settings.preview_rows),
            ] + filter_updates + _plot_updates(view)

        def on_filter(dataset: CleanedDataset, filter_columns: list[str], description: str, year: str, *values):
            """Пересчёт KPI и графиков при смене фильтров."""
            if dataset is None:
                return [gr.update()] + [gr.update()] * (MAX_CATEGORY_FILTERS + 1)

            filters = _filters_from_inputs(filter_columns, year, values)
            view = build_dashboard(dataset, description, filters)
            return [render_kpi_cards(view.kpis)] + _plot_updates(view)

        def on_export(dataset: CleanedDataset, filter_columns: list[str], description: str, year: str, *values):
            """CSV текущего отфильтрованного представления."""
            if dataset is None:
                gr.Warning("Nothing to export yet")
                return gr.update(visible=False)

            filters = _filters_from_inputs(filter_columns, year, values)
            view = apply_filters(dataset, filters)

            out_path = save_export(view, description or "dashboard", settings.export_dir)

            return gr.update(value=str(out_path), visible=True)

        # Привязываем обработчики
        load_btn.click(
            fn=on_load,
            inputs=[file_input, description_input],
            outputs=[
                dataset_state,
                filter_columns_state,
                results_section,
                warnings_output,
                year_filter,
                kpi_output,
                columns_output,
                preview_output,
            ] + category_filters + plot_outputs
        )

        filter_inputs = [dataset_state, filter_columns_state, description_input, year_filter] + category_filters

        for dropdown in [year_filter] + category_filters:
            dropdown.input(
                fn=on_filter,
                inputs=filter_inputs,
                outputs=[kpi_output] + plot_outputs
            )

        export_btn.click(fn=on_export, inputs=filter_inputs, outputs=[export_file])

    return app
