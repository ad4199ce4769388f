"""
Отрисовка результатов в HTML/Markdown для Gradio.

Без импорта gradio — чистые функции.
"""

from html import escape
from typing import Optional

import pandas as pd

from core.analyzer import SizeAdvisory
from core.formatters import format_currency
from data.models import CategoryPoint, CleanedDataset, DatePoint, KPIIcon, KPIMetric


_ICONS = {
    KPIIcon.DOLLAR_SIGN: "💵",
    KPIIcon.PACKAGE: "📦",
    KPIIcon.TRENDING_UP: "📈",
    KPIIcon.MAP_PIN: "📍",
    KPIIcon.STAR: "⭐",
    KPIIcon.DATABASE: "🗄️",
}


def render_kpi_cards(kpis: list[KPIMetric]) -> str:
    """KPI-карточки в HTML (стили — .kpi-card в styles.py)."""
    cards = []

    for kpi in kpis:
        subtitle = f'<div class="kpi-subtitle">{escape(kpi.subtitle)}</div>' if kpi.subtitle else ""
        cards.append(
            f'<div class="kpi-card kpi-{kpi.id}">'
            f'<div class="kpi-label">{_ICONS.get(kpi.icon, "")} {escape(kpi.label)}</div>'
            f'<div class="kpi-value">{escape(str(kpi.value))}</div>'
            f'{subtitle}'
            f'</div>'
        )

    return f'<div class="kpi-grid">{"".join(cards)}</div>'


def render_warnings(warnings: list[str], advisory: Optional[SizeAdvisory] = None) -> str:
    """Отчёт о качестве данных в Markdown ("" если сказать нечего)."""
    lines = []

    if advisory and advisory.is_large:
        lines.append(f"⚠️ {advisory.message}\n")

    if warnings:
        lines.append("ℹ️ **Data Quality Report**\n")
        lines.extend(f"- {w}" for w in warnings)

    return "\n".join(lines)


def render_column_summary(data: CleanedDataset) -> str:
    """Таблица "колонка — выведенный тип"."""
    frame = pd.DataFrame(
        [{"Column": col.name, "Type": col.type.value} for col in data.columns]
    )
    return frame.to_markdown(index=False)


def render_preview(data: CleanedDataset, rows: int = 20) -> str:
    """Первые строки датасета таблицей Markdown."""
    if not data.rows:
        return "*No rows*"

    frame = pd.DataFrame(data.rows[:rows], columns=data.column_names)
    return frame.to_markdown(index=False)


def category_frame(points: list[CategoryPoint]) -> pd.DataFrame:
    """Точки разбивки -> DataFrame для gr.BarPlot (label — подпись для подсказки)."""
    return pd.DataFrame(
        [{"name": p.name, "value": p.value, "label": format_currency(p.value)} for p in points],
        columns=["name", "value", "label"],
    )


def trend_frame(points: list[DatePoint]) -> pd.DataFrame:
    """Точки тренда -> DataFrame для gr.LinePlot (порядок хронологический)."""
    return pd.DataFrame(
        [{"date": p.date, "value": p.value, "label": format_currency(p.value)} for p in points],
        columns=["date", "value", "label"],
    )
