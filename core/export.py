"""
Экспорт текущего (отфильтрованного) представления в CSV.
"""

import csv
import io
import re
from pathlib import Path
import logging

from data.models import CleanedDataset

logger = logging.getLogger(__name__)


def _export_value(value) -> str:
    """None -> "", 1200.0 -> "1200", остальное — str()."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def export_csv(data: CleanedDataset) -> str:
    """
    CSV из строк представления.

    Заголовок — порядок ключей первой строки (или колонки датасета,
    если строк нет). Каждое поле данных в двойных кавычках,
    кавычки внутри значения удваиваются (RFC 4180).
    """
    header = list(data.rows[0].keys()) if data.rows else data.column_names

    header_buffer = io.StringIO()
    csv.writer(header_buffer, lineterminator="\n").writerow(header)

    body_buffer = io.StringIO()
    writer = csv.writer(body_buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for row in data.rows:
        writer.writerow([_export_value(v) for v in row.values()])

    lines = header_buffer.getvalue() + body_buffer.getvalue()

    logger.info(f"Экспорт CSV: {len(data.rows)} строк, {len(header)} колонок")

    return lines.rstrip("\n")


def export_filename(description: str) -> str:
    """"Sales 2024 Q1" -> "Sales_2024_Q1_filtered_data.csv"."""
    slug = re.sub(r"\s+", "_", description.strip())
    return f"{slug}_filtered_data.csv"


def save_export(data: CleanedDataset, description: str, directory: Path) -> Path:
    """
    Пишет CSV представления в directory и возвращает путь.

    Каталог общий для всех выгрузок: файл с тем же описанием
    перезаписывается, новые каталоги не создаются.
    """
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / export_filename(description)
    path.write_text(export_csv(data), encoding="utf-8")
    logger.debug(f"CSV сохранён: {path}")
    return path
