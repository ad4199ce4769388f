"""
Агрегации для графиков: разбивка по категории и временной ряд.

Функции чистые: датасет не мутируется, на каждый вызов — новый список.
"""

import math
import re
from functools import cmp_to_key
from typing import Any, Optional
import logging

from data.dates import MONTH_ABBR, month_index
from data.models import (
    AggregationMode,
    CategoryPoint,
    CleanedDataset,
    DatePoint,
    Granularity,
)

logger = logging.getLogger(__name__)


# "Feb 2024" — метка после нормализации
_MONTH_LABEL = re.compile(r'^([A-Z][a-z]{2})\s(\d{4})$')
# "2024-02-15" — сырая ISO-дата
_ISO_DATE = re.compile(r'^(\d{4})-(\d{2})-\d{2}$')


def to_number(value: Any) -> float:
    """
    Приведение значения ячейки к числу для агрегации.

    None, нечисловые строки, NaN и бесконечности -> 0.
    Валюту и разделители тысяч здесь не чистим: это делает normalizer.
    """
    if value is None or isinstance(value, bool):
        return float(bool(value))
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else 0.0
    s = str(value).strip()
    if not s:
        return 0.0
    try:
        result = float(s)
    except ValueError:
        return 0.0
    return result if math.isfinite(result) else 0.0


def aggregate_by_category(
    data: CleanedDataset,
    category_column: str,
    value_column: str,
    mode: AggregationMode = AggregationMode.SUM
) -> list[CategoryPoint]:
    """
    Группировка строк по значению category_column.

    Args:
        data: датасет (или отфильтрованное представление)
        category_column: колонка-ключ группы
        value_column: колонка со значениями
        mode: sum / count / avg

    Returns:
        Список точек по убыванию value. При равенстве — порядок
        первого появления группы в строках.
    """
    mode = AggregationMode(mode)
    grouped: dict[str, list[float]] = {}

    for row in data.rows:
        name = str(row.get(category_column))
        grouped.setdefault(name, []).append(to_number(row.get(value_column)))

    points = []
    for name, values in grouped.items():
        if mode == AggregationMode.SUM:
            value = sum(values)
        elif mode == AggregationMode.COUNT:
            value = len(values)
        else:
            value = sum(values) / len(values)
        points.append(CategoryPoint(name=name, value=value))

    # sorted() стабилен — ничьи остаются в порядке появления
    return sorted(points, key=lambda p: p.value, reverse=True)


def _bucket_key(date_value: Any, granularity: Granularity) -> Optional[str]:
    """
    Ключ корзины для значения даты или None, если формат не распознан.

    - "Feb 2024", month -> "Feb 2024"
    - "Feb 2024", year -> "2024"
    - "2024-02-15", month -> "Feb 2024"
    - "2024-02-15", year -> "2024"
    """
    if not isinstance(date_value, str):
        return None

    match = _MONTH_LABEL.match(date_value)
    if match and month_index(match.group(1)):
        if granularity == Granularity.YEAR:
            return match.group(2)
        return date_value

    match = _ISO_DATE.match(date_value)
    if match:
        year, month = match.group(1), int(match.group(2))
        if not 1 <= month <= 12:
            return None
        if granularity == Granularity.YEAR:
            return year
        return f"{MONTH_ABBR[month - 1]} {year}"

    return None


def _compare_buckets(a: DatePoint, b: DatePoint) -> int:
    """Хронологический порядок для "Mon yyyy", иначе — строковый."""
    match_a = _MONTH_LABEL.match(a.date)
    match_b = _MONTH_LABEL.match(b.date)

    if match_a and match_b:
        key_a = int(match_a.group(2)) * 100 + month_index(match_a.group(1))
        key_b = int(match_b.group(2)) * 100 + month_index(match_b.group(1))
        return key_a - key_b

    return (a.date > b.date) - (a.date < b.date)


def aggregate_by_date(
    data: CleanedDataset,
    date_column: str,
    value_column: str,
    granularity: Granularity = Granularity.MONTH
) -> list[DatePoint]:
    """
    Временной ряд: сумма value_column по месяцам или годам.

    Строки с датой в нераспознанном формате пропускаются молча.

    Returns:
        Список точек по возрастанию даты
    """
    granularity = Granularity(granularity)
    grouped: dict[str, float] = {}
    skipped = 0

    for row in data.rows:
        key = _bucket_key(row.get(date_column), granularity)
        if key is None:
            skipped += 1
            continue
        grouped[key] = grouped.get(key, 0.0) + to_number(row.get(value_column))

    if skipped:
        logger.debug(f"Временной ряд {date_column!r}: пропущено {skipped} строк")

    points = [DatePoint(date=key, value=value) for key, value in grouped.items()]
    return sorted(points, key=cmp_to_key(_compare_buckets))
