"""
Нормализация значений ячеек под выведенный тип колонки.

Пропуски заполняются значением по умолчанию для типа:
- number -> 0
- category / text -> "Unknown"
- date -> None (такие строки потом удаляет cleaner)

Функции не бросают исключений: всё, что не распознано,
превращается в значение по умолчанию.
"""

import math
from typing import Any, Optional
import logging

from data.dates import format_month_label, parse_date
from data.inference import is_missing, parse_number
from data.models import ColumnType

logger = logging.getLogger(__name__)


UNKNOWN = "Unknown"


def clean_number(value) -> float:
    """
    Очистка числа.

    Примеры:
    - "1,200" -> 1200.0
    - "$3,500" -> 3500.0
    - 42 -> 42.0
    - "n/a" -> 0.0
    """
    if isinstance(value, bool):
        return float(value)

    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else 0.0

    result = parse_number(value)
    if result is None:
        logger.debug(f"Не удалось преобразовать в число: {value!r}")
        return 0.0
    return result


def clean_date(value) -> Optional[str]:
    """Дата -> метка "Mon yyyy" ("15/02/2024" -> "Feb 2024") или None."""
    parsed = parse_date(str(value).strip())
    return format_month_label(parsed) if parsed else None


def clean_category(value) -> str:
    """
    Первая буква заглавная, остальное строчное.

    Это НЕ title case: "north east" -> "North east".
    """
    s = str(value).strip()
    return s[:1].upper() + s[1:].lower()


def clean_value(value: Any, column_type: ColumnType) -> Any:
    """
    Приводит сырое значение ячейки к каноническому виду.

    Args:
        value: сырое значение из файла
        column_type: выведенный (или заданный) тип колонки

    Returns:
        нормализованное значение (float, str или None)
    """
    if is_missing(value):
        if column_type == ColumnType.NUMBER:
            return 0.0
        if column_type == ColumnType.DATE:
            return None
        return UNKNOWN

    if column_type == ColumnType.NUMBER:
        return clean_number(value)
    if column_type == ColumnType.DATE:
        return clean_date(value)
    if column_type == ColumnType.CATEGORY:
        return clean_category(value)

    return str(value).strip()


def is_default(value) -> bool:
    """
    Значение совпадает с одним из дефолтов (None, 0, "Unknown").

    Настоящий ноль в числовой колонке тоже попадает сюда —
    отличить его от заполненного пропуска уже нельзя.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == UNKNOWN
    return value == 0
