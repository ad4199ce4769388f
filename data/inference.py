"""
Вывод типа колонки по выборке значений.

Типы: date / number / category / text.
Порядок проверок важен: дата проверяется первой и имеет приоритет.
"""

import math
from typing import Optional
import logging

from data.dates import parse_date
from data.models import ColumnType

logger = logging.getLogger(__name__)


SAMPLE_SIZE = 50            # Сколько первых значений смотрим
DATE_RATIO = 0.7            # Доля дат строго больше — колонка date
NUMBER_RATIO = 0.8          # Доля чисел строго больше — колонка number
CATEGORY_UNIQUE_RATIO = 0.5
CATEGORY_MAX_UNIQUE = 20


def is_missing(value) -> bool:
    """None, NaN и пустая строка считаются пропуском."""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and value == ''


def parse_number(value) -> Optional[float]:
    """
    Число из строки с валютой и разделителями тысяч.

    Примеры:
    - "1,200" -> 1200.0
    - "$3,500.50" -> 3500.5
    - "abc" -> None
    - "" -> None
    """
    s = str(value).strip().replace('$', '').replace(',', '')
    if not s or "_" in s:
        return None
    try:
        result = float(s)
    except ValueError:
        return None
    return result if math.isfinite(result) else None


def infer_column_type(values: list) -> ColumnType:
    """
    Определяет тип колонки по первым SAMPLE_SIZE значениям.

    Пропуски выкидываются из выборки; если ничего не осталось — text.
    Одно значение может засчитаться и как дата, и как число.
    """
    sample = [v for v in values[:SAMPLE_SIZE] if not is_missing(v)]

    if not sample:
        return ColumnType.TEXT

    date_count = 0
    number_count = 0

    for value in sample:
        str_value = str(value).strip()

        if parse_date(str_value) is not None:
            date_count += 1

        if str_value and parse_number(str_value) is not None:
            number_count += 1

    unique_count = len(set(sample))
    size = len(sample)

    if date_count / size > DATE_RATIO:
        column_type = ColumnType.DATE
    elif number_count / size > NUMBER_RATIO:
        column_type = ColumnType.NUMBER
    elif unique_count < size * CATEGORY_UNIQUE_RATIO and unique_count < CATEGORY_MAX_UNIQUE:
        column_type = ColumnType.CATEGORY
    else:
        column_type = ColumnType.TEXT

    logger.debug(
        f"Выборка {size}: дат={date_count}, чисел={number_count}, "
        f"уникальных={unique_count} -> {column_type.value}"
    )

    return column_type
