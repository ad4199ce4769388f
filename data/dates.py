"""
Распознавание дат в произвольных форматах.

Используется и при выводе типа колонки, и при нормализации значений.

Порядок форматов фиксирован: первый формат, который распарсился
И прошёл проверку года, побеждает. Поэтому "03/04/2020" читается
как 3 апреля (DD/MM стоит раньше MM/DD) — это осознанно,
без эвристик по содержимому.
"""

import re
from datetime import date, datetime
from typing import Optional
import logging

import pandas as pd

logger = logging.getLogger(__name__)


MIN_YEAR = 2000
FUTURE_YEARS = 5

MONTH_ABBR = [
    'Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
    'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec',
]

# Форматы в порядке приоритета.
# %d и %m в strptime принимают и одну, и две цифры,
# поэтому "d MMMM yyyy" покрывается "%d %B %Y".
DATE_FORMATS = [
    '%Y-%m-%d',    # 2024-01-15
    '%Y/%m/%d',    # 2024/01/15
    '%Y-%m',       # 2024-01
    '%d/%m/%Y',    # 15/01/2024
    '%d/%m/%y',    # 15/01/24
    '%d-%m-%Y',    # 15-01-2024
    '%d-%m-%y',    # 15-01-24
    '%m/%d/%Y',    # 01/15/2024 (US format)
    '%m/%d/%y',    # 01/15/24
    '%m-%d-%Y',    # 01-15-2024
    '%m-%d-%y',    # 01-15-24
    '%m/%Y',       # 01/2024
    '%m-%Y',       # 01-2024
    '%d.%m.%Y',    # 15.01.2024
    '%Y.%m.%d',    # 2024.01.15
    '%d %B %Y',    # 15 January 2024
    '%d %b %Y',    # 15 Jan 2024
]

# Артефакт выгрузки: лишняя "p"/"c" в конце ("2024-01-15p")
_TRAILING_ARTIFACT = re.compile(r'\s*[pc]\s*$', re.IGNORECASE)
# Время в конце: "17:00", "5:30 PM", "10:15:00 a.m."
_TRAILING_TIME = re.compile(
    r'\s+\d{1,2}:\d{2}(?::\d{2})?(?:\s*[ap]\.?m\.?)?$',
    re.IGNORECASE
)
# "12", "-3.5", "$1,200.50" — числа, а не даты
_PLAIN_NUMBER = re.compile(r'^[+-]?\$?\d[\d,]*(?:\.\d+)?$')


def clean_date_string(value: str) -> str:
    """Убирает мусорный суффикс и время из строки с датой."""
    cleaned = str(value).strip()
    cleaned = _TRAILING_ARTIFACT.sub('', cleaned).strip()
    cleaned = _TRAILING_TIME.sub('', cleaned).strip()
    return cleaned


def is_valid_year(year: int) -> bool:
    """
    Год в окне [2000, текущий + 5].

    Отсекает ошибки века ("01/02/03" как 1903) и явный мусор.
    """
    return MIN_YEAR <= year <= date.today().year + FUTURE_YEARS


def parse_date(value) -> Optional[date]:
    """
    Распознаёт дату в строке.

    Примеры:
    - "2024-01-15" -> 2024-01-15
    - "15 May 2024" -> 2024-05-15
    - "03/04/2020" -> 2020-04-03 (DD/MM раньше MM/DD)
    - "01/02/1899" -> None (год вне окна)
    - "bad-date" -> None

    Returns:
        date или None если не удалось распарсить
    """
    if value is None:
        return None

    cleaned = clean_date_string(value)
    if not cleaned:
        return None

    # 1. Фиксированные форматы
    for fmt in DATE_FORMATS:
        try:
            parsed = datetime.strptime(cleaned, fmt)
        except ValueError:
            continue
        if is_valid_year(parsed.year):
            return parsed.date()

    # 2. ISO-8601 (с временем, таймзоной и т.п.)
    try:
        parsed = datetime.fromisoformat(cleaned)
        if is_valid_year(parsed.year):
            return parsed.date()
    except ValueError:
        pass

    # 3. Последняя попытка — pandas с dateutil.
    # Голые числа и строки без цифр сюда не пускаем:
    # иначе "12" или "May" превращаются в дату текущего года.
    if _PLAIN_NUMBER.match(cleaned) or not any(ch.isdigit() for ch in cleaned):
        return None

    try:
        result = pd.to_datetime(cleaned)
    except (ValueError, TypeError, OverflowError):
        logger.debug(f"Не удалось распознать дату: {value!r}")
        return None

    if pd.notna(result) and is_valid_year(result.year):
        return result.date()

    return None


def format_month_label(value: date) -> str:
    """Каноническая метка месяца: date(2024, 2, 1) -> "Feb 2024"."""
    return f"{MONTH_ABBR[value.month - 1]} {value.year:04d}"


def month_index(abbr: str) -> Optional[int]:
    """"Feb" -> 2, неизвестное -> None."""
    try:
        return MONTH_ABBR.index(abbr) + 1
    except ValueError:
        return None
