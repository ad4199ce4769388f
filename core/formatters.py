"""
Форматирование чисел для карточек и подписей графиков.
"""

import math


# Порог -> суффикс, от большего к меньшему (индийская система: лакх, крор)
_COMPACT_UNITS = [
    (1_000_000_000, "B"),
    (10_000_000, "Cr"),
    (1_000_000, "M"),
    (100_000, "L"),
    (1_000, "k"),
]


def format_number(value: float) -> str:
    """
    Компактная запись числа.

    Примеры:
    - 2000 -> "2k"
    - 150000 -> "1.5L"
    - 1000000 -> "1M"
    - 50000000 -> "5Cr"
    - -2500 -> "-2.5k"
    """
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    abs_value = abs(value)

    for threshold, suffix in _COMPACT_UNITS:
        if abs_value >= threshold:
            formatted = f"{abs_value / threshold:.1f}"
            if formatted.endswith(".0"):
                formatted = formatted[:-2]
            return f"{sign}{formatted}{suffix}"

    return f"{sign}{abs_value:.0f}"


def format_currency(value: float) -> str:
    """Компактная сумма со знаком доллара: 2500 -> "$2.5k"."""
    return "$" + format_number(value)


def format_millions(value: float) -> str:
    """Сумма в миллионах для KPI: 1234567 -> "$1.23M"."""
    return f"${value / 1_000_000:.2f}M"


def format_count(value: float) -> str:
    """
    Число с разделителями тысяч.

    Целые без дробной части, дробные — до трёх знаков:
    1234 -> "1,234", 1234.5 -> "1,234.5"
    """
    if not math.isfinite(value):
        return str(value)
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")
