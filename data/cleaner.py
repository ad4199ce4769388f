"""
Очистка сырых строк из файла пользователя в типизированный датасет.

Шаги:
1. Колонки = ключи первой строки (порядок сохраняется)
2. Вывод типа каждой колонки + нормализация значений
3. Удаление строк с нераспознанной датой
4. Удаление дублей (первое вхождение остаётся)
5. Предупреждения о заполненных пропусках

Каждый шаг возвращает (результат, предупреждения),
perform_eda склеивает предупреждения в порядке шагов.
"""

import json
from typing import Any
import logging

import pandas as pd

from data.errors import EmptyInputError
from data.inference import infer_column_type
from data.models import CleanedDataset, Column, ColumnType
from data.normalizer import clean_value, is_default

logger = logging.getLogger(__name__)


def build_columns(raw_rows: list[dict], column_names: list[str]) -> list[Column]:
    """
    Выводит тип каждой колонки и нормализует все её значения.

    values[i] каждой колонки соответствует raw_rows[i].
    Отсутствующий в строке ключ считается пропуском.
    """
    columns = []

    for name in column_names:
        raw_values = [row.get(name) for row in raw_rows]
        column_type = infer_column_type(raw_values)
        values = [clean_value(v, column_type) for v in raw_values]

        logger.debug(f"Колонка {name!r}: тип {column_type.value}")
        columns.append(Column(name=name, type=column_type, values=values))

    return columns


def drop_invalid_dates(
    frame: pd.DataFrame,
    columns: list[Column]
) -> tuple[pd.DataFrame, list[str]]:
    """
    Удаляет строки, где хотя бы одна date-колонка пустая.

    Множество плохих строк — объединение по всем date-колонкам,
    поэтому строка с двумя плохими датами считается один раз.
    """
    warnings = []

    date_columns = [col.name for col in columns if col.type == ColumnType.DATE]
    if not date_columns:
        return frame, warnings

    invalid_mask = frame[date_columns].isna().any(axis=1)
    invalid_count = int(invalid_mask.sum())

    if invalid_count > 0:
        warnings.append(f"Removed {invalid_count} rows with invalid or missing dates")
        logger.debug(f"Удалено {invalid_count} строк с некорректной датой")
        frame = frame[~invalid_mask]

    return frame, warnings


def row_key(row: dict[str, Any]) -> str:
    """Канонический ключ строки: не зависит от порядка колонок."""
    return json.dumps(row, sort_keys=True, ensure_ascii=False, default=str)


def drop_duplicates(frame: pd.DataFrame) -> tuple[pd.DataFrame, list[str]]:
    """
    Удаляет полностью совпадающие строки.

    Остаётся первое вхождение, порядок строк не меняется.
    """
    warnings = []

    records = frame.to_dict(orient="records")
    keys = pd.Series([row_key(r) for r in records], index=frame.index, dtype=object)
    duplicated = keys.duplicated(keep="first")
    duplicate_count = int(duplicated.sum())

    if duplicate_count > 0:
        warnings.append(f"Removed {duplicate_count} duplicate rows")
        logger.debug(f"Удалено {duplicate_count} дублей")
        frame = frame[~duplicated]

    return frame, warnings


def default_value_warnings(columns: list[Column]) -> list[str]:
    """
    Сколько значений в колонке равно дефолту (None, 0, "Unknown").

    Считается по всем исходным строкам. Настоящие нули в числовых
    колонках тоже попадают в счётчик.
    """
    warnings = []

    for col in columns:
        count = sum(1 for v in col.values if is_default(v))
        if count > 0:
            warnings.append(f'Column "{col.name}": {count} missing values filled with defaults')

    return warnings


def perform_eda(raw_rows: list[dict]) -> CleanedDataset:
    """
    Полная очистка сырых строк.

    Args:
        raw_rows: строки из парсера (ключ — имя колонки)

    Returns:
        CleanedDataset с колонками, строками и предупреждениями

    Raises:
        EmptyInputError: если нет строк или колонок
    """
    if not raw_rows:
        raise EmptyInputError("No data found in file. Please check your file format.")

    original_count = len(raw_rows)
    column_names = list(raw_rows[0].keys())

    if not column_names:
        raise EmptyInputError("No columns found in file. Please check your file format.")

    logger.info(f"Очистка: {original_count} строк, {len(column_names)} колонок")

    # 1-2. Типы и нормализация
    columns = build_columns(raw_rows, column_names)

    # Значения храним как есть (object), без приведения типов pandas
    frame = pd.DataFrame(
        {col.name: pd.Series(col.values, dtype=object) for col in columns},
        index=pd.RangeIndex(original_count),
    )

    # 3. Строки с плохими датами
    frame, date_warnings = drop_invalid_dates(frame, columns)

    # 4. Дубли
    frame, duplicate_warnings = drop_duplicates(frame)

    # 5. Пропуски, заполненные дефолтами
    quality_warnings = default_value_warnings(columns)

    rows = frame.to_dict(orient="records")
    warnings = date_warnings + duplicate_warnings + quality_warnings

    logger.info(f"Очистка завершена: {len(rows)} строк, {len(warnings)} предупреждений")

    return CleanedDataset(
        columns=columns,
        rows=rows,
        original_row_count=original_count,
        cleaned_row_count=len(rows),
        warnings=warnings,
    )
