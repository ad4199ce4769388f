"""
Парсер файлов CSV и Excel.

Функции:
- parse_file(): читает файл целиком и возвращает список строк (dict)
"""

from datetime import date, datetime
from io import BytesIO
import numbers
from pathlib import Path
from typing import Union
import logging

import pandas as pd

from data.dates import is_valid_year
from data.errors import FileReadError, ParseError

logger = logging.getLogger(__name__)


SUPPORTED_SUFFIXES = (".csv", ".xlsx", ".xls")

# Движок pandas для каждого формата Excel
EXCEL_ENGINES = {".xlsx": "openpyxl", ".xls": "xlrd"}

# Заголовки, по которым колонка Excel считается датой
DATE_HEADER_HINTS = ("date", "order", "time")

# Нулевой день Excel (с учётом бага 1900 года)
EXCEL_EPOCH = pd.Timestamp("1899-12-30")


def parse_file(file_path: Union[str, Path]) -> list[dict]:
    """
    Читает файл CSV или Excel и возвращает строки.

    Args:
        file_path: путь к файлу (CSV, XLSX, XLS)

    Returns:
        list[dict]: строки файла, ключи в порядке заголовка

    Raises:
        FileReadError: если файл не найден или не читается
        ParseError: если формат не поддерживается или структура битая
    """
    path = Path(file_path)

    if not path.exists():
        raise FileReadError(f"File not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ParseError(
            f"Unsupported file format: {suffix or path.name}. "
            f"Supported: CSV, XLSX, XLS"
        )

    logger.info(f"Парсинг файла: {path.name} (формат: {suffix})")

    # Файл читается один раз целиком
    try:
        content = path.read_bytes()
    except OSError as e:
        logger.error(f"Ошибка чтения файла: {e}")
        raise FileReadError(f"Failed to read file: {e}")

    try:
        if suffix == ".csv":
            df = _parse_csv(content)
        else:
            df = _parse_excel(content, suffix)
    except ParseError:
        raise
    except Exception as e:
        logger.error(f"Ошибка при разборе файла: {e}")
        raise ParseError(f"Failed to parse file: {e}")

    rows = df.to_dict(orient="records")
    logger.info(f"Прочитано строк: {len(rows)}, колонок: {len(df.columns)}")
    return rows


def _parse_csv(content: bytes) -> pd.DataFrame:
    """
    Парсит CSV.

    Все значения остаются строками, пустые ячейки — "".
    Пробует разные кодировки и разделители.
    """
    if not content.strip():
        return pd.DataFrame()

    encodings = ["utf-8-sig", "cp1251", "latin-1"]

    for encoding in encodings:
        try:
            df = _read_csv(content, encoding)

            # Если получилась одна колонка — возможно разделитель точка с запятой
            if len(df.columns) == 1 and ";" in str(df.columns[0]):
                df = _read_csv(content, encoding, sep=";")

            logger.debug(f"CSV прочитан с кодировкой {encoding}, колонок: {len(df.columns)}")
            return df

        except UnicodeDecodeError:
            continue
        except pd.errors.EmptyDataError:
            return pd.DataFrame()
        except pd.errors.ParserError as e:
            raise ParseError(f"Malformed CSV file: {e}")

    raise ParseError("Could not detect CSV file encoding")


def _read_csv(content: bytes, encoding: str, sep: str = ",") -> pd.DataFrame:
    return pd.read_csv(
        BytesIO(content),
        encoding=encoding,
        sep=sep,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
    ).fillna("")


def _parse_excel(content: bytes, suffix: str) -> pd.DataFrame:
    """
    Парсит Excel файл.

    Берёт первый лист. Даты приводит к ISO-строкам,
    в "датовых" колонках числа читает как серийные даты Excel.
    """
    engine = EXCEL_ENGINES[suffix]

    try:
        df = pd.read_excel(BytesIO(content), sheet_name=0, engine=engine, dtype=object)
    except Exception as e:
        raise ParseError(f"Failed to parse Excel file: {e}")

    df.columns = [str(c) for c in df.columns]

    for col in df.columns:
        is_date_column = any(hint in col.lower() for hint in DATE_HEADER_HINTS)
        df[col] = df[col].map(lambda v: _excel_cell(v, is_date_column)).astype(object)

    logger.debug(f"Excel прочитан, колонок: {len(df.columns)}, строк: {len(df)}")
    return df


def _excel_cell(value, is_date_column: bool):
    """Одна ячейка Excel -> значение для пайплайна."""
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""

    if isinstance(value, (datetime, date)):
        return value.strftime("%Y-%m-%d")

    if is_date_column and isinstance(value, numbers.Real) and not isinstance(value, bool):
        # Серийная дата, только если год правдоподобен (иначе это номер заказа и т.п.)
        try:
            converted = EXCEL_EPOCH + pd.to_timedelta(float(value), unit="D")
        except (ValueError, OverflowError):
            converted = None
        if converted is not None and pd.notna(converted) and is_valid_year(converted.year):
            return converted.strftime("%Y-%m-%d")

    if hasattr(value, "item"):
        # numpy-скаляры -> обычные числа Python
        return value.item()

    return value
