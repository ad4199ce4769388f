"""
Data module — парсинг файлов, вывод типов, очистка, модели.
"""

from data.models import (
    ColumnType,
    AggregationMode,
    Granularity,
    KPIIcon,
    Column,
    CleanedDataset,
    KPIMetric,
    CategoryPoint,
    DatePoint,
)
from data.errors import (
    DatasetError,
    FileReadError,
    ParseError,
    EmptyInputError,
    NoValidRowsError,
)
from data.parser import parse_file
from data.dates import parse_date
from data.inference import infer_column_type
from data.normalizer import clean_value
from data.cleaner import perform_eda

__all__ = [
    # Models
    "ColumnType",
    "AggregationMode",
    "Granularity",
    "KPIIcon",
    "Column",
    "CleanedDataset",
    "KPIMetric",
    "CategoryPoint",
    "DatePoint",
    # Errors
    "DatasetError",
    "FileReadError",
    "ParseError",
    "EmptyInputError",
    "NoValidRowsError",
    # Pipeline
    "parse_file",
    "parse_date",
    "infer_column_type",
    "clean_value",
    "perform_eda",
]
