"""
Оркестрация загрузки — связывает все компоненты в единый пайплайн.

Пайплайн:
1. Проверка размера файла (только предупреждение)
2. Парсинг файла (CSV/Excel)
3. Вывод типов, нормализация, очистка
4. Проверка, что после очистки остались строки

Любая ошибка прерывает пайплайн: частичный датасет не возвращается.
"""

from pathlib import Path
from typing import Optional, Union
import logging

from pydantic import BaseModel

from config import settings
from data.cleaner import perform_eda
from data.errors import FileReadError, NoValidRowsError
from data.models import CleanedDataset
from data.parser import parse_file

logger = logging.getLogger(__name__)


class SizeAdvisory(BaseModel):
    """Рекомендация по размеру файла — не ограничение"""
    is_large: bool
    size_mb: float
    message: Optional[str] = None


class LoadResult(BaseModel):
    """Очищенный датасет + рекомендация по размеру"""
    dataset: CleanedDataset
    advisory: SizeAdvisory


def check_dataset_size(size_bytes: int) -> SizeAdvisory:
    """
    Проверка размера файла.

    Большой файл не запрещается: вызывающий сам решает,
    продолжать ли обработку.
    """
    size_mb = size_bytes / (1024 * 1024)

    if size_mb > settings.large_file_mb:
        return SizeAdvisory(
            is_large=True,
            size_mb=size_mb,
            message=(
                f"Dataset is large ({size_mb:.2f} MB). Processing may be slow. "
                f"Consider server-side processing for better performance."
            ),
        )

    return SizeAdvisory(is_large=False, size_mb=size_mb)


def load_dataset(file_path: Union[str, Path]) -> LoadResult:
    """
    Полный цикл загрузки файла.

    Args:
        file_path: путь к CSV/Excel файлу

    Returns:
        LoadResult с очищенным датасетом

    Raises:
        FileReadError: если файл не читается
        ParseError: если файл битый или формат не поддерживается
        EmptyInputError: если в файле нет строк
        NoValidRowsError: если после очистки не осталось строк
    """
    path = Path(file_path)
    logger.info(f"Начало загрузки файла: {path}")

    # 1. Размер
    try:
        advisory = check_dataset_size(path.stat().st_size)
    except OSError as e:
        raise FileReadError(f"Failed to read file: {e}")

    if advisory.is_large:
        logger.warning(advisory.message)

    # 2. Парсинг
    logger.debug("Шаг 2: Парсинг файла")
    raw_rows = parse_file(path)

    # 3. Очистка
    logger.debug("Шаг 3: Очистка данных")
    dataset = perform_eda(raw_rows)

    # 4. Пусто после очистки
    if dataset.cleaned_row_count == 0:
        raise NoValidRowsError(
            "All data was filtered out during cleaning. Please check your data quality."
        )

    logger.info(
        f"Загрузка завершена: {dataset.cleaned_row_count} из "
        f"{dataset.original_row_count} строк, {len(dataset.warnings)} предупреждений"
    )

    return LoadResult(dataset=dataset, advisory=advisory)
