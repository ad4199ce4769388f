"""
Ошибки загрузки датасета.

Любая из них прерывает пайплайн целиком: частичный датасет
никогда не возвращается. Мягкие проблемы (удалённые строки,
заполненные пропуски) — это не ошибки, а warnings в CleanedDataset.
"""


class DatasetError(Exception):
    """Базовая ошибка загрузки — текст показывается пользователю как есть"""
    pass


class FileReadError(DatasetError):
    """Файл не найден или не читается с диска"""
    pass


class ParseError(DatasetError):
    """Ошибка при парсинге файла (формат, кодировка, битая структура)"""
    pass


class EmptyInputError(DatasetError):
    """В файле нет ни одной строки данных"""
    pass


class NoValidRowsError(DatasetError):
    """После очистки не осталось ни одной строки"""
    pass
