"""
Pydantic модели данных для AutoDash.

Модели:
- ColumnType: тип колонки (date / number / category / text)
- Column: колонка с нормализованными значениями
- CleanedDataset: очищенный датасет + предупреждения
- KPIMetric: одна KPI-карточка
- CategoryPoint / DatePoint: точки для графиков
"""

from pydantic import BaseModel, ConfigDict, Field
from enum import Enum
from typing import Any, Optional, Union


class ColumnType(str, Enum):
    """Тип колонки — выводится по значениям, не объявляется"""
    DATE = "date"
    NUMBER = "number"
    CATEGORY = "category"
    TEXT = "text"


class AggregationMode(str, Enum):
    """Способ свёртки группы значений"""
    SUM = "sum"
    COUNT = "count"
    AVG = "avg"


class Granularity(str, Enum):
    """Размер корзины для временного ряда"""
    MONTH = "month"
    YEAR = "year"


class KPIIcon(str, Enum):
    """Символьные теги иконок для KPI-карточек"""
    DOLLAR_SIGN = "dollar-sign"
    PACKAGE = "package"
    TRENDING_UP = "trending-up"
    MAP_PIN = "map-pin"
    STAR = "star"
    DATABASE = "database"


class Column(BaseModel):
    """
    Одна колонка датасета.

    values[i] у всех колонок относится к одной и той же исходной строке i.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    type: ColumnType
    values: list[Any] = Field(default_factory=list)


class CleanedDataset(BaseModel):
    """
    Очищенный датасет — источник истины после загрузки файла.

    Не мутируется: фильтры строят новые представления через model_copy().
    """
    model_config = ConfigDict(frozen=True)

    columns: list[Column]
    rows: list[dict[str, Any]]
    original_row_count: int
    cleaned_row_count: int
    warnings: list[str] = Field(default_factory=list)

    @property
    def column_names(self) -> list[str]:
        return [col.name for col in self.columns]

    def columns_of_type(self, column_type: ColumnType) -> list[Column]:
        """Колонки заданного типа в исходном порядке."""
        return [col for col in self.columns if col.type == column_type]

    def get_column(self, name: str) -> Optional[Column]:
        for col in self.columns:
            if col.name == name:
                return col
        return None


class KPIMetric(BaseModel):
    """
    Одна KPI-карточка.

    Пересчитывается на каждый запрос, собственной идентичности не имеет.
    """
    id: str
    label: str
    value: Union[str, float, int]
    subtitle: Optional[str] = None
    icon: KPIIcon
    trend: Optional[float] = None


class CategoryPoint(BaseModel):
    """Точка категориальной разбивки"""
    name: str
    value: float


class DatePoint(BaseModel):
    """Точка временного ряда (date — метка корзины: "Mon yyyy" или "yyyy")"""
    date: str
    value: float
