"""
Конфигурация приложения AutoDash.
Загружает настройки из переменных окружения / .env файла.
"""

import tempfile
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Настройки приложения"""

    # === Приложение ===
    app_name: str = "AutoDash"
    debug: bool = False

    # === Сервер Gradio ===
    server_name: str = "0.0.0.0"
    server_port: int = 7860

    # === Лимиты данных ===
    large_file_mb: float = 1.0   # Выше — только предупреждение, не запрет
    preview_rows: int = 20       # Строк в превью датасета

    # === Графики ===
    chart_top_n: int = 8         # Столбцов в основных разбивках
    chart_top_n_small: int = 5   # Секторов в круговой диаграмме

    # === Экспорт ===
    export_dir: Path = Path(tempfile.gettempdir()) / "autodash-exports"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "AUTODASH_"


# Глобальный экземпляр настроек
# Загружается при импорте модуля
settings = Settings()
