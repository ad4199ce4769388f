"""
AutoDash — дашборд по любому CSV/Excel файлу.

Использование:
    python app.py

    Затем откройте http://localhost:7860 в браузере.
    Порт, хост и режим отладки — через .env (AUTODASH_*).
"""

import logging
import sys

from config import settings

logger = logging.getLogger(__name__)

# Библиотеки, которые шумят на INFO
QUIET_LOGGERS = ("httpx", "gradio", "matplotlib", "urllib3")


def setup_logging():
    """Логи в stdout; DEBUG только при AUTODASH_DEBUG=true."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format='%(asctime)s | %(levelname)s | %(name)s | %(message)s',
        datefmt='%H:%M:%S',
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def main():
    """Запуск приложения."""
    import gradio as gr
    from ui.components import create_app
    from ui.styles import CUSTOM_CSS

    setup_logging()
    logger.info(f"📊 Запуск {settings.app_name} на {settings.server_name}:{settings.server_port}")

    app = create_app()

    app.launch(
        server_name=settings.server_name,
        server_port=settings.server_port,
        show_error=True,
        css=CUSTOM_CSS,
        theme=gr.themes.Soft(primary_hue="indigo", neutral_hue="slate"),
    )


if __name__ == "__main__":
    main()
