"""
UI module — Gradio интерфейс.
"""

from ui.components import create_app
from ui.styles import CUSTOM_CSS

__all__ = ["create_app", "CUSTOM_CSS"]
