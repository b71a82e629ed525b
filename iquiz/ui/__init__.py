"""Qt UI components for the quiz application."""

from .dialog_helpers import show_error, show_info
from .main_window import MainWindow
from .session_renderer import SessionView, render_session

__all__ = [
    "MainWindow",
    "SessionView",
    "render_session",
    "show_error",
    "show_info",
]
