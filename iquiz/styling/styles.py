"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette

class Styles:
    """Helper class to generate Qt stylesheets from the color palette."""

    @staticmethod
    def get_main_window_style() -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY};
                color: {ColorPalette.TEXT_PRIMARY};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY};
                color: {ColorPalette.TEXT_PRIMARY};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG};
                color: {ColorPalette.TEXT_PRIMARY};
                border: 1px solid {ColorPalette.BORDER_PRIMARY};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_DISABLED};
            }}
            QLineEdit, QSpinBox {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY};
                color: {ColorPalette.TEXT_PRIMARY};
                border: 1px solid {ColorPalette.BORDER_PRIMARY};
                border-radius: 4px;
                padding: 4px;
            }}
            QListWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY};
                border: 1px solid {ColorPalette.BORDER_PRIMARY};
                border-radius: 4px;
            }}
            QListWidget::item {{
                padding: 8px 4px;
            }}
            QGroupBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
        """

    @staticmethod
    def get_option_button_style() -> str:
        return f"""
            QPushButton {{
                background-color: {ColorPalette.OPTION_IDLE_BG};
                border-radius: 8px;
                padding: 12px;
                text-align: center;
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.OPTION_SELECTED_BG};
                border: 1px solid {ColorPalette.ACCENT_PRIMARY};
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_prompt_style() -> str:
        return "font-size: 15pt;"

    @staticmethod
    def get_feedback_style() -> str:
        return "font-size: 13pt; font-weight: bold;"

    @staticmethod
    def get_result_style() -> str:
        return "font-size: 24pt; font-weight: bold;"
