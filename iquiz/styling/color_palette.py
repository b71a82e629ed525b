"""Color palette for iQuiz."""

from __future__ import annotations


class ColorPalette:
    """Centralized color definitions for the application."""

    # Text colors
    TEXT_PRIMARY = "#000000"       # Black
    TEXT_DISABLED = "#AAAAAA"      # Gray

    # Background colors
    BACKGROUND_PRIMARY = "#FFFFFF"  # White

    # Accent colors
    ACCENT_PRIMARY = "#0078D4"     # Blue

    # Border colors
    BORDER_PRIMARY = "#D1D1D1"     # Gray

    # Button colors
    BUTTON_SECONDARY_BG = "#F5F5F5"  # WhiteSmoke
    BUTTON_HOVER_BG = "#E8E8E8"      # Light Gray

    # Answer option colors
    OPTION_IDLE_BG = "#F0F0F0"      # Faint Gray
    OPTION_SELECTED_BG = "#B3D7F3"  # Pale Blue
