"""Quiz-related constants shared across UI and core layers."""

RESULT_PERFECT: str = "Perfect"
RESULT_NOT_BAD: str = "Not bad"
RESULT_NOT_EVEN_CLOSE: str = "Not even close"

ICON_MATHEMATICS: str = "function"
ICON_MARVEL: str = "figure.boxing"
ICON_SCIENCE: str = "flask"
ICON_FALLBACK: str = "questionmark.circle"

SECONDS_PER_MINUTE: int = 60
MAX_REFRESH_INTERVAL_MINUTES: int = 24 * 60
# Largest interval a QTimer accepts, in milliseconds.
MAX_TIMER_INTERVAL_MS: int = 2**31 - 1
