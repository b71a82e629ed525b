"""Network configuration constants for the quiz application."""

DEFAULT_SOURCE_URL: str = "https://tednewardsandbox.site44.com/questions.json"
DEFAULT_REFRESH_INTERVAL_MINUTES: int = 0
ALLOWED_URL_SCHEMES: tuple[str, ...] = ("http", "https")

CONTENT_SERVER_HOST: str = "127.0.0.1"
CONTENT_SERVER_PORT: int = 8000
CONTENT_SERVER_PATH: str = "/questions.json"
