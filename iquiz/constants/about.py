"""Static metadata describing iQuiz."""

APP_NAME = "iQuiz"
APP_ORGANIZATION = "iQuiz"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "iQuiz is a small multiple-choice quiz app built with Qt. "
    "Pick a topic, answer its questions one by one, and see how you did. "
    "Quiz content can be refreshed from a JSON URL configured in Settings."
)
