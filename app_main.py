"""Application entry point for iQuiz."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from iquiz.constants.about import APP_NAME, APP_ORGANIZATION, APP_VERSION
from iquiz.core.seed_content import build_seed_content
from iquiz.core.services.content_repository import ContentRepository
from iquiz.ui.main_window import MainWindow
from iquiz.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, load built-in content, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting iQuiz…")

    app = QApplication(sys.argv)
    app.setOrganizationName(APP_ORGANIZATION)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)

    repository = ContentRepository()
    repository.replace_content(*build_seed_content())
    config = repository.get_config()
    logger.info("Quiz source is %s", config.source_url)

    window = MainWindow(repository)
    window.show()
    repository.fetch_now()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
