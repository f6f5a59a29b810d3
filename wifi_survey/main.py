# wifi_survey/main.py

from __future__ import annotations

import logging
import sys

from PySide6.QtWidgets import QApplication

from wifi_survey.config import SurveyConfig
from wifi_survey.main_window import MainWindow
from wifi_survey.state import AppState

_LOG = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=logging.getLevelNamesMapping()[level],
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )


def main() -> None:
    config = SurveyConfig.from_env()
    configure_logging(config.log_level)
    _LOG.info("starting with required-field policy %r", config.required_policy)

    app = QApplication(sys.argv)
    window = MainWindow(AppState(config), config)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
