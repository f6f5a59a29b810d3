"""Pytest configuration and fixtures for the Wi-Fi survey app."""

from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from wifi_survey.config import SurveyConfig
from wifi_survey.state import AppState


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    """One QApplication for the whole run (offscreen platform)."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def state(qapp) -> AppState:
    return AppState(SurveyConfig())


@pytest.fixture
def strict_state(qapp) -> AppState:
    return AppState(SurveyConfig(required_policy="strict"))


@pytest.fixture
def sala_form() -> dict[str, str]:
    """A fully filled-in room form."""
    return {
        "room": "Sala",
        "signal_level_24": "-40",
        "signal_level_5": "-55",
        "speed_24": "100",
        "speed_5": "50",
        "interference": "",
    }
