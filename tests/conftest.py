"""
Pytest configuration for tictactoe tests.
"""

import os

# headless Qt for the widget tests; must be set before QApplication exists
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from tictactoe.game_logic import GameEngine


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication shared by every Qt test."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def engine() -> GameEngine:
    """Fresh engine, X to move."""
    return GameEngine()
