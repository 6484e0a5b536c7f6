import os

# no display in CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import random

import pytest
from PySide6.QtWidgets import QApplication

from tictactoe.engine import GameEngine


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def engine(qapp):
    eng = GameEngine(ai_delay_ms=20, rng=random.Random(1234))
    yield eng
    eng.set_ai_mode(False)

