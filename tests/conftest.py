"""Test configuration shared across this project's pytest suite."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Widgets are created without a display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Ensure tests can import modules from src/ without requiring editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole session (Qt allows only one)."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
