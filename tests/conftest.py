"""pytest configuration and fixtures for pyqt-stepeditor tests."""

import os

import pytest

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture
def memory_store():
    """Empty in-memory byte store."""
    from pyqt_stepeditor.io import MemoryByteStore
    return MemoryByteStore()


@pytest.fixture(autouse=True)
def reset_editor_config():
    """Keep tests independent of any global config a test installs."""
    from pyqt_stepeditor.protocols import set_editor_config
    yield
    set_editor_config(None)
