"""
Step Editor Widget for PyQt6 GUI.

Displays the recyclable step list with an Add control. Owns the
ListController for its lifetime: the session starts when the widget is
built and stops when it is closed.
"""

import logging
from typing import Optional

from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from pyqt_stepeditor.core.reorderable_list_widget import ReorderableListWidget
from pyqt_stepeditor.io.backends import DiskByteStore, resolve_save_path
from pyqt_stepeditor.io.persistence import PersistenceGateway
from pyqt_stepeditor.protocols.editor_config import EditorConfig, get_editor_config
from pyqt_stepeditor.services.list_controller import ListController

logger = logging.getLogger(__name__)


class StepEditorWidget(QWidget):
    """
    Step list editor: header with Add button above the step rows.

    Args:
        gateway: Persistence gateway (defaults to a disk store at the
            configured save path)
        config: Editor configuration (defaults to the global config)
        parent: Parent widget
    """

    def __init__(self, gateway: Optional[PersistenceGateway] = None,
                 config: Optional[EditorConfig] = None, parent=None):
        super().__init__(parent)
        self.config = config or get_editor_config()
        if gateway is None:
            gateway = PersistenceGateway(DiskByteStore(resolve_save_path(self.config)))

        self.setup_ui()
        self.controller = ListController(gateway, self.step_list, self.config)

        self.add_button.clicked.connect(self._on_add_clicked)
        self._add_connected = True

        self.controller.on_start()
        logger.debug(f"Step editor initialized with {len(self.controller.steps)} steps")

    def setup_ui(self):
        """Setup the user interface."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        header_layout = QHBoxLayout()
        self.header_label = QLabel("Steps")
        self.header_label.setStyleSheet("font-weight: bold; font-size: 14px;")
        header_layout.addWidget(self.header_label)
        header_layout.addStretch()

        self.add_button = QPushButton("Add Step")
        self.add_button.setObjectName("add-step-button")
        header_layout.addWidget(self.add_button)
        layout.addLayout(header_layout)

        self.step_list = ReorderableListWidget(visible_rows=self.config.visible_row_count)
        self.step_list.setObjectName("step-list")
        layout.addWidget(self.step_list, 1)

    def _on_add_clicked(self, _checked: bool = False) -> None:
        self.controller.on_add()

    def shutdown(self) -> None:
        """Disconnect controls and stop the editing session. Idempotent."""
        if self._add_connected:
            self.add_button.clicked.disconnect(self._on_add_clicked)
            self._add_connected = False
        self.controller.on_stop()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.shutdown()
        super().closeEvent(event)
