"""
Step Row Widget for PyQt6.

One recyclable row of the step list: drag handle, name field, value field
and remove button, plus the attached-data slot the binder uses to remember
which step the row currently shows.
"""

import logging
from typing import Any

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QSizePolicy, QWidget

from pyqt_stepeditor.protocols.widget_adapters import (
    CommitLineEditAdapter, PyQtWidgetMeta, TriggerButtonAdapter
)
from pyqt_stepeditor.protocols.widget_protocols import BindableRow

logger = logging.getLogger(__name__)


class StepRowWidget(QWidget, BindableRow, metaclass=PyQtWidgetMeta):
    """
    Row widget implementing BindableRow.

    Holds no step of its own beyond the attached data; everything it shows
    is pushed in by the binder on each bind pass.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._bound_data: Any = None
        self.setup_ui()

    def setup_ui(self):
        """Setup the user interface."""
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 2, 4, 2)
        layout.setSpacing(6)

        # Mouse presses on the handle fall through to the row, which the
        # list host watches for drag-reordering
        self.drag_handle = QLabel("⋮⋮")
        self.drag_handle.setToolTip("Drag to reorder")
        self.drag_handle.setCursor(Qt.CursorShape.OpenHandCursor)
        layout.addWidget(self.drag_handle)

        self.name_field = CommitLineEditAdapter()
        self.name_field.setObjectName("action-title")
        self.name_field.setPlaceholderText("Action name")
        layout.addWidget(self.name_field, 3)

        self.value_field = CommitLineEditAdapter()
        self.value_field.setObjectName("value-field")
        self.value_field.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.value_field.setMaximumWidth(90)
        layout.addWidget(self.value_field, 1)

        self.remove_button = TriggerButtonAdapter("✕")
        self.remove_button.setObjectName("remove-button")
        self.remove_button.setToolTip("Remove step")
        self.remove_button.setMaximumWidth(28)
        layout.addWidget(self.remove_button)

        self.setSizePolicy(QSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Fixed))

    # ========== BindableRow ABC ==========

    @property
    def name_control(self) -> CommitLineEditAdapter:
        return self.name_field

    @property
    def value_control(self) -> CommitLineEditAdapter:
        return self.value_field

    @property
    def remove_trigger(self) -> TriggerButtonAdapter:
        return self.remove_button

    def get_bound_data(self) -> Any:
        return self._bound_data

    def set_bound_data(self, data: Any) -> None:
        self._bound_data = data
