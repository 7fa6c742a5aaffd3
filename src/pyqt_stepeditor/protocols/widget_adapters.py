"""
Widget adapters that wrap Qt widgets to implement the editor ABCs.

Normalizes Qt's inconsistent APIs:
- QLineEdit.text() / QLineEdit.setText() -> get_value() / set_value()
- QLineEdit.editingFinished / QPushButton.clicked -> connect_* / disconnect_*

Qt only disconnects a slot by the exact object that was connected, so the
adapters remember the wrapper created for every callback. That makes
disconnect-by-callback work and lets callers inspect what is connected.
"""

from abc import ABCMeta
from typing import Any, Callable, List, Optional, Tuple

from PyQt6.QtCore import QObject
from PyQt6.QtWidgets import QLineEdit, QPushButton

from .widget_protocols import (
    ValueGettable, ValueSettable, ChangeSignalEmitter, TriggerEmitter
)

# PyQt-specific metaclass that combines ABCMeta with Qt's metaclass
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


class CommitLineEditAdapter(QLineEdit, ValueGettable, ValueSettable,
                            ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Adapter for QLineEdit that reports committed text.

    Change callbacks fire on editingFinished (Enter or focus out), not on
    every keystroke, so a half-typed number is never parsed.
    """

    _widget_id = "commit_line_edit"

    def __init__(self, parent=None):
        super().__init__(parent)
        self._change_connections: List[Tuple[Callable[[Any], None], Callable[[], None]]] = []

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.text()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self.setText("" if value is None else str(value))

    def commit_value(self, value: Any) -> None:
        """Set text and commit it as if the user pressed Enter."""
        self.set_value(value)
        self.editingFinished.emit()

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        def wrapper():
            callback(self.get_value())
        self.editingFinished.connect(wrapper)
        self._change_connections.append((callback, wrapper))

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        wrapper = self._pop_connection(callback)
        if wrapper is None:
            return
        try:
            self.editingFinished.disconnect(wrapper)
        except TypeError:
            # Signal not connected - ignore
            pass

    def change_callbacks(self) -> List[Callable[[Any], None]]:
        """Implement ChangeSignalEmitter ABC."""
        return [callback for callback, _wrapper in self._change_connections]

    def _pop_connection(self, callback) -> Optional[Callable[[], None]]:
        for i, (connected, wrapper) in enumerate(self._change_connections):
            if connected is callback:
                del self._change_connections[i]
                return wrapper
        return None


class TriggerButtonAdapter(QPushButton, TriggerEmitter, metaclass=PyQtWidgetMeta):
    """
    Adapter for QPushButton implementing TriggerEmitter.

    clicked carries a 'checked' flag; callbacks take no arguments.
    """

    _widget_id = "trigger_button"

    def __init__(self, text: str = "", parent=None):
        super().__init__(text, parent)
        self._trigger_connections: List[Tuple[Callable[[], None], Callable[..., None]]] = []

    def connect_trigger(self, callback: Callable[[], None]) -> None:
        """Implement TriggerEmitter ABC."""
        def wrapper(_checked: bool = False):
            callback()
        self.clicked.connect(wrapper)
        self._trigger_connections.append((callback, wrapper))

    def disconnect_trigger(self, callback: Callable[[], None]) -> None:
        """Implement TriggerEmitter ABC."""
        for i, (connected, wrapper) in enumerate(self._trigger_connections):
            if connected is callback:
                del self._trigger_connections[i]
                try:
                    self.clicked.disconnect(wrapper)
                except TypeError:
                    pass
                return

    def trigger_callbacks(self) -> List[Callable[[], None]]:
        """Implement TriggerEmitter ABC."""
        return [callback for callback, _wrapper in self._trigger_connections]
