"""
Consolidated Signal Service.

Merges:
- Signal blocking: context managers for programmatic widget updates
- Handler replacement: swap the callback on a change/trigger emitter

Key features:
1. Context manager guarantees signal unblocking
2. Supports single or multiple widgets
3. Replacement disconnects the old callback before connecting the new one,
   so repeated rebinding never stacks handlers
"""

from contextlib import contextmanager
from typing import Any, Callable, Optional
from PyQt6.QtWidgets import QWidget
import logging

from pyqt_stepeditor.protocols.widget_protocols import (
    ChangeSignalEmitter, TriggerEmitter, ValueSettable
)

logger = logging.getLogger(__name__)


class SignalService:
    """
    Consolidated service for signal blocking and handler replacement.

    Examples:
        # Block signals (context manager):
        with SignalService.block_signals(name_field, value_field):
            name_field.set_value("Wait")
            value_field.set_value("2.5")

        # Replace the change handler of a field:
        SignalService.replace_change_handler(value_field, old_handler, new_handler)
    """

    # ========== SIGNAL BLOCKING ==========

    @staticmethod
    @contextmanager
    def block_signals(*widgets: QWidget):
        """Context manager for blocking widget signals."""
        for widget in widgets:
            if widget is not None:
                widget.blockSignals(True)

        try:
            yield
        finally:
            for widget in widgets:
                if widget is not None:
                    widget.blockSignals(False)

    @staticmethod
    def update_widget_value(widget: QWidget, value) -> None:
        """Update a ValueSettable widget with signals blocked."""
        if not isinstance(widget, ValueSettable):
            raise ValueError(f"Cannot set a value on {type(widget).__name__}")
        with SignalService.block_signals(widget):
            widget.set_value(value)

    # ========== HANDLER REPLACEMENT ==========

    @staticmethod
    def replace_change_handler(emitter: ChangeSignalEmitter,
                               old: Optional[Callable[[Any], None]],
                               new: Optional[Callable[[Any], None]]) -> None:
        """Disconnect old (if any) and connect new (if any) on a change emitter."""
        if old is not None:
            emitter.disconnect_change_signal(old)
        if new is not None:
            emitter.connect_change_signal(new)

    @staticmethod
    def replace_trigger_handler(emitter: TriggerEmitter,
                                old: Optional[Callable[[], None]],
                                new: Optional[Callable[[], None]]) -> None:
        """Disconnect old (if any) and connect new (if any) on a trigger emitter."""
        if old is not None:
            emitter.disconnect_trigger(old)
        if new is not None:
            emitter.connect_trigger(new)
