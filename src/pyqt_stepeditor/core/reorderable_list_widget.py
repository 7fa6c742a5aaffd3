"""
Virtualized, reorderable row host.

Keeps a small pool of row widgets and rebinds them to whichever indices of
the backing sequence are currently in view. Rows are recycled across
indices as the window scrolls or the sequence changes, so the bind callback
is the only place a row learns what it represents.
"""

import logging
from typing import Any, Callable, List, Optional, Sequence

from PyQt6.QtCore import QEvent, QObject, Qt, pyqtSignal
from PyQt6.QtCore import QSignalBlocker
from PyQt6.QtWidgets import QHBoxLayout, QScrollBar, QVBoxLayout, QWidget

from pyqt_stepeditor.protocols.editor_config import get_editor_config
from pyqt_stepeditor.protocols.widget_adapters import PyQtWidgetMeta
from pyqt_stepeditor.protocols.widget_protocols import RowHost

logger = logging.getLogger(__name__)

# angleDelta units per wheel notch
WHEEL_NOTCH = 120


class ReorderableListWidget(QWidget, RowHost, metaclass=PyQtWidgetMeta):
    """Row host that recycles a fixed pool of rows and reports reorders.

    Emits a signal when a row is dragged onto another slot so the owner can
    update the data model. The host itself never reorders the backing
    sequence.
    """

    items_reordered = pyqtSignal(int, int)  # from_index, to_index

    def __init__(self, visible_rows: Optional[int] = None, parent=None):
        """Initialize the row host.

        Args:
            visible_rows: Size of the visible window (defaults to config)
            parent: Parent widget
        """
        super().__init__(parent)
        if visible_rows is None:
            visible_rows = get_editor_config().visible_row_count
        if visible_rows < 1:
            raise ValueError(f"visible_rows must be at least 1, got {visible_rows}")
        self._visible_rows = visible_rows

        self._items_source: Sequence[Any] = []
        self._pool: List[QWidget] = []
        self._first_visible = 0
        self._drag_source: Optional[int] = None
        self._wheel_remainder = 0

        self._make_row: Optional[Callable[[], QWidget]] = None
        self._bind_row: Optional[Callable[[QWidget, int], None]] = None
        self._unbind_row: Optional[Callable[[QWidget], None]] = None

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        self._rows_container = QWidget()
        self._rows_layout = QVBoxLayout(self._rows_container)
        self._rows_layout.setContentsMargins(0, 0, 0, 0)
        self._rows_layout.setSpacing(2)
        self._rows_layout.addStretch()
        layout.addWidget(self._rows_container, 1)

        self._scrollbar = QScrollBar(Qt.Orientation.Vertical)
        self._scrollbar.setRange(0, 0)
        self._scrollbar.valueChanged.connect(self._on_scrolled)
        layout.addWidget(self._scrollbar)

    # ========== RowHost ABC ==========

    def set_row_factory(self, make_row, bind_row, unbind_row=None) -> None:
        self._make_row = make_row
        self._bind_row = bind_row
        self._unbind_row = unbind_row

    def set_items_source(self, items: Sequence[Any]) -> None:
        self._items_source = items
        self._first_visible = 0
        self.refresh_items()

    def refresh_items(self) -> None:
        """Rebind every visible row; grow the pool if the window needs more rows."""
        if self._make_row is None or self._bind_row is None:
            raise RuntimeError("Row factory not set. Call set_row_factory(...) first.")

        count = len(self._items_source)
        needed = self.visible_count

        while len(self._pool) < needed:
            row = self._make_row()
            row.installEventFilter(self)
            # Insert before the trailing stretch
            self._rows_layout.insertWidget(len(self._pool), row)
            self._pool.append(row)
            logger.debug(f"Created pooled row #{len(self._pool)}")

        max_first = max(0, count - needed)
        self._first_visible = min(self._first_visible, max_first)

        blocker = QSignalBlocker(self._scrollbar)
        self._scrollbar.setRange(0, max_first)
        self._scrollbar.setPageStep(max(needed, 1))
        self._scrollbar.setValue(self._first_visible)
        blocker.unblock()
        self._scrollbar.setVisible(max_first > 0)

        self._bind_visible_rows()

    def scroll_to_item(self, index: int) -> None:
        count = len(self._items_source)
        if count == 0:
            return
        if index < 0:
            index += count
        index = max(0, min(index, count - 1))

        needed = self.visible_count
        if index < self._first_visible:
            self._first_visible = index
        elif index >= self._first_visible + needed:
            self._first_visible = index - needed + 1
        self.refresh_items()

    def connect_reorder(self, callback: Callable[[int, int], None]) -> None:
        self.items_reordered.connect(callback)

    def disconnect_reorder(self, callback: Callable[[int, int], None]) -> None:
        try:
            self.items_reordered.disconnect(callback)
        except TypeError:
            # Signal not connected - ignore
            pass

    # ========== Window state ==========

    @property
    def visible_count(self) -> int:
        """Number of rows currently bound and shown."""
        return min(self._visible_rows, len(self._items_source))

    @property
    def first_visible_index(self) -> int:
        return self._first_visible

    def pooled_rows(self) -> List[QWidget]:
        """All rows ever created, bound or not."""
        return list(self._pool)

    def visible_rows(self) -> List[QWidget]:
        return self._pool[:self.visible_count]

    def row_for_index(self, index: int) -> Optional[QWidget]:
        """Row currently bound to index, or None if index is out of view."""
        slot = index - self._first_visible
        if 0 <= slot < self.visible_count:
            return self._pool[slot]
        return None

    def index_for_row(self, row: QWidget) -> Optional[int]:
        for slot, candidate in enumerate(self.visible_rows()):
            if candidate is row:
                return self._first_visible + slot
        return None

    def _bind_visible_rows(self) -> None:
        needed = self.visible_count
        for slot, row in enumerate(self._pool):
            if slot < needed:
                self._bind_row(row, self._first_visible + slot)
                row.show()
            else:
                if self._unbind_row is not None:
                    self._unbind_row(row)
                row.hide()
        logger.debug(f"Bound rows {self._first_visible}..{self._first_visible + needed - 1} "
                     f"of {len(self._items_source)}")

    def _on_scrolled(self, value: int) -> None:
        if value != self._first_visible:
            self._first_visible = value
            self._bind_visible_rows()

    # ========== Reordering ==========

    def move_item(self, from_index: int, to_index: int) -> None:
        """Report a completed move of from_index to to_index.

        Only emits if position actually changed and both indices are valid.
        """
        count = len(self._items_source)
        if not (0 <= from_index < count and 0 <= to_index < count):
            logger.warning(f"Ignoring reorder with invalid indices {from_index} -> {to_index} (count={count})")
            return
        if from_index != to_index:
            self.items_reordered.emit(from_index, to_index)

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        """Track press on a row and release over another row as a drag."""
        if watched in self._pool:
            if event.type() == QEvent.Type.MouseButtonPress and event.button() == Qt.MouseButton.LeftButton:
                self._drag_source = self.index_for_row(watched)
            elif event.type() == QEvent.Type.MouseButtonRelease and self._drag_source is not None:
                source_index = self._drag_source
                self._drag_source = None
                target_row = self._row_at_global(event.globalPosition().toPoint())
                if target_row is not None:
                    target_index = self.index_for_row(target_row)
                    if target_index is not None:
                        self.move_item(source_index, target_index)
        return super().eventFilter(watched, event)

    def _row_at_global(self, global_pos) -> Optional[QWidget]:
        local_pos = self._rows_container.mapFromGlobal(global_pos)
        for row in self.visible_rows():
            if row.geometry().contains(local_pos):
                return row
        return None

    def wheelEvent(self, event):
        """Scroll the window by one row per full wheel notch.

        Partial deltas from high-resolution wheels and trackpads accumulate
        until they add up to a notch in either direction.
        """
        self._wheel_remainder += event.angleDelta().y()
        steps = int(self._wheel_remainder / WHEEL_NOTCH)
        if steps:
            self._wheel_remainder -= steps * WHEEL_NOTCH
            self._scrollbar.setValue(self._scrollbar.value() - steps)
        event.accept()
