"""Tests for the recycling row host and editor widgets."""

import pytest


def _make_host(items, visible_rows=3):
    """Host with plain QWidget rows that records the current binds."""
    from PyQt6.QtWidgets import QWidget
    from pyqt_stepeditor.core import ReorderableListWidget

    host = ReorderableListWidget(visible_rows=visible_rows)
    bound = {}

    def bind(row, index):
        bound[row] = index

    def unbind(row):
        bound.pop(row, None)

    host.set_row_factory(QWidget, bind, unbind)
    host.set_items_source(items)
    return host, bound


def test_reorderable_list_widget_requires_row_factory(qapp):
    """Refreshing before a row factory is installed fails loudly."""
    from pyqt_stepeditor.core import ReorderableListWidget

    host = ReorderableListWidget(visible_rows=2)
    with pytest.raises(RuntimeError):
        host.set_items_source(["a"])


def test_pool_is_limited_to_visible_rows(qapp):
    """Only visible_rows rows are created for a long sequence."""
    items = list(range(10))
    host, bound = _make_host(items, visible_rows=3)

    assert len(host.pooled_rows()) == 3
    assert sorted(bound.values()) == [0, 1, 2]
    assert host.row_for_index(1) is host.pooled_rows()[1]
    assert host.row_for_index(5) is None


def test_scrolling_recycles_rows_across_indices(qapp):
    """scroll_to_item rebinds the same row objects to new indices."""
    items = list(range(10))
    host, bound = _make_host(items, visible_rows=3)
    pool = host.pooled_rows()

    host.scroll_to_item(9)
    assert host.first_visible_index == 7
    assert host.pooled_rows() == pool
    assert [bound[row] for row in pool] == [7, 8, 9]
    assert host.index_for_row(pool[0]) == 7

    host.scroll_to_item(0)
    assert [bound[row] for row in pool] == [0, 1, 2]

    host.scroll_to_item(-1)
    assert [bound[row] for row in pool] == [7, 8, 9]



def _wheel(host, delta_y):
    from PyQt6.QtCore import QPoint, QPointF, Qt
    from PyQt6.QtGui import QWheelEvent

    event = QWheelEvent(QPointF(5, 5), QPointF(5, 5), QPoint(0, 0), QPoint(0, delta_y),
                        Qt.MouseButton.NoButton, Qt.KeyboardModifier.NoModifier,
                        Qt.ScrollPhase.NoScrollPhase, False)
    host.wheelEvent(event)


def test_wheel_scrolls_one_row_per_full_notch(qapp):
    """Partial wheel deltas accumulate symmetrically into whole rows."""
    items = list(range(10))
    host, bound = _make_host(items, visible_rows=2)
    host.scroll_to_item(6)
    assert host.first_visible_index == 5

    _wheel(host, 60)
    _wheel(host, -60)
    assert host.first_visible_index == 5

    _wheel(host, -60)
    assert host.first_visible_index == 5
    _wheel(host, -60)
    assert host.first_visible_index == 6

    _wheel(host, 60)
    _wheel(host, 60)
    assert host.first_visible_index == 5

    _wheel(host, 240)
    assert host.first_visible_index == 3
    assert sorted(bound.values()) == [3, 4]


def test_shrinking_sequence_hides_and_unbinds_extra_rows(qapp):
    """Rows beyond the sequence are kept in the pool but unbound."""
    items = ["a", "b", "c"]
    host, bound = _make_host(items, visible_rows=5)
    pool = host.pooled_rows()
    assert len(pool) == 3

    del items[0]
    host.refresh_items()

    assert host.pooled_rows() == pool
    assert bound == {pool[0]: 0, pool[1]: 1}
    assert pool[2].isHidden()


def test_refresh_clamps_window_after_removal(qapp):
    """The visible window never starts past the end of the sequence."""
    items = list(range(6))
    host, bound = _make_host(items, visible_rows=3)
    host.scroll_to_item(5)
    assert host.first_visible_index == 3

    del items[-2:]
    host.refresh_items()
    assert host.first_visible_index == 1
    assert sorted(bound.values()) == [1, 2, 3]


def test_move_item_emits_reorder(qapp):
    """move_item reports valid moves only, and never mutates the sequence."""
    items = ["a", "b", "c"]
    host, _bound = _make_host(items)
    moves = []
    host.connect_reorder(lambda old, new: moves.append((old, new)))

    host.move_item(0, 2)
    host.move_item(1, 1)
    host.move_item(0, 7)

    assert moves == [(0, 2)]
    assert items == ["a", "b", "c"]


def test_disconnect_reorder_is_safe(qapp):
    """Disconnecting an unknown callback is ignored."""
    host, _bound = _make_host(["a", "b"])
    moves = []

    def on_reorder(old, new):
        moves.append((old, new))

    host.disconnect_reorder(on_reorder)
    host.connect_reorder(on_reorder)
    host.disconnect_reorder(on_reorder)
    host.move_item(0, 1)
    assert moves == []


def test_drag_between_rows_reports_reorder(qapp):
    """Press on one row and release over another reports a move."""
    from PyQt6.QtCore import QPoint, Qt
    from PyQt6.QtTest import QTest

    host, _bound = _make_host(["a", "b", "c"])
    host.resize(300, 300)
    host.show()
    qapp.processEvents()

    moves = []
    host.connect_reorder(lambda old, new: moves.append((old, new)))
    rows = host.visible_rows()

    QTest.mousePress(rows[0], Qt.MouseButton.LeftButton, pos=QPoint(2, 2))
    QTest.mouseRelease(rows[2], Qt.MouseButton.LeftButton, pos=QPoint(2, 2))

    assert moves == [(0, 2)]
    host.close()


def test_step_row_widget_capabilities(qapp):
    """StepRowWidget exposes the row capability set."""
    from pyqt_stepeditor.core import Step
    from pyqt_stepeditor.protocols import BindableRow, ChangeSignalEmitter, TriggerEmitter
    from pyqt_stepeditor.widgets import StepRowWidget

    row = StepRowWidget()
    assert isinstance(row, BindableRow)
    assert isinstance(row.name_control, ChangeSignalEmitter)
    assert isinstance(row.value_control, ChangeSignalEmitter)
    assert isinstance(row.remove_trigger, TriggerEmitter)
    assert row.name_field.objectName() == "action-title"
    assert row.value_field.objectName() == "value-field"
    assert row.remove_button.objectName() == "remove-button"

    assert row.get_bound_data() is None
    step = Step("Wait", 2.5)
    row.set_bound_data(step)
    assert row.get_bound_data() is step


def test_step_editor_widget_session(qapp, tmp_path):
    """The editor widget loads, adds through its button and saves on close."""
    from pyqt_stepeditor.io import DiskByteStore, PersistenceGateway
    from pyqt_stepeditor.protocols import EditorConfig
    from pyqt_stepeditor.services import SessionState
    from pyqt_stepeditor.widgets import StepEditorWidget

    config = EditorConfig(save_dir=str(tmp_path), visible_row_count=4)
    editor = StepEditorWidget(config=config)
    assert editor.controller.state is SessionState.LOADED
    assert [s.name for s in editor.controller.steps] == ["Initial Move", "Wait", "Rotate"]

    editor.add_button.click()
    assert editor.controller.steps[-1].name == "New Action"
    assert len(editor.step_list.visible_rows()) == 4

    editor.close()
    assert editor.controller.state is SessionState.DISPOSED

    # Closing again, or clicking Add after shutdown, changes nothing
    editor.shutdown()
    editor.add_button.click()

    reloaded = PersistenceGateway(DiskByteStore(tmp_path / "StepSequence.json")).load()
    assert [(s.name, s.value) for s in reloaded] == [
        ("Initial Move", 10.0), ("Wait", 2.5), ("Rotate", 90.0), ("New Action", 0.0)
    ]
