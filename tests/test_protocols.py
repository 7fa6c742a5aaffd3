"""Tests for widget protocols, adapters and editor config."""

import pytest


def test_commit_line_edit_adapter(qapp):
    """CommitLineEditAdapter implements protocols."""
    from pyqt_stepeditor.protocols import (
        ChangeSignalEmitter, CommitLineEditAdapter, ValueGettable, ValueSettable
    )

    adapter = CommitLineEditAdapter()
    assert isinstance(adapter, ValueGettable)
    assert isinstance(adapter, ValueSettable)
    assert isinstance(adapter, ChangeSignalEmitter)

    # Test value roundtrip
    adapter.set_value("test")
    assert adapter.get_value() == "test"
    adapter.set_value(None)
    assert adapter.get_value() == ""


def test_commit_line_edit_reports_commits_only(qapp):
    """Callbacks fire on commit with the committed text, not on setText."""
    from pyqt_stepeditor.protocols import CommitLineEditAdapter

    adapter = CommitLineEditAdapter()
    received = []
    adapter.connect_change_signal(received.append)

    adapter.set_value("4")
    adapter.set_value("45")
    assert received == []

    adapter.commit_value("45.0")
    assert received == ["45.0"]


def test_commit_line_edit_disconnect_by_callback(qapp):
    """A callback can be disconnected by the reference that was connected."""
    from pyqt_stepeditor.protocols import CommitLineEditAdapter

    adapter = CommitLineEditAdapter()
    received = []
    adapter.connect_change_signal(received.append)
    callback = adapter.change_callbacks()[0]

    adapter.disconnect_change_signal(callback)
    adapter.disconnect_change_signal(callback)  # Second call is a no-op
    adapter.commit_value("x")

    assert received == []
    assert adapter.change_callbacks() == []


def test_trigger_button_adapter(qapp):
    """TriggerButtonAdapter connects and disconnects parameterless callbacks."""
    from pyqt_stepeditor.protocols import TriggerButtonAdapter, TriggerEmitter

    button = TriggerButtonAdapter("Go")
    assert isinstance(button, TriggerEmitter)

    clicks = []

    def on_click():
        clicks.append(1)

    button.connect_trigger(on_click)
    assert button.trigger_callbacks() == [on_click]
    button.click()
    assert clicks == [1]

    button.disconnect_trigger(on_click)
    button.click()
    assert clicks == [1]
    assert button.trigger_callbacks() == []


def test_editor_config_defaults_and_override():
    """get_editor_config returns defaults until a config is set."""
    from pyqt_stepeditor.protocols import EditorConfig, get_editor_config, set_editor_config

    default = get_editor_config()
    assert default.save_file_name == "StepSequence.json"
    assert default.new_step_name == "New Action"
    assert default.new_step_value == 0.0

    custom = EditorConfig(visible_row_count=3)
    set_editor_config(custom)
    assert get_editor_config() is custom


def test_bindable_row_is_abstract():
    """BindableRow cannot be instantiated without its capability set."""
    from pyqt_stepeditor.protocols import BindableRow

    with pytest.raises(TypeError):
        BindableRow()


def test_update_widget_value_does_not_fire_commit(qapp):
    """Programmatic updates through SignalService never reach commit handlers."""
    from PyQt6.QtWidgets import QLabel, QLineEdit
    from pyqt_stepeditor.protocols import CommitLineEditAdapter
    from pyqt_stepeditor.services import SignalService

    edit = CommitLineEditAdapter()
    received = []
    edit.connect_change_signal(received.append)

    SignalService.update_widget_value(edit, "Rotate")
    with SignalService.block_signals(edit):
        edit.editingFinished.emit()

    assert edit.get_value() == "Rotate"
    assert received == []
    assert not edit.signalsBlocked()

    with pytest.raises(ValueError):
        SignalService.update_widget_value(QLabel(), "x")
    with pytest.raises(ValueError):
        SignalService.update_widget_value(QLineEdit(), "x")
