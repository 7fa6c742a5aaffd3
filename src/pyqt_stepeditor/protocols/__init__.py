"""
Widget protocol definitions, adapters and editor configuration.

ABC-based contracts for row controls, rows and list hosts, in favor of
duck typing.
"""

from .widget_protocols import (
    ValueGettable,
    ValueSettable,
    ChangeSignalEmitter,
    TriggerEmitter,
    BindableRow,
    RowHost,
)
from .widget_adapters import (
    CommitLineEditAdapter,
    TriggerButtonAdapter,
    PyQtWidgetMeta,
)
from .editor_config import EditorConfig, set_editor_config, get_editor_config

__all__ = [
    "ValueGettable",
    "ValueSettable",
    "ChangeSignalEmitter",
    "TriggerEmitter",
    "BindableRow",
    "RowHost",
    "CommitLineEditAdapter",
    "TriggerButtonAdapter",
    "PyQtWidgetMeta",
    "EditorConfig",
    "set_editor_config",
    "get_editor_config",
]
