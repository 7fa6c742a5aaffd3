"""Base configuration class for the step editor.

Provides hooks for applications to customize storage location, row pool
size, new-step defaults and logging.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class EditorConfig:
    """Base configuration for step editor behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        save_dir: Directory holding the persisted sequence (None = user data dir)
        save_file_name: File name of the persisted sequence
        visible_row_count: Number of row widgets the list host keeps visible
        new_step_name: Name given to steps created by the Add action
        new_step_value: Value given to steps created by the Add action
        value_display_format: Format used to render values in row fields
    """

    save_dir: Optional[str] = None
    save_file_name: str = "StepSequence.json"
    visible_row_count: int = 8
    new_step_name: str = "New Action"
    new_step_value: float = 0.0
    value_display_format: str = "{:.1f}"
    log_dir: Optional[str] = None
    log_file_prefix: str = "pyqt_stepeditor_"
    log_root_logger_name: str = "pyqt_stepeditor"


# Global config instance (set by application)
_editor_config: Optional[EditorConfig] = None


def set_editor_config(config: Optional[EditorConfig]) -> None:
    """Set the global editor configuration.

    Args:
        config: EditorConfig instance, or None to restore defaults
    """
    global _editor_config
    _editor_config = config


def get_editor_config() -> EditorConfig:
    """Get the current editor configuration.

    Returns:
        Current EditorConfig or default if not set
    """
    if _editor_config is None:
        return EditorConfig()
    return _editor_config
