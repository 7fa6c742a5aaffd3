"""
Core model and PyQt6 utilities.

The step model and its owning store, plus foundational widgets and helpers
with no dependency on the service layer.
"""

from .exceptions import ValueParseError
from .step import Step, StepField, DEFAULT_SEED, default_seed, parse_step_value
from .step_store import StepStore
from .reorderable_list_widget import ReorderableListWidget
from .log_utils import setup_logging, get_log_dir, get_current_log_file_path

__all__ = [
    "ValueParseError",
    "Step",
    "StepField",
    "DEFAULT_SEED",
    "default_seed",
    "parse_step_value",
    "StepStore",
    "ReorderableListWidget",
    "setup_logging",
    "get_log_dir",
    "get_current_log_file_path",
]
