"""
Editor widgets.

The recyclable step row and the composite editor widget that hosts the
step list.
"""

from .step_row_widget import StepRowWidget
from .step_editor_widget import StepEditorWidget

__all__ = [
    "StepRowWidget",
    "StepEditorWidget",
]
