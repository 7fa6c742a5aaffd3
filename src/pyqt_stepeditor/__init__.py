"""
pyqt-stepeditor: Synchronized step list editor for PyQt6.

Edits an ordered sequence of named, valued steps. Each step is rendered as a
recyclable row widget, and the sequence is persisted as JSON after every
mutation.

Architecture:
- Tier 1 (Core): Step model, StepStore, recycling row host, logging helpers
- Tier 2 (Protocols): Widget ABCs, adapters and editor configuration
- Tier 3 (IO): Byte stores and the JSON PersistenceGateway
- Tier 4 (Services): RowBinder and ListController
- Tier 5 (Widgets): Row widget and the composite editor widget

Key Features:
- Identity-based step lookup (duplicate names/values are legal)
- Full rebind on every row reuse, handler sets replaced, never stacked
- Default seed on missing or corrupt storage, never fatal
- Save after every mutation, failures logged and retried on the next one
"""

__version__ = "0.1.0"

from pyqt_stepeditor.core.step import Step, StepField, default_seed
from pyqt_stepeditor.core.step_store import StepStore
from pyqt_stepeditor.io.persistence import PersistenceGateway
from pyqt_stepeditor.services.row_binder import RowBinder
from pyqt_stepeditor.services.list_controller import ListController, SessionState

__all__ = [
    "__version__",
    "Step",
    "StepField",
    "default_seed",
    "StepStore",
    "PersistenceGateway",
    "RowBinder",
    "ListController",
    "SessionState",
]
