"""
Service layer for the step editor.

Signal management, row binding and the list controller that ties the store,
the persistence gateway and the row host together.
"""

from .signal_service import SignalService
from .row_binder import RowBinder, RowBinding
from .list_controller import ListController, SessionState

__all__ = [
    "SignalService",
    "RowBinder",
    "RowBinding",
    "ListController",
    "SessionState",
]
