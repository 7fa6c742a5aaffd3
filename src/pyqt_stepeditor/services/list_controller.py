"""
List controller.

Orchestrates one editing session: owns the StepStore, the
PersistenceGateway and the RowBinder, turns UI intents into store
mutations, refreshes the row host and saves after every mutation.

Session lifecycle:

    UNINITIALIZED --on_start--> LOADED --first mutation--> EDITING --on_stop--> DISPOSED
"""

import logging
from enum import Enum
from typing import Any, Optional, Sequence, Union

from pyqt_stepeditor.core.step import Step, StepField
from pyqt_stepeditor.core.step_store import StepStore
from pyqt_stepeditor.io.persistence import PersistenceGateway
from pyqt_stepeditor.protocols.editor_config import EditorConfig, get_editor_config
from pyqt_stepeditor.protocols.widget_protocols import RowHost
from pyqt_stepeditor.services.row_binder import RowBinder

logger = logging.getLogger(__name__)

StepRef = Union[Step, int]


class SessionState(Enum):
    UNINITIALIZED = "uninitialized"
    LOADED = "loaded"
    EDITING = "editing"
    DISPOSED = "disposed"


class ListController:
    """
    Reacts to add/remove/edit/reorder intents for one editing session.

    Every failure is contained here or below: intents outside an active
    session are ignored with a warning, and storage errors are logged by the
    gateway while the in-memory sequence stays authoritative.
    """

    def __init__(self, gateway: PersistenceGateway, host: RowHost,
                 config: Optional[EditorConfig] = None):
        self._config = config or get_editor_config()
        self.store = StepStore()
        self.gateway = gateway
        self.host = host
        self.binder = RowBinder(self.store, self.on_edit, self.on_remove,
                                value_format=self._config.value_display_format)
        self.state = SessionState.UNINITIALIZED
        self._reorder_attached = False

    @property
    def steps(self) -> Sequence[Step]:
        """Read view of the current sequence."""
        return self.store.all()

    @property
    def is_active(self) -> bool:
        return self.state in (SessionState.LOADED, SessionState.EDITING)

    # ========== Lifecycle ==========

    def on_start(self) -> None:
        """Load (or seed) the sequence and bind the initial rows."""
        if self.state is not SessionState.UNINITIALIZED:
            logger.warning(f"on_start ignored in state {self.state.value}")
            return

        self.store.seed(self.gateway.load())
        self.host.set_row_factory(self.binder.make_row, self.binder.bind, self.binder.unbind)
        self.host.connect_reorder(self.on_reorder)
        self._reorder_attached = True
        self.host.set_items_source(self.store.all())
        self.state = SessionState.LOADED
        logger.info(f"Editing session started with {len(self.store)} steps")

    def on_stop(self) -> None:
        """Detach all handlers and save one last time. Idempotent."""
        if self.state is SessionState.DISPOSED:
            return

        if self._reorder_attached:
            self.host.disconnect_reorder(self.on_reorder)
            self._reorder_attached = False
        self.binder.detach_all()

        if self.is_active:
            self._save()
        self.state = SessionState.DISPOSED
        logger.info("Editing session stopped")

    # ========== Intents ==========

    def on_add(self) -> Optional[Step]:
        """Append a default-valued step, scroll to it and save."""
        if not self._require_active("add"):
            return None

        step = Step(self._config.new_step_name, self._config.new_step_value)
        index = self.store.insert(step)
        self.host.refresh_items()
        self.host.scroll_to_item(index)
        self._mark_edited()
        self._save()
        logger.debug(f"Added step at index {index}: {step}")
        return step

    def on_remove(self, target: StepRef) -> bool:
        """Remove a step by identity (Step) or by index (int)."""
        if not self._require_active("remove"):
            return False

        if isinstance(target, Step):
            removed = self.store.remove_by_identity(target)
        else:
            removed = self.store.remove_at(target)

        # Refresh even when nothing was removed, to resync stale rows
        self.host.refresh_items()
        if removed:
            self._mark_edited()
            self._save()
        return removed

    def on_edit(self, target: StepRef, field: Union[StepField, str], raw_value: Any) -> bool:
        """Update one field; save only if the update was accepted."""
        if not self._require_active("edit"):
            return False

        step = self._resolve(target)
        if step is None:
            logger.warning(f"Edit target {target!r} not found")
            return False

        if not self.store.update_field(step, field, raw_value):
            return False
        self._mark_edited()
        self._save()
        return True

    def on_reorder(self, old_index: int, new_index: int) -> bool:
        """Apply a completed drag-reorder and save."""
        if not self._require_active("reorder"):
            return False

        count = len(self.store)
        if not (0 <= old_index < count and 0 <= new_index < count):
            logger.warning(f"Ignoring reorder with invalid indices {old_index} -> {new_index} (count={count})")
            return False
        if old_index == new_index:
            return False

        self.store.move(old_index, new_index)
        logger.info(f"Step sequence reordered: {self.store[new_index].name} "
                    f"moved from index {old_index} to {new_index}")
        self.host.refresh_items()
        self._mark_edited()
        self._save()
        return True

    # ========== Helpers ==========

    def _require_active(self, intent: str) -> bool:
        if self.is_active:
            return True
        logger.warning(f"Ignoring {intent} intent in state {self.state.value}")
        return False

    def _resolve(self, target: StepRef) -> Optional[Step]:
        if isinstance(target, Step):
            return target if target in self.store else None
        if 0 <= target < len(self.store):
            return self.store[target]
        return None

    def _mark_edited(self) -> None:
        if self.state is SessionState.LOADED:
            self.state = SessionState.EDITING

    def _save(self) -> bool:
        # Fire-and-forget: failures are logged by the gateway
        return self.gateway.save(self.store.all())
