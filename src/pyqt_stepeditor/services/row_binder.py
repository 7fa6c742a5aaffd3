"""
Row binding service.

Maps recyclable row widgets to the step at a given index and wires the
row's edit and remove controls to controller intents.

Rows are reused across indices, so a handler must never remember the step
or index it was registered for. Every bind pass stores the current step in
the row's attached-data slot and replaces the row's handler set; handlers
look the step up from the row when they fire.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from pyqt_stepeditor.core.step import Step, StepField
from pyqt_stepeditor.core.step_store import StepStore
from pyqt_stepeditor.protocols.editor_config import get_editor_config
from pyqt_stepeditor.protocols.widget_protocols import BindableRow
from pyqt_stepeditor.services.signal_service import SignalService

logger = logging.getLogger(__name__)

EditIntent = Callable[[Step, StepField, Any], bool]
RemoveIntent = Callable[[Step], bool]


@dataclass
class RowBinding:
    """Live binding of one row: the step it shows and its handler set."""
    step: Step
    on_name_commit: Callable[[Any], None]
    on_value_commit: Callable[[Any], None]
    on_remove: Callable[[], None]


class RowBinder:
    """
    Binds rows to steps and keeps exactly one handler set live per row.

    Args:
        store: Store the rows display
        edit_intent: Called as edit_intent(step, field, raw_text) on commit;
            returns whether the edit was accepted
        remove_intent: Called as remove_intent(step) when a row's remove
            trigger fires
        value_format: Format for displayed values (defaults to config)
        row_factory: Creates new rows (defaults to StepRowWidget)
    """

    def __init__(self, store: StepStore, edit_intent: EditIntent, remove_intent: RemoveIntent,
                 value_format: Optional[str] = None,
                 row_factory: Optional[Callable[[], BindableRow]] = None):
        self._store = store
        self._edit_intent = edit_intent
        self._remove_intent = remove_intent
        self._value_format = value_format or get_editor_config().value_display_format
        self._row_factory = row_factory
        self._bindings: Dict[BindableRow, RowBinding] = {}

    def make_row(self) -> BindableRow:
        """Create a new row for the host's pool."""
        if self._row_factory is not None:
            return self._row_factory()
        # Import locally to avoid circular imports (widgets depend on services)
        from pyqt_stepeditor.widgets.step_row_widget import StepRowWidget
        return StepRowWidget()

    def format_value(self, value: float) -> str:
        return self._value_format.format(value)

    # ========== Binding ==========

    def bind(self, row: BindableRow, index: int) -> Step:
        """
        Bind row to the step currently at index.

        Replaces any handler set from a previous bind of this row, so binding
        repeatedly (to the same or a different step) never stacks handlers.

        Returns:
            The step the row now represents
        """
        step = self._store.all()[index]
        row.set_bound_data(step)
        self._refresh_display(row, step)

        previous = self._bindings.get(row)

        def on_name_commit(raw):
            self._on_field_commit(row, StepField.NAME, raw)

        def on_value_commit(raw):
            self._on_field_commit(row, StepField.VALUE, raw)

        def on_remove():
            self._on_remove_triggered(row)

        SignalService.replace_change_handler(
            row.name_control, previous.on_name_commit if previous else None, on_name_commit)
        SignalService.replace_change_handler(
            row.value_control, previous.on_value_commit if previous else None, on_value_commit)
        SignalService.replace_trigger_handler(
            row.remove_trigger, previous.on_remove if previous else None, on_remove)

        self._bindings[row] = RowBinding(step, on_name_commit, on_value_commit, on_remove)
        return step

    def unbind(self, row: BindableRow) -> None:
        """Disconnect the row's handler set and clear its attached data."""
        binding = self._bindings.pop(row, None)
        if binding is not None:
            SignalService.replace_change_handler(row.name_control, binding.on_name_commit, None)
            SignalService.replace_change_handler(row.value_control, binding.on_value_commit, None)
            SignalService.replace_trigger_handler(row.remove_trigger, binding.on_remove, None)
        row.set_bound_data(None)

    def detach_all(self) -> None:
        """Unbind every bound row. Safe to call when nothing is bound."""
        rows = list(self._bindings)
        for row in rows:
            self.unbind(row)
        if rows:
            logger.debug(f"Detached handlers from {len(rows)} rows")

    def binding_for(self, row: BindableRow) -> Optional[RowBinding]:
        return self._bindings.get(row)

    def bound_rows(self) -> List[BindableRow]:
        return list(self._bindings)

    def _refresh_display(self, row: BindableRow, step: Step) -> None:
        SignalService.update_widget_value(row.name_control, step.name)
        SignalService.update_widget_value(row.value_control, self.format_value(step.value))

    # ========== Handlers ==========

    def _on_field_commit(self, row: BindableRow, field: StepField, raw_value: Any) -> None:
        step = row.get_bound_data()
        if not isinstance(step, Step):
            logger.warning(f"Ignoring {field.value} commit on a row with no bound step")
            return

        current = step.name if field is StepField.NAME else self.format_value(step.value)
        if raw_value == current:
            return

        accepted = self._edit_intent(step, field, raw_value)
        if not accepted:
            logger.debug(f"Edit of {field.value} on '{step.name}' rejected, restoring display")
        # Re-resolve: the intent may have caused a rebind
        if row.get_bound_data() is step:
            self._refresh_display(row, step)

    def _on_remove_triggered(self, row: BindableRow) -> None:
        step = row.get_bound_data()
        if not isinstance(step, Step):
            logger.warning("Ignoring remove on a row with no bound step")
            return
        self._remove_intent(step)
