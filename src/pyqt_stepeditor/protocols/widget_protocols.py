"""
Widget ABC contracts for the step editor.

Defines explicit contracts for the controls a row exposes, the row itself,
and the list host that recycles rows, in favor of duck typing.

Design Philosophy:
- Explicit inheritance over duck typing
- Fail-loud over fail-silent
- Handler registration is observable, so rebinding can replace instead of stack
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Sequence


class ValueGettable(ABC):
    """
    ABC for widgets that can return a value.
    """

    @abstractmethod
    def get_value(self) -> Any:
        """
        Get the current value from the widget.

        Returns:
            The widget's current value. None if no value set.
        """
        pass


class ValueSettable(ABC):
    """
    ABC for widgets that can accept a value.
    """

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """
        Set the widget's value.

        Args:
            value: The value to set. None clears the widget.
        """
        pass


class ChangeSignalEmitter(ABC):
    """
    ABC for widgets that emit change signals.

    Callbacks receive the committed value. Implementations must keep track
    of what is connected so a callback can be disconnected by reference.
    """

    @abstractmethod
    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Connect callback to widget's change signal.

        Args:
            callback: Function to call when widget value is committed.
                     Signature: callback(new_value: Any) -> None
        """
        pass

    @abstractmethod
    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Disconnect callback from widget's change signal.

        Disconnecting a callback that is not connected is a no-op.
        """
        pass

    @abstractmethod
    def change_callbacks(self) -> List[Callable[[Any], None]]:
        """Currently connected change callbacks, in connection order."""
        pass


class TriggerEmitter(ABC):
    """
    ABC for widgets that fire a parameterless trigger (buttons).
    """

    @abstractmethod
    def connect_trigger(self, callback: Callable[[], None]) -> None:
        """Connect callback to the trigger."""
        pass

    @abstractmethod
    def disconnect_trigger(self, callback: Callable[[], None]) -> None:
        """Disconnect callback. Unknown callbacks are ignored."""
        pass

    @abstractmethod
    def trigger_callbacks(self) -> List[Callable[[], None]]:
        """Currently connected trigger callbacks, in connection order."""
        pass


class BindableRow(ABC):
    """
    ABC for a recyclable list row.

    A row exposes a name control, a numeric value control, a remove trigger
    and an attached-data slot holding the item it currently represents.
    """

    @property
    @abstractmethod
    def name_control(self) -> ChangeSignalEmitter:
        """Name display/edit control."""
        pass

    @property
    @abstractmethod
    def value_control(self) -> ChangeSignalEmitter:
        """Numeric display/edit control."""
        pass

    @property
    @abstractmethod
    def remove_trigger(self) -> TriggerEmitter:
        """Trigger requesting removal of the bound item."""
        pass

    @abstractmethod
    def get_bound_data(self) -> Any:
        """Item attached at the most recent bind, or None."""
        pass

    @abstractmethod
    def set_bound_data(self, data: Any) -> None:
        """Attach item to the row (None detaches)."""
        pass


class RowHost(ABC):
    """
    ABC for an ordered, virtualized row host.

    The host creates rows through a factory, binds them to indices of the
    backing sequence and recycles them when the window scrolls or the
    sequence changes. It never mutates the backing sequence itself; a
    completed reorder gesture is only reported as (old_index, new_index).
    """

    @abstractmethod
    def set_row_factory(self,
                        make_row: Callable[[], Any],
                        bind_row: Callable[[Any, int], None],
                        unbind_row: Optional[Callable[[Any], None]] = None) -> None:
        """Install the callbacks used to create, bind and release rows."""
        pass

    @abstractmethod
    def set_items_source(self, items: Sequence[Any]) -> None:
        """Set the backing sequence and rebind all visible rows."""
        pass

    @abstractmethod
    def refresh_items(self) -> None:
        """Rebind all visible rows against the current backing sequence."""
        pass

    @abstractmethod
    def scroll_to_item(self, index: int) -> None:
        """Make the row for index visible. Negative indices count from the end."""
        pass

    @abstractmethod
    def connect_reorder(self, callback: Callable[[int, int], None]) -> None:
        """Connect callback to reorder-completed notifications."""
        pass

    @abstractmethod
    def disconnect_reorder(self, callback: Callable[[int, int], None]) -> None:
        """Disconnect a reorder callback. Unknown callbacks are ignored."""
        pass
