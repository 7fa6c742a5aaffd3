"""
Owning store for the step sequence.

StepStore is the only writer of the sequence. The UI and the persistence
layer read it through ``all()`` and change it only through the intent-level
operations below.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Union

from pyqt_stepeditor.core.exceptions import ValueParseError
from pyqt_stepeditor.core.step import Step, StepField, parse_step_value

logger = logging.getLogger(__name__)


class StepStore:
    """
    Ordered collection of steps with identity semantics.

    Order is the execution/display order. A step reference appears at most
    once. Lookups resolve steps by ``step_id``, so value-identical steps are
    never confused with each other.
    """

    def __init__(self, steps: Optional[Iterable[Step]] = None):
        self._steps: List[Step] = []
        if steps is not None:
            self.seed(steps)

    def seed(self, steps: Iterable[Step]) -> None:
        """Replace the whole content, e.g. with freshly loaded steps."""
        seeded: List[Step] = []
        seen = set()
        for step in steps:
            if step.step_id in seen:
                logger.warning(f"Skipping duplicate step reference while seeding: {step}")
                continue
            seen.add(step.step_id)
            seeded.append(step)
        # Mutate in place so existing read views stay valid
        self._steps[:] = seeded
        logger.debug(f"Store seeded with {len(self._steps)} steps")

    # ========== READ ACCESS ==========

    def all(self) -> Sequence[Step]:
        """Live read view of the sequence. Do not mutate through it."""
        return self._steps

    def index_of(self, step: Step) -> int:
        """Current index of step, resolved by identity. -1 if absent."""
        for index, candidate in enumerate(self._steps):
            if candidate.same_identity(step):
                return index
        return -1

    def __contains__(self, step: object) -> bool:
        return isinstance(step, Step) and self.index_of(step) != -1

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __getitem__(self, index: int) -> Step:
        return self._steps[index]

    # ========== MUTATIONS ==========

    def insert(self, step: Step, at_end: bool = True, index: Optional[int] = None) -> int:
        """
        Insert a step and return its index.

        Args:
            step: Step to insert
            at_end: Append when True (default); otherwise insert at ``index``
                (or at the front when no index is given)
            index: Target position when not appending, clamped into range

        Returns:
            Index of the step after insertion. A step that is already present
            is left where it is and its current index is returned.
        """
        existing = self.index_of(step)
        if existing != -1:
            logger.warning(f"Step already in sequence at index {existing}, not inserting again: {step}")
            return existing

        if at_end:
            self._steps.append(step)
            return len(self._steps) - 1

        target = 0 if index is None else max(0, min(index, len(self._steps)))
        self._steps.insert(target, step)
        return target

    def remove_by_identity(self, step: Step) -> bool:
        """
        Remove step, resolved by identity.

        A step that cannot be found means a row binding went out of sync with
        the store. It is reported and otherwise ignored.
        """
        index = self.index_of(step)
        if index == -1:
            logger.error(f"Could not find step in sequence for removal (stale binding?): {step!r}")
            return False
        del self._steps[index]
        logger.debug(f"Removed step at index {index}: {step}")
        return True

    def remove_at(self, index: int) -> bool:
        """Remove the step at index. Out of range is a silent no-op."""
        if 0 <= index < len(self._steps):
            removed = self._steps.pop(index)
            logger.debug(f"Removed step at index {index}: {removed}")
            return True
        return False

    def update_field(self, step: Step, field: Union[StepField, str], raw_value) -> bool:
        """
        Set one field of step from raw input.

        Numeric fields are parsed first; a parse failure leaves the step
        untouched. Nothing is raised to the caller.

        Returns:
            True if the step was updated
        """
        try:
            step_field = StepField.coerce(field)
        except ValueError:
            logger.warning(f"Unknown step field {field!r}")
            return False

        if step not in self:
            logger.error(f"Cannot update {step_field.value} of a step that is not in the sequence: {step!r}")
            return False

        if step_field is StepField.NAME:
            step.name = "" if raw_value is None else str(raw_value)
            return True

        try:
            step.value = parse_step_value(raw_value)
        except ValueParseError as e:
            logger.debug(f"Rejected value edit for '{step.name}': {e}")
            return False
        return True

    def move(self, old_index: int, new_index: int) -> None:
        """Move the step at old_index to new_index. Both indices must be valid."""
        step = self._steps.pop(old_index)
        self._steps.insert(new_index, step)
