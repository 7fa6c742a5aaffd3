"""
Step data model.

A Step is one named, numeric-valued entry of the edited sequence. Steps are
compared by identity, never by value: two steps with the same name and value
are distinct entries, and every lookup goes through the opaque ``step_id``
assigned when the step is created.
"""

import math
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Union

from pyqt_stepeditor.core.exceptions import ValueParseError


class StepField(Enum):
    """Editable fields of a step."""
    NAME = "name"
    VALUE = "value"

    @classmethod
    def coerce(cls, field_ref: Union["StepField", str]) -> "StepField":
        """Accept either the enum member or its string value."""
        if isinstance(field_ref, cls):
            return field_ref
        return cls(field_ref)


@dataclass(eq=False)
class Step:
    """
    A named action with a numeric value.

    Attributes:
        name: Display label, mutable, not unique
        value: Numeric value, mutable
        step_id: Stable opaque identity, assigned at creation and never persisted
    """
    name: str
    value: float
    step_id: str = field(default_factory=lambda: uuid.uuid4().hex, repr=False)

    def same_identity(self, other: "Step") -> bool:
        """Check whether other refers to this very step."""
        return isinstance(other, Step) and other.step_id == self.step_id

    def __str__(self) -> str:
        return f"{self.name}: {self.value}"


# (name, value) pairs used whenever there is nothing valid to load
DEFAULT_SEED: Tuple[Tuple[str, float], ...] = (
    ("Initial Move", 10.0),
    ("Wait", 2.5),
    ("Rotate", 90.0),
)


def default_seed() -> List[Step]:
    """Build fresh Step instances for the default seed."""
    return [Step(name, value) for name, value in DEFAULT_SEED]


def parse_step_value(raw_value) -> float:
    """
    Parse raw field input into a step value.

    Parsing is locale-invariant: only '.' is accepted as the decimal
    separator. Empty text, digit-group underscores and non-finite results
    (nan, inf) are rejected.

    Raises:
        ValueParseError: If the input is not a finite number
    """
    if isinstance(raw_value, bool):
        raise ValueParseError(raw_value, "booleans are not step values")
    if isinstance(raw_value, (int, float)):
        value = float(raw_value)
    else:
        text = str(raw_value).strip()
        if not text:
            raise ValueParseError(raw_value, "empty input")
        if "_" in text:
            raise ValueParseError(raw_value, "digit separators are not accepted")
        try:
            value = float(text)
        except ValueError:
            raise ValueParseError(raw_value) from None

    if not math.isfinite(value):
        raise ValueParseError(raw_value, "value must be finite")
    return value
