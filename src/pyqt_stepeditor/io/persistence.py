"""
Step sequence persistence.

The persisted document is a single JSON object wrapping the ordered steps:

    {
        "steps": [
            {"name": "Initial Move", "value": 10.0},
            ...
        ]
    }

There is no version field. Every save writes the full sequence. Values are
always written as floats, so an integer value such as 3 is saved back as 3.0.
"""

import json
import logging
import math
from typing import Iterable, List

from pyqt_stepeditor.core.step import Step, default_seed
from pyqt_stepeditor.io.base import ByteStore
from pyqt_stepeditor.io.exceptions import LoadCorruptionError, SaveFailureError

logger = logging.getLogger(__name__)

STEPS_KEY = "steps"
NAME_KEY = "name"
VALUE_KEY = "value"


def encode_steps(steps: Iterable[Step]) -> bytes:
    """Serialize steps to the persisted JSON document."""
    wrapper = {
        STEPS_KEY: [{NAME_KEY: step.name, VALUE_KEY: step.value} for step in steps]
    }
    return json.dumps(wrapper, indent=4, ensure_ascii=False, allow_nan=False).encode("utf-8")


def decode_steps(data: bytes) -> List[Step]:
    """
    Deserialize the persisted JSON document.

    Raises:
        LoadCorruptionError: If the document is not valid UTF-8 JSON or does
            not have the expected shape
    """
    try:
        wrapper = json.loads(data.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise LoadCorruptionError(f"Document is not UTF-8: {e}") from e
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, oversized integer literals and excessive nesting
        raise LoadCorruptionError(f"Document is not valid JSON: {e}") from e

    if not isinstance(wrapper, dict):
        raise LoadCorruptionError(f"Expected a JSON object, got {type(wrapper).__name__}")
    records = wrapper.get(STEPS_KEY)
    if not isinstance(records, list):
        raise LoadCorruptionError(f"'{STEPS_KEY}' is missing or not a list")

    steps = []
    for position, record in enumerate(records):
        if not isinstance(record, dict):
            raise LoadCorruptionError(f"Step #{position} is not an object")
        name = record.get(NAME_KEY)
        value = record.get(VALUE_KEY)
        if not isinstance(name, str):
            raise LoadCorruptionError(f"Step #{position} has no string '{NAME_KEY}'")
        # bool is an int subclass, reject it explicitly
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise LoadCorruptionError(f"Step #{position} has no numeric '{VALUE_KEY}'")
        try:
            number = float(value)
        except OverflowError:
            number = math.inf
        if not math.isfinite(number):
            raise LoadCorruptionError(f"Step #{position} has a non-finite '{VALUE_KEY}'")
        steps.append(Step(name, number))
    return steps


class PersistenceGateway:
    """
    Loads and saves the full step sequence through a ByteStore.

    Neither operation raises: a missing or unreadable document loads as the
    default seed, and a failed write is logged so editing can continue with
    the in-memory state as the source of truth.
    """

    def __init__(self, store: ByteStore):
        self._store = store

    @property
    def store(self) -> ByteStore:
        return self._store

    def load(self) -> List[Step]:
        """Load the persisted sequence, or the default seed if there is none."""
        location = self._store.location
        if not self._store.exists():
            logger.info(f"No saved step sequence at {location}, starting with default data")
            return default_seed()

        try:
            steps = decode_steps(self._store.read_bytes())
        except (LoadCorruptionError, OSError) as e:
            logger.error(f"Error loading step sequence from {location}: {e}. Starting with default data.")
            return default_seed()

        logger.info(f"Loaded {len(steps)} steps from {location}")
        return steps

    def save(self, steps: Iterable[Step]) -> bool:
        """
        Persist the full sequence, overwriting prior content.

        Returns:
            True if the write succeeded
        """
        steps = list(steps)
        try:
            self._store.write_bytes(encode_steps(steps))
        except (OSError, SaveFailureError, ValueError) as e:
            logger.error(f"Error saving step sequence to {self._store.location}: {e}")
            return False
        logger.debug(f"Saved {len(steps)} steps to {self._store.location}")
        return True

