"""Core model exceptions."""


class ValueParseError(ValueError):
    """Raised when raw field text cannot be converted to a step value."""

    def __init__(self, raw_value, reason: str = "not a finite number"):
        self.raw_value = raw_value
        self.reason = reason
        super().__init__(f"Cannot parse {raw_value!r} as a step value: {reason}")
