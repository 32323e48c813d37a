"""Errors raised for benchmark data that cannot be normalized."""


class InvalidUnitError(ValueError):
    """A time or memory unit token is not one of the recognized units."""

    def __init__(self, axis: str, unit: str):
        self.axis = axis
        self.unit = unit
        super().__init__(f"Unknown {axis} unit '{unit}'.")


class MalformedRangeError(ValueError):
    """A measurement range does not end in a parseable number."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Malformed range '{text}'.")
