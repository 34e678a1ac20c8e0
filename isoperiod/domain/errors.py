"""Duration error types"""

from typing import Optional


class DurationError(ValueError):
    """Base error for duration parsing and decoding"""


class BadFormatError(DurationError):
    """Input matches neither the week form nor the full form"""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"invalid ISO8601 string: {text!r}")


class NumericParseError(DurationError):
    """Designator value could not be read as a number"""

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"invalid number {value!r} for field {field}")


class UnknownFieldError(DurationError):
    """Grammar captured a field with no known unit length"""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"unknown field {field}")


class DurationJSONError(DurationError):
    """JSON payload is not a JSON string"""

    def __init__(self, message: str, data: Optional[bytes] = None) -> None:
        self.data = data
        super().__init__(message)
