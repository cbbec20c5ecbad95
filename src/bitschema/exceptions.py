"""Exception hierarchy for bitschema.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BitSchemaError for easy catching of any bitschema-specific error.
"""

from __future__ import annotations


class BitSchemaError(Exception):
    """Base exception for all bitschema errors."""

    pass


class InvalidSchemaError(BitSchemaError):
    """Raised when a schema description is malformed.

    Examples:
        - Missing or mistyped ``name`` / ``bit_width`` / ``signed`` attribute
        - Bit width of 0 or greater than 64
        - Duplicate field name within one message type
        - Schema file that cannot be parsed
    """

    pass


class UnknownMessageTypeError(BitSchemaError, KeyError):
    """Raised when a registry lookup names an unregistered message type."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Message type '{name}' not found in registry")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class UnknownFieldError(BitSchemaError, KeyError):
    """Raised when a field name is absent from the bound schema."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Field not found: {name}")

    def __str__(self) -> str:
        return str(self.args[0])


class ValueOutOfRangeError(BitSchemaError, ValueError):
    """Raised when a value does not fit its field's width and signedness.

    Attributes:
        field: Name of the field being set
        value: Rejected value
        min_value: Smallest value the field accepts
        max_value: Largest value the field accepts
    """

    def __init__(self, field: str, value: object, min_value: int, max_value: int) -> None:
        self.field = field
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(
            f"Value {value!r} out of range for field {field} [{min_value}, {max_value}]"
        )


class BufferTooSmallError(BitSchemaError):
    """Raised when unpacking a buffer shorter than the schema requires.

    Attributes:
        required: Number of bytes the schema needs
        actual: Number of bytes supplied
    """

    def __init__(self, required: int, actual: int) -> None:
        self.required = required
        self.actual = actual
        super().__init__(
            f"Buffer too small for message: need {required} bytes, got {actual}"
        )
