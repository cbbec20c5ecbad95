"""Mutable message bound to a schema.

A Message stores one integer per field of its MessageSchema and converts
between those values and the packed wire format.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..exceptions import ValueOutOfRangeError
from .decoder import unpack_values
from .encoder import pack_values
from .schema import MessageSchema


class Message:
    """Field values for one instance of a message schema.

    The schema is referenced, not copied, so many messages can share one
    schema. A single Message is not safe for concurrent mutation.

    Example:
        >>> schema = MessageSchema.from_description([
        ...     {"name": "status", "bit_width": 2},
        ...     {"name": "value", "bit_width": 8, "signed": True},
        ... ])
        >>> msg = Message(schema)
        >>> msg.set_field("value", -128)
        >>> data = msg.pack()
        >>> Message.from_bytes(schema, data).get_field("value")
        -128
    """

    __slots__ = ("_schema", "_values")

    def __init__(self, schema: MessageSchema) -> None:
        """Initialize a message with every field set to 0.

        Args:
            schema: Layout this message is bound to
        """
        self._schema = schema
        self._values: list[int] = [0] * len(schema)

    @classmethod
    def from_bytes(cls, schema: MessageSchema, data: bytes | bytearray | memoryview) -> Message:
        """Create a message and unpack ``data`` into it.

        Raises:
            BufferTooSmallError: If ``data`` is shorter than the schema requires
        """
        message = cls(schema)
        message.unpack(data)
        return message

    @property
    def schema(self) -> MessageSchema:
        """The bound schema."""
        return self._schema

    def _validated(self, name: str, value: Any) -> tuple[int, int]:
        index = self._schema.index_of(name)
        field = self._schema.fields[index]
        if not field.is_valid_value(value):
            raise ValueOutOfRangeError(name, value, field.min_value, field.max_value)
        return index, value

    def set_field(self, name: str, value: int) -> None:
        """Set a single field.

        Args:
            name: Field name
            value: New value; must lie within the field's range

        Raises:
            UnknownFieldError: If the schema has no such field
            ValueOutOfRangeError: If value doesn't fit the field
        """
        index, value = self._validated(name, value)
        self._values[index] = value

    def set_fields(self, values: Mapping[str, int] | None = None, /, **kwargs: int) -> None:
        """Set several fields at once.

        Every name and value is validated before any field is assigned, so a
        failure leaves the message unchanged. The mapping is positional-only,
        so fields named ``values`` or ``self`` can be passed as keywords.

        Raises:
            UnknownFieldError: If any name is not in the schema
            ValueOutOfRangeError: If any value doesn't fit its field
        """
        updates = dict(values or {}, **kwargs)
        validated = [self._validated(name, value) for name, value in updates.items()]
        for index, value in validated:
            self._values[index] = value

    def get_field(self, name: str) -> int:
        """Return the stored value of a field.

        Raises:
            UnknownFieldError: If the schema has no such field
        """
        return self._values[self._schema.index_of(name)]

    def to_dict(self) -> dict[str, int]:
        """Return all field values keyed by name, in schema order."""
        return dict(zip(self._schema.field_names(), self._values))

    def reset(self) -> None:
        """Set every field back to 0."""
        self._values = [0] * len(self._schema)

    def pack(self) -> bytes:
        """Pack the current field values.

        Returns:
            ``schema.byte_length()`` bytes
        """
        return pack_values(self._schema, self._values)

    def unpack(self, data: bytes | bytearray | memoryview) -> None:
        """Replace every field value with those decoded from ``data``.

        Trailing bytes beyond the schema's length are ignored.

        Raises:
            BufferTooSmallError: If ``data`` is shorter than the schema requires
        """
        self._values = unpack_values(self._schema, data)

    def __getitem__(self, name: str) -> int:
        return self.get_field(name)

    def __setitem__(self, name: str, value: int) -> None:
        self.set_field(name, value)

    def __contains__(self, name: object) -> bool:
        return name in self._schema

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Message):
            return NotImplemented
        return self._schema == other._schema and self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        values = ", ".join(f"{name}={value}" for name, value in self.to_dict().items())
        return f"Message({values})"

