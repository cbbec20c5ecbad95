"""Field and message schemas.

This module provides the validated, immutable layout model used by the
codec: a FieldSpec per named fixed-width integer and a MessageSchema that
fixes their packing order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from ..exceptions import InvalidSchemaError, UnknownFieldError
from ..models.description import FieldDescription, parse_field_descriptions
from .bitpack import MAX_BITS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldSpec:
    """Schema information for a single field.

    Attributes:
        name: Field name
        bit_width: Number of bits the field occupies (1-64)
        is_signed: Whether values are two's-complement signed
    """

    name: str
    bit_width: int
    is_signed: bool = False

    def __post_init__(self) -> None:
        """Validate name and width."""
        if not isinstance(self.name, str) or not self.name:
            raise InvalidSchemaError(f"Field name must be a non-empty string, got {self.name!r}")
        if isinstance(self.bit_width, bool) or not isinstance(self.bit_width, int):
            raise InvalidSchemaError(
                f"Field {self.name}: bit width must be an integer, "
                f"got {type(self.bit_width).__name__}"
            )
        if self.bit_width < 1 or self.bit_width > MAX_BITS:
            raise InvalidSchemaError(
                f"Invalid bit width for field '{self.name}': {self.bit_width} "
                f"(must be 1-{MAX_BITS})"
            )
        if not isinstance(self.is_signed, bool):
            raise InvalidSchemaError(f"Field {self.name}: signed flag must be a boolean")

    @classmethod
    def from_description(cls, description: FieldDescription) -> FieldSpec:
        """Build a field from a validated description entry."""
        return cls(description.name, description.bit_width, description.signed)

    @property
    def min_value(self) -> int:
        """Smallest value the field can hold."""
        if self.is_signed:
            return -(1 << (self.bit_width - 1))
        return 0

    @property
    def max_value(self) -> int:
        """Largest value the field can hold."""
        if self.is_signed:
            return (1 << (self.bit_width - 1)) - 1
        return (1 << self.bit_width) - 1

    @property
    def mask(self) -> int:
        """Bit mask covering the field's width."""
        return (1 << self.bit_width) - 1

    def is_valid_value(self, value: Any) -> bool:
        """Check whether ``value`` fits this field.

        Args:
            value: Candidate value

        Returns:
            True if value is an integer within [min_value, max_value]
        """
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return self.min_value <= value <= self.max_value


class MessageSchema:
    """Ordered collection of fields describing one message layout.

    The order of ``fields`` is the packing order and is part of the wire
    format. Instances are immutable and may be shared by any number of
    messages.

    Example:
        >>> schema = MessageSchema.from_description([
        ...     {"name": "f1", "bit_width": 8},
        ...     {"name": "f2", "bit_width": 4, "signed": True},
        ... ])
        >>> schema.total_bits(), schema.byte_length()
        (12, 2)
    """

    __slots__ = ("_fields", "_index", "_total_bits")

    def __init__(self, fields: Iterable[FieldSpec] = ()) -> None:
        """Initialize a schema from field specs.

        Args:
            fields: Field specs in packing order

        Raises:
            InvalidSchemaError: If a field name repeats
        """
        index: dict[str, int] = {}
        total_bits = 0
        collected: list[FieldSpec] = []

        for field in fields:
            if not isinstance(field, FieldSpec):
                raise InvalidSchemaError(
                    f"Schema fields must be FieldSpec instances, got {type(field).__name__}"
                )
            if field.name in index:
                raise InvalidSchemaError(f"Duplicate field name '{field.name}'")
            index[field.name] = len(collected)
            collected.append(field)
            total_bits += field.bit_width

        object.__setattr__(self, "_fields", tuple(collected))
        object.__setattr__(self, "_index", MappingProxyType(index))
        object.__setattr__(self, "_total_bits", total_bits)

    @classmethod
    def from_description(
        cls, descriptions: Any, message_type: str | None = None
    ) -> MessageSchema:
        """Create a schema from a list of field entries.

        Args:
            descriptions: List of ``{"name", "bit_width", "signed"?}`` mappings
            message_type: Optional owning message type, used in error messages

        Returns:
            MessageSchema instance

        Raises:
            InvalidSchemaError: If any entry is malformed or a name repeats
        """
        parsed = parse_field_descriptions(descriptions, message_type)
        try:
            schema = cls(FieldSpec.from_description(entry) for entry in parsed)
        except InvalidSchemaError as err:
            if message_type is None:
                raise
            raise InvalidSchemaError(f"{err} in message '{message_type}'") from err

        logger.debug(
            "Built schema%s: %d fields, %d bits",
            f" '{message_type}'" if message_type else "",
            len(schema),
            schema.total_bits(),
        )
        return schema

    @property
    def fields(self) -> tuple[FieldSpec, ...]:
        """Fields in packing order."""
        return self._fields

    def field(self, name: str) -> FieldSpec:
        """Look up a field by name.

        Raises:
            UnknownFieldError: If the schema has no such field
        """
        return self._fields[self.index_of(name)]

    def index_of(self, name: str) -> int:
        """Return the position of a field in packing order.

        Raises:
            UnknownFieldError: If the schema has no such field
        """
        try:
            return self._index[name]
        except (KeyError, TypeError):
            raise UnknownFieldError(name) from None

    def has_field(self, name: str) -> bool:
        """Check whether the schema defines ``name``."""
        return name in self

    def field_names(self) -> list[str]:
        """Return field names in packing order."""
        return [field.name for field in self._fields]

    def total_bits(self) -> int:
        """Return the sum of all field widths."""
        return self._total_bits

    def byte_length(self) -> int:
        """Return the packed size in bytes (rounded up)."""
        return (self._total_bits + 7) // 8

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[FieldSpec]:
        return iter(self._fields)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MessageSchema):
            return NotImplemented
        return self._fields == other._fields

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"MessageSchema is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"MessageSchema is immutable; cannot delete {name!r}")

    def __hash__(self) -> int:
        return hash(self._fields)

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{f.name}:{'i' if f.is_signed else 'u'}{f.bit_width}" for f in self._fields
        )
        return f"MessageSchema([{fields}])"
