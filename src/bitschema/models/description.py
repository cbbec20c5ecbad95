"""Field and schema-set description models.

A single schema is described by a list of field entries::

    [
        {"name": "status", "bit_width": 2},
        {"name": "value", "bit_width": 8, "signed": True},
    ]

A schema set maps message-type names to such lists.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import Field, StrictBool, StrictInt, StrictStr, TypeAdapter, ValidationError

from ..exceptions import InvalidSchemaError
from .base import BaseDescription


class FieldDescription(BaseDescription):
    """One field entry of a schema description.

    Attributes:
        name: Field name (non-empty)
        bit_width: Width in bits; the 1-64 bound is enforced by FieldSpec
        signed: Whether the field holds two's-complement values
    """

    name: StrictStr = Field(min_length=1)
    bit_width: StrictInt = Field(ge=0)
    signed: StrictBool = False


_FIELD_LIST = TypeAdapter(list[FieldDescription])


def _format_validation_error(err: ValidationError) -> str:
    parts = []
    for error in err.errors():
        loc = ".".join(str(item) for item in error["loc"])
        parts.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return "; ".join(parts)


def parse_field_descriptions(
    descriptions: Any, message_type: str | None = None
) -> list[FieldDescription]:
    """Validate a list of field entries.

    Args:
        descriptions: Sequence of mappings (or FieldDescription instances)
        message_type: Owning message type, used in error messages

    Returns:
        Validated field descriptions in the order supplied

    Raises:
        InvalidSchemaError: If the value is not a list of well-formed entries
    """
    where = f" for '{message_type}'" if message_type is not None else ""

    if isinstance(descriptions, (str, bytes, Mapping)) or not isinstance(
        descriptions, (list, tuple)
    ):
        raise InvalidSchemaError(
            f"Message definition{where} must be an array of fields, "
            f"got {type(descriptions).__name__}"
        )

    try:
        return _FIELD_LIST.validate_python(list(descriptions))
    except ValidationError as err:
        raise InvalidSchemaError(
            f"Invalid field definition{where}: {_format_validation_error(err)}"
        ) from err


def parse_schema_set(schema_set: Any) -> dict[str, list[FieldDescription]]:
    """Validate a mapping of message-type name to field entries.

    Args:
        schema_set: Mapping from message-type name to a list of field entries

    Returns:
        Dictionary of validated field descriptions keyed by message type

    Raises:
        InvalidSchemaError: If the mapping or any of its entries is malformed
    """
    if not isinstance(schema_set, Mapping):
        raise InvalidSchemaError(
            f"Schema set must be a mapping of message types, got {type(schema_set).__name__}"
        )

    parsed: dict[str, list[FieldDescription]] = {}
    for message_type, descriptions in schema_set.items():
        if not isinstance(message_type, str) or not message_type:
            raise InvalidSchemaError(
                f"Message type names must be non-empty strings, got {message_type!r}"
            )
        parsed[message_type] = parse_field_descriptions(descriptions, message_type)

    return parsed
