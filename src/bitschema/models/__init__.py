"""Pydantic models for validating schema descriptions."""

from __future__ import annotations

from .base import BaseDescription
from .description import FieldDescription, parse_field_descriptions, parse_schema_set

__all__ = [
    "BaseDescription",
    "FieldDescription",
    "parse_field_descriptions",
    "parse_schema_set",
]
