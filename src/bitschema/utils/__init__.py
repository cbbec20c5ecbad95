"""Utility functions for bitschema.

This module provides helpers for inspecting packed message layouts.
"""

from __future__ import annotations

from .sizing import (
    FieldLayout,
    encoded_bits,
    encoded_size,
    field_layout,
    field_sizes,
    padding_bits,
)

__all__ = [
    "FieldLayout",
    "encoded_size",
    "encoded_bits",
    "field_sizes",
    "field_layout",
    "padding_bits",
]
