"""Base class and shared pydantic configuration for schema descriptions.

Schema descriptions arrive as plain Python values (usually parsed from a
JSON or YAML document). The models in this package validate those values
before any FieldSpec or MessageSchema is built from them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseDescription(BaseModel):
    """Base class for all description models.

    Descriptions are immutable once validated. Unknown keys are ignored, which
    lets schema files carry documentation attributes alongside the ones the
    codec understands. Individual fields use pydantic's strict types so that
    ``"8"`` is not accepted as a width and ``1`` is not accepted as a boolean.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
    )
