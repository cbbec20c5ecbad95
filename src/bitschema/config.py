"""Schema file loading.

Schema sets can be kept in JSON or YAML files whose top level maps
message-type names to field lists::

    sensor_data:
      - {name: sensor_id, bit_width: 6}
      - {name: temperature, bit_width: 10, signed: true}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .exceptions import InvalidSchemaError

logger = logging.getLogger(__name__)

JSON_SUFFIXES = frozenset({".json"})
YAML_SUFFIXES = frozenset({".yaml", ".yml"})

_YAML_MERGE_TAG = "tag:yaml.org,2002:merge"


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects a key repeated within one mapping."""

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[Any, Any]:
        seen: set[Any] = set()
        for key_node, _ in node.value:
            if key_node.tag == _YAML_MERGE_TAG or not isinstance(key_node, yaml.ScalarNode):
                continue
            key = self.construct_object(key_node, deep=deep)
            if key in seen:
                raise yaml.constructor.ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"found duplicate key {key!r}",
                    key_node.start_mark,
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def _unique_json_object(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise InvalidSchemaError(f"Invalid JSON schema document: duplicate key {key!r}")
        result[key] = value
    return result


def parse_schema_text(text: str, fmt: str = "yaml") -> Any:
    """Parse schema-set text without validating its structure.

    A key repeated within one object or mapping is an error in both formats.

    Args:
        text: Document contents
        fmt: ``"json"`` or ``"yaml"``

    Returns:
        The parsed document

    Raises:
        InvalidSchemaError: If the text can't be parsed, repeats a key, or
            fmt is unknown
    """
    if fmt == "json":
        try:
            return json.loads(text, object_pairs_hook=_unique_json_object)
        except json.JSONDecodeError as err:
            raise InvalidSchemaError(f"Invalid JSON schema document: {err}") from err
    if fmt == "yaml":
        try:
            return yaml.load(text, Loader=_UniqueKeyLoader)
        except yaml.YAMLError as err:
            raise InvalidSchemaError(f"Invalid YAML schema document: {err}") from err
    raise InvalidSchemaError(f"Unsupported schema format: {fmt!r}")


def load_schema_set(path: str | Path) -> dict[str, Any]:
    """Read a schema set from a ``.json``, ``.yaml`` or ``.yml`` file.

    The file must be UTF-8. A message type listed twice is rejected rather
    than letting the later entry replace the earlier one. The returned value
    is the raw mapping; pass it to SchemaRegistry for validation.

    Raises:
        FileNotFoundError: If the file doesn't exist
        OSError: If the path can't be read, e.g. it is a directory
        InvalidSchemaError: If the suffix is unsupported, the file is not
            UTF-8 or can't be parsed, a key repeats, or its top level is not
            a mapping
    """
    file_path = Path(path)
    suffix = file_path.suffix.lower()

    if suffix in JSON_SUFFIXES:
        fmt = "json"
    elif suffix in YAML_SUFFIXES:
        fmt = "yaml"
    else:
        raise InvalidSchemaError(
            f"Unsupported schema file type '{suffix}': expected .json, .yaml or .yml"
        )

    logger.debug("Loading %s schema set from %s", fmt, file_path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as err:
        raise InvalidSchemaError(f"{file_path}: schema file is not valid UTF-8: {err}") from err
    document = parse_schema_text(text, fmt)

    if not isinstance(document, dict):
        raise InvalidSchemaError(
            f"{file_path}: top level must map message types to field lists, "
            f"got {type(document).__name__}"
        )

    return document
