"""YAML record loading for code generation.

This module reads one data file per collection and builds raw record
instances from it. Scalars are read as written, without YAML type
resolution, so values such as ``yes`` or ``0700`` stay text. Only plain
null scalars (``~``, ``null``, empty) resolve, and mean "no value".
"""

from __future__ import annotations

from pathlib import Path
import re
from typing import Any, Mapping, Sequence

import yaml
from yaml.constructor import SafeConstructor

from codegen.schema_reflector import FieldKind, SchemaDescriptor
from core.errors import RosterLoadError


class _TextLoader(yaml.BaseLoader):
    """Base loader that also resolves plain null scalars."""


_TextLoader.add_implicit_resolver(
    "tag:yaml.org,2002:null",
    re.compile(r"^(?:~|null|Null|NULL|)$"),
    list("~nN") + [""],
)
_TextLoader.add_constructor("tag:yaml.org,2002:null", SafeConstructor.construct_yaml_null)


def load_records(data_file: Path, record_type: type, schema: SchemaDescriptor) -> list[Any]:
    """Load raw records from a YAML data file.

    Args:
        data_file: YAML file whose top level is a list of mappings.
        record_type: Record class constructed for each mapping.
        schema: Field descriptor of ``record_type``.

    Returns:
        Raw records in file order. An empty document yields no records.

    Raises:
        RosterLoadError: If the file is missing, unreadable or malformed.
    """
    payload = _read_yaml_payload(data_file)
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise RosterLoadError(
            data_file, f"expected a list of records at top level, got {type(payload).__name__}"
        )
    return [
        _build_record(data_file, record_type, schema, row, index)
        for index, row in enumerate(payload)
    ]


def _read_yaml_payload(data_file: Path) -> object:
    if not data_file.is_file():
        raise RosterLoadError(data_file, "file does not exist")
    try:
        text = data_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise RosterLoadError(data_file, str(error)) from error
    try:
        return yaml.load(text, Loader=_TextLoader)
    except yaml.YAMLError as error:
        raise RosterLoadError(data_file, f"invalid YAML: {error}") from error


def _build_record(
    data_file: Path,
    record_type: type,
    schema: SchemaDescriptor,
    row: object,
    index: int,
) -> Any:
    context = f"record #{index + 1}"
    if not isinstance(row, Mapping):
        raise RosterLoadError(
            data_file, f"{context} must be a mapping, got {type(row).__name__}"
        )
    known_keys = {descriptor.key for descriptor in schema.fields}
    unknown_keys = sorted(str(key) for key in row if key not in known_keys)
    if unknown_keys:
        raise RosterLoadError(
            data_file,
            f"{context} has unknown keys {unknown_keys}; "
            f"{schema.record_type_name} accepts {sorted(known_keys)}",
        )
    values: dict[str, Any] = {}
    for descriptor in schema.fields:
        raw_value = row.get(descriptor.key)
        field_context = f"{context} field '{descriptor.key}'"
        if descriptor.kind is FieldKind.SCALAR:
            values[descriptor.name] = _parse_scalar(data_file, raw_value, field_context)
        else:
            values[descriptor.name] = _parse_scalar_list(data_file, raw_value, field_context)
    return record_type(**values)


def _parse_scalar(data_file: Path, raw_value: object, context: str) -> str:
    if raw_value is None:
        return ""
    if isinstance(raw_value, str):
        return raw_value
    raise RosterLoadError(data_file, f"{context} must be text, got {type(raw_value).__name__}")


def _parse_scalar_list(data_file: Path, raw_value: object, context: str) -> list[str]:
    if raw_value is None:
        return []
    if not isinstance(raw_value, Sequence) or isinstance(raw_value, str):
        raise RosterLoadError(
            data_file, f"{context} must be a list of text, got {type(raw_value).__name__}"
        )
    items: list[str] = []
    for position, item in enumerate(raw_value):
        if item is None:
            items.append("")
            continue
        if not isinstance(item, str):
            raise RosterLoadError(
                data_file,
                f"{context} item #{position + 1} must be text, got {type(item).__name__}",
            )
        items.append(item)
    return items
