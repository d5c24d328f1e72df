"""Whitespace sanitization for raw records.

Trimming is driven by the schema descriptor, so one function serves
every record kind that exposes string and string-list fields.
"""

from __future__ import annotations

from typing import Any, MutableSequence

from codegen.schema_reflector import FieldKind, SchemaDescriptor


def trim(value: str) -> str:
    """Strip leading and trailing whitespace."""
    return value.strip()


def sanitize_record(record: Any, schema: SchemaDescriptor) -> Any:
    """Trim every scalar and every scalar-list element of a record in place.

    Args:
        record: Raw record instance.
        schema: Field descriptor of the record type.

    Returns:
        The same record instance, now sanitized.
    """
    for descriptor in schema.fields:
        value = getattr(record, descriptor.name)
        if descriptor.kind is FieldKind.SCALAR:
            setattr(record, descriptor.name, trim(value))
        elif isinstance(value, MutableSequence):
            value[:] = [trim(item) for item in value]
        else:
            setattr(record, descriptor.name, type(value)(trim(item) for item in value))
    return record
