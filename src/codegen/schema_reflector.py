"""Record shape reflection for code generation.

This module turns a record type into an ordered schema descriptor.
Record types either describe themselves through ``describe_fields()``
or are dataclasses whose annotations are classified field by field.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence as AbcSequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, get_args, get_origin, get_type_hints

from core.constants import DATA_KEY_METADATA
from core.errors import RosterSchemaError, RosterUnsupportedFieldKindError

_SEQUENCE_ORIGINS = (list, tuple, AbcSequence)


class FieldKind(Enum):
    """Renderable field shapes."""

    SCALAR = "scalar"
    SCALAR_LIST = "scalar_list"


@dataclass(frozen=True)
class FieldDescriptor:
    """One record field in declaration order.

    Attributes:
        name: Attribute name on the record type.
        kind: Renderable field shape.
        key: Mapping key used for this field in data files.
    """

    name: str
    kind: FieldKind
    key: str


@dataclass(frozen=True)
class SchemaDescriptor:
    """Ordered field shape of one record type.

    Attributes:
        record_type_name: Class name of the record type.
        module_name: Module that defines the record type.
        fields: Field descriptors in declaration order.
    """

    record_type_name: str
    module_name: str
    fields: tuple[FieldDescriptor, ...]

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for descriptor in self.fields:
            if descriptor.name in seen:
                raise RosterSchemaError(
                    f"Duplicate field '{descriptor.name}' in {self.record_type_name} schema. "
                    "Field names must be unique."
                )
            seen.add(descriptor.name)

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(descriptor.name for descriptor in self.fields)


def reflect(example: object) -> SchemaDescriptor:
    """Describe the record type of an example instance.

    Only the shape of ``example`` is inspected; its values are ignored.

    Args:
        example: Any instance of the record type.

    Returns:
        Schema descriptor for the instance's type.

    Raises:
        RosterSchemaError: If the value is not a record.
        RosterUnsupportedFieldKindError: If a field cannot be rendered.
    """
    return describe_record_type(type(example))


def describe_record_type(record_type: type) -> SchemaDescriptor:
    """Describe a record type.

    Args:
        record_type: Record class to describe.

    Returns:
        Schema descriptor with fields in declaration order.

    Raises:
        RosterSchemaError: If the type is not a record.
        RosterUnsupportedFieldKindError: If a field cannot be rendered.
    """
    describe_fields = getattr(record_type, "describe_fields", None)
    if callable(describe_fields):
        return _validate_declared_schema(record_type, describe_fields())
    if not dataclasses.is_dataclass(record_type):
        raise RosterSchemaError(
            f"Cannot describe {record_type.__name__}: expected a dataclass or a type "
            "providing describe_fields()."
        )
    type_hints = _resolve_type_hints(record_type)
    fields = tuple(
        FieldDescriptor(
            name=record_field.name,
            kind=classify_field(
                record_type.__name__, record_field.name, type_hints[record_field.name]
            ),
            key=str(record_field.metadata.get(DATA_KEY_METADATA, record_field.name)),
        )
        for record_field in dataclasses.fields(record_type)
    )
    return SchemaDescriptor(
        record_type_name=record_type.__name__,
        module_name=record_type.__module__,
        fields=fields,
    )


def classify_field(record_kind: str, field_name: str, field_type: Any) -> FieldKind:
    """Classify one annotated field.

    Args:
        record_kind: Record type name for error context.
        field_name: Field name for error context.
        field_type: Resolved type annotation.

    Returns:
        ``SCALAR`` for ``str``; ``SCALAR_LIST`` for sequences of ``str``.

    Raises:
        RosterUnsupportedFieldKindError: For every other annotation.
    """
    if field_type is str:
        return FieldKind.SCALAR
    if _is_str_sequence(field_type):
        return FieldKind.SCALAR_LIST
    raise RosterUnsupportedFieldKindError(record_kind, field_name, field_type)


def _is_str_sequence(field_type: Any) -> bool:
    origin = get_origin(field_type)
    if origin not in _SEQUENCE_ORIGINS:
        return False
    # tuple[str, str] is a fixed-size record, not a list shape.
    if origin is tuple:
        return get_args(field_type) == (str, Ellipsis)
    return get_args(field_type) == (str,)


def _resolve_type_hints(record_type: type) -> dict[str, Any]:
    try:
        return get_type_hints(record_type)
    except (NameError, TypeError) as error:
        raise RosterSchemaError(
            f"Cannot resolve field annotations of {record_type.__name__}: {error}."
        ) from error


def _validate_declared_schema(record_type: type, declared: object) -> SchemaDescriptor:
    if not isinstance(declared, SchemaDescriptor):
        raise RosterSchemaError(
            f"{record_type.__name__}.describe_fields() must return a SchemaDescriptor, "
            f"got {type(declared).__name__}."
        )
    for descriptor in declared.fields:
        if not descriptor.name.isidentifier():
            raise RosterSchemaError(
                f"{record_type.__name__}.describe_fields() declares field "
                f"'{descriptor.name}', which is not a valid Python identifier."
            )
        if not isinstance(descriptor.kind, FieldKind):
            raise RosterUnsupportedFieldKindError(
                record_type.__name__, descriptor.name, descriptor.kind
            )
    return declared
