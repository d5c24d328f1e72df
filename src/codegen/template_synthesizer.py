"""Code template synthesis for generated record modules.

This module builds a Jinja2 template from a schema descriptor.
Rendering the template against sanitized records yields a Python
module declaring one tuple of literal record constructions.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
from typing import Sequence

from jinja2 import Environment, StrictUndefined, Template, TemplateError

from codegen.schema_reflector import FieldDescriptor, FieldKind, SchemaDescriptor
from core.errors import RosterRenderError

_HEADER = '''"""Generated {collection_name} records. DO NOT EDIT.

Regenerate with ``roster generate``.
"""

from {module_name} import {record_type_name}

{constant_name}: tuple[{record_type_name}, ...] = (
'''
_FOOTER = ")\n"


def render_string_literal(value: object) -> str:
    """Render a value as a double-quoted Python string literal.

    Quotes, backslashes, newlines and control characters are escaped, so
    the literal cannot terminate early or inject code.

    Args:
        value: Sanitized field value.

    Returns:
        Escaped literal text, including surrounding quotes.

    Raises:
        RosterRenderError: If the value is not a string.
    """
    if not isinstance(value, str):
        raise RosterRenderError(
            f"Cannot render {type(value).__name__} value {value!r} as a string literal."
        )
    return json.dumps(value, ensure_ascii=False)


_ENVIRONMENT = Environment(
    undefined=StrictUndefined,
    autoescape=False,
    keep_trailing_newline=True,
)
_ENVIRONMENT.filters["literal"] = render_string_literal


@dataclass(frozen=True)
class CodeTemplate:
    """Compiled template for one collection module.

    Attributes:
        collection_name: Plural collection identifier, e.g. ``teams``.
        source: Jinja2 template source text.
        template: Compiled Jinja2 template.
    """

    collection_name: str
    source: str
    template: Template

    def render(self, records: Sequence[object]) -> str:
        """Render the module text for sanitized records, in order.

        Raises:
            RosterRenderError: If template execution fails.
        """
        try:
            return self.template.render(records=records)
        except TemplateError as error:
            raise RosterRenderError(
                f"Failed to render {self.collection_name} template: {error}. "
                "The record schema and the loaded records are inconsistent."
            ) from error


def synthesize(
    collection_name: str,
    schema: SchemaDescriptor,
    record_type_name: str,
) -> CodeTemplate:
    """Build the code template for a collection.

    Args:
        collection_name: Plural collection identifier.
        schema: Ordered field descriptor of the record type.
        record_type_name: Class name constructed for each record.

    Returns:
        Compiled code template.

    Raises:
        RosterRenderError: If names are not identifiers or the template is invalid.
    """
    for name in (collection_name, record_type_name):
        if not name.isidentifier():
            raise RosterRenderError(
                f"Cannot synthesize template: '{name}' is not a valid Python identifier."
            )
    header = _HEADER.format(
        collection_name=collection_name,
        module_name=schema.module_name,
        record_type_name=record_type_name,
        constant_name=collection_constant_name(collection_name),
    )
    field_expressions = ", ".join(_field_expression(descriptor) for descriptor in schema.fields)
    record_block = (
        "{% for record in records %}"
        f"    {record_type_name}({field_expressions}),\n"
        "{% endfor %}"
    )
    source = header + record_block + _FOOTER
    try:
        template = _ENVIRONMENT.from_string(source)
    except TemplateError as error:
        raise RosterRenderError(
            f"Failed to compile {collection_name} template: {error}."
        ) from error
    return CodeTemplate(collection_name=collection_name, source=source, template=template)


def collection_constant_name(collection_name: str) -> str:
    """Return the exported constant name for a collection, e.g. ``TEAMS``."""
    return collection_name.upper()


def _field_expression(descriptor: FieldDescriptor) -> str:
    name = descriptor.name
    if descriptor.kind is FieldKind.SCALAR:
        return name + "={{ record." + name + " | literal }}"
    return (
        name
        + "=[{% for item in record."
        + name
        + " %}{{ item | literal }}{% if not loop.last %}, {% endif %}{% endfor %}]"
    )
