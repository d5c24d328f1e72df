"""Generation pipeline for literal record modules.

This module coordinates loading, reflection, sanitizing, rendering
and persistence for one collection at a time. Every stage raises a
typed Roster error; nothing is written unless rendering succeeds.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, is_dataclass
from pathlib import Path
from typing import Any, Sequence

from codegen.record_loader import load_records
from codegen.sanitizer import sanitize_record
from codegen.schema_reflector import SchemaDescriptor, describe_record_type
from codegen.source_writer import write_source_unit
from codegen.targets import GenerationTarget
from codegen.template_synthesizer import synthesize
from core.config import RosterConfig
from core.constants import DATA_FILE_SUFFIX, GENERATED_FILE_SUFFIX
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one successful generation run.

    Attributes:
        record_kind: Singular record kind name.
        collection_name: Plural collection name.
        output_path: Path of the written module.
        record_count: Number of records embedded in the module.
    """

    record_kind: str
    collection_name: str
    output_path: Path
    record_count: int


def data_file_path(data_root: Path, collection_name: str) -> Path:
    """Return the YAML source path for a collection."""
    return data_root / f"{collection_name}{DATA_FILE_SUFFIX}"


def output_file_path(output_root: Path, collection_name: str) -> Path:
    """Return the generated module path for a collection."""
    return output_root / f"{collection_name}{GENERATED_FILE_SUFFIX}"


def render_collection(
    target: GenerationTarget,
    records: list[Any],
    schema: SchemaDescriptor,
) -> str:
    """Sanitize records in place and render the module text.

    Args:
        target: Record kind and collection being generated.
        records: Raw records in load order.
        schema: Field descriptor of the record type.

    Returns:
        Generated module text.
    """
    for index, record in enumerate(records):
        _LOGGER.debug(
            "record_loaded", record_kind=target.record_kind, index=index, record=_fields(record)
        )
        sanitize_record(record, schema)
        _LOGGER.debug(
            "record_sanitized", record_kind=target.record_kind, index=index, record=_fields(record)
        )
    _LOGGER.info("records_sanitized", record_kind=target.record_kind, record_count=len(records))
    template = synthesize(target.collection_name, schema, schema.record_type_name)
    source_text = template.render(records)
    _LOGGER.info(
        "source_rendered", record_kind=target.record_kind, character_count=len(source_text)
    )
    return source_text


def generate(target: GenerationTarget, config: RosterConfig) -> GenerationResult:
    """Regenerate the literal module for one collection.

    Args:
        target: Record kind and collection to generate.
        config: Runtime configuration with data and output roots.

    Returns:
        Summary of the written module.

    Raises:
        RosterLoadError: If the data file is missing or malformed.
        RosterUnsupportedFieldKindError: If the record type has an unrenderable field.
        RosterRenderError: If template synthesis or rendering fails.
        RosterWriteError: If the module cannot be written.
    """
    schema = describe_record_type(target.record_type)
    _LOGGER.info(
        "schema_reflected", record_kind=target.record_kind, fields=list(schema.field_names)
    )
    data_file = data_file_path(config.data_root, target.collection_name)
    records = load_records(data_file, target.record_type, schema)
    _LOGGER.info(
        "records_loaded",
        record_kind=target.record_kind,
        data_file=str(data_file),
        record_count=len(records),
    )
    source_text = render_collection(target, records, schema)
    output_path = output_file_path(config.output_root, target.collection_name)
    write_source_unit(output_path, source_text)
    _LOGGER.info("source_written", record_kind=target.record_kind, output_path=str(output_path))
    return GenerationResult(
        record_kind=target.record_kind,
        collection_name=target.collection_name,
        output_path=output_path,
        record_count=len(records),
    )


def generate_all(
    targets: Sequence[GenerationTarget],
    config: RosterConfig,
) -> list[GenerationResult]:
    """Regenerate every target in order, stopping at the first failure."""
    return [generate(target, config) for target in targets]


def _fields(record: Any) -> Any:
    if is_dataclass(record) and not isinstance(record, type):
        return asdict(record)
    return repr(record)
