"""Read-only HTTP responder for generated record collections.

Collections are imported from the generated modules once, at app
creation, and served as JSON without any parsing at request time.
"""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
import importlib
from typing import Any, Mapping, Sequence

from fastapi import APIRouter, FastAPI

from codegen.targets import GENERATION_TARGETS, GenerationTarget
from codegen.template_synthesizer import collection_constant_name
from core.constants import GENERATED_FILE_SUFFIX, GENERATED_PACKAGE_NAME
from core.errors import RosterServeError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def create_app(collections: Mapping[str, Sequence[Any]] | None = None) -> FastAPI:
    """Build the FastAPI app serving one GET route per collection.

    Args:
        collections: Records keyed by collection name. Defaults to the
            generated modules for every generation target.

    Returns:
        Configured FastAPI application.

    Raises:
        RosterServeError: If a generated module is missing.
    """
    if collections is None:
        collections = load_generated_collections(GENERATION_TARGETS)
    app = FastAPI(title="Roster", description="Read-only people and teams directory")
    router = APIRouter()
    for collection_name, records in collections.items():
        payload = [_record_payload(record) for record in records]
        router.add_api_route(
            f"/{collection_name}",
            _build_endpoint(payload),
            methods=["GET"],
            name=f"list_{collection_name}",
            summary=f"List {collection_name}",
        )
        _LOGGER.info("collection_mounted", collection=collection_name, record_count=len(payload))
    app.include_router(router)
    return app


def load_generated_collections(
    targets: Sequence[GenerationTarget],
) -> dict[str, Sequence[Any]]:
    """Import the generated collection of every target.

    Raises:
        RosterServeError: If a generated module or its constant is missing.
    """
    collections: dict[str, Sequence[Any]] = {}
    for target in targets:
        module_name = (
            f"{GENERATED_PACKAGE_NAME}.{target.collection_name}"
            f"{GENERATED_FILE_SUFFIX.removesuffix('.py')}"
        )
        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError as error:
            raise RosterServeError(
                f"Generated module {module_name} is missing. Run 'roster generate' first."
            ) from error
        constant_name = collection_constant_name(target.collection_name)
        if not hasattr(module, constant_name):
            raise RosterServeError(
                f"Generated module {module_name} does not define {constant_name}. "
                "Run 'roster generate' to rebuild it."
            )
        collections[target.collection_name] = getattr(module, constant_name)
    return collections


def _build_endpoint(payload: list[dict[str, Any]]):
    async def list_records() -> list[dict[str, Any]]:
        return payload

    return list_records


def _record_payload(record: Any) -> dict[str, Any]:
    if is_dataclass(record) and not isinstance(record, type):
        return asdict(record)
    return dict(vars(record))
