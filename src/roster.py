"""Public SDK surface for Roster.

This module provides a stable import path for build scripts and services.
It re-exports the generation pipeline, its typed models and the server app.
"""

from __future__ import annotations

from codegen.generation_pipeline import GenerationResult, generate, generate_all
from codegen.schema_reflector import FieldDescriptor, FieldKind, SchemaDescriptor, reflect
from codegen.targets import GENERATION_TARGETS, GenerationTarget
from codegen.template_synthesizer import CodeTemplate, synthesize
from core.config import RosterConfig
from model.person import Person
from model.team import Team
from serve.roster_api import create_app

__all__ = [
    "CodeTemplate",
    "FieldDescriptor",
    "FieldKind",
    "GENERATION_TARGETS",
    "GenerationResult",
    "GenerationTarget",
    "Person",
    "RosterConfig",
    "SchemaDescriptor",
    "Team",
    "create_app",
    "generate",
    "generate_all",
    "reflect",
    "synthesize",
]
