"""Roster CLI entry points.

This module exposes the generate build step and the read-only server.
It maps argparse commands onto codegen and serve calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
import sys
from typing import Sequence

from codegen.generation_pipeline import generate
from codegen.targets import GENERATION_TARGETS
from core.config import RosterConfig
from core.errors import RosterError
from core.logging_config import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="roster", description="Roster people and teams CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_generate_command(subparsers)
    _add_serve_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Roster CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = RosterConfig.from_env()
    except RosterError as error:
        print(f"invalid configuration: {error}", file=sys.stderr)
        return 1
    configure_logging(config.log_level)
    if args.command == "generate":
        return _run_generate_command(config, args)
    if args.command == "serve":
        return _run_serve_command(config, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _add_generate_command(subparsers: argparse._SubParsersAction) -> None:
    generate_parser = subparsers.add_parser(
        "generate", help="Regenerate literal record modules from YAML data"
    )
    generate_parser.add_argument("--data-root", help="Override ROSTER_DATA_ROOT")
    generate_parser.add_argument("--output-root", help="Override ROSTER_OUTPUT_ROOT")


def _add_serve_command(subparsers: argparse._SubParsersAction) -> None:
    serve_parser = subparsers.add_parser("serve", help="Serve generated records over HTTP")
    serve_parser.add_argument("--host", help="Override ROSTER_HOST")
    serve_parser.add_argument("--port", type=int, help="Override ROSTER_PORT")


def _run_generate_command(config: RosterConfig, args: argparse.Namespace) -> int:
    """Handle generate command.

    Targets run in order; the first failure stops the build.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    if args.data_root:
        config = replace(config, data_root=Path(args.data_root).expanduser().resolve())
    if args.output_root:
        config = replace(config, output_root=Path(args.output_root).expanduser().resolve())
    for target in GENERATION_TARGETS:
        try:
            result = generate(target, config)
        except RosterError as error:
            print(
                f"generation failed for record kind '{target.record_kind}' "
                f"at stage '{error.stage}': {error}",
                file=sys.stderr,
            )
            return 1
        print(
            f"{result.record_kind}\t"
            f"{result.collection_name}\t"
            f"{result.record_count}\t"
            f"{result.output_path}"
        )
    return 0


def _run_serve_command(config: RosterConfig, args: argparse.Namespace) -> int:
    """Handle serve command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    import uvicorn

    from serve.roster_api import create_app

    try:
        app = create_app()
    except RosterError as error:
        print(f"serve failed at stage '{error.stage}': {error}", file=sys.stderr)
        return 1
    uvicorn.run(app, host=args.host or config.host, port=args.port or config.port)
    return 0
