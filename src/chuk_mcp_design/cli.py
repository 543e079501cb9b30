#!/usr/bin/env python3
"""
Command-line generator.

Reads one design system definition and writes the theme artifacts
without going through the MCP server:

    chuk-mcp-design-generate design-system.yaml -o src/styles
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_design.constants import UnresolvedPolicy
from chuk_mcp_design.errors import DesignSystemError
from chuk_mcp_design.generator import DesignSystemGenerator, write_artifacts
from chuk_mcp_design.systems import load_design_system
from chuk_mcp_design.validator import validate_design_system

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate theme assets from a design token file")
    parser.add_argument("definition", type=Path, help="Design system definition (YAML or JSON)")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path.cwd(),
        help="Base directory; artifacts go under <output>/<output_dir_name>",
    )
    parser.add_argument(
        "--output-name",
        help="Override the output folder name (default: settings.output_dir_name)",
    )
    parser.add_argument(
        "--unresolved-policy",
        choices=[p.value for p in UnresolvedPolicy],
        help="How to treat utility references that address no collection",
    )
    parser.add_argument(
        "--legacy-property-fallback",
        action="store_true",
        help="Derive a missing utility property from its prefix",
    )
    parser.add_argument(
        "--sort-index",
        action="store_true",
        help="Sort index.css imports instead of keeping emission order",
    )
    parser.add_argument(
        "--no-global-aggregates",
        action="store_true",
        help="Skip the namespace-wide aggregate files",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Only validate the definition and print the issues",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def _settings_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.output_name:
        overrides["output_dir_name"] = args.output_name
    if args.unresolved_policy:
        overrides["unresolved_policy"] = args.unresolved_policy
    if args.legacy_property_fallback:
        overrides["legacy_property_fallback"] = True
    if args.sort_index:
        overrides["sort_index_imports"] = True
    if args.no_global_aggregates:
        overrides["emit_global_aggregates"] = False
    return overrides


def main(argv: list[str] | None = None) -> int:
    """Run the generator; returns the process exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    try:
        system = load_design_system(args.definition)
    except (OSError, yaml.YAMLError, ValueError, ValidationError) as e:
        logger.error("Could not load %s: %s", args.definition, e)
        return 1

    overrides = _settings_overrides(args)
    if overrides:
        system = system.with_settings(**overrides)

    if args.validate:
        result = validate_design_system(system)
        print(result)
        return 0 if result.is_valid else 1

    try:
        generation = DesignSystemGenerator(system).generate()
    except DesignSystemError as e:
        logger.error("Generation failed: %s", e)
        return 1

    output_root = args.output / system.settings.output_dir_name
    written = write_artifacts(generation, output_root)
    for warning in generation.warnings:
        print(f"warning: {warning}", file=sys.stderr)
    print(f"Wrote {len(written)} files to {output_root}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
