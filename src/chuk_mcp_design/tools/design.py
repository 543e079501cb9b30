"""
Design tools - MCP tools for design system discovery and generation.

Tools for listing and describing design systems, validating token
graphs, resolving references and generating CSS/TS/name artifacts.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_design.constants import ErrorMessages, SuccessMessages
from chuk_mcp_design.core.references import (
    Reference,
    Resolved,
    find_token,
    parse_value,
    resolve_collection,
    resolve_shallow,
)
from chuk_mcp_design.errors import DesignSystemError
from chuk_mcp_design.generator import DesignSystemGenerator, write_artifacts
from chuk_mcp_design.systems import DesignSystemLoader
from chuk_mcp_design.validator import validate_design_system

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _not_found(name: str) -> str:
    return json.dumps(
        {"status": "error", "message": ErrorMessages.SYSTEM_NOT_FOUND.format(name=name)}
    )


def register_design_tools(
    mcp: ChukMCPServer,
    loader: DesignSystemLoader,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register design system tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The design system loader
        output_dir: Directory for generated artifacts

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def design_list_systems() -> str:
        """
        List available design systems.

        Returns all definitions from the library and project with
        basic metadata.

        Returns:
            JSON string with list of design system summaries

        Example:
            design_list_systems()
        """
        try:
            systems = loader.list_systems()

            return json.dumps(
                {
                    "status": "success",
                    "systems": [s.model_dump() for s in systems],
                    "count": len(systems),
                }
            )
        except Exception as e:
            logger.exception("Failed to list design systems")
            return json.dumps({"status": "error", "message": str(e)})

    tools["design_list_systems"] = design_list_systems

    @mcp.tool  # type: ignore[arg-type]
    async def design_describe_system(name: str) -> str:
        """
        Get detailed information about a design system.

        Returns the groups and categories of each namespace, and the
        utility-class families with their properties.

        Args:
            name: Design system name

        Returns:
            JSON string with design system details

        Example:
            design_describe_system(name="starter")
        """
        try:
            system = loader.get_system(name)
            if system is None:
                return _not_found(name)

            return json.dumps(
                {
                    "status": "success",
                    "system": {
                        "name": system.name,
                        "description": system.description,
                        "settings": system.settings.model_dump(mode="json"),
                        "primitives": {
                            group: {category: len(tokens) for category, tokens in categories.items()}
                            for group, categories in system.primitives.items()
                        },
                        "semantic_tokens": {
                            group: {category: len(tokens) for category, tokens in categories.items()}
                            for group, categories in system.semantic_tokens.items()
                        },
                        "utility_classes": {
                            group: {
                                key: {
                                    "prefix": spec.prefix,
                                    "property": spec.css_property,
                                    "pseudo": spec.pseudo,
                                    "tokens": spec.tokens
                                    if isinstance(spec.tokens, str)
                                    else list(spec.tokens),
                                }
                                for key, spec in utilities.items()
                            }
                            for group, utilities in system.utility_classes.items()
                        },
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe design system")
            return json.dumps({"status": "error", "message": str(e)})

    tools["design_describe_system"] = design_describe_system

    @mcp.tool  # type: ignore[arg-type]
    async def design_validate(name: str) -> str:
        """
        Validate a design system's token graph.

        Reports missing utility properties, unresolved collection
        references, dangling variable references, leaf-name collisions
        and malformed theme pairs.

        Args:
            name: Design system name

        Returns:
            JSON string with validation results

        Example:
            design_validate(name="starter")
        """
        try:
            system = loader.get_system(name)
            if system is None:
                return _not_found(name)

            result = validate_design_system(system)

            return json.dumps(
                {
                    "status": "success",
                    "valid": result.is_valid,
                    "errors": [i.to_dict() for i in result.errors],
                    "warnings": [i.to_dict() for i in result.warnings],
                    "issue_count": len(result.issues),
                }
            )
        except Exception as e:
            logger.exception("Failed to validate design system")
            return json.dumps({"status": "error", "message": str(e)})

    tools["design_validate"] = design_validate

    @mcp.tool  # type: ignore[arg-type]
    async def design_resolve_reference(name: str, reference: str) -> str:
        """
        Resolve a reference against a design system.

        Shows both strategies: the var() handle produced by shallow
        resolution and what the graph walk finds (a collection or a
        single token).

        Args:
            name: Design system name
            reference: Reference string, e.g. "{groww-primary.colors.white}"

        Returns:
            JSON string with resolution details

        Example:
            design_resolve_reference(name="starter", reference="{semanticTokens.groww-primary.background}")
        """
        try:
            system = loader.get_system(name)
            if system is None:
                return _not_found(name)

            parsed = parse_value(reference)
            if not isinstance(parsed, Reference):
                return json.dumps(
                    {
                        "status": "success",
                        "reference": reference,
                        "is_reference": False,
                        "shallow": reference,
                    }
                )

            payload: dict[str, Any] = {
                "status": "success",
                "reference": reference,
                "is_reference": True,
                "shallow": resolve_shallow(reference),
            }

            location = find_token(system, parsed)
            if location is not None:
                payload["token"] = {
                    "namespace": location.namespace.value,
                    "group": location.group,
                    "category": location.category,
                    "token": location.token,
                    "value": location.value,
                }

            resolution = resolve_collection(system, parsed)
            if isinstance(resolution, Resolved):
                payload["collection"] = {
                    "namespace": resolution.namespace.value,
                    "group": resolution.group,
                    "category": resolution.category,
                    "tokens": list(resolution.tokens),
                    "variable_stem": resolution.variable_stem,
                }
            else:
                payload["collection"] = None
                payload["unresolved_reason"] = resolution.reason

            return json.dumps(payload, default=str)
        except Exception as e:
            logger.exception("Failed to resolve reference")
            return json.dumps({"status": "error", "message": str(e)})

    tools["design_resolve_reference"] = design_resolve_reference

    @mcp.tool  # type: ignore[arg-type]
    async def design_preview_artifact(name: str, path: str | None = None) -> str:
        """
        Generate a design system in memory and return one artifact.

        Nothing is written to disk. Without a path, lists every
        artifact path the generator would produce.

        Args:
            name: Design system name
            path: Artifact path relative to the output root,
                e.g. "css/tokens/groww-primary/background.css"

        Returns:
            JSON string with the artifact content or the path list

        Example:
            design_preview_artifact(name="starter", path="index.css")
        """
        try:
            system = loader.get_system(name)
            if system is None:
                return _not_found(name)

            result = DesignSystemGenerator(system).generate()

            if path is None:
                return json.dumps(
                    {
                        "status": "success",
                        "paths": [str(a.path) for a in result.artifacts],
                        "count": result.total_artifacts,
                    }
                )

            artifact = result.get(path)
            if artifact is None:
                return json.dumps({"status": "error", "message": f"Artifact not found: {path}"})

            return json.dumps(
                {
                    "status": "success",
                    "path": str(artifact.path),
                    "kind": artifact.kind.value,
                    "content": artifact.content,
                }
            )
        except DesignSystemError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to preview artifact")
            return json.dumps({"status": "error", "message": str(e)})

    tools["design_preview_artifact"] = design_preview_artifact

    @mcp.tool  # type: ignore[arg-type]
    async def design_generate(
        name: str,
        output_name: str | None = None,
        unresolved_policy: str | None = None,
        legacy_property_fallback: bool | None = None,
    ) -> str:
        """
        Generate and write all artifacts for a design system.

        Writes css/, ts/, names/ and index.css under the output
        directory. A configuration error aborts before anything is
        written.

        Args:
            name: Design system name
            output_name: Output folder name (defaults to the system's
                output_dir_name setting)
            unresolved_policy: Override: 'skip', 'dangling' or 'fail'
            legacy_property_fallback: Override: derive missing utility
                properties from their prefix

        Returns:
            JSON string with generation summary

        Example:
            design_generate(name="starter")
        """
        try:
            system = loader.get_system(name)
            if system is None:
                return _not_found(name)

            overrides: dict[str, Any] = {}
            if unresolved_policy is not None:
                overrides["unresolved_policy"] = unresolved_policy
            if legacy_property_fallback is not None:
                overrides["legacy_property_fallback"] = legacy_property_fallback
            if overrides:
                system = system.with_settings(**overrides)

            result = DesignSystemGenerator(system).generate()

            output_root = output_dir / (output_name or system.settings.output_dir_name)
            written = write_artifacts(result, output_root)

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_root),
                    "generation": {
                        "artifacts": result.summary(),
                        "groups": result.groups_processed,
                        "files_written": len(written),
                    },
                    "warnings": result.warnings,
                    "message": SuccessMessages.SYSTEM_GENERATED.format(
                        count=len(written), name=system.name, path=output_root
                    ),
                }
            )
        except DesignSystemError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to generate design system")
            return json.dumps({"status": "error", "message": str(e)})

    tools["design_generate"] = design_generate

    @mcp.tool  # type: ignore[arg-type]
    async def design_copy_system_to_project(name: str) -> str:
        """
        Copy a library design system to the project for customization.

        Args:
            name: Design system name

        Returns:
            JSON string with path to copied definition

        Example:
            design_copy_system_to_project(name="starter")
        """
        try:
            path = loader.copy_to_project(name)
            if path is None:
                return _not_found(name)

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.SYSTEM_COPIED,
                    "path": str(path),
                    "hint": "You can now customize this design system by editing the YAML file",
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to copy design system")
            return json.dumps({"status": "error", "message": str(e)})

    tools["design_copy_system_to_project"] = design_copy_system_to_project

    return tools
