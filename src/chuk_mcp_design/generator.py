"""
Design system generator - the central pipeline.

    DesignSystem → per-category CSS + identifier lists
    → typed enumerations / name lists (category, group, global)
    → index.css manifest
    → files on disk

The generator:
1. Walks primitives, semantic tokens and utility classes, group by group
2. Emits the style sheet for each category
3. Emits the artifact pair from the same identifiers the CSS used
4. Aggregates identifiers per group and per namespace
5. Collects every style sheet into the index manifest

Generation is pure and happens entirely in memory. Files are written
only after the whole run succeeded, so a fatal configuration error
leaves the output directory untouched.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from chuk_mcp_design.constants import (
    AGGREGATE_NAMES,
    INDEX_FILENAME,
    NAMES_SUFFIX,
    NAMESPACE_FOLDERS,
    TYPES_SUFFIX,
    ArtifactKind,
    Namespace,
)
from chuk_mcp_design.core.naming import to_kebab_case
from chuk_mcp_design.emitters.index import emit_index
from chuk_mcp_design.emitters.stylesheet import emit_primitive_css, emit_semantic_css
from chuk_mcp_design.emitters.typings import emit_artifact_pair
from chuk_mcp_design.emitters.utilities import build_utility_rules
from chuk_mcp_design.models.artifacts import GenerationResult
from chuk_mcp_design.models.tokens import DesignSystem, GeneratorSettings

logger = logging.getLogger(__name__)


def artifact_path(
    kind: ArtifactKind,
    namespace: Namespace,
    name: str,
    group: str | None = None,
) -> PurePosixPath:
    """
    Build the relative path of an artifact.

    Args:
        kind: Artifact tree (css, ts, names)
        namespace: Namespace folder
        name: Base file name (category or aggregate name, already kebab-cased)
        group: Group folder, None for namespace-level files

    Returns:
        e.g. ``ts/variables/groww-primary/colors-types.d.ts``
    """
    suffix = {
        ArtifactKind.CSS: ".css",
        ArtifactKind.TS: TYPES_SUFFIX,
        ArtifactKind.NAMES: NAMES_SUFFIX,
    }[kind]
    path = PurePosixPath(kind.value, NAMESPACE_FOLDERS[namespace])
    if group is not None:
        path = path / to_kebab_case(group)
    return path / f"{name}{suffix}"


class DesignSystemGenerator:
    """
    Generates every artifact for a design system.

    The token graph is passed in once and consulted explicitly by each
    emitter; nothing is cached between runs.
    """

    def __init__(self, system: DesignSystem, settings: GeneratorSettings | None = None):
        """
        Initialize the generator.

        Args:
            system: The token graph
            settings: Override the settings carried by the system
        """
        self.system = system
        self.settings = settings or system.settings

    def generate(self) -> GenerationResult:
        """
        Generate all artifacts in memory.

        Returns:
            GenerationResult with artifacts in emission order

        Raises:
            UtilityConfigError: A utility spec has no CSS property
            UnresolvedReferenceError: A miss under the 'fail' policy
            DesignSystemError: Two artifacts map to the same path
        """
        result = GenerationResult(system_name=self.system.name)
        stylesheets: list[PurePosixPath] = []

        self._generate_primitives(result, stylesheets)
        self._generate_semantic_tokens(result, stylesheets)
        self._generate_utilities(result, stylesheets)

        if self.settings.emit_index:
            result.add(
                ArtifactKind.INDEX,
                PurePosixPath(INDEX_FILENAME),
                emit_index(stylesheets, sort=self.settings.sort_index_imports),
            )

        logger.info(
            "Generated %d artifacts for design system '%s'",
            result.total_artifacts,
            self.system.name,
        )
        return result

    def _generate_primitives(self, result: GenerationResult, stylesheets: list[PurePosixPath]) -> None:
        namespace = Namespace.PRIMITIVES
        group_lists: list[list[str]] = []

        for group, categories in self.system.primitives.items():
            category_lists: list[list[str]] = []
            for category, tokens in categories.items():
                css = emit_primitive_css(tokens, self.settings)
                identifiers = [to_kebab_case(key) for key in tokens]
                self._emit_category(result, stylesheets, namespace, group, category, css, identifiers)
                category_lists.append(identifiers)
            group_lists.append(self._emit_group_aggregate(result, namespace, group, category_lists))

        self._emit_global_aggregate(result, namespace, group_lists)

    def _generate_semantic_tokens(
        self, result: GenerationResult, stylesheets: list[PurePosixPath]
    ) -> None:
        namespace = Namespace.SEMANTIC_TOKENS
        group_lists: list[list[str]] = []

        for group, categories in self.system.semantic_tokens.items():
            category_lists: list[list[str]] = []
            for category, tokens in categories.items():
                css = emit_semantic_css(category, tokens, self.settings)
                stem = to_kebab_case(category)
                identifiers = [f"{stem}-{to_kebab_case(key)}" for key in tokens]
                self._emit_category(result, stylesheets, namespace, group, category, css, identifiers)
                category_lists.append(identifiers)
            group_lists.append(self._emit_group_aggregate(result, namespace, group, category_lists))

        self._emit_global_aggregate(result, namespace, group_lists)

    def _generate_utilities(self, result: GenerationResult, stylesheets: list[PurePosixPath]) -> None:
        namespace = Namespace.UTILITY_CLASSES
        group_lists: list[list[str]] = []

        for group, utilities in self.system.utility_classes.items():
            utility_lists: list[list[str]] = []
            for utility, spec in utilities.items():
                emission = build_utility_rules(
                    self.system,
                    spec,
                    self.settings,
                    group=group,
                    utility=utility,
                )
                result.warnings.extend(emission.warnings)
                identifiers = emission.class_names
                self._emit_category(
                    result, stylesheets, namespace, group, utility, emission.render(), identifiers
                )
                utility_lists.append(identifiers)
            group_lists.append(self._emit_group_aggregate(result, namespace, group, utility_lists))

        self._emit_global_aggregate(result, namespace, group_lists)

    def _emit_category(
        self,
        result: GenerationResult,
        stylesheets: list[PurePosixPath],
        namespace: Namespace,
        group: str,
        category: str,
        css: str,
        identifiers: list[str],
    ) -> None:
        """Emit the style sheet and artifact pair for one category."""
        name = to_kebab_case(category)

        css_path = artifact_path(ArtifactKind.CSS, namespace, name, group)
        result.add(ArtifactKind.CSS, css_path, css)
        stylesheets.append(css_path)

        pair = emit_artifact_pair(identifiers, namespace, group, category)
        result.add(ArtifactKind.TS, artifact_path(ArtifactKind.TS, namespace, name, group), pair.typed)
        result.add(
            ArtifactKind.NAMES, artifact_path(ArtifactKind.NAMES, namespace, name, group), pair.names
        )
        logger.debug("Generated %s %s/%s", namespace.value, group, category)

    def _emit_group_aggregate(
        self,
        result: GenerationResult,
        namespace: Namespace,
        group: str,
        identifier_lists: list[list[str]],
    ) -> list[str]:
        """Emit the group-level aggregate and return its identifiers."""
        pair = emit_artifact_pair(
            (i for identifiers in identifier_lists for i in identifiers),
            namespace,
            group,
        )
        name = AGGREGATE_NAMES[namespace]
        result.add(ArtifactKind.TS, artifact_path(ArtifactKind.TS, namespace, name, group), pair.typed)
        result.add(
            ArtifactKind.NAMES, artifact_path(ArtifactKind.NAMES, namespace, name, group), pair.names
        )
        result.groups_processed.append(f"{namespace.value}/{group}")
        logger.debug("Generated aggregate for %s group %s", namespace.value, group)
        return list(pair.identifiers)

    def _emit_global_aggregate(
        self,
        result: GenerationResult,
        namespace: Namespace,
        group_lists: list[list[str]],
    ) -> None:
        """Emit the namespace-wide aggregate, if enabled and non-empty."""
        if not self.settings.emit_global_aggregates or not group_lists:
            return
        pair = emit_artifact_pair(
            (i for identifiers in group_lists for i in identifiers),
            namespace,
        )
        name = AGGREGATE_NAMES[namespace]
        result.add(ArtifactKind.TS, artifact_path(ArtifactKind.TS, namespace, name), pair.typed)
        result.add(ArtifactKind.NAMES, artifact_path(ArtifactKind.NAMES, namespace, name), pair.names)


def write_artifacts(result: GenerationResult, output_root: Path) -> list[Path]:
    """
    Write generated artifacts under an output root.

    Args:
        result: A completed generation result
        output_root: Directory that receives css/, ts/, names/ and index.css

    Returns:
        Paths of the written files, in emission order
    """
    written: list[Path] = []
    for artifact in result.artifacts:
        target = output_root / Path(*artifact.path.parts)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(artifact.content, encoding="utf-8")
        written.append(target)
        logger.debug("Wrote %s", target)

    result.output_root = output_root
    logger.info("Wrote %d files to %s", len(written), output_root)
    return written


def generate_design_system(
    system: DesignSystem,
    base_dir: Path | None = None,
) -> GenerationResult:
    """
    Convenience function to generate (and optionally write) a design system.

    Args:
        system: The token graph
        base_dir: If given, artifacts are written to
            ``base_dir / settings.output_dir_name``

    Returns:
        GenerationResult with all artifacts
    """
    result = DesignSystemGenerator(system).generate()
    if base_dir is not None:
        write_artifacts(result, base_dir / system.settings.output_dir_name)
    return result
