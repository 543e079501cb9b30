"""
Tests for the generation pipeline.

Tests cover:
- Output layout and emission order
- Cross-artifact consistency and aggregation
- Idempotence
- Fatal errors leaving the output directory untouched
"""

from pathlib import Path, PurePosixPath
from typing import Any

import pytest

from chuk_mcp_design.constants import ArtifactKind, Namespace
from chuk_mcp_design.emitters.typings import render_sequence
from chuk_mcp_design.errors import DesignSystemError, UtilityConfigError
from chuk_mcp_design.generator import (
    DesignSystemGenerator,
    artifact_path,
    generate_design_system,
    write_artifacts,
)
from chuk_mcp_design.models import DesignSystem, GeneratorSettings


def _read_tree(root: Path) -> dict[str, bytes]:
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


class TestArtifactPath:
    """Tests for artifact_path."""

    def test_category_css(self):
        """Category style sheets live under css/<folder>/<group>/."""
        path = artifact_path(ArtifactKind.CSS, Namespace.PRIMITIVES, "colors", "groww-primary")
        assert path == PurePosixPath("css/variables/groww-primary/colors.css")

    def test_group_is_kebab_cased(self):
        """Group folders are kebab-cased."""
        path = artifact_path(ArtifactKind.TS, Namespace.SEMANTIC_TOKENS, "background", "dataViz")
        assert path == PurePosixPath("ts/tokens/data-viz/background-types.d.ts")

    def test_global_aggregate(self):
        """Namespace-level files have no group folder."""
        path = artifact_path(ArtifactKind.NAMES, Namespace.UTILITY_CLASSES, "utils")
        assert path == PurePosixPath("names/utils/utils-names.js")


class TestGenerate:
    """Tests for in-memory generation."""

    def test_artifact_counts(self, sample_system: DesignSystem):
        """One css/ts/names triple per category plus aggregates and the index."""
        result = DesignSystemGenerator(sample_system).generate()
        assert result.summary() == {"css": 7, "ts": 14, "names": 14, "index": 1}
        assert result.total_artifacts == 36

    def test_expected_paths(self, sample_system: DesignSystem):
        """Representative paths for every tree."""
        result = DesignSystemGenerator(sample_system).generate()
        for path in [
            "css/variables/groww-primary/colors.css",
            "ts/variables/groww-primary/colors-types.d.ts",
            "names/variables/groww-primary/colors-names.js",
            "ts/variables/groww-primary/primitives-types.d.ts",
            "names/variables/primitives-names.js",
            "css/tokens/groww-primary/background.css",
            "ts/tokens/tokens-types.d.ts",
            "css/utils/groww-primary/border.css",
            "names/utils/groww-primary/utils-names.js",
            "index.css",
        ]:
            assert result.get(path) is not None, path

    def test_reference_outputs(self, sample_system: DesignSystem):
        """Known declarations and rules appear in the generated style sheets."""
        result = DesignSystemGenerator(sample_system).generate()

        colors = result.get("css/variables/groww-primary/colors.css").content
        assert "  --gray150: #e9e9eb;" in colors
        assert "  --gray150: #2e2e2e;" in colors

        background = result.get("css/tokens/groww-primary/background.css").content
        assert background.count("  --background-secondary: var(--gray150);") == 2

        utilities = result.get("css/utils/groww-primary/background.css").content
        assert ".backgroundPrimary { background-color: var(--background-primary); }" in utilities

        border = result.get("css/utils/groww-primary/border.css").content
        assert ".borderPrimary { border: 1px solid var(--border-primary); }" in border

    def test_index_in_emission_order(self, sample_system: DesignSystem):
        """index.css imports every style sheet in emission order."""
        result = DesignSystemGenerator(sample_system).generate()
        assert result.get("index.css").content.splitlines() == [
            "@import './css/variables/groww-primary/colors.css';",
            "@import './css/variables/groww-primary/radius.css';",
            "@import './css/variables/data-viz/colors.css';",
            "@import './css/tokens/groww-primary/background.css';",
            "@import './css/tokens/groww-primary/border.css';",
            "@import './css/utils/groww-primary/background.css';",
            "@import './css/utils/groww-primary/border.css';",
        ]

    def test_sorted_index(self, sample_system: DesignSystem):
        """sort_index_imports sorts the manifest."""
        system = sample_system.with_settings(sort_index_imports=True)
        lines = DesignSystemGenerator(system).generate().get("index.css").content.splitlines()
        assert lines == sorted(lines)

    def test_category_identifiers(self, sample_system: DesignSystem):
        """The names list matches the variables declared in the CSS."""
        result = DesignSystemGenerator(sample_system).generate()
        names = result.get("names/tokens/groww-primary/background-names.js").content
        assert render_sequence(["background-primary", "background-secondary"]) in names

    def test_utility_identifiers(self, sample_system: DesignSystem):
        """Utility name lists hold class names."""
        result = DesignSystemGenerator(sample_system).generate()
        typed = result.get("ts/utils/groww-primary/background-types.d.ts").content
        assert "export const growwprimaryBackgroundUtilityClasses = " in typed
        assert render_sequence(["backgroundPrimary", "backgroundSecondary"]) in typed

    def test_group_aggregate(self, sample_system: DesignSystem):
        """Group aggregate is the sorted union of its categories."""
        result = DesignSystemGenerator(sample_system).generate()
        typed = result.get("ts/variables/groww-primary/primitives-types.d.ts").content
        assert render_sequence(["black", "gray150", "small", "white"]) in typed
        assert "export const growwprimaryPrimitiveTokens = " in typed

    def test_global_aggregate(self, sample_system: DesignSystem):
        """Global aggregate is the sorted union of all groups."""
        result = DesignSystemGenerator(sample_system).generate()
        names = result.get("names/variables/primitives-names.js").content
        assert names == (
            "// Auto-generated aggregated names for all primitives\n"
            "export const PrimitiveTokenNames = "
            + render_sequence(["black", "data-viz-lilac", "gray150", "small", "white"])
            + ";\n"
        )

    def test_global_aggregates_disabled(self, sample_system: DesignSystem):
        """Global aggregates can be switched off."""
        system = sample_system.with_settings(emit_global_aggregates=False)
        result = DesignSystemGenerator(system).generate()
        assert result.get("ts/variables/primitives-types.d.ts") is None
        assert result.get("ts/variables/groww-primary/primitives-types.d.ts") is not None

    def test_index_disabled(self, sample_system: DesignSystem):
        """The index can be switched off."""
        system = sample_system.with_settings(emit_index=False)
        result = DesignSystemGenerator(system).generate()
        assert result.by_kind(ArtifactKind.INDEX) == []

    def test_settings_override(self, sample_system: DesignSystem):
        """Explicit settings win over the system's own."""
        settings = GeneratorSettings(default_theme_selector=":root")
        result = DesignSystemGenerator(sample_system, settings).generate()
        assert result.get("css/variables/data-viz/colors.css").content.startswith(":root {")

    def test_groups_processed(self, sample_system: DesignSystem):
        """Each namespace/group pair is recorded once."""
        result = DesignSystemGenerator(sample_system).generate()
        assert result.groups_processed == [
            "primitives/groww-primary",
            "primitives/data-viz",
            "semanticTokens/groww-primary",
            "utilityClasses/groww-primary",
        ]

    def test_unresolved_warning_collected(self, sample_definition: dict[str, Any]):
        """Resolution misses surface as result warnings."""
        sample_definition["utilityClasses"]["groww-primary"]["shadow"] = {
            "prefix": "shadow",
            "property": "box-shadow",
            "tokens": "{semanticTokens.groww-primary.elevation}",
        }
        result = DesignSystemGenerator(DesignSystem.model_validate(sample_definition)).generate()
        assert len(result.warnings) == 1
        assert result.get("css/utils/groww-primary/shadow.css").content == ""

    def test_idempotent(self, sample_system: DesignSystem):
        """Two runs produce identical artifacts."""
        first = DesignSystemGenerator(sample_system).generate()
        second = DesignSystemGenerator(sample_system).generate()
        assert first.artifacts == second.artifacts

    def test_empty_system(self):
        """An empty definition yields only an empty index."""
        result = DesignSystemGenerator(DesignSystem()).generate()
        assert [str(a.path) for a in result.artifacts] == ["index.css"]
        assert result.get("index.css").content == ""


class TestWriteArtifacts:
    """Tests for writing generated files."""

    def test_writes_tree(self, sample_system: DesignSystem, temp_dir: Path):
        """Every artifact lands at its relative path."""
        result = DesignSystemGenerator(sample_system).generate()
        written = write_artifacts(result, temp_dir / "theme")

        assert len(written) == result.total_artifacts
        assert (temp_dir / "theme" / "index.css").exists()
        assert (temp_dir / "theme" / "css" / "variables" / "groww-primary" / "colors.css").exists()
        assert result.output_root == temp_dir / "theme"

    def test_byte_identical_runs(self, sample_system: DesignSystem, temp_dir: Path):
        """Writing twice yields byte-identical trees."""
        generate_design_system(sample_system, temp_dir / "first")
        generate_design_system(sample_system, temp_dir / "second")
        first = _read_tree(temp_dir / "first" / "theme")
        second = _read_tree(temp_dir / "second" / "theme")
        assert first == second
        assert len(first) == 36

    def test_output_dir_name(self, sample_system: DesignSystem, temp_dir: Path):
        """The output folder name comes from the settings."""
        system = sample_system.with_settings(output_dir_name="design-tokens")
        generate_design_system(system, temp_dir)
        assert (temp_dir / "design-tokens" / "index.css").exists()

    def test_in_memory_only(self, sample_system: DesignSystem, temp_dir: Path):
        """Without a base directory nothing is written."""
        result = generate_design_system(sample_system)
        assert result.output_root is None
        assert list(temp_dir.iterdir()) == []

    def test_fatal_error_writes_nothing(
        self, sample_definition: dict[str, Any], temp_dir: Path
    ):
        """A missing utility property aborts before any file is written."""
        del sample_definition["utilityClasses"]["groww-primary"]["border"]["property"]
        system = DesignSystem.model_validate(sample_definition)

        with pytest.raises(UtilityConfigError):
            generate_design_system(system, temp_dir)

        assert list(temp_dir.iterdir()) == []


class TestArtifactCollisions:
    """Tests for definitions whose artifacts would share a path."""

    def test_category_named_like_aggregate(self, sample_definition: dict[str, Any]):
        """A 'primitives' category collides with the group aggregate."""
        sample_definition["primitives"]["data-viz"]["primitives"] = {"zz": "#000"}
        system = DesignSystem.model_validate(sample_definition)

        with pytest.raises(DesignSystemError, match="same path"):
            DesignSystemGenerator(system).generate()

    def test_groups_with_same_folder(self, sample_definition: dict[str, Any]):
        """Groups that kebab-case to one folder collide."""
        sample_definition["primitives"]["dataViz"] = {"colors": {"zz": "#000"}}
        system = DesignSystem.model_validate(sample_definition)

        with pytest.raises(DesignSystemError, match="css/variables/data-viz/colors.css"):
            DesignSystemGenerator(system).generate()

    def test_collision_writes_nothing(self, sample_definition: dict[str, Any], temp_dir: Path):
        """A collision aborts before any file is written."""
        sample_definition["semanticTokens"]["groww-primary"]["tokens"] = {"zz": "#000"}
        system = DesignSystem.model_validate(sample_definition)

        with pytest.raises(DesignSystemError):
            generate_design_system(system, temp_dir)

        assert list(temp_dir.iterdir()) == []
