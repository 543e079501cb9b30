"""
Tests for the style-sheet emitter.

Each token collection becomes a default-theme block and an
alternate-theme block of CSS custom properties.
"""

from datetime import date

from chuk_mcp_design.emitters import (
    build_theme_blocks,
    emit_primitive_css,
    emit_semantic_css,
    format_value,
)
from chuk_mcp_design.models import GeneratorSettings


def _blocks(css: str) -> tuple[str, str]:
    """Split emitted CSS into its default and alternate blocks."""
    default, alternate = css.split("\n\n")
    return default, alternate


class TestFormatValue:
    """Tests for value rendering."""

    def test_string(self):
        """Strings pass through."""
        assert format_value("#ffffff") == "#ffffff"

    def test_numbers(self):
        """Numbers use their shortest form."""
        assert format_value(4) == "4"
        assert format_value(1.5) == "1.5"
        assert format_value(2.0) == "2"

    def test_json_scalars(self):
        """Booleans and None use their JSON spelling."""
        assert format_value(True) == "true"
        assert format_value(None) == "null"

    def test_opaque_mapping(self):
        """Other structures are compact JSON."""
        assert format_value({"light": "#fff"}) == '{"light":"#fff"}'

    def test_other_scalars(self):
        """Scalars JSON cannot encode, like YAML dates, use str()."""
        assert format_value(date(2024, 1, 1)) == "2024-01-01"
        assert format_value({"released": date(2024, 1, 1)}) == '{"released":"2024-01-01"}'


class TestPrimitiveStylesheet:
    """Tests for primitive collections."""

    def test_theme_pair(self):
        """A pair declares its light value by default and dark value in the alternate block."""
        css = emit_primitive_css({"gray150": {"light": "#e9e9eb", "dark": "#2e2e2e"}})
        default, alternate = _blocks(css)

        assert default.startswith("html {")
        assert "  --gray150: #e9e9eb;" in default.splitlines()
        assert alternate.startswith('html[data-theme="dark"] {')
        assert "  --gray150: #2e2e2e;" in alternate.splitlines()

    def test_one_declaration_per_block(self):
        """Each variable is declared exactly once in each block."""
        css = emit_primitive_css(
            {
                "white": {"light": "#ffffff", "dark": "#121212"},
                "gray150": {"light": "#e9e9eb", "dark": "#2e2e2e"},
            }
        )
        default, alternate = _blocks(css)
        assert default.count("--gray150:") == 1
        assert alternate.count("--gray150:") == 1

    def test_scalar_identical_in_both_blocks(self):
        """A scalar token is declared identically in both blocks."""
        css = emit_primitive_css({"black": "#000000", "small": 4})
        default, alternate = _blocks(css)

        default_lines = [line for line in default.splitlines() if line.startswith("  ")]
        alternate_lines = [line for line in alternate.splitlines() if line.startswith("  ")]
        assert default_lines == alternate_lines == ["  --black: #000000;", "  --small: 4;"]

    def test_exact_output(self):
        """Full text of a small collection."""
        css = emit_primitive_css({"dataVizLilac": {"light": "#7A7AC6", "dark": "#6060a0"}})
        assert css == (
            "html {\n"
            "  --data-viz-lilac: #7A7AC6;\n"
            "}\n"
            "\n"
            'html[data-theme="dark"] {\n'
            "  --data-viz-lilac: #6060a0;\n"
            "}\n"
        )

    def test_empty_collection(self):
        """An empty collection still emits both (empty) blocks."""
        css = emit_primitive_css({})
        assert css == 'html {\n}\n\nhtml[data-theme="dark"] {\n}\n'

    def test_custom_selectors(self):
        """Theme selectors come from the settings."""
        settings = GeneratorSettings(
            default_theme_selector=":root",
            alternate_theme_selector=".dark",
        )
        css = emit_primitive_css({"white": "#fff"}, settings)
        assert css.startswith(":root {")
        assert "\n.dark {\n" in css


class TestSemanticStylesheet:
    """Tests for semantic collections."""

    def test_shallow_reference(self):
        """References become var() handles in both blocks."""
        css = emit_semantic_css("background", {"secondary": "{colors.gray150}"})
        default, alternate = _blocks(css)
        assert "  --background-secondary: var(--gray150);" in default.splitlines()
        assert "  --background-secondary: var(--gray150);" in alternate.splitlines()

    def test_pair_of_references(self):
        """Each side of a pair is resolved separately."""
        css = emit_semantic_css(
            "text",
            {"primary": {"light": "{colors.black}", "dark": "{colors.white}"}},
        )
        default, alternate = _blocks(css)
        assert "  --text-primary: var(--black);" in default.splitlines()
        assert "  --text-primary: var(--white);" in alternate.splitlines()

    def test_literal_value(self):
        """Literal semantic values are emitted as-is."""
        css = emit_semantic_css("overlay", {"scrim": "rgba(0, 0, 0, 0.5)"})
        assert "  --overlay-scrim: rgba(0, 0, 0, 0.5);" in css.splitlines()

    def test_camel_case_category(self):
        """Category and key are both kebab-cased."""
        css = emit_semantic_css("interactionState", {"backgroundHover": "{colors.gray150}"})
        assert "  --interaction-state-background-hover: var(--gray150);" in css.splitlines()

    def test_malformed_reference_is_literal(self):
        """Unbalanced braces are not resolved."""
        css = emit_semantic_css("background", {"broken": "{colors.gray150"})
        assert "  --background-broken: {colors.gray150;" in css.splitlines()


class TestThemeBlocks:
    """Tests for the intermediate ThemeBlocks."""

    def test_variable_names_in_order(self):
        """Declaration order follows collection order."""
        blocks = build_theme_blocks({"b": "1", "a": "2"}, "size")
        assert blocks.variable_names == ["--size-b", "--size-a"]

    def test_opaque_mapping(self):
        """A mapping without both themes is written as JSON in both blocks."""
        blocks = build_theme_blocks({"odd": {"light": "#fff"}})
        assert blocks.default == blocks.alternate == [("--odd", '{"light":"#fff"}')]
