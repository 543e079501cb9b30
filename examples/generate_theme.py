#!/usr/bin/env python3
"""
Example: Generating a Theme from Design Tokens.

This walks the starter design system through the whole pipeline:
validation, reference resolution, in-memory generation and writing
the css/, ts/ and names/ trees plus index.css.

Usage:
    python examples/generate_theme.py
"""

import tempfile
from pathlib import Path

from chuk_mcp_design.constants import ArtifactKind
from chuk_mcp_design.core import resolve_collection, resolve_shallow
from chuk_mcp_design.generator import DesignSystemGenerator, write_artifacts
from chuk_mcp_design.systems import DesignSystemLoader
from chuk_mcp_design.validator import validate_design_system


def main() -> None:
    """Demonstrate theme generation."""
    print("CHUK Design Token Generator Demo")
    print("=" * 40)
    print()

    library_path = Path(__file__).parent.parent / "src/chuk_mcp_design/systems/library"
    loader = DesignSystemLoader(library_path=library_path)

    # List available design systems
    print("Available design systems:")
    for meta in loader.list_systems():
        print(f"  {meta.name}: {meta.description}")
        print(f"    Groups: {', '.join(meta.groups)}")
        print(f"    Tokens: {meta.token_count}, utility families: {meta.utility_count}")
    print()

    system = loader.get_system("starter")
    if not system:
        print("Failed to load design system")
        return

    # Validate before generating
    print("Validation:")
    print(f"  {validate_design_system(system)}")
    print()

    # The two resolution strategies
    print("Reference resolution:")
    print(f"  shallow  {{colors.gray150}} -> {resolve_shallow('{colors.gray150}')}")
    resolution = resolve_collection(system, "{semanticTokens.groww-primary.background}")
    print(f"  graph    {{semanticTokens.groww-primary.background}} -> {resolution}")
    print()

    # Generate in memory
    result = DesignSystemGenerator(system).generate()
    print(f"Generated {result.total_artifacts} artifacts: {result.summary()}")
    print()

    print("css/tokens/groww-primary/background.css:")
    print(result.get("css/tokens/groww-primary/background.css").content)

    print("First style sheets in index.css:")
    for line in result.by_kind(ArtifactKind.INDEX)[0].content.splitlines()[:4]:
        print(f"  {line}")
    print()

    # Write to disk
    with tempfile.TemporaryDirectory() as tmp:
        written = write_artifacts(result, Path(tmp) / system.settings.output_dir_name)
        print(f"Wrote {len(written)} files to {result.output_root}")
    print()

    print("Done! Import theme/index.css and use the generated token types.")


if __name__ == "__main__":
    main()
