"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path
from typing import Any

import pytest

from chuk_mcp_design.models import DesignSystem


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_definition() -> dict[str, Any]:
    """A small two-group definition covering every namespace."""
    return {
        "name": "sample",
        "description": "Sample system for tests",
        "primitives": {
            "groww-primary": {
                "colors": {
                    "white": {"light": "#ffffff", "dark": "#121212"},
                    "gray150": {"light": "#e9e9eb", "dark": "#2e2e2e"},
                    "black": "#000000",
                },
                "radius": {
                    "small": 4,
                },
            },
            "data-viz": {
                "colors": {
                    "dataVizLilac": {"light": "#7A7AC6", "dark": "#7A7AC6"},
                },
            },
        },
        "semanticTokens": {
            "groww-primary": {
                "background": {
                    "primary": "{groww-primary.colors.white}",
                    "secondary": "{colors.gray150}",
                },
                "border": {
                    "primary": "{groww-primary.colors.gray150}",
                },
            },
        },
        "utilityClasses": {
            "groww-primary": {
                "background": {
                    "prefix": "background",
                    "property": "background-color",
                    "tokens": "{semanticTokens.groww-primary.background}",
                },
                "border": {
                    "prefix": "border",
                    "property": "border",
                    "tokens": "{semanticTokens.groww-primary.border}",
                },
            },
        },
    }


@pytest.fixture
def sample_system(sample_definition: dict[str, Any]) -> DesignSystem:
    """The sample definition as a validated DesignSystem."""
    return DesignSystem.model_validate(sample_definition)
