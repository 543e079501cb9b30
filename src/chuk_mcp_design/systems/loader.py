"""
Design system loader - discovers and loads token definitions.

Definitions can come from:
1. Built-in library (shipped with package)
2. Project design systems (user's project/design-systems directory)

Both YAML (``.yaml``/``.yml``) and JSON files are accepted.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_design.models.tokens import DesignSystem, DesignSystemMetadata

logger = logging.getLogger(__name__)

DEFINITION_SUFFIXES = (".yaml", ".yml", ".json")


def _stringify_keys(data: Any) -> Any:
    """Stringify mapping keys recursively (YAML reads ``50:`` as an int)."""
    if isinstance(data, dict):
        return {str(key): _stringify_keys(value) for key, value in data.items()}
    if isinstance(data, list):
        return [_stringify_keys(item) for item in data]
    return data


def parse_design_system(data: dict[str, Any], default_name: str = "untitled") -> DesignSystem:
    """
    Build a DesignSystem from raw definition data.

    Args:
        data: Parsed YAML/JSON mapping
        default_name: Name used when the definition has none

    Returns:
        Validated DesignSystem

    Raises:
        pydantic.ValidationError: If the definition is malformed
    """
    data = _stringify_keys(data or {})
    data.setdefault("name", default_name)
    return DesignSystem.model_validate(data)


def load_design_system(path: Path) -> DesignSystem:
    """
    Load a single definition file.

    Errors propagate: OSError, yaml.YAMLError, json.JSONDecodeError
    or pydantic.ValidationError.
    """
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)
    return parse_design_system(data, default_name=path.stem)


class DesignSystemLoader:
    """
    Discovers and loads design system definitions.

    Definitions are loaded from the library and project directories.
    Project definitions override library definitions with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the loader.

        Args:
            library_path: Path to built-in definitions
            project_path: Path to project definitions
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, DesignSystem] = {}

    def list_systems(self) -> list[DesignSystemMetadata]:
        """
        List all available design systems.

        Returns systems from both library and project, with project
        definitions taking precedence.
        """
        systems: dict[str, DesignSystemMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.iterdir()):
                if path.suffix not in DEFINITION_SUFFIXES:
                    continue
                system = self._load_system_file(path)
                if system:
                    systems[system.name] = DesignSystemMetadata.from_system(system)

        return list(systems.values())

    def get_system(self, name: str) -> DesignSystem | None:
        """
        Get a design system by name.

        Project definitions take precedence over library definitions.

        Args:
            name: Design system name (file stem)

        Returns:
            DesignSystem if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = self._find_file(directory, name)
            if path is None:
                continue
            system = self._load_system_file(path)
            if system:
                self._cache[name] = system
                return system

        return None

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library definition to the project for customization.

        Args:
            name: Design system name

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        library_file = self._find_file(self.library_path, name)
        if library_file is None:
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / library_file.name
        if dest_file.exists():
            raise ValueError(f"Design system already exists in project: {name}")

        dest_file.write_text(library_file.read_text(encoding="utf-8"), encoding="utf-8")

        self._cache.pop(name, None)

        return dest_file

    def save_to_project(self, system: DesignSystem) -> Path:
        """
        Write a design system to the project as YAML.

        Args:
            system: Design system to save

        Returns:
            Path to the written file
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        self.project_path.mkdir(parents=True, exist_ok=True)
        dest_file = self.project_path / f"{system.name}.yaml"
        dest_file.write_text(
            yaml.safe_dump(system.to_yaml_dict(), sort_keys=False, allow_unicode=True),
            encoding="utf-8",
        )
        self._cache.pop(system.name, None)
        return dest_file

    def _find_file(self, directory: Path, name: str) -> Path | None:
        for suffix in DEFINITION_SUFFIXES:
            candidate = directory / f"{name}{suffix}"
            if candidate.exists():
                return candidate
        return None

    def _load_system_file(self, path: Path) -> DesignSystem | None:
        """Load a definition, logging and skipping unreadable files."""
        try:
            return load_design_system(path)
        except (OSError, ValueError, yaml.YAMLError, ValidationError) as e:
            logger.warning("Skipping design system file %s: %s", path, e)
            return None

    def clear_cache(self) -> None:
        """Clear the design system cache."""
        self._cache.clear()
